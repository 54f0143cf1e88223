# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee schemas."""
import datetime
import uuid
from typing import Any

from pydantic import ConfigDict, EmailStr, Field

from hrms.models.enums import DocumentStatus, DocumentType, EmployeeStatus, EmploymentType
from hrms.schemas.common import CamelModel


class EmployeeCreate(CamelModel):
    """Schema for creating an employee."""

    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=50)
    date_of_birth: datetime.date | None = None
    gender: str | None = Field(None, max_length=30)
    address: dict[str, Any] | None = None
    department_id: str | None = Field(None, min_length=1, max_length=50)
    position: str = Field(..., min_length=1, max_length=200)
    role_id: str | None = Field(None, min_length=1, max_length=50)
    manager_id: str | None = Field(None, min_length=1, max_length=50)
    hire_date: datetime.date
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    salary: float | None = Field(None, ge=0)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    emergency_contact: dict[str, Any] | None = None
    skills: list[str] = []
    education: list[dict[str, Any]] = []
    certifications: list[dict[str, Any]] = []
    # Creates a login account for the employee when given
    password: str | None = Field(None, min_length=8)


class EmployeeUpdate(CamelModel):
    """Schema for a partial employee update.

    Unknown keys are rejected. Which of the known keys survive depends on the
    caller's edit scope.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    date_of_birth: datetime.date | None = None
    gender: str | None = Field(None, max_length=30)
    address: dict[str, Any] | None = None
    department_id: str | None = Field(None, min_length=1, max_length=50)
    position: str | None = Field(None, min_length=1, max_length=200)
    role_id: str | None = Field(None, min_length=1, max_length=50)
    manager_id: str | None = Field(None, min_length=1, max_length=50)
    hire_date: datetime.date | None = None
    employment_type: EmploymentType | None = None
    salary: float | None = Field(None, ge=0)
    status: EmployeeStatus | None = None
    emergency_contact: dict[str, Any] | None = None
    bank_details: dict[str, Any] | None = None
    skills: list[str] | None = None
    education: list[dict[str, Any]] | None = None
    certifications: list[dict[str, Any]] | None = None


class EmployeeSummary(CamelModel):
    """Employee row as returned by list endpoints."""

    id: str
    employee_code: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    department: str | None = None
    department_id: str | None = None
    position: str
    role_id: str | None = None
    manager_id: str | None = None
    manager_name: str | None = None
    hire_date: datetime.date
    employment_type: EmploymentType
    salary: float | None = None
    status: EmployeeStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime


class EmployeeDetail(EmployeeSummary):
    """Full employee profile."""

    date_of_birth: datetime.date | None = None
    gender: str | None = None
    address: dict[str, Any] | None = None
    emergency_contact: dict[str, Any] | None = None
    bank_details: dict[str, Any] | None = None
    skills: list[str] = []
    education: list[dict[str, Any]] = []
    certifications: list[dict[str, Any]] = []


class ManagerOption(CamelModel):
    """An employee who can be chosen as manager."""

    id: str
    name: str
    position: str
    role_id: str | None = None


class DocumentResponse(CamelModel):
    """Metadata of an uploaded employee document."""

    id: uuid.UUID
    employee_id: str
    document_type: DocumentType
    file_name: str
    original_name: str
    mime_type: str
    file_size: int
    status: DocumentStatus
    uploaded_at: datetime.datetime
    reviewed_by: str | None = None
    reviewed_at: datetime.datetime | None = None
    comments: str | None = None
