# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organization structure, reporting chain and department schemas."""

from pydantic import ConfigDict, Field

from hrms.schemas.common import CamelModel


class OrgEmployee(CamelModel):
    """Employee snapshot used in organization views."""

    id: str
    employee_code: str
    first_name: str
    last_name: str
    name: str
    position: str
    role_id: str | None = None
    department_id: str | None = None
    department_name: str | None = None
    manager_id: str | None = None
    status: str | None = None


class ManagerSummarySchema(CamelModel):
    """Who a hierarchy node reports to."""

    id: str
    name: str
    position: str


class HierarchyNodeSchema(OrgEmployee):
    """An employee with its direct reports, nested."""

    manager: ManagerSummarySchema | None = None
    children: list["HierarchyNodeSchema"] = []


class DepartmentResponse(CamelModel):
    """Department with its resolved head."""

    id: str
    name: str
    description: str | None = None
    head_role: str | None = None
    head_employee_id: str | None = None
    head_name: str | None = None
    location: str | None = None
    budget: float | None = None
    functions: list[str] = []


class DepartmentCreate(CamelModel):
    """Schema for creating a department."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z0-9][a-z0-9-]*$")
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    head_role: str | None = Field(None, max_length=200)
    head_employee_id: str | None = None
    location: str | None = Field(None, max_length=200)
    budget: float | None = Field(None, ge=0)
    functions: list[str] = []


class DepartmentUpdate(CamelModel):
    """Schema for a partial department update."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    head_role: str | None = Field(None, max_length=200)
    head_employee_id: str | None = None
    location: str | None = Field(None, max_length=200)
    budget: float | None = Field(None, ge=0)
    functions: list[str] | None = None


class DepartmentMember(CamelModel):
    """An employee listed under a department."""

    id: str
    employee_code: str
    first_name: str
    last_name: str
    position: str
    role_id: str | None = None
    status: str
    manager_id: str | None = None
    manager_name: str | None = None


class DepartmentDetail(CamelModel):
    """A department and its live members."""

    department: DepartmentResponse
    employees: list[DepartmentMember]


class OrganizationStructure(CamelModel):
    """Reporting forest plus the flat lists it was built from."""

    hierarchy: list[HierarchyNodeSchema]
    departments: list[DepartmentResponse]
    employees: list[OrgEmployee]


class ChainEntrySchema(CamelModel):
    """One employee in a reporting chain; managerId is only set going down."""

    id: str
    name: str
    position: str
    department: str | None = None
    role: str | None = None
    manager_id: str | None = None


class ReportingChain(CamelModel):
    """Upward and downward reporting chains of one employee."""

    employee_id: str
    upward: list[ChainEntrySchema]
    downward: list[ChainEntrySchema]


class SearchResult(CamelModel):
    """Employee row returned by organization search."""

    id: str
    employee_code: str
    first_name: str
    last_name: str
    email: str
    position: str
    role_id: str | None = None
    department_id: str | None = None
    department_name: str | None = None
    manager_id: str | None = None
    status: str
    hire_date: str | None = None


HierarchyNodeSchema.model_rebuild()
