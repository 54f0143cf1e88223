# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Date, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, TimestampMixin
from hrms.models.enums import EmployeeStatus, EmploymentType

if TYPE_CHECKING:
    from hrms.models.department import Department
    from hrms.models.role import Role
    from hrms.models.user import User


class Employee(Base, TimestampMixin):
    """Employee record.

    ``manager_id`` points at another employee; a null value makes the employee
    a root of the reporting hierarchy.
    """

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    employee_code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    department_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("departments.id"), nullable=True, index=True
    )
    position: Mapped[str] = mapped_column(String(200), nullable=False)
    role_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("roles.id"), nullable=True
    )
    manager_id: Mapped[str | None] = mapped_column(
        String(20), ForeignKey("employees.id"), nullable=True, index=True
    )

    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    employment_type: Mapped[EmploymentType] = mapped_column(
        Enum(EmploymentType, values_callable=lambda e: [m.value for m in e]),
        default=EmploymentType.FULL_TIME,
        nullable=False,
    )
    salary: Mapped[float | None] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=True
    )
    status: Mapped[EmployeeStatus] = mapped_column(
        Enum(EmployeeStatus, values_callable=lambda e: [m.value for m in e]),
        default=EmployeeStatus.ACTIVE,
        nullable=False,
        index=True,
    )

    # Profile fields, opaque to authorization and hierarchy logic
    emergency_contact: Mapped[dict[str, Any] | None] = mapped_column(
        JSON, nullable=True
    )
    bank_details: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    skills: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    education: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, default=list, nullable=False
    )
    certifications: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, default=list, nullable=False
    )

    # Relationships
    department: Mapped[Department | None] = relationship(
        "Department", back_populates="employees", foreign_keys=[department_id]
    )
    role: Mapped[Role | None] = relationship("Role")
    manager: Mapped[Employee | None] = relationship(
        "Employee", remote_side=[id], back_populates="direct_reports"
    )
    direct_reports: Mapped[list[Employee]] = relationship(
        "Employee", back_populates="manager"
    )
    user: Mapped[User | None] = relationship(
        "User", back_populates="employee", uselist=False
    )

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"
