# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import JSON, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from hrms.models.employee import Employee


class Department(Base, TimestampMixin):
    """Organizational department.

    The head is referenced by employee id. ``head_role`` is kept only as the
    display title of that position.
    """

    __tablename__ = "departments"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    head_role: Mapped[str | None] = mapped_column(String(200), nullable=True)
    head_employee_id: Mapped[str | None] = mapped_column(
        String(20),
        ForeignKey(
            "employees.id",
            use_alter=True,
            name="fk_departments_head_employee_id",
            ondelete="SET NULL",
        ),
        nullable=True,
    )
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    budget: Mapped[float | None] = mapped_column(
        Numeric(14, 2, asdecimal=False), nullable=True
    )
    functions: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    head: Mapped[Employee | None] = relationship(
        "Employee", foreign_keys=[head_employee_id], post_update=True
    )
    employees: Mapped[list[Employee]] = relationship(
        "Employee",
        back_populates="department",
        foreign_keys="[Employee.department_id]",
    )
