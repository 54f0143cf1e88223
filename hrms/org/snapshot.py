# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read-only employee projection used by hierarchy and chain computations."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class EmployeeSnapshot:
    """The employee columns the organization views need, plus the department name."""

    id: str
    employee_code: str
    first_name: str
    last_name: str
    position: str
    role_id: str | None = None
    department_id: str | None = None
    manager_id: str | None = None
    status: str | None = None
    department_name: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_employee(
        cls, employee: Any, department_name: str | None = None
    ) -> "EmployeeSnapshot":
        """Project an ORM employee (or any object with the same attributes)."""
        status = employee.status
        return cls(
            id=employee.id,
            employee_code=employee.employee_code,
            first_name=employee.first_name,
            last_name=employee.last_name,
            position=employee.position,
            role_id=employee.role_id,
            department_id=employee.department_id,
            manager_id=employee.manager_id,
            status=getattr(status, "value", status),
            department_name=department_name,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["name"] = self.full_name
        return data
