# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee records: scoped listing, profile reads, edits and lifecycle."""

import logging
import math
from collections.abc import Iterable
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from hrms.config import settings
from hrms.exceptions import ConflictError, NotFoundError, ValidationError
from hrms.models import (
    Department,
    Employee,
    EmployeeDocument,
    EmployeeStatus,
    Role,
)
from hrms.org.hierarchy import assert_no_cycle
from hrms.rbac.guard import (
    UNRESTRICTED_ROLES,
    Action,
    EmployeeTarget,
    Identity,
    authorize,
    enforce,
    filter_updates,
)
from hrms.rbac.permissions import has_universal_access
from hrms.rbac.roles import (
    DEPARTMENT_HEAD_ROLE,
    EMPLOYEE_ROLE,
    HR_SPECIALIST_ROLE,
    MANAGER_ROLE,
)

from . import auth_service, onboarding_service

logger = logging.getLogger(__name__)

VIEW_PERMISSIONS = (
    "employees.view.self",
    "employees.view.team",
    "employees.view.department",
    "employees.view.all",
)
LIST_PERMISSIONS = VIEW_PERMISSIONS[1:]
EDIT_PERMISSIONS = ("employees.edit.self", "employees.edit.team", "employees.edit.all")

# Columns that may not be cleared by an update
NON_NULLABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "email",
        "position",
        "hire_date",
        "employment_type",
        "status",
        "skills",
        "education",
        "certifications",
    }
)

MANAGERIAL_STATUSES = (EmployeeStatus.ACTIVE,)


def position_rank(position: str) -> int:
    """Seniority rank of a position title, lower is more senior."""
    if position == "CEO":
        return 1
    if position.startswith("VP"):
        return 2
    if position.endswith("Director"):
        return 3
    if position.endswith("Manager"):
        return 4
    if position == "Team Lead":
        return 5
    return 6


def employee_to_dict(employee: Employee, detail: bool = False) -> dict[str, Any]:
    """Flatten an employee with its department and manager names."""
    data = {
        "id": employee.id,
        "employee_code": employee.employee_code,
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "email": employee.email,
        "phone": employee.phone,
        "department": employee.department.name if employee.department else None,
        "department_id": employee.department_id,
        "position": employee.position,
        "role_id": employee.role_id,
        "manager_id": employee.manager_id,
        "manager_name": employee.manager.full_name if employee.manager else None,
        "hire_date": employee.hire_date,
        "employment_type": employee.employment_type,
        "salary": employee.salary,
        "status": employee.status,
        "created_at": employee.created_at,
        "updated_at": employee.updated_at,
    }
    if detail:
        data.update(
            date_of_birth=employee.date_of_birth,
            gender=employee.gender,
            address=employee.address,
            emergency_contact=employee.emergency_contact,
            bank_details=employee.bank_details,
            skills=employee.skills or [],
            education=employee.education or [],
            certifications=employee.certifications or [],
        )
    return data


def get_employee(db: Session, employee_id: str) -> Employee:
    """Get an employee by id.

    Raises:
        NotFoundError: If no such employee exists
    """
    employee = (
        db.query(Employee)
        .options(joinedload(Employee.department), joinedload(Employee.manager))
        .filter(Employee.id == employee_id)
        .first()
    )
    if not employee:
        raise NotFoundError("Employee not found")
    return employee


def actor_department_id(db: Session, identity: Identity) -> str | None:
    """Department of the caller, looked up only when a scope rule needs it."""
    if identity.role != DEPARTMENT_HEAD_ROLE:
        return None
    return (
        db.query(Employee.department_id)
        .filter(Employee.id == identity.employee_id)
        .scalar()
    )


def _get_manager_id(db: Session, employee_id: str) -> str | None:
    return db.query(Employee.manager_id).filter(Employee.id == employee_id).scalar()


def _scoped_query(db: Session, identity: Identity):
    query = db.query(Employee)
    if has_universal_access(identity.permissions, identity.role):
        return query
    if identity.role in UNRESTRICTED_ROLES or identity.role == HR_SPECIALIST_ROLE:
        return query
    if identity.role == MANAGER_ROLE:
        return query.filter(
            or_(
                Employee.manager_id == identity.employee_id,
                Employee.id == identity.employee_id,
            )
        )
    if identity.role == DEPARTMENT_HEAD_ROLE:
        department_id = actor_department_id(db, identity)
        if department_id is not None:
            return query.filter(Employee.department_id == department_id)
    return query.filter(Employee.id == identity.employee_id)


def list_employees(
    db: Session,
    identity: Identity,
    page: int = 1,
    limit: int | None = None,
    department: str | None = None,
    status: EmployeeStatus | None = None,
    search: str | None = None,
) -> tuple[list[dict[str, Any]], dict[str, int]]:
    """List the employees visible to ``identity``, newest first.

    Returns:
        The page of employee dicts and its pagination metadata
    """
    limit = min(limit or settings.default_page_size, settings.max_page_size)
    page = max(page, 1)

    query = _scoped_query(db, identity)
    if department:
        query = query.filter(Employee.department_id == department)
    if status:
        query = query.filter(Employee.status == status)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Employee.first_name.ilike(pattern),
                Employee.last_name.ilike(pattern),
                Employee.email.ilike(pattern),
                Employee.employee_code.ilike(pattern),
            )
        )

    total = query.count()
    employees = (
        query.options(joinedload(Employee.department), joinedload(Employee.manager))
        .order_by(Employee.created_at.desc(), Employee.id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    pagination = {
        "total": total,
        "page": page,
        "per_page": limit,
        "pages": math.ceil(total / limit) if total else 0,
    }
    return [employee_to_dict(e) for e in employees], pagination


def view_employee(db: Session, identity: Identity, employee_id: str) -> Employee:
    """Get an employee after checking the caller may see it."""
    employee = get_employee(db, employee_id)
    enforce(
        authorize(
            identity,
            VIEW_PERMISSIONS,
            EmployeeTarget.from_employee(employee),
            Action.VIEW,
            actor_department_id(db, identity),
        )
    )
    return employee


def _validate_references(
    db: Session, data: dict[str, Any], employee_id: str | None = None
) -> None:
    """Check uniqueness and foreign references of employee fields in place."""
    for key in NON_NULLABLE_FIELDS & data.keys():
        if data[key] is None:
            raise ValidationError(f"Field '{key}' cannot be empty")

    if data.get("email"):
        data["email"] = data["email"].lower()
        clash = db.query(Employee).filter(Employee.email == data["email"])
        if employee_id:
            clash = clash.filter(Employee.id != employee_id)
        if clash.first():
            raise ConflictError(f"Email {data['email']} is already in use")

    department_id = data.get("department_id")
    if department_id is not None and not db.get(Department, department_id):
        raise ValidationError(f"Department '{department_id}' does not exist")

    role_id = data.get("role_id")
    if role_id is not None and not db.get(Role, role_id):
        raise ValidationError(f"Role '{role_id}' does not exist")

    manager_id = data.get("manager_id")
    if manager_id is not None:
        if not db.get(Employee, manager_id):
            raise ValidationError(f"Manager '{manager_id}' does not exist")
        if employee_id:
            assert_no_cycle(employee_id, manager_id, lambda eid: _get_manager_id(db, eid))


def _next_sequence(values: Iterable[str | None], prefix: str) -> int:
    highest = 0
    for value in values:
        if value and value.startswith(prefix) and value[len(prefix):].isdigit():
            highest = max(highest, int(value[len(prefix):]))
    return highest + 1


def next_employee_ids(db: Session) -> tuple[str, str]:
    """Return the next free employee id and business code."""
    id_prefix = settings.employee_id_prefix
    code_prefix = settings.employee_code_prefix
    ids = (row[0] for row in db.query(Employee.id).all())
    codes = (row[0] for row in db.query(Employee.employee_code).all())
    return (
        f"{id_prefix}{_next_sequence(ids, id_prefix):03d}",
        f"{code_prefix}{_next_sequence(codes, code_prefix):03d}",
    )


def create_employee(db: Session, identity: Identity, data: dict[str, Any]) -> Employee:
    """Create an employee, its onboarding checklist and optionally its account."""
    data = dict(data)
    password = data.pop("password", None)
    if not data.get("role_id"):
        data["role_id"] = EMPLOYEE_ROLE
    _validate_references(db, data)

    employee_id, employee_code = next_employee_ids(db)
    employee = Employee(id=employee_id, employee_code=employee_code, **data)
    db.add(employee)
    db.flush()

    if employee.status == EmployeeStatus.PENDING_ONBOARDING:
        onboarding_service.create_default_tasks(db, employee.id, employee.hire_date)
    if password:
        auth_service.create_user(db, employee, password)

    db.commit()
    logger.info(f"Employee {employee.id} created by {identity.employee_id}")
    return get_employee(db, employee.id)


def update_employee(
    db: Session, identity: Identity, employee_id: str, updates: dict[str, Any]
) -> Employee:
    """Apply the part of ``updates`` the caller is allowed to make.

    Fields outside the caller's edit tier are dropped silently; the request
    only fails when nothing is left.
    """
    employee = get_employee(db, employee_id)
    target = EmployeeTarget.from_employee(employee)
    enforce(
        authorize(
            identity,
            EDIT_PERMISSIONS,
            target,
            Action.EDIT,
            actor_department_id(db, identity),
        )
    )

    changes = filter_updates(identity, target, updates)
    _validate_references(db, changes, employee_id=employee.id)

    for key, value in changes.items():
        setattr(employee, key, value)

    if employee.user is not None:
        if "email" in changes:
            employee.user.email = changes["email"]
        if "role_id" in changes and changes["role_id"]:
            employee.user.role_id = changes["role_id"]
        if changes.get("status") in (EmployeeStatus.INACTIVE, EmployeeStatus.TERMINATED):
            employee.user.is_active = False
        elif changes.get("status") == EmployeeStatus.ACTIVE:
            employee.user.is_active = True

    db.commit()
    logger.info(
        f"Employee {employee_id} updated by {identity.employee_id}: {sorted(changes)}"
    )
    return get_employee(db, employee_id)


def deactivate_employee(db: Session, identity: Identity, employee_id: str) -> Employee:
    """Mark an employee Inactive and disable their account."""
    if employee_id == identity.employee_id:
        raise ValidationError("Cannot deactivate your own record")

    employee = get_employee(db, employee_id)
    employee.status = EmployeeStatus.INACTIVE
    if employee.user is not None:
        employee.user.is_active = False
        auth_service.delete_user_sessions(db, employee.user)

    db.commit()
    logger.info(f"Employee {employee_id} deactivated by {identity.employee_id}")
    return get_employee(db, employee_id)


def list_managers(db: Session, department_id: str) -> list[dict[str, Any]]:
    """Active employees of a department holding a managerial position, by seniority."""
    if not db.get(Department, department_id):
        raise NotFoundError("Department not found")

    candidates = (
        db.query(Employee)
        .filter(
            Employee.department_id == department_id,
            Employee.status.in_(MANAGERIAL_STATUSES),
            or_(
                Employee.position == "CEO",
                Employee.position.like("VP%"),
                Employee.position.like("%Director"),
                Employee.position.like("%Manager"),
                Employee.position == "Team Lead",
            ),
        )
        .all()
    )
    candidates.sort(key=lambda e: (position_rank(e.position), e.first_name, e.last_name))
    return [
        {"id": e.id, "name": e.full_name, "position": e.position, "role_id": e.role_id}
        for e in candidates
    ]


def list_documents(
    db: Session, identity: Identity, employee_id: str
) -> list[EmployeeDocument]:
    """Documents of an employee the caller may view, newest first."""
    view_employee(db, identity, employee_id)
    return (
        db.query(EmployeeDocument)
        .filter(EmployeeDocument.employee_id == employee_id)
        .order_by(EmployeeDocument.uploaded_at.desc())
        .all()
    )
