# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organization views: hierarchy forest, reporting chains, search and departments."""

import logging
from functools import partial
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session, aliased, joinedload

from hrms.exceptions import (
    AuthorizationError,
    ConflictError,
    HierarchyCycleError,
    NotFoundError,
    ValidationError,
)
from hrms.models import VISIBLE_STATUSES, Department, Employee, EmployeeStatus
from hrms.org import (
    EmployeeSnapshot,
    build_forest,
    downward,
    find_manager_cycles,
    upward,
)
from hrms.rbac.guard import (
    Action,
    DenyReason,
    EmployeeTarget,
    Identity,
    authorize,
    enforce,
)
from hrms.services.employee_service import VIEW_PERMISSIONS, actor_department_id

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 50


def _snapshot_query(db: Session):
    return db.query(Employee, Department.name).outerjoin(
        Department, Employee.department_id == Department.id
    )


def _snapshots(rows) -> list[EmployeeSnapshot]:
    return [
        EmployeeSnapshot.from_employee(employee, department_name)
        for employee, department_name in rows
    ]


def fetch_snapshot(db: Session, employee_id: str) -> EmployeeSnapshot | None:
    """Load one employee snapshot regardless of status."""
    row = _snapshot_query(db).filter(Employee.id == employee_id).first()
    if row is None:
        return None
    return EmployeeSnapshot.from_employee(row[0], row[1])


def fetch_visible_reports(db: Session, manager_id: str) -> list[EmployeeSnapshot]:
    """Direct reports of ``manager_id`` that are part of the live organization."""
    rows = (
        _snapshot_query(db)
        .filter(
            Employee.manager_id == manager_id,
            Employee.status.in_(VISIBLE_STATUSES),
        )
        .order_by(Employee.first_name, Employee.last_name)
        .all()
    )
    return _snapshots(rows)


def department_to_dict(department: Department) -> dict[str, Any]:
    return {
        "id": department.id,
        "name": department.name,
        "description": department.description,
        "head_role": department.head_role,
        "head_employee_id": department.head_employee_id,
        "head_name": department.head.full_name if department.head else None,
        "location": department.location,
        "budget": department.budget,
        "functions": department.functions or [],
    }


def list_departments(db: Session) -> list[Department]:
    """List departments by name with their heads loaded."""
    return (
        db.query(Department)
        .options(joinedload(Department.head))
        .order_by(Department.name)
        .all()
    )


def get_structure(db: Session) -> dict[str, Any]:
    """Build the organization forest over Active and Pending Onboarding employees.

    Raises:
        HierarchyCycleError: If stored manager links form a loop
    """
    rows = (
        _snapshot_query(db)
        .filter(Employee.status.in_(VISIBLE_STATUSES))
        .order_by(Employee.hire_date, Employee.id)
        .all()
    )
    employees = _snapshots(rows)

    cycles = find_manager_cycles(employees)
    if cycles:
        logger.error(f"Manager links contain {len(cycles)} cycle(s): {cycles}")
        raise HierarchyCycleError(cycles[0] + cycles[0][:1])

    forest = build_forest(employees)
    return {
        "hierarchy": [node.to_dict() for node in forest],
        "departments": [department_to_dict(d) for d in list_departments(db)],
        "employees": [employee.to_dict() for employee in employees],
    }


def get_reporting_chain(db: Session, identity: Identity, employee_id: str) -> dict[str, Any]:
    """Upward and downward reporting chains of one employee.

    Callers without ``employees.view.all`` may only ask about themselves.
    Others must also be able to view the employee's profile.
    """
    if employee_id != identity.employee_id and not identity.can("employees.view.all"):
        raise AuthorizationError(
            "Access denied. Can only view own reporting chain.",
            reason=DenyReason.OUT_OF_SCOPE.value,
        )
    snapshot = fetch_snapshot(db, employee_id)
    if snapshot is None:
        raise NotFoundError("Employee not found")
    enforce(
        authorize(
            identity,
            VIEW_PERMISSIONS,
            EmployeeTarget.from_employee(snapshot),
            Action.VIEW,
            actor_department_id(db, identity),
        )
    )

    return {
        "employee_id": employee_id,
        "upward": [e.to_dict() for e in upward(employee_id, partial(fetch_snapshot, db))],
        "downward": [
            e.to_dict() for e in downward(employee_id, partial(fetch_visible_reports, db))
        ],
    }


def search_employees(
    db: Session,
    q: str | None = None,
    department: str | None = None,
    role: str | None = None,
    position: str | None = None,
    status: EmployeeStatus | None = None,
) -> list[dict[str, Any]]:
    """Search employees of any status by name or position, with optional filters."""
    query = _snapshot_query(db)
    if q:
        pattern = f"%{q}%"
        query = query.filter(
            or_(
                Employee.first_name.ilike(pattern),
                Employee.last_name.ilike(pattern),
                Employee.position.ilike(pattern),
            )
        )
    if department:
        query = query.filter(Employee.department_id == department)
    if role:
        query = query.filter(Employee.role_id == role)
    if position:
        query = query.filter(Employee.position.ilike(f"%{position}%"))
    if status:
        query = query.filter(Employee.status == status)

    rows = query.order_by(Employee.first_name, Employee.last_name).limit(SEARCH_LIMIT).all()
    return [
        {
            **EmployeeSnapshot.from_employee(employee, department_name).to_dict(),
            "email": employee.email,
            "hire_date": employee.hire_date.isoformat() if employee.hire_date else None,
        }
        for employee, department_name in rows
    ]


def get_department(db: Session, department_id: str) -> Department:
    department = (
        db.query(Department)
        .options(joinedload(Department.head))
        .filter(Department.id == department_id)
        .first()
    )
    if not department:
        raise NotFoundError("Department not found")
    return department


def get_department_detail(db: Session, department_id: str) -> dict[str, Any]:
    """A department and its live members, ordered by position then name."""
    department = get_department(db, department_id)

    manager = aliased(Employee)
    rows = (
        db.query(Employee, manager.first_name, manager.last_name)
        .outerjoin(manager, Employee.manager_id == manager.id)
        .filter(
            Employee.department_id == department_id,
            Employee.status.in_(VISIBLE_STATUSES),
        )
        .order_by(Employee.position, Employee.first_name)
        .all()
    )
    members = [
        {
            "id": employee.id,
            "employee_code": employee.employee_code,
            "first_name": employee.first_name,
            "last_name": employee.last_name,
            "position": employee.position,
            "role_id": employee.role_id,
            "status": employee.status.value,
            "manager_id": employee.manager_id,
            "manager_name": f"{first} {last}" if first else None,
        }
        for employee, first, last in rows
    ]
    return {"department": department_to_dict(department), "employees": members}


def _validate_department(
    db: Session, data: dict[str, Any], department_id: str | None = None
) -> None:
    name = data.get("name")
    if name:
        clash = db.query(Department).filter(Department.name == name)
        if department_id:
            clash = clash.filter(Department.id != department_id)
        if clash.first():
            raise ConflictError(f"Department name '{name}' is already taken")

    head_id = data.get("head_employee_id")
    if head_id and not db.get(Employee, head_id):
        raise ValidationError(f"Employee '{head_id}' does not exist")


def create_department(db: Session, data: dict[str, Any]) -> Department:
    """Create a department."""
    if db.get(Department, data["id"]):
        raise ConflictError(f"Department '{data['id']}' already exists")
    _validate_department(db, data)

    department = Department(**data)
    db.add(department)
    db.commit()
    logger.info(f"Created department '{department.id}'")
    return get_department(db, department.id)


def update_department(db: Session, department_id: str, data: dict[str, Any]) -> Department:
    """Apply a partial update to a department."""
    department = get_department(db, department_id)
    if "name" in data and data["name"] is None:
        raise ValidationError("Field 'name' cannot be empty")
    _validate_department(db, data, department_id)

    for key, value in data.items():
        setattr(department, key, [] if key == "functions" and value is None else value)
    db.commit()
    logger.info(f"Updated department '{department_id}': {sorted(data)}")
    return get_department(db, department_id)
