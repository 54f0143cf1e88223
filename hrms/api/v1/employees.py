# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee API endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hrms.api.deps import get_db, require_permission
from hrms.models import EmployeeStatus
from hrms.rbac.guard import Identity
from hrms.schemas.common import ApiResponse, PaginatedResponse, PaginationMeta
from hrms.schemas.employee import (
    DocumentResponse,
    EmployeeCreate,
    EmployeeDetail,
    EmployeeSummary,
    EmployeeUpdate,
    ManagerOption,
)
from hrms.services import employee_service
from hrms.services.employee_service import (
    EDIT_PERMISSIONS,
    LIST_PERMISSIONS,
    VIEW_PERMISSIONS,
    employee_to_dict,
)

router = APIRouter()


@router.get("", response_model=PaginatedResponse[EmployeeSummary])
def list_employees(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    department: str | None = None,
    status: EmployeeStatus | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission(*LIST_PERMISSIONS)),
) -> PaginatedResponse[EmployeeSummary]:
    """List employees within the caller's scope.

    Managers see their direct reports, department heads their department,
    HR and admins everyone.
    """
    employees, pagination = employee_service.list_employees(
        db,
        identity,
        page=page,
        limit=limit,
        department=department,
        status=status,
        search=search,
    )
    return PaginatedResponse(
        data=[EmployeeSummary.model_validate(e) for e in employees],
        pagination=PaginationMeta(**pagination),
    )


@router.post(
    "",
    response_model=ApiResponse[EmployeeDetail],
    status_code=status.HTTP_201_CREATED,
)
def create_employee(
    data: EmployeeCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("employees.create")),
) -> ApiResponse[EmployeeDetail]:
    """Create a new employee."""
    employee = employee_service.create_employee(db, identity, data.model_dump())
    return ApiResponse(
        data=EmployeeDetail.model_validate(employee_to_dict(employee, detail=True)),
        message="Employee created successfully",
    )


@router.get("/managers/{department_id}", response_model=ApiResponse[list[ManagerOption]])
def list_department_managers(
    department_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("employees.view.all")),
) -> ApiResponse[list[ManagerOption]]:
    """List managerial employees of a department, most senior first."""
    managers = employee_service.list_managers(db, department_id)
    return ApiResponse(data=[ManagerOption.model_validate(m) for m in managers])


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeDetail])
def get_employee(
    employee_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission(*VIEW_PERMISSIONS)),
) -> ApiResponse[EmployeeDetail]:
    """Get an employee profile within the caller's scope."""
    employee = employee_service.view_employee(db, identity, employee_id)
    return ApiResponse(
        data=EmployeeDetail.model_validate(employee_to_dict(employee, detail=True))
    )


@router.put("/{employee_id}", response_model=ApiResponse[EmployeeDetail])
def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission(*EDIT_PERMISSIONS)),
) -> ApiResponse[EmployeeDetail]:
    """Update an employee.

    Fields outside the caller's edit scope are ignored; if none remain the
    request fails.
    """
    employee = employee_service.update_employee(
        db, identity, employee_id, data.model_dump(exclude_unset=True)
    )
    return ApiResponse(
        data=EmployeeDetail.model_validate(employee_to_dict(employee, detail=True)),
        message="Employee updated successfully",
    )


@router.post("/{employee_id}/deactivate", response_model=ApiResponse[EmployeeDetail])
def deactivate_employee(
    employee_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("employees.deactivate")),
) -> ApiResponse[EmployeeDetail]:
    """Deactivate an employee and their login account."""
    employee = employee_service.deactivate_employee(db, identity, employee_id)
    return ApiResponse(
        data=EmployeeDetail.model_validate(employee_to_dict(employee, detail=True)),
        message="Employee deactivated",
    )


@router.get("/{employee_id}/documents", response_model=ApiResponse[list[DocumentResponse]])
def list_employee_documents(
    employee_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission(*VIEW_PERMISSIONS)),
) -> ApiResponse[list[DocumentResponse]]:
    """List documents uploaded for an employee."""
    documents = employee_service.list_documents(db, identity, employee_id)
    return ApiResponse(data=[DocumentResponse.model_validate(d) for d in documents])
