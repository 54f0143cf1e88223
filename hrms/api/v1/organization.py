# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organization structure and department API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hrms.api.deps import get_db, require_permission
from hrms.models import EmployeeStatus
from hrms.rbac.guard import Identity
from hrms.schemas.common import ApiResponse
from hrms.schemas.organization import (
    DepartmentCreate,
    DepartmentDetail,
    DepartmentResponse,
    DepartmentUpdate,
    OrganizationStructure,
    ReportingChain,
    SearchResult,
)
from hrms.services import organization_service
from hrms.services.employee_service import VIEW_PERMISSIONS
from hrms.services.organization_service import department_to_dict

router = APIRouter()


@router.get("/structure", response_model=ApiResponse[OrganizationStructure])
def get_structure(
    db: Session = Depends(get_db),
    identity: Identity = Depends(
        require_permission("employees.view.all", "organization.view")
    ),
) -> ApiResponse[OrganizationStructure]:
    """Get the reporting forest of the live organization."""
    return ApiResponse(
        data=OrganizationStructure.model_validate(organization_service.get_structure(db))
    )


@router.get("/search", response_model=ApiResponse[list[SearchResult]])
def search(
    q: str | None = None,
    department: str | None = None,
    role: str | None = None,
    position: str | None = None,
    status: EmployeeStatus | None = None,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("employees.view.all")),
) -> ApiResponse[list[SearchResult]]:
    """Search employees of any status by name or position."""
    results = organization_service.search_employees(
        db, q=q, department=department, role=role, position=position, status=status
    )
    return ApiResponse(data=[SearchResult.model_validate(r) for r in results])


@router.get("/departments", response_model=ApiResponse[list[DepartmentResponse]])
def list_departments(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("departments.view")),
) -> ApiResponse[list[DepartmentResponse]]:
    """List departments."""
    departments = organization_service.list_departments(db)
    return ApiResponse(
        data=[DepartmentResponse.model_validate(department_to_dict(d)) for d in departments]
    )


@router.post(
    "/departments",
    response_model=ApiResponse[DepartmentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_department(
    data: DepartmentCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("departments.manage")),
) -> ApiResponse[DepartmentResponse]:
    """Create a department."""
    department = organization_service.create_department(db, data.model_dump())
    return ApiResponse(
        data=DepartmentResponse.model_validate(department_to_dict(department)),
        message="Department created successfully",
    )


@router.get("/departments/{department_id}", response_model=ApiResponse[DepartmentDetail])
def get_department(
    department_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(
        require_permission("employees.view.all", "departments.view")
    ),
) -> ApiResponse[DepartmentDetail]:
    """Get a department with its members."""
    return ApiResponse(
        data=DepartmentDetail.model_validate(
            organization_service.get_department_detail(db, department_id)
        )
    )


@router.put("/departments/{department_id}", response_model=ApiResponse[DepartmentResponse])
def update_department(
    department_id: str,
    data: DepartmentUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("departments.manage")),
) -> ApiResponse[DepartmentResponse]:
    """Update a department."""
    department = organization_service.update_department(
        db, department_id, data.model_dump(exclude_unset=True)
    )
    return ApiResponse(
        data=DepartmentResponse.model_validate(department_to_dict(department)),
        message="Department updated successfully",
    )


@router.get(
    "/{employee_id}/reporting-chain",
    response_model=ApiResponse[ReportingChain],
    response_model_exclude_unset=True,
)
def get_reporting_chain(
    employee_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission(*VIEW_PERMISSIONS)),
) -> ApiResponse[ReportingChain]:
    """Get who an employee reports to, and who reports to them.

    Upward entries run from the top of the organization down to the employee.
    """
    chain = organization_service.get_reporting_chain(db, identity, employee_id)
    return ApiResponse(success=True, data=ReportingChain.model_validate(chain))
