# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from hrms.schemas.auth import (
    ChangePasswordRequest,
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    ResetPasswordRequest,
)
from hrms.schemas.common import (
    ApiResponse,
    CamelModel,
    HealthResponse,
    PaginatedResponse,
    PaginationMeta,
)
from hrms.schemas.employee import (
    DocumentResponse,
    EmployeeCreate,
    EmployeeDetail,
    EmployeeSummary,
    EmployeeUpdate,
    ManagerOption,
)
from hrms.schemas.organization import (
    ChainEntrySchema,
    DepartmentCreate,
    DepartmentDetail,
    DepartmentResponse,
    DepartmentUpdate,
    HierarchyNodeSchema,
    OrganizationStructure,
    ReportingChain,
    SearchResult,
)
from hrms.schemas.rbac import (
    MyPermissionsSchema,
    PermissionSchema,
    RoleCreateSchema,
    RoleSchema,
    RoleUpdateSchema,
    RoleWithEffectivePermissionsSchema,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ChainEntrySchema",
    "ChangePasswordRequest",
    "DepartmentCreate",
    "DepartmentDetail",
    "DepartmentResponse",
    "DepartmentUpdate",
    "DocumentResponse",
    "EmployeeCreate",
    "EmployeeDetail",
    "EmployeeSummary",
    "EmployeeUpdate",
    "HealthResponse",
    "HierarchyNodeSchema",
    "IdentityResponse",
    "LoginRequest",
    "LoginResponse",
    "ManagerOption",
    "MyPermissionsSchema",
    "OrganizationStructure",
    "PaginatedResponse",
    "PaginationMeta",
    "PermissionSchema",
    "ProfileResponse",
    "ReportingChain",
    "ResetPasswordRequest",
    "RoleCreateSchema",
    "RoleSchema",
    "RoleUpdateSchema",
    "RoleWithEffectivePermissionsSchema",
    "SearchResult",
]
