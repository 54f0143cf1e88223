# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hrms.api.deps import get_current_identity, get_db, require_permission
from hrms.rbac.guard import Identity
from hrms.schemas.common import ApiResponse
from hrms.schemas.rbac import (
    MyPermissionsSchema,
    PermissionSchema,
    RoleCreateSchema,
    RoleSchema,
    RoleUpdateSchema,
    RoleWithEffectivePermissionsSchema,
)
from hrms.services import rbac_service

router = APIRouter()


@router.get("/permissions", response_model=ApiResponse[list[PermissionSchema]])
def list_permissions(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("roles.view")),
) -> ApiResponse[list[PermissionSchema]]:
    """Retrieve all available permissions.
    Requires roles.view permission.
    """
    permissions = rbac_service.list_permissions(db)
    return ApiResponse(data=[PermissionSchema.model_validate(p) for p in permissions])


@router.get("/roles", response_model=ApiResponse[list[RoleSchema]])
def list_roles(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("roles.view")),
) -> ApiResponse[list[RoleSchema]]:
    """Retrieve all roles with their own permissions and parents."""
    roles = rbac_service.list_roles(db)
    return ApiResponse(
        data=[RoleSchema.model_validate(rbac_service.role_to_dict(r)) for r in roles]
    )


@router.get("/roles/{role_id}", response_model=ApiResponse[RoleWithEffectivePermissionsSchema])
def get_role(
    role_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("roles.view")),
) -> ApiResponse[RoleWithEffectivePermissionsSchema]:
    """Retrieve a role together with the permissions it resolves to."""
    role = rbac_service.get_role_or_raise(db, role_id)
    effective = rbac_service.effective_permissions(db, role_id)
    return ApiResponse(
        data=RoleWithEffectivePermissionsSchema.model_validate(
            rbac_service.role_to_dict(role, with_effective=effective)
        )
    )


@router.post(
    "/roles",
    response_model=ApiResponse[RoleSchema],
    status_code=status.HTTP_201_CREATED,
)
def create_role(
    role_in: RoleCreateSchema,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("roles.manage")),
) -> ApiResponse[RoleSchema]:
    """Create a new custom role.
    Requires roles.manage permission.
    """
    role = rbac_service.create_role(
        db,
        role_in.id,
        role_in.name,
        description=role_in.description,
        level=role_in.level,
        permissions=role_in.permissions,
        inherits_from=role_in.inherits_from,
    )
    return ApiResponse(
        data=RoleSchema.model_validate(rbac_service.role_to_dict(role)),
        message="Role created successfully",
    )


@router.put("/roles/{role_id}", response_model=ApiResponse[RoleSchema])
def update_role(
    role_id: str,
    role_in: RoleUpdateSchema,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("roles.manage")),
) -> ApiResponse[RoleSchema]:
    """Update a custom role. System roles cannot be modified."""
    role = rbac_service.update_role(db, role_id, role_in.model_dump(exclude_unset=True))
    return ApiResponse(
        data=RoleSchema.model_validate(rbac_service.role_to_dict(role)),
        message="Role updated successfully",
    )


@router.delete("/roles/{role_id}", response_model=ApiResponse[None])
def delete_role(
    role_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_permission("roles.manage")),
) -> ApiResponse[None]:
    """Delete a custom role that is not assigned to anyone."""
    rbac_service.delete_role(db, role_id)
    return ApiResponse(message="Role deleted successfully")


@router.get("/me/permissions", response_model=ApiResponse[MyPermissionsSchema])
def get_my_permissions(
    identity: Identity = Depends(get_current_identity),
) -> ApiResponse[MyPermissionsSchema]:
    """Return the caller's role and effective permissions."""
    return ApiResponse(
        data=MyPermissionsSchema(role=identity.role, permissions=sorted(identity.permissions))
    )
