# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""RBAC schemas."""

from pydantic import ConfigDict, Field

from hrms.schemas.common import CamelModel


class PermissionSchema(CamelModel):
    """Schema representing a permission."""

    code: str
    module: str
    description: str | None = None


class RoleSchema(CamelModel):
    """Schema representing a role with its own permissions and parents."""

    id: str
    name: str
    description: str | None = None
    level: int
    is_system: bool
    permissions: list[str]
    inherits_from: list[str]


class RoleWithEffectivePermissionsSchema(RoleSchema):
    """Role along with the permissions it resolves to after inheritance."""

    effective_permissions: list[str]


class RoleCreateSchema(CamelModel):
    """Schema for creating a new role."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z][a-z0-9-]*$")
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    level: int = Field(0, ge=0)
    permissions: list[str] = []
    inherits_from: list[str] = []


class RoleUpdateSchema(CamelModel):
    """Schema for updating a role."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    level: int | None = Field(None, ge=0)
    permissions: list[str] | None = None
    inherits_from: list[str] | None = None


class MyPermissionsSchema(CamelModel):
    """The caller's role and effective permissions."""

    role: str
    permissions: list[str]
