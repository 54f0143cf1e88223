# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission management, and resolution of effective permissions."""

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session, selectinload

from hrms.exceptions import ConflictError, RoleNotFoundError, ValidationError
from hrms.models import Employee, Permission, Role, RoleInheritance, RolePermission, User
from hrms.rbac.permissions import is_valid_permission

logger = logging.getLogger(__name__)


def get_role(db: Session, role_id: str) -> Role | None:
    """Get a role by its id."""
    return (
        db.query(Role)
        .options(selectinload(Role.permissions), selectinload(Role.parents))
        .filter(Role.id == role_id)
        .first()
    )


def get_role_or_raise(db: Session, role_id: str) -> Role:
    role = get_role(db, role_id)
    if role is None:
        raise RoleNotFoundError(role_id)
    return role


def list_roles(db: Session) -> list[Role]:
    """List all roles, most senior first."""
    return (
        db.query(Role)
        .options(selectinload(Role.permissions), selectinload(Role.parents))
        .order_by(Role.level.desc(), Role.name)
        .all()
    )


def list_permissions(db: Session) -> list[Permission]:
    """List the permission catalogue grouped by module."""
    return db.query(Permission).order_by(Permission.module, Permission.code).all()


def register_permission(
    db: Session, code: str, module: str, description: str | None = None
) -> Permission:
    """Add a permission to the catalogue, or return the existing one."""
    if not is_valid_permission(code):
        raise ValidationError(f"Invalid permission code '{code}'")

    permission = db.query(Permission).filter(Permission.code == code).first()
    if permission:
        return permission

    permission = Permission(code=code, module=module, description=description)
    db.add(permission)
    db.flush()
    return permission


def effective_permissions(db: Session, role_id: str) -> set[str]:
    """Resolve a role to its own permissions plus those of its direct parents.

    Only the parents' *own* permissions are added; a grandparent contributes
    nothing unless the role lists it as a parent too. A parent id that does
    not resolve is skipped with a warning.

    Raises:
        RoleNotFoundError: If ``role_id`` itself does not exist
    """
    role = get_role(db, role_id)
    if role is None:
        raise RoleNotFoundError(role_id)

    permissions = set(role.permission_codes)
    for parent_id in role.inherits_from:
        parent = get_role(db, parent_id)
        if parent is None:
            logger.warning(f"Role '{role_id}' inherits from unknown role '{parent_id}'")
            continue
        permissions.update(parent.permission_codes)

    return permissions


def role_to_dict(role: Role, with_effective: set[str] | None = None) -> dict[str, Any]:
    """Flatten a role for the API layer."""
    data = {
        "id": role.id,
        "name": role.name,
        "description": role.description,
        "level": role.level,
        "is_system": role.is_system,
        "permissions": role.permission_codes,
        "inherits_from": role.inherits_from,
    }
    if with_effective is not None:
        data["effective_permissions"] = sorted(with_effective)
    return data


def _validate_permission_codes(db: Session, codes: Iterable[str]) -> list[str]:
    codes = sorted(set(codes))
    known = {
        row[0] for row in db.query(Permission.code).filter(Permission.code.in_(codes)).all()
    }
    unknown = [code for code in codes if code not in known]
    if unknown:
        raise ValidationError(f"Unknown permissions: {', '.join(unknown)}")
    return codes


def _validate_parents(db: Session, role_id: str, parent_ids: Iterable[str]) -> list[str]:
    parent_ids = sorted(set(parent_ids))
    if role_id in parent_ids:
        raise ValidationError(f"Role '{role_id}' cannot inherit from itself")

    for parent_id in parent_ids:
        if get_role(db, parent_id) is None:
            raise ValidationError(f"Parent role '{parent_id}' does not exist")
        if _inherits(db, parent_id, role_id):
            raise ValidationError(
                f"Role '{role_id}' cannot inherit from '{parent_id}': "
                "inheritance would be cyclic"
            )
    return parent_ids


def _inherits(db: Session, role_id: str, ancestor_id: str) -> bool:
    """Check whether ``ancestor_id`` is reachable from ``role_id`` via parent links."""
    seen: set[str] = set()
    pending = [role_id]
    while pending:
        current = pending.pop()
        if current == ancestor_id:
            return True
        if current in seen:
            continue
        seen.add(current)
        pending.extend(
            row[0]
            for row in db.query(RoleInheritance.parent_role_id)
            .filter(RoleInheritance.role_id == current)
            .all()
        )
    return False


def _set_role_links(
    role: Role, permissions: list[str] | None, parents: list[str] | None
) -> None:
    if permissions is not None:
        wanted = set(permissions)
        current = set(role.permission_codes)
        role.permissions = [
            rp for rp in role.permissions if rp.permission_code in wanted
        ] + [
            RolePermission(role_id=role.id, permission_code=code)
            for code in sorted(wanted - current)
        ]
    if parents is not None:
        wanted = set(parents)
        current = set(role.inherits_from)
        role.parents = [
            link for link in role.parents if link.parent_role_id in wanted
        ] + [
            RoleInheritance(role_id=role.id, parent_role_id=parent_id)
            for parent_id in sorted(wanted - current)
        ]


def create_role(
    db: Session,
    role_id: str,
    name: str,
    description: str | None = None,
    level: int = 0,
    permissions: Iterable[str] = (),
    inherits_from: Iterable[str] = (),
) -> Role:
    """Create a custom role."""
    if db.query(Role).filter(Role.id == role_id).first():
        raise ConflictError(f"Role '{role_id}' already exists")
    if db.query(Role).filter(Role.name == name).first():
        raise ConflictError(f"Role name '{name}' is already taken")

    permission_codes = _validate_permission_codes(db, permissions)
    parent_ids = _validate_parents(db, role_id, inherits_from)

    role = Role(id=role_id, name=name, description=description, level=level, is_system=False)
    db.add(role)
    db.flush()
    _set_role_links(role, permission_codes, parent_ids)
    db.commit()
    db.refresh(role)

    logger.info(f"Created role '{role_id}'")
    return role


def update_role(db: Session, role_id: str, data: dict[str, Any]) -> Role:
    """Update a custom role; system roles cannot be changed."""
    role = get_role_or_raise(db, role_id)
    if role.is_system:
        raise ValidationError("System roles cannot be modified")

    name = data.get("name")
    if name is not None and name != role.name:
        if db.query(Role).filter(Role.name == name, Role.id != role_id).first():
            raise ConflictError(f"Role name '{name}' is already taken")
        role.name = name
    if "description" in data:
        role.description = data["description"]
    if data.get("level") is not None:
        role.level = data["level"]

    permissions = data.get("permissions")
    parents = data.get("inherits_from")
    _set_role_links(
        role,
        _validate_permission_codes(db, permissions) if permissions is not None else None,
        _validate_parents(db, role_id, parents) if parents is not None else None,
    )

    db.commit()
    db.refresh(role)
    logger.info(f"Updated role '{role_id}'")
    return role


def delete_role(db: Session, role_id: str) -> None:
    """Delete a custom role that nobody holds."""
    role = get_role_or_raise(db, role_id)
    if role.is_system:
        raise ValidationError("System roles cannot be deleted")

    in_use = (
        db.query(User).filter(User.role_id == role_id).count()
        + db.query(Employee).filter(Employee.role_id == role_id).count()
    )
    if in_use:
        raise ValidationError(f"Role '{role_id}' is still assigned to {in_use} record(s)")

    db.query(RoleInheritance).filter(RoleInheritance.parent_role_id == role_id).delete()
    db.delete(role)
    db.commit()
    logger.info(f"Deleted role '{role_id}'")
