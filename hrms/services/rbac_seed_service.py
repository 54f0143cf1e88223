# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Seeding of the permission catalogue and the default roles."""

import logging

from sqlalchemy.orm import Session

from hrms.models import Role, RoleInheritance, RolePermission
from hrms.rbac.permissions import CORE_PERMISSIONS
from hrms.rbac.roles import DEFAULT_ROLES

from . import rbac_service

logger = logging.getLogger(__name__)


def seed_rbac_data(db: Session) -> None:
    """Seeds the database with core permissions and default roles.

    This function is idempotent: existing roles keep their current
    permissions and parents, only missing rows are added.
    @param db: SQLAlchemy Session object
    """
    for perm_data in CORE_PERMISSIONS:
        rbac_service.register_permission(db, **perm_data)

    created = []
    for role_data in DEFAULT_ROLES:
        role = db.query(Role).filter(Role.id == role_data["id"]).first()
        if role:
            continue
        role = Role(
            id=role_data["id"],
            name=role_data["name"],
            level=role_data["level"],
            is_system=role_data["is_system"],
            description=role_data["description"],
        )
        db.add(role)
        db.flush()
        for perm_code in role_data["permissions"]:
            db.add(RolePermission(role_id=role.id, permission_code=perm_code))
        created.append(role_data)

    # Parents are linked once every default role exists
    db.flush()
    for role_data in created:
        for parent_id in role_data["inherits_from"]:
            db.add(RoleInheritance(role_id=role_data["id"], parent_role_id=parent_id))

    db.commit()
    if created:
        logger.info(f"Seeded roles: {', '.join(r['id'] for r in created)}")
