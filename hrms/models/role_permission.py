# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Association tables linking roles to permissions and parent roles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base

if TYPE_CHECKING:
    from hrms.models.permission import Permission
    from hrms.models.role import Role


class RolePermission(Base):
    """Association table mapping roles to their granted permissions."""

    __tablename__ = "role_permissions"

    role_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True
    )
    permission_code: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("permissions.code", ondelete="CASCADE"),
        primary_key=True,
    )

    role: Mapped[Role] = relationship("Role", back_populates="permissions")
    permission: Mapped[Permission] = relationship("Permission")


class RoleInheritance(Base):
    """A role listing another role whose permissions it inherits."""

    __tablename__ = "role_inheritance"

    role_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True
    )
    parent_role_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True
    )

    role: Mapped[Role] = relationship(
        "Role", back_populates="parents", foreign_keys=[role_id]
    )
