# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from hrms.models.role_permission import RoleInheritance, RolePermission


class Role(Base, TimestampMixin):
    """Model representing a role with its permissions and parent roles."""

    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Informational rank, higher is more senior
    level: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_system: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    permissions: Mapped[list[RolePermission]] = relationship(
        "RolePermission", back_populates="role", cascade="all, delete-orphan"
    )
    parents: Mapped[list[RoleInheritance]] = relationship(
        "RoleInheritance",
        back_populates="role",
        foreign_keys="[RoleInheritance.role_id]",
        cascade="all, delete-orphan",
    )

    @property
    def permission_codes(self) -> list[str]:
        """Permission codes granted directly to this role."""
        return sorted(rp.permission_code for rp in self.permissions)

    @property
    def inherits_from(self) -> list[str]:
        """Ids of the roles this role inherits from."""
        return sorted(link.parent_role_id for link in self.parents)
