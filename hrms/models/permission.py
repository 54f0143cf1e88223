# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalogue model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hrms.models.base import Base, TimestampMixin


class Permission(Base, TimestampMixin):
    """A permission code grouped by the module it belongs to.

    Codes are ``<resource>.<action>`` where the action may itself contain dots
    (``employees.view.all``), or a resource wildcard such as ``employees.*``.
    """

    __tablename__ = "permissions"

    code: Mapped[str] = mapped_column(String(100), primary_key=True)
    module: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    @property
    def is_wildcard(self) -> bool:
        """Check if this permission covers a whole resource."""
        return self.code.endswith(".*")
