# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role-based access control: permission matching, default roles and the guard."""

from hrms.rbac.permissions import (
    GLOBAL_WILDCARD,
    SUPER_ADMIN_ROLE,
    covers,
    covers_any,
    has_universal_access,
    resource_wildcard,
)

__all__ = [
    "GLOBAL_WILDCARD",
    "SUPER_ADMIN_ROLE",
    "covers",
    "covers_any",
    "has_universal_access",
    "resource_wildcard",
]
