# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission codes and the matching rules between held and required permissions.

A permission is ``<resource>.<action>``; the action part may contain further
dots (``employees.view.all``). ``<resource>.*`` grants every action on that
resource. ``system.*`` and the super-admin role grant everything.
"""

import re
from collections.abc import Collection, Iterable

SUPER_ADMIN_ROLE = "super-admin"
GLOBAL_WILDCARD = "system.*"

PERMISSION_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*(\.[a-z][a-z0-9_-]*)*\.([a-z][a-z0-9_-]*|\*)$")

CORE_PERMISSIONS = [
    # Employee records
    {
        "code": "employees.view.self",
        "module": "employees",
        "description": "View own employee profile",
    },
    {
        "code": "employees.view.team",
        "module": "employees",
        "description": "View direct reports",
    },
    {
        "code": "employees.view.department",
        "module": "employees",
        "description": "View employees of own department",
    },
    {
        "code": "employees.view.all",
        "module": "employees",
        "description": "View all employees",
    },
    {"code": "employees.create", "module": "employees", "description": "Create employees"},
    {
        "code": "employees.edit.self",
        "module": "employees",
        "description": "Edit own employee profile",
    },
    {
        "code": "employees.edit.team",
        "module": "employees",
        "description": "Edit limited fields of direct reports",
    },
    {
        "code": "employees.edit.all",
        "module": "employees",
        "description": "Edit any employee",
    },
    {
        "code": "employees.deactivate",
        "module": "employees",
        "description": "Deactivate employees",
    },
    {
        "code": "employees.*",
        "module": "employees",
        "description": "Full control over employee records",
    },
    # Organization & departments
    {
        "code": "organization.view",
        "module": "organization",
        "description": "View the organization chart",
    },
    {"code": "departments.view", "module": "organization", "description": "View departments"},
    {
        "code": "departments.manage",
        "module": "organization",
        "description": "Create and edit departments",
    },
    {
        "code": "departments.*",
        "module": "organization",
        "description": "Full control over departments",
    },
    # Access control
    {"code": "roles.view", "module": "rbac", "description": "View roles and permissions"},
    {"code": "roles.manage", "module": "rbac", "description": "Create and edit roles"},
    {
        "code": "users.manage",
        "module": "rbac",
        "description": "Manage user accounts and reset passwords",
    },
    # Attendance, payroll, onboarding
    {
        "code": "attendance.view.self",
        "module": "attendance",
        "description": "View own attendance",
    },
    {
        "code": "attendance.*",
        "module": "attendance",
        "description": "Full control over attendance and leave",
    },
    {"code": "payroll.view.self", "module": "payroll", "description": "View own payslips"},
    {"code": "payroll.*", "module": "payroll", "description": "Full control over payroll"},
    {
        "code": "onboarding.*",
        "module": "onboarding",
        "description": "Manage onboarding tasks",
    },
    # System
    {
        "code": GLOBAL_WILDCARD,
        "module": "system",
        "description": "Unrestricted access to everything",
    },
]


def resource_wildcard(required: str) -> str:
    """Return the wildcard that covers ``required``'s resource.

    >>> resource_wildcard("employees.view.all")
    'employees.*'
    """
    return f"{required.split('.', 1)[0]}.*"


def has_universal_access(held: Collection[str], role: str | None = None) -> bool:
    """Check whether the role or held set short-circuits every permission check."""
    return role == SUPER_ADMIN_ROLE or GLOBAL_WILDCARD in held


def covers(held: Collection[str], required: str, role: str | None = None) -> bool:
    """Check if ``held`` grants ``required`` exactly or through its resource wildcard."""
    if has_universal_access(held, role):
        return True
    if required in held:
        return True
    return resource_wildcard(required) in held


def covers_any(
    held: Collection[str], required: Iterable[str], role: str | None = None
) -> bool:
    """Check if ``held`` grants at least one of ``required``.

    An empty ``required`` means no check was requested and yields True.
    """
    required = list(required)
    if not required:
        return True
    return any(covers(held, permission, role) for permission in required)


def is_valid_permission(code: str) -> bool:
    """Check if a string is a syntactically valid permission code."""
    return bool(PERMISSION_PATTERN.match(code))
