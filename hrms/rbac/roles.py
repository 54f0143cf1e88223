# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Default roles seeded on first start.

Inheritance is resolved one level deep: a role gets its own permissions plus
the *own* permissions of each role listed in ``inherits_from``. Roles that need
a grandparent's permissions list it explicitly.
"""

from hrms.rbac.permissions import GLOBAL_WILDCARD, SUPER_ADMIN_ROLE

HR_ADMIN_ROLE = "hr-admin"
HR_SPECIALIST_ROLE = "hr-specialist"
DEPARTMENT_HEAD_ROLE = "department-head"
MANAGER_ROLE = "manager"
EMPLOYEE_ROLE = "employee"

# Only super-admin is a system role and cannot be modified or deleted
DEFAULT_ROLES = [
    {
        "id": SUPER_ADMIN_ROLE,
        "name": "Super Admin",
        "level": 100,
        "is_system": True,
        "description": "Unrestricted access to the whole system.",
        "permissions": [GLOBAL_WILDCARD],
        "inherits_from": [],
    },
    {
        "id": HR_ADMIN_ROLE,
        "name": "HR Admin",
        "level": 90,
        "is_system": False,
        "description": "Administers all employee records, departments and HR modules.",
        "permissions": [
            "employees.*",
            "departments.*",
            "organization.view",
            "roles.view",
            "users.manage",
            "attendance.*",
            "payroll.*",
        ],
        "inherits_from": [HR_SPECIALIST_ROLE, EMPLOYEE_ROLE],
    },
    {
        "id": HR_SPECIALIST_ROLE,
        "name": "HR Specialist",
        "level": 70,
        "is_system": False,
        "description": "Views all employee records and runs onboarding.",
        "permissions": [
            "employees.view.all",
            "employees.create",
            "departments.view",
            "organization.view",
            "onboarding.*",
        ],
        "inherits_from": [EMPLOYEE_ROLE],
    },
    {
        "id": DEPARTMENT_HEAD_ROLE,
        "name": "Department Head",
        "level": 60,
        "is_system": False,
        "description": "Views and maintains the employees of their own department.",
        "permissions": [
            "employees.view.department",
            "departments.view",
        ],
        "inherits_from": [MANAGER_ROLE, EMPLOYEE_ROLE],
    },
    {
        "id": MANAGER_ROLE,
        "name": "Manager",
        "level": 50,
        "is_system": False,
        "description": "Views direct reports and edits their contact details.",
        "permissions": [
            "employees.view.team",
            "employees.edit.team",
            "organization.view",
        ],
        "inherits_from": [EMPLOYEE_ROLE],
    },
    {
        "id": EMPLOYEE_ROLE,
        "name": "Employee",
        "level": 10,
        "is_system": False,
        "description": "Self-service access to own records.",
        "permissions": [
            "employees.view.self",
            "employees.edit.self",
            "attendance.view.self",
            "payroll.view.self",
        ],
        "inherits_from": [],
    },
]
