# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from hrms.models.attendance import AttendanceRecord, LeaveRequest
from hrms.models.base import Base, TimestampMixin
from hrms.models.department import Department
from hrms.models.document import EmployeeDocument
from hrms.models.employee import Employee
from hrms.models.enums import (
    VISIBLE_STATUSES,
    ApprovalStatus,
    AttendanceStatus,
    DocumentStatus,
    DocumentType,
    EmployeeStatus,
    EmploymentType,
    LeaveType,
    OnboardingTaskStatus,
    OnboardingTaskType,
    PayrollStatus,
)
from hrms.models.onboarding_task import OnboardingTask
from hrms.models.payroll import PayrollRecord
from hrms.models.permission import Permission
from hrms.models.role import Role
from hrms.models.role_permission import RoleInheritance, RolePermission
from hrms.models.session import Session
from hrms.models.user import User

__all__ = [
    "VISIBLE_STATUSES",
    "ApprovalStatus",
    "AttendanceRecord",
    "AttendanceStatus",
    "Base",
    "Department",
    "DocumentStatus",
    "DocumentType",
    "Employee",
    "EmployeeDocument",
    "EmployeeStatus",
    "EmploymentType",
    "LeaveRequest",
    "LeaveType",
    "OnboardingTask",
    "OnboardingTaskStatus",
    "OnboardingTaskType",
    "PayrollRecord",
    "PayrollStatus",
    "Permission",
    "Role",
    "RoleInheritance",
    "RolePermission",
    "Session",
    "TimestampMixin",
    "User",
]
