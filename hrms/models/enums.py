# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employee status enumeration.

    Employees are never deleted; they move between statuses instead.
    """

    ACTIVE = "Active"
    PENDING_ONBOARDING = "Pending Onboarding"
    ON_LEAVE = "On Leave"
    INACTIVE = "Inactive"
    TERMINATED = "Terminated"


# Statuses that count as part of the live organization
VISIBLE_STATUSES = (EmployeeStatus.ACTIVE, EmployeeStatus.PENDING_ONBOARDING)


class EmploymentType(str, Enum):
    """Employment type enumeration."""

    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERN = "Intern"


class AttendanceStatus(str, Enum):
    """Daily attendance status."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    HALF_DAY = "Half-day"
    REGULARIZED = "Regularized"


class LeaveType(str, Enum):
    """Leave type enumeration."""

    ANNUAL = "Annual"
    SICK = "Sick"
    PERSONAL = "Personal"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"
    EMERGENCY = "Emergency"


class ApprovalStatus(str, Enum):
    """Approval state shared by leave requests."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PayrollStatus(str, Enum):
    """Payroll run status.

    Status flow:
        DRAFT → PROCESSED → PAID
    """

    DRAFT = "Draft"
    PROCESSED = "Processed"
    PAID = "Paid"


class OnboardingTaskType(str, Enum):
    """Onboarding task type enumeration."""

    PERSONAL_INFO = "personal_info"
    DOCUMENTS = "documents"
    BANK_DETAILS = "bank_details"
    POLICIES = "policies"
    TRAINING = "training"


class OnboardingTaskStatus(str, Enum):
    """Onboarding task status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    REJECTED = "rejected"


class DocumentType(str, Enum):
    """Employee document type enumeration."""

    ID_PROOF = "id_proof"
    PAN = "pan"
    RESUME = "resume"
    CERTIFICATES = "certificates"
    BANK_PROOF = "bank_proof"
    OTHER = "other"


class DocumentStatus(str, Enum):
    """Employee document review status."""

    UPLOADED = "uploaded"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    REJECTED = "rejected"
