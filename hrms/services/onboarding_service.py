# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Onboarding checklist for new hires."""

from datetime import date, timedelta

from sqlalchemy.orm import Session

from hrms.models import OnboardingTask, OnboardingTaskType

DEFAULT_ONBOARDING_TASKS = [
    ("Complete Personal Information", OnboardingTaskType.PERSONAL_INFO, True),
    ("Upload ID Proof", OnboardingTaskType.DOCUMENTS, True),
    ("Upload Resume", OnboardingTaskType.DOCUMENTS, True),
    ("Submit Bank Details", OnboardingTaskType.BANK_DETAILS, True),
    ("Review Company Policies", OnboardingTaskType.POLICIES, True),
]

# Days after the hire date by which the checklist should be done
ONBOARDING_DUE_DAYS = 7


def create_default_tasks(
    db: Session, employee_id: str, hire_date: date | None = None
) -> list[OnboardingTask]:
    """Add the default checklist for a new hire. Does not commit."""
    due_date = hire_date + timedelta(days=ONBOARDING_DUE_DAYS) if hire_date else None
    tasks = [
        OnboardingTask(
            employee_id=employee_id,
            task_name=name,
            task_type=task_type,
            required=required,
            due_date=due_date,
        )
        for name, task_type, required in DEFAULT_ONBOARDING_TASKS
    ]
    db.add_all(tasks)
    return tasks
