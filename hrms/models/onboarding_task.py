# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Onboarding task model."""

import uuid
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hrms.models.base import Base, TimestampMixin
from hrms.models.enums import OnboardingTaskStatus, OnboardingTaskType


class OnboardingTask(Base, TimestampMixin):
    """A single step a new hire has to complete."""

    __tablename__ = "onboarding_tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    employee_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    task_name: Mapped[str] = mapped_column(String(200), nullable=False)
    task_type: Mapped[OnboardingTaskType] = mapped_column(
        Enum(OnboardingTaskType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    status: Mapped[OnboardingTaskStatus] = mapped_column(
        Enum(OnboardingTaskStatus, values_callable=lambda e: [m.value for m in e]),
        default=OnboardingTaskStatus.PENDING,
        nullable=False,
    )
    required: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    reviewed_by: Mapped[str | None] = mapped_column(
        String(20), ForeignKey("employees.id"), nullable=True
    )
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
