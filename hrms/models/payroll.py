# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Payroll model (data shape only, no calculation yet)."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hrms.models.base import Base, TimestampMixin
from hrms.models.enums import PayrollStatus


def _money() -> Numeric:
    return Numeric(12, 2, asdecimal=False)


class PayrollRecord(Base, TimestampMixin):
    """Monthly salary breakdown for one employee."""

    __tablename__ = "payroll_records"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    employee_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    # Earnings
    basic_salary: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    hra: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    conveyance: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    lta: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    medical: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    other_allowances: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    total_earnings: Mapped[float] = mapped_column(_money(), default=0, nullable=False)

    # Deductions
    pf: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    professional_tax: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    income_tax: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    other_deductions: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    total_deductions: Mapped[float] = mapped_column(_money(), default=0, nullable=False)

    net_salary: Mapped[float] = mapped_column(_money(), default=0, nullable=False)
    status: Mapped[PayrollStatus] = mapped_column(
        Enum(PayrollStatus, values_callable=lambda e: [m.value for m in e]),
        default=PayrollStatus.DRAFT,
        nullable=False,
    )
    processed_by: Mapped[str | None] = mapped_column(
        String(20), ForeignKey("employees.id"), nullable=True
    )
    processed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    paid_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        UniqueConstraint("employee_id", "month", "year", name="_payroll_period_uc"),
    )
