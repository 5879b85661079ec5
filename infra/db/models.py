# infra/db/models.py
from __future__ import annotations
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    Boolean,
    ForeignKey,
    Enum as SAEnum,
    Index,
    Integer,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base, DecimalText
from core.domain import (
    PaymentStatus,
    PaymentType,
    StaffLocation,
)

# Money, hours and ratios keep the exact digits they were entered with.
MONEY = DecimalText()
HOURS = DecimalText()
RATIO = DecimalText()


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    total_contract_value: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    manager: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    coordinator: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    overhead_multiplier: Mapped[Decimal] = mapped_column(RATIO, nullable=False, default=Decimal("2.5"))
    target_margin: Mapped[Decimal] = mapped_column(RATIO, nullable=False, default=Decimal("20"))
    currency: Mapped[str] = mapped_column(String(8), nullable=False, default="SAR")

    stoppage_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    percent_complete: Mapped[Decimal] = mapped_column(RATIO, nullable=False, default=Decimal("0"))
    is_paused: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pause_start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class StaffORM(Base):
    __tablename__ = "staff"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(String, default="")
    base_rate: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    location: Mapped[StaffLocation] = mapped_column(
        SAEnum(StaffLocation), default=StaffLocation.CAIRO, nullable=False
    )
Index("idx_staff_project_id", StaffORM.project_id)


# staff_id on budget lines and time logs is not a foreign key; these rows
# outlive the staff member they point at.
class BudgetLaborORM(Base):
    __tablename__ = "budget_labor"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    staff_id: Mapped[str] = mapped_column(String, nullable=False)
    hours: Mapped[Decimal] = mapped_column(HOURS, nullable=False)
Index("idx_budget_labor_project_id", BudgetLaborORM.project_id)


class BudgetExpenseORM(Base):
    __tablename__ = "budget_expenses"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    category: Mapped[str] = mapped_column(String, nullable=False, default="Others")
    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
Index("idx_budget_expenses_project_id", BudgetExpenseORM.project_id)


class TimeLogORM(Base):
    __tablename__ = "time_logs"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    staff_id: Mapped[str] = mapped_column(String, nullable=False)
    hours: Mapped[Decimal] = mapped_column(HOURS, nullable=False)
    phase: Mapped[str] = mapped_column(String, nullable=False, default="Other")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
Index("idx_time_logs_project_id", TimeLogORM.project_id)
Index("idx_time_logs_staff_id", TimeLogORM.staff_id)


class ExpenseORM(Base):
    __tablename__ = "expenses"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    category: Mapped[str] = mapped_column(String, nullable=False, default="Others")
    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    reimbursable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
Index("idx_expenses_project_id", ExpenseORM.project_id)


class PaymentORM(Base):
    __tablename__ = "payments"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    payment_date: Mapped[date] = mapped_column("date", Date, nullable=False)
    type: Mapped[PaymentType] = mapped_column(
        SAEnum(PaymentType), default=PaymentType.CONTRACT, nullable=False
    )
    status: Mapped[PaymentStatus] = mapped_column(
        SAEnum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False
    )
    requirements: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    paid_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
Index("idx_payments_project_id", PaymentORM.project_id)
