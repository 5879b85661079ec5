from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from core.domain.identifiers import generate_id


@dataclass
class TimeLog:
    id: str
    project_id: str
    staff_id: str
    hours: Decimal
    phase: str
    start_date: date
    end_date: date
    description: Optional[str] = None

    @staticmethod
    def create(
        project_id: str,
        staff_id: str,
        hours: Decimal,
        phase: str,
        start_date: date,
        end_date: date,
        description: Optional[str] = None,
    ) -> "TimeLog":
        return TimeLog(
            id=generate_id(),
            project_id=project_id,
            staff_id=staff_id,
            hours=hours,
            phase=phase,
            start_date=start_date,
            end_date=end_date,
            description=description,
        )


@dataclass
class Expense:
    id: str
    project_id: str
    category: str
    amount: Decimal
    description: Optional[str] = None
    # Reimbursable costs are recovered from the client and stay out of burn.
    reimbursable: bool = False

    @staticmethod
    def create(
        project_id: str,
        category: str,
        amount: Decimal,
        description: Optional[str] = None,
        reimbursable: bool = False,
    ) -> "Expense":
        return Expense(
            id=generate_id(),
            project_id=project_id,
            category=category,
            amount=amount,
            description=description,
            reimbursable=reimbursable,
        )


__all__ = ["TimeLog", "Expense"]
