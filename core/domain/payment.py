from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from core.domain.enums import PaymentStatus, PaymentType
from core.domain.identifiers import generate_id


@dataclass
class Payment:
    id: str
    project_id: str
    title: str
    amount: Decimal
    date: date
    type: PaymentType = PaymentType.CONTRACT
    status: PaymentStatus = PaymentStatus.PENDING
    requirements: Optional[str] = None
    paid_amount: Optional[Decimal] = Decimal("0")

    @staticmethod
    def create(
        project_id: str,
        title: str,
        amount: Decimal,
        date: date,
        type: PaymentType = PaymentType.CONTRACT,
        status: PaymentStatus = PaymentStatus.PENDING,
        requirements: Optional[str] = None,
    ) -> "Payment":
        return Payment(
            id=generate_id(),
            project_id=project_id,
            title=title,
            amount=amount,
            date=date,
            type=type,
            status=status,
            requirements=requirements,
        )


__all__ = ["Payment"]
