from __future__ import annotations

from decimal import Decimal

from core.domain import Payment
from infra.db.models import PaymentORM


def payment_to_orm(payment: Payment) -> PaymentORM:
    return PaymentORM(
        id=payment.id,
        project_id=payment.project_id,
        title=payment.title,
        amount=payment.amount,
        payment_date=payment.date,
        type=payment.type,
        status=payment.status,
        requirements=payment.requirements,
        paid_amount=payment.paid_amount or Decimal("0"),
    )


def payment_from_orm(obj: PaymentORM) -> Payment:
    return Payment(
        id=obj.id,
        project_id=obj.project_id,
        title=obj.title,
        amount=obj.amount,
        date=obj.payment_date,
        type=obj.type,
        status=obj.status,
        requirements=obj.requirements,
        paid_amount=obj.paid_amount if obj.paid_amount is not None else Decimal("0"),
    )


__all__ = ["payment_to_orm", "payment_from_orm"]
