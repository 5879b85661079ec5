from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Payment
from core.exceptions import NotFoundError
from core.interfaces import PaymentRepository
from infra.db.models import PaymentORM
from infra.db.payment.mapper import payment_from_orm, payment_to_orm


class SqlAlchemyPaymentRepository(PaymentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, payment: Payment) -> None:
        self.session.add(payment_to_orm(payment))

    def update(self, payment: Payment) -> None:
        obj = self.session.get(PaymentORM, payment.id)
        if obj is None:
            raise NotFoundError("Payment not found.", code="PAYMENT_NOT_FOUND")
        obj.title = payment.title
        obj.amount = payment.amount
        obj.payment_date = payment.date
        obj.type = payment.type
        obj.status = payment.status
        obj.requirements = payment.requirements
        obj.paid_amount = payment.paid_amount or Decimal("0")

    def delete(self, payment_id: str) -> None:
        self.session.query(PaymentORM).filter_by(id=payment_id).delete()

    def get(self, payment_id: str) -> Optional[Payment]:
        obj = self.session.get(PaymentORM, payment_id)
        return payment_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Payment]:
        stmt = (
            select(PaymentORM)
            .where(PaymentORM.project_id == project_id)
            .order_by(PaymentORM.payment_date)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [payment_from_orm(row) for row in rows]

    def delete_by_project(self, project_id: str) -> None:
        self.session.query(PaymentORM).filter_by(project_id=project_id).delete()


__all__ = ["SqlAlchemyPaymentRepository"]
