from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from core.domain import Payment, PaymentStatus, PaymentType
from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import PaymentRepository, ProjectRepository
from core.services.common.base import ServiceBase
from core.services.common.parsing import clean_text, parse_date, parse_decimal, parse_enum

logger = logging.getLogger(__name__)


class PaymentService(ServiceBase):
    """Contract milestones and variation orders, and their collection status.

    ``paid_amount`` only carries meaning while a payment is ``PaidPartial``;
    a fully paid payment counts its whole amount as collected.
    """

    def __init__(
        self,
        session: Session,
        payment_repo: PaymentRepository,
        project_repo: ProjectRepository,
    ):
        super().__init__(session)
        self._payment_repo: PaymentRepository = payment_repo
        self._project_repo: ProjectRepository = project_repo

    def add_payment(
        self,
        project_id: str,
        title: str,
        amount: Any,
        date: date | str,
        type: PaymentType | str = PaymentType.CONTRACT,
        status: PaymentStatus | str = PaymentStatus.PENDING,
        requirements: Optional[str] = None,
        paid_amount: Any = None,
    ) -> Payment:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        if not title or not title.strip():
            raise ValidationError("Payment title cannot be empty.", code="PAYMENT_TITLE_EMPTY")

        payment = Payment.create(
            project_id=project_id,
            title=title.strip(),
            amount=parse_decimal(amount, field="amount"),
            date=parse_date(date, field="date"),
            type=parse_enum(PaymentType, type, field="type"),
            status=parse_enum(PaymentStatus, status, field="status"),
            requirements=clean_text(requirements),
        )
        payment.paid_amount = self._resolve_paid_amount(payment.status, paid_amount)

        with self.unit_of_work("payment.add"):
            self._payment_repo.add(payment)
        logger.info(
            "Added %s payment %r (%s) to project %s",
            payment.type.value, payment.title, payment.amount, project_id,
        )
        domain_events.payments_changed.emit(project_id)
        return payment

    def update_status(
        self,
        payment_id: str,
        status: PaymentStatus | str,
        paid_amount: Any = None,
    ) -> Payment:
        payment = self._payment_repo.get(payment_id)
        if not payment:
            raise NotFoundError("Payment not found.", code="PAYMENT_NOT_FOUND")

        payment.status = parse_enum(PaymentStatus, status, field="status")
        payment.paid_amount = self._resolve_paid_amount(payment.status, paid_amount)

        with self.unit_of_work("payment.update_status"):
            self._payment_repo.update(payment)
        logger.info("Payment %s moved to %s", payment_id, payment.status.value)
        domain_events.payments_changed.emit(payment.project_id)
        return payment

    def delete_payment(self, payment_id: str) -> None:
        payment = self._payment_repo.get(payment_id)
        if not payment:
            raise NotFoundError("Payment not found.", code="PAYMENT_NOT_FOUND")
        with self.unit_of_work("payment.delete"):
            self._payment_repo.delete(payment_id)
        domain_events.payments_changed.emit(payment.project_id)

    def list_payments(self, project_id: str) -> List[Payment]:
        return self._payment_repo.list_by_project(project_id)

    @staticmethod
    def _resolve_paid_amount(status: PaymentStatus, paid_amount: Any) -> Decimal:
        if status != PaymentStatus.PAID_PARTIAL:
            return Decimal("0")
        if paid_amount is None:
            return Decimal("0")
        return parse_decimal(paid_amount, field="paid_amount")


__all__ = ["PaymentService"]
