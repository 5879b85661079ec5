from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from core.domain import PaymentStatus

# Share of the daily profit target lost per stoppage day; overhead keeps
# accruing while the project is paused. Tunable policy value.
STOPPAGE_LOSS_FACTOR = Decimal("0.40")

INVOICED_STATUSES: tuple[PaymentStatus, ...] = (
    PaymentStatus.INVOICED,
    PaymentStatus.PAID_FULL,
    PaymentStatus.PAID_PARTIAL,
)


@dataclass(frozen=True)
class FinancePolicy:
    stoppage_loss_factor: Decimal = STOPPAGE_LOSS_FACTOR
    invoiced_statuses: tuple[PaymentStatus, ...] = INVOICED_STATUSES


DEFAULT_POLICY = FinancePolicy()


__all__ = [
    "STOPPAGE_LOSS_FACTOR",
    "INVOICED_STATUSES",
    "FinancePolicy",
    "DEFAULT_POLICY",
]
