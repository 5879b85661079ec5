from __future__ import annotations

from enum import Enum


class StaffLocation(str, Enum):
    RIYADH = "Riyadh"
    CAIRO = "Cairo"


class PaymentType(str, Enum):
    CONTRACT = "Contract"
    VO = "VO"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    DUE = "Due"
    CLAIMED = "Claimed"
    INVOICED = "Invoiced"
    PAID_PARTIAL = "PaidPartial"
    PAID_FULL = "PaidFull"


TIME_LOG_PHASES: tuple[str, ...] = (
    "Concept",
    "Schematic",
    "Design Dev (DD)",
    "Construction Doc (CD)",
    "Tender",
    "Other",
)

EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Sub-Consultant",
    "Printing",
    "Travel",
    "Software License",
    "Commission",
    "Materials",
    "Others",
)

DEFAULT_EXPENSE_CATEGORY = "Others"


__all__ = [
    "StaffLocation",
    "PaymentType",
    "PaymentStatus",
    "TIME_LOG_PHASES",
    "EXPENSE_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORY",
]
