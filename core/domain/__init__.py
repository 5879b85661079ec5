from core.domain.actuals import Expense, TimeLog
from core.domain.budget import BudgetExpense, BudgetLabor
from core.domain.enums import (
    DEFAULT_EXPENSE_CATEGORY,
    EXPENSE_CATEGORIES,
    TIME_LOG_PHASES,
    PaymentStatus,
    PaymentType,
    StaffLocation,
)
from core.domain.identifiers import generate_id
from core.domain.payment import Payment
from core.domain.project import Project
from core.domain.staff import Staff

__all__ = [
    "generate_id",
    "StaffLocation",
    "PaymentType",
    "PaymentStatus",
    "TIME_LOG_PHASES",
    "EXPENSE_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORY",
    "Project",
    "Staff",
    "BudgetLabor",
    "BudgetExpense",
    "TimeLog",
    "Expense",
    "Payment",
]
