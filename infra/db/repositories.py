# infra/db/repositories.py
from __future__ import annotations

from infra.db.actuals.repository import SqlAlchemyExpenseRepository, SqlAlchemyTimeLogRepository
from infra.db.budget.repository import (
    SqlAlchemyBudgetExpenseRepository,
    SqlAlchemyBudgetLaborRepository,
)
from infra.db.payment.repository import SqlAlchemyPaymentRepository
from infra.db.project.repository import SqlAlchemyProjectRepository
from infra.db.staff.repository import SqlAlchemyStaffRepository

__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyStaffRepository",
    "SqlAlchemyBudgetLaborRepository",
    "SqlAlchemyBudgetExpenseRepository",
    "SqlAlchemyTimeLogRepository",
    "SqlAlchemyExpenseRepository",
    "SqlAlchemyPaymentRepository",
]
