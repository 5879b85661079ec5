from infra.db.actuals.mapper import (
    expense_from_orm,
    expense_to_orm,
    time_log_from_orm,
    time_log_to_orm,
)
from infra.db.actuals.repository import (
    SqlAlchemyExpenseRepository,
    SqlAlchemyTimeLogRepository,
)

__all__ = [
    "time_log_to_orm",
    "time_log_from_orm",
    "expense_to_orm",
    "expense_from_orm",
    "SqlAlchemyTimeLogRepository",
    "SqlAlchemyExpenseRepository",
]
