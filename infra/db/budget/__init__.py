from infra.db.budget.mapper import (
    budget_expense_from_orm,
    budget_expense_to_orm,
    budget_labor_from_orm,
    budget_labor_to_orm,
)
from infra.db.budget.repository import (
    SqlAlchemyBudgetExpenseRepository,
    SqlAlchemyBudgetLaborRepository,
)

__all__ = [
    "budget_labor_to_orm",
    "budget_labor_from_orm",
    "budget_expense_to_orm",
    "budget_expense_from_orm",
    "SqlAlchemyBudgetLaborRepository",
    "SqlAlchemyBudgetExpenseRepository",
]
