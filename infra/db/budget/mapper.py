from __future__ import annotations

from core.domain import BudgetExpense, BudgetLabor
from infra.db.models import BudgetExpenseORM, BudgetLaborORM


def budget_labor_to_orm(line: BudgetLabor) -> BudgetLaborORM:
    return BudgetLaborORM(
        id=line.id,
        project_id=line.project_id,
        staff_id=line.staff_id,
        hours=line.hours,
    )


def budget_labor_from_orm(obj: BudgetLaborORM) -> BudgetLabor:
    return BudgetLabor(
        id=obj.id,
        project_id=obj.project_id,
        staff_id=obj.staff_id,
        hours=obj.hours,
    )


def budget_expense_to_orm(line: BudgetExpense) -> BudgetExpenseORM:
    return BudgetExpenseORM(
        id=line.id,
        project_id=line.project_id,
        category=line.category,
        amount=line.amount,
    )


def budget_expense_from_orm(obj: BudgetExpenseORM) -> BudgetExpense:
    return BudgetExpense(
        id=obj.id,
        project_id=obj.project_id,
        category=obj.category,
        amount=obj.amount,
    )


__all__ = [
    "budget_labor_to_orm",
    "budget_labor_from_orm",
    "budget_expense_to_orm",
    "budget_expense_from_orm",
]
