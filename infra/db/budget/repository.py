from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import BudgetExpense, BudgetLabor
from core.interfaces import BudgetExpenseRepository, BudgetLaborRepository
from infra.db.budget.mapper import (
    budget_expense_from_orm,
    budget_expense_to_orm,
    budget_labor_from_orm,
    budget_labor_to_orm,
)
from infra.db.models import BudgetExpenseORM, BudgetLaborORM


class SqlAlchemyBudgetLaborRepository(BudgetLaborRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, line: BudgetLabor) -> None:
        self.session.add(budget_labor_to_orm(line))

    def delete(self, line_id: str) -> None:
        self.session.query(BudgetLaborORM).filter_by(id=line_id).delete()

    def get(self, line_id: str) -> Optional[BudgetLabor]:
        obj = self.session.get(BudgetLaborORM, line_id)
        return budget_labor_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[BudgetLabor]:
        stmt = select(BudgetLaborORM).where(BudgetLaborORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [budget_labor_from_orm(row) for row in rows]

    def delete_by_project(self, project_id: str) -> None:
        self.session.query(BudgetLaborORM).filter_by(project_id=project_id).delete()


class SqlAlchemyBudgetExpenseRepository(BudgetExpenseRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, line: BudgetExpense) -> None:
        self.session.add(budget_expense_to_orm(line))

    def delete(self, line_id: str) -> None:
        self.session.query(BudgetExpenseORM).filter_by(id=line_id).delete()

    def get(self, line_id: str) -> Optional[BudgetExpense]:
        obj = self.session.get(BudgetExpenseORM, line_id)
        return budget_expense_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[BudgetExpense]:
        stmt = select(BudgetExpenseORM).where(BudgetExpenseORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [budget_expense_from_orm(row) for row in rows]

    def delete_by_project(self, project_id: str) -> None:
        self.session.query(BudgetExpenseORM).filter_by(project_id=project_id).delete()


__all__ = [
    "SqlAlchemyBudgetLaborRepository",
    "SqlAlchemyBudgetExpenseRepository",
]
