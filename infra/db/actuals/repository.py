from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Expense, TimeLog
from core.interfaces import ExpenseRepository, TimeLogRepository
from infra.db.actuals.mapper import (
    expense_from_orm,
    expense_to_orm,
    time_log_from_orm,
    time_log_to_orm,
)
from infra.db.models import ExpenseORM, TimeLogORM


class SqlAlchemyTimeLogRepository(TimeLogRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, log: TimeLog) -> None:
        self.session.add(time_log_to_orm(log))

    def delete(self, log_id: str) -> None:
        self.session.query(TimeLogORM).filter_by(id=log_id).delete()

    def get(self, log_id: str) -> Optional[TimeLog]:
        obj = self.session.get(TimeLogORM, log_id)
        return time_log_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[TimeLog]:
        stmt = (
            select(TimeLogORM)
            .where(TimeLogORM.project_id == project_id)
            .order_by(TimeLogORM.start_date)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [time_log_from_orm(row) for row in rows]

    def delete_by_project(self, project_id: str) -> None:
        self.session.query(TimeLogORM).filter_by(project_id=project_id).delete()


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, expense: Expense) -> None:
        self.session.add(expense_to_orm(expense))

    def delete(self, expense_id: str) -> None:
        self.session.query(ExpenseORM).filter_by(id=expense_id).delete()

    def get(self, expense_id: str) -> Optional[Expense]:
        obj = self.session.get(ExpenseORM, expense_id)
        return expense_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Expense]:
        stmt = select(ExpenseORM).where(ExpenseORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [expense_from_orm(row) for row in rows]

    def delete_by_project(self, project_id: str) -> None:
        self.session.query(ExpenseORM).filter_by(project_id=project_id).delete()


__all__ = [
    "SqlAlchemyTimeLogRepository",
    "SqlAlchemyExpenseRepository",
]
