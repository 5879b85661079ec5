from __future__ import annotations

from core.domain import Expense, TimeLog
from infra.db.models import ExpenseORM, TimeLogORM


def time_log_to_orm(log: TimeLog) -> TimeLogORM:
    return TimeLogORM(
        id=log.id,
        project_id=log.project_id,
        staff_id=log.staff_id,
        hours=log.hours,
        phase=log.phase,
        start_date=log.start_date,
        end_date=log.end_date,
        description=log.description,
    )


def time_log_from_orm(obj: TimeLogORM) -> TimeLog:
    return TimeLog(
        id=obj.id,
        project_id=obj.project_id,
        staff_id=obj.staff_id,
        hours=obj.hours,
        phase=obj.phase,
        start_date=obj.start_date,
        end_date=obj.end_date,
        description=obj.description,
    )


def expense_to_orm(expense: Expense) -> ExpenseORM:
    return ExpenseORM(
        id=expense.id,
        project_id=expense.project_id,
        category=expense.category,
        amount=expense.amount,
        description=expense.description,
        reimbursable=expense.reimbursable,
    )


def expense_from_orm(obj: ExpenseORM) -> Expense:
    return Expense(
        id=obj.id,
        project_id=obj.project_id,
        category=obj.category,
        amount=obj.amount,
        description=obj.description,
        reimbursable=bool(obj.reimbursable),
    )


__all__ = [
    "time_log_to_orm",
    "time_log_from_orm",
    "expense_to_orm",
    "expense_from_orm",
]
