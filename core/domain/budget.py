from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from core.domain.identifiers import generate_id


@dataclass
class BudgetLabor:
    """Planned hours for one staff member. ``staff_id`` may outlive the staff row."""

    id: str
    project_id: str
    staff_id: str
    hours: Decimal

    @staticmethod
    def create(project_id: str, staff_id: str, hours: Decimal) -> "BudgetLabor":
        return BudgetLabor(id=generate_id(), project_id=project_id, staff_id=staff_id, hours=hours)


@dataclass
class BudgetExpense:
    id: str
    project_id: str
    category: str
    amount: Decimal

    @staticmethod
    def create(project_id: str, category: str, amount: Decimal) -> "BudgetExpense":
        return BudgetExpense(id=generate_id(), project_id=project_id, category=category, amount=amount)


__all__ = ["BudgetLabor", "BudgetExpense"]
