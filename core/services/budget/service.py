from __future__ import annotations

from typing import Any, List

from sqlalchemy.orm import Session

from core.domain import DEFAULT_EXPENSE_CATEGORY, BudgetExpense, BudgetLabor
from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError
from core.interfaces import (
    BudgetExpenseRepository,
    BudgetLaborRepository,
    ProjectRepository,
    StaffRepository,
)
from core.services.common.base import ServiceBase
from core.services.common.parsing import parse_decimal


class BudgetService(ServiceBase):
    """Planned labor hours and planned non-labor costs (the inputs to BAC)."""

    def __init__(
        self,
        session: Session,
        budget_labor_repo: BudgetLaborRepository,
        budget_expense_repo: BudgetExpenseRepository,
        project_repo: ProjectRepository,
        staff_repo: StaffRepository,
    ):
        super().__init__(session)
        self._budget_labor_repo: BudgetLaborRepository = budget_labor_repo
        self._budget_expense_repo: BudgetExpenseRepository = budget_expense_repo
        self._project_repo: ProjectRepository = project_repo
        self._staff_repo: StaffRepository = staff_repo

    def _require_project(self, project_id: str) -> None:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

    def add_labor_line(self, project_id: str, staff_id: str, hours: Any) -> BudgetLabor:
        self._require_project(project_id)
        staff = self._staff_repo.get(staff_id)
        if not staff:
            raise NotFoundError("Staff member not found.", code="STAFF_NOT_FOUND")
        if staff.project_id != project_id:
            raise BusinessRuleError(
                "Staff member must belong to the selected project.",
                code="STAFF_PROJECT_MISMATCH",
            )

        line = BudgetLabor.create(
            project_id=project_id,
            staff_id=staff_id,
            hours=parse_decimal(hours, field="hours"),
        )
        with self.unit_of_work("budget.labor.add"):
            self._budget_labor_repo.add(line)
        domain_events.budget_changed.emit(project_id)
        return line

    def delete_labor_line(self, line_id: str) -> None:
        line = self._budget_labor_repo.get(line_id)
        if not line:
            raise NotFoundError("Labor budget line not found.", code="BUDGET_LINE_NOT_FOUND")
        with self.unit_of_work("budget.labor.delete"):
            self._budget_labor_repo.delete(line_id)
        domain_events.budget_changed.emit(line.project_id)

    def list_labor_lines(self, project_id: str) -> List[BudgetLabor]:
        return self._budget_labor_repo.list_by_project(project_id)

    def add_expense_line(self, project_id: str, category: str, amount: Any) -> BudgetExpense:
        self._require_project(project_id)
        line = BudgetExpense.create(
            project_id=project_id,
            category=(category or "").strip() or DEFAULT_EXPENSE_CATEGORY,
            amount=parse_decimal(amount, field="amount"),
        )
        with self.unit_of_work("budget.expense.add"):
            self._budget_expense_repo.add(line)
        domain_events.budget_changed.emit(project_id)
        return line

    def delete_expense_line(self, line_id: str) -> None:
        line = self._budget_expense_repo.get(line_id)
        if not line:
            raise NotFoundError("Expense budget line not found.", code="BUDGET_LINE_NOT_FOUND")
        with self.unit_of_work("budget.expense.delete"):
            self._budget_expense_repo.delete(line_id)
        domain_events.budget_changed.emit(line.project_id)

    def list_expense_lines(self, project_id: str) -> List[BudgetExpense]:
        return self._budget_expense_repo.list_by_project(project_id)


__all__ = ["BudgetService"]
