from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from core.domain import DEFAULT_EXPENSE_CATEGORY, EXPENSE_CATEGORIES, TIME_LOG_PHASES, Expense, TimeLog
from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.interfaces import ExpenseRepository, ProjectRepository, StaffRepository, TimeLogRepository
from core.services.actuals.categorize import suggest_expense_category
from core.services.common.base import ServiceBase
from core.services.common.parsing import clean_text, parse_date, parse_decimal

logger = logging.getLogger(__name__)


class ActualsService(ServiceBase):
    """Recorded hours and incurred expenses, the inputs to burn."""

    def __init__(
        self,
        session: Session,
        time_log_repo: TimeLogRepository,
        expense_repo: ExpenseRepository,
        project_repo: ProjectRepository,
        staff_repo: StaffRepository,
    ):
        super().__init__(session)
        self._time_log_repo: TimeLogRepository = time_log_repo
        self._expense_repo: ExpenseRepository = expense_repo
        self._project_repo: ProjectRepository = project_repo
        self._staff_repo: StaffRepository = staff_repo

    def _require_project(self, project_id: str) -> None:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

    # ---------------- Time logs ----------------
    def log_time(
        self,
        project_id: str,
        staff_id: str,
        hours: Any,
        start_date: date | str,
        end_date: date | str | None = None,
        phase: str = "Other",
        description: Optional[str] = None,
    ) -> TimeLog:
        self._require_project(project_id)
        staff = self._staff_repo.get(staff_id)
        if not staff:
            raise NotFoundError("Staff member not found.", code="STAFF_NOT_FOUND")
        if staff.project_id != project_id:
            raise BusinessRuleError(
                "Staff member must belong to the selected project.",
                code="STAFF_PROJECT_MISMATCH",
            )
        if phase not in TIME_LOG_PHASES:
            raise ValidationError(f"Unknown phase: {phase!r}.", code="INVALID_ENUM")

        start = parse_date(start_date, field="start_date")
        end = parse_date(end_date, field="end_date") if end_date is not None else start
        if end < start:
            raise ValidationError(
                "Time log end date cannot be before its start date.",
                code="TIME_LOG_INVALID_DATES",
            )

        log = TimeLog.create(
            project_id=project_id,
            staff_id=staff_id,
            hours=parse_decimal(hours, field="hours"),
            phase=phase,
            start_date=start,
            end_date=end,
            description=clean_text(description),
        )
        with self.unit_of_work("actuals.time_log.add"):
            self._time_log_repo.add(log)
        logger.info("Logged %s h for staff %s on project %s", log.hours, staff_id, project_id)
        domain_events.actuals_changed.emit(project_id)
        return log

    def delete_time_log(self, log_id: str) -> None:
        log = self._time_log_repo.get(log_id)
        if not log:
            raise NotFoundError("Time log not found.", code="TIME_LOG_NOT_FOUND")
        with self.unit_of_work("actuals.time_log.delete"):
            self._time_log_repo.delete(log_id)
        domain_events.actuals_changed.emit(log.project_id)

    def list_time_logs(self, project_id: str) -> List[TimeLog]:
        return self._time_log_repo.list_by_project(project_id)

    # ---------------- Expenses ----------------
    def add_expense(
        self,
        project_id: str,
        amount: Any,
        category: Optional[str] = None,
        description: Optional[str] = None,
        reimbursable: bool = False,
    ) -> Expense:
        """Record an incurred cost.

        When no category is given one is suggested from the description.
        """
        self._require_project(project_id)
        category = (category or "").strip()
        if not category:
            category = suggest_expense_category(description)
        elif category not in EXPENSE_CATEGORIES:
            logger.warning("Unknown expense category %r, filing under %s", category, DEFAULT_EXPENSE_CATEGORY)
            category = DEFAULT_EXPENSE_CATEGORY

        expense = Expense.create(
            project_id=project_id,
            category=category,
            amount=parse_decimal(amount, field="amount"),
            description=clean_text(description),
            reimbursable=bool(reimbursable),
        )
        with self.unit_of_work("actuals.expense.add"):
            self._expense_repo.add(expense)
        domain_events.actuals_changed.emit(project_id)
        return expense

    def delete_expense(self, expense_id: str) -> None:
        expense = self._expense_repo.get(expense_id)
        if not expense:
            raise NotFoundError("Expense not found.", code="EXPENSE_NOT_FOUND")
        with self.unit_of_work("actuals.expense.delete"):
            self._expense_repo.delete(expense_id)
        domain_events.actuals_changed.emit(expense.project_id)

    def list_expenses(self, project_id: str) -> List[Expense]:
        return self._expense_repo.list_by_project(project_id)

    def suggest_expense_category(self, description: Optional[str]) -> str:
        return suggest_expense_category(description)


__all__ = ["ActualsService"]
