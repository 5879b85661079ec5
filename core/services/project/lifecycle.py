from __future__ import annotations

import logging
from datetime import date
from typing import Any

from core.domain import Project
from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, ConcurrencyError
from core.interfaces import (
    BudgetExpenseRepository,
    BudgetLaborRepository,
    ExpenseRepository,
    PaymentRepository,
    ProjectRepository,
    StaffRepository,
    TimeLogRepository,
)
from core.services.common.parsing import (
    clean_text,
    parse_date,
    parse_decimal,
    parse_non_negative_int,
    parse_percent,
)
from core.services.project.validation import ProjectValidationMixin

logger = logging.getLogger(__name__)
DEFAULT_CURRENCY_CODE = "SAR"
DEFAULT_OVERHEAD_MULTIPLIER = "2.5"
DEFAULT_TARGET_MARGIN = "20"


class ProjectLifecycleMixin(ProjectValidationMixin):
    _project_repo: ProjectRepository
    _staff_repo: StaffRepository
    _budget_labor_repo: BudgetLaborRepository
    _budget_expense_repo: BudgetExpenseRepository
    _time_log_repo: TimeLogRepository
    _expense_repo: ExpenseRepository
    _payment_repo: PaymentRepository
    _default_currency: str

    def create_project(
        self,
        name: str,
        code: str,
        total_contract_value: Any,
        start_date: Any,
        end_date: Any,
        manager: str | None = None,
        coordinator: str | None = None,
        overhead_multiplier: Any = DEFAULT_OVERHEAD_MULTIPLIER,
        target_margin: Any = DEFAULT_TARGET_MARGIN,
        currency: str | None = None,
    ) -> Project:
        self._validate_project_name(name)
        self._validate_project_code(code)
        start = parse_date(start_date, field="start_date")
        end = parse_date(end_date, field="end_date")
        self._validate_date_range(start, end)
        resolved_currency = (currency or "").strip().upper() or self._default_currency

        project = Project.create(
            name=name.strip(),
            code=code.strip(),
            total_contract_value=parse_decimal(total_contract_value, field="total_contract_value"),
            start_date=start,
            end_date=end,
            manager=clean_text(manager),
            coordinator=clean_text(coordinator),
            overhead_multiplier=parse_decimal(overhead_multiplier, field="overhead_multiplier"),
            target_margin=parse_percent(target_margin, field="target_margin"),
            currency=resolved_currency,
        )

        with self.unit_of_work("project.create"):
            self._project_repo.add(project)
        logger.info("Created project %s - %s", project.id, project.name)
        domain_events.project_changed.emit(project.id)
        return project

    def update_project(
        self,
        project_id: str,
        expected_version: int | None = None,
        name: str | None = None,
        code: str | None = None,
        manager: str | None = None,
        coordinator: str | None = None,
        total_contract_value: Any = None,
        overhead_multiplier: Any = None,
        target_margin: Any = None,
        currency: str | None = None,
        start_date: Any = None,
        end_date: Any = None,
        stoppage_days: Any = None,
        percent_complete: Any = None,
    ) -> Project:
        project = self.get_project(project_id)
        if expected_version is not None and project.version != expected_version:
            raise ConcurrencyError(
                "Project changed since you opened it. Refresh and try again.",
                code="STALE_WRITE",
            )

        if name is not None:
            self._validate_project_name(name)
            project.name = name.strip()
        if code is not None:
            self._validate_project_code(code, exclude_id=project.id)
            project.code = code.strip()
        if manager is not None:
            project.manager = clean_text(manager)
        if coordinator is not None:
            project.coordinator = clean_text(coordinator)
        if total_contract_value is not None:
            project.total_contract_value = parse_decimal(total_contract_value, field="total_contract_value")
        if overhead_multiplier is not None:
            project.overhead_multiplier = parse_decimal(overhead_multiplier, field="overhead_multiplier")
        if target_margin is not None:
            project.target_margin = parse_percent(target_margin, field="target_margin")
        if currency is not None:
            project.currency = currency.strip().upper() or self._default_currency
        if start_date is not None:
            project.start_date = parse_date(start_date, field="start_date")
        if end_date is not None:
            project.end_date = parse_date(end_date, field="end_date")
        self._validate_date_range(project.start_date, project.end_date)
        if stoppage_days is not None:
            project.stoppage_days = parse_non_negative_int(stoppage_days, field="stoppage_days")
        if percent_complete is not None:
            project.percent_complete = parse_percent(percent_complete, field="percent_complete")

        with self.unit_of_work("project.update"):
            self._project_repo.update(project)
        domain_events.project_changed.emit(project_id)
        return project

    def set_progress(self, project_id: str, percent_complete: Any) -> Project:
        return self.update_project(project_id, percent_complete=percent_complete)

    def pause_project(self, project_id: str, on: date | None = None) -> Project:
        project = self.get_project(project_id)
        if project.is_paused:
            raise BusinessRuleError("Project is already paused.", code="PROJECT_ALREADY_PAUSED")

        project.is_paused = True
        project.pause_start_date = on or date.today()
        with self.unit_of_work("project.pause"):
            self._project_repo.update(project)
        logger.info("Paused project %s on %s", project.id, project.pause_start_date)
        domain_events.project_changed.emit(project_id)
        return project

    def resume_project(self, project_id: str, on: date | None = None) -> Project:
        """Close the open pause and add its whole days to ``stoppage_days``."""
        project = self.get_project(project_id)
        if not project.is_paused:
            raise BusinessRuleError("Project is not paused.", code="PROJECT_NOT_PAUSED")

        resumed_on = on or date.today()
        elapsed = 0
        if project.pause_start_date is not None:
            elapsed = max(0, (resumed_on - project.pause_start_date).days)

        project.stoppage_days = int(project.stoppage_days or 0) + elapsed
        project.is_paused = False
        project.pause_start_date = None
        with self.unit_of_work("project.resume"):
            self._project_repo.update(project)
        logger.info("Resumed project %s after %s stoppage day(s)", project.id, elapsed)
        domain_events.project_changed.emit(project_id)
        return project

    def delete_project(self, project_id: str) -> None:
        project = self.get_project(project_id)

        with self.unit_of_work("project.delete"):
            self._payment_repo.delete_by_project(project_id)
            self._expense_repo.delete_by_project(project_id)
            self._time_log_repo.delete_by_project(project_id)
            self._budget_expense_repo.delete_by_project(project_id)
            self._budget_labor_repo.delete_by_project(project_id)
            self._staff_repo.delete_by_project(project_id)
            self._project_repo.delete(project_id)
        logger.info("Deleted project %s - %s", project.id, project.name)
        domain_events.project_changed.emit(project_id)


__all__ = ["ProjectLifecycleMixin", "DEFAULT_CURRENCY_CODE"]
