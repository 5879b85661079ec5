from __future__ import annotations

import logging
from decimal import Decimal

from core.exceptions import NotFoundError
from core.interfaces import (
    BudgetExpenseRepository,
    BudgetLaborRepository,
    ExpenseRepository,
    PaymentRepository,
    ProjectRepository,
    StaffRepository,
    TimeLogRepository,
)
from core.services.common.parsing import parse_percent
from core.services.finance.analytics import (
    build_budget_summary,
    build_collection_summary,
    build_cost_distribution,
    build_labor_budget_rows,
    build_variance_bars,
)
from core.services.finance.engine import compute_financial_metrics
from core.services.finance.models import FinanceDashboard, FinancialInputs, FinancialMetrics
from core.services.finance.policy import DEFAULT_POLICY, FinancePolicy

logger = logging.getLogger(__name__)


class FinanceService:
    """Read side: loads a project's records and runs the derivation engine."""

    def __init__(
        self,
        *,
        project_repo: ProjectRepository,
        staff_repo: StaffRepository,
        budget_labor_repo: BudgetLaborRepository,
        budget_expense_repo: BudgetExpenseRepository,
        time_log_repo: TimeLogRepository,
        expense_repo: ExpenseRepository,
        payment_repo: PaymentRepository,
        policy: FinancePolicy = DEFAULT_POLICY,
    ) -> None:
        self._project_repo: ProjectRepository = project_repo
        self._staff_repo: StaffRepository = staff_repo
        self._budget_labor_repo: BudgetLaborRepository = budget_labor_repo
        self._budget_expense_repo: BudgetExpenseRepository = budget_expense_repo
        self._time_log_repo: TimeLogRepository = time_log_repo
        self._expense_repo: ExpenseRepository = expense_repo
        self._payment_repo: PaymentRepository = payment_repo
        self._policy: FinancePolicy = policy

    def load_inputs(
        self,
        project_id: str,
        *,
        percent_complete: Decimal | str | int | float | None = None,
    ) -> FinancialInputs:
        project = self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        override = None
        if percent_complete is not None:
            override = parse_percent(percent_complete, field="percent_complete")

        return FinancialInputs(
            project=project,
            staff=tuple(self._staff_repo.list_by_project(project_id)),
            budget_labor=tuple(self._budget_labor_repo.list_by_project(project_id)),
            budget_expenses=tuple(self._budget_expense_repo.list_by_project(project_id)),
            time_logs=tuple(self._time_log_repo.list_by_project(project_id)),
            expenses=tuple(self._expense_repo.list_by_project(project_id)),
            payments=tuple(self._payment_repo.list_by_project(project_id)),
            percent_complete=override,
        )

    def get_metrics(
        self,
        project_id: str,
        *,
        percent_complete: Decimal | str | int | float | None = None,
    ) -> FinancialMetrics:
        inputs = self.load_inputs(project_id, percent_complete=percent_complete)
        metrics = compute_financial_metrics(inputs, policy=self._policy)
        logger.debug(
            "Computed metrics for project %s: burn=%s BAC=%s CPI=%s",
            project_id,
            metrics.total_burn,
            metrics.BAC,
            metrics.CPI,
        )
        return metrics

    def get_dashboard(
        self,
        project_id: str,
        *,
        percent_complete: Decimal | str | int | float | None = None,
    ) -> FinanceDashboard:
        inputs = self.load_inputs(project_id, percent_complete=percent_complete)
        metrics = compute_financial_metrics(inputs, policy=self._policy)
        return FinanceDashboard(
            metrics=metrics,
            cost_distribution=build_cost_distribution(metrics),
            variance=build_variance_bars(metrics),
            budget=build_budget_summary(metrics),
            collection=build_collection_summary(metrics),
            labor_budget=build_labor_budget_rows(
                project=inputs.project,
                staff=inputs.staff,
                budget_labor=inputs.budget_labor,
            ),
            project_name=inputs.project.name,
            project_code=inputs.project.code,
        )


__all__ = ["FinanceService"]
