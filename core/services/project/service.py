from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import (
    BudgetExpenseRepository,
    BudgetLaborRepository,
    ExpenseRepository,
    PaymentRepository,
    ProjectRepository,
    StaffRepository,
    TimeLogRepository,
)
from core.services.common.base import ServiceBase
from core.services.project.lifecycle import DEFAULT_CURRENCY_CODE, ProjectLifecycleMixin
from core.services.project.query import ProjectQueryMixin


class ProjectService(ServiceBase, ProjectLifecycleMixin, ProjectQueryMixin):
    """Project service orchestrator: wiring repositories + composing mixins."""

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        staff_repo: StaffRepository,
        budget_labor_repo: BudgetLaborRepository,
        budget_expense_repo: BudgetExpenseRepository,
        time_log_repo: TimeLogRepository,
        expense_repo: ExpenseRepository,
        payment_repo: PaymentRepository,
        default_currency: str = DEFAULT_CURRENCY_CODE,
    ):
        super().__init__(session)
        self._project_repo: ProjectRepository = project_repo
        self._staff_repo: StaffRepository = staff_repo
        self._budget_labor_repo: BudgetLaborRepository = budget_labor_repo
        self._budget_expense_repo: BudgetExpenseRepository = budget_expense_repo
        self._time_log_repo: TimeLogRepository = time_log_repo
        self._expense_repo: ExpenseRepository = expense_repo
        self._payment_repo: PaymentRepository = payment_repo
        self._default_currency: str = default_currency


__all__ = ["ProjectService"]
