from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy.orm import Session

from core.services.actuals import ActualsService
from core.services.budget import BudgetService
from core.services.finance import DEFAULT_POLICY, FinancePolicy, FinanceService
from core.services.payment import PaymentService
from core.services.project import ProjectService
from core.services.project.lifecycle import DEFAULT_CURRENCY_CODE
from core.services.staff import StaffService
from infra.config import AppConfig
from infra.db.repositories import (
    SqlAlchemyBudgetExpenseRepository,
    SqlAlchemyBudgetLaborRepository,
    SqlAlchemyExpenseRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyStaffRepository,
    SqlAlchemyTimeLogRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    project_service: ProjectService
    staff_service: StaffService
    budget_service: BudgetService
    actuals_service: ActualsService
    payment_service: PaymentService
    finance_service: FinanceService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "project_service": self.project_service,
            "staff_service": self.staff_service,
            "budget_service": self.budget_service,
            "actuals_service": self.actuals_service,
            "payment_service": self.payment_service,
            "finance_service": self.finance_service,
        }


def build_service_graph(session: Session, config: Optional[AppConfig] = None) -> ServiceGraph:
    policy: FinancePolicy = config.finance_policy() if config else DEFAULT_POLICY
    default_currency = config.default_currency if config else DEFAULT_CURRENCY_CODE

    project_repo = SqlAlchemyProjectRepository(session)
    staff_repo = SqlAlchemyStaffRepository(session)
    budget_labor_repo = SqlAlchemyBudgetLaborRepository(session)
    budget_expense_repo = SqlAlchemyBudgetExpenseRepository(session)
    time_log_repo = SqlAlchemyTimeLogRepository(session)
    expense_repo = SqlAlchemyExpenseRepository(session)
    payment_repo = SqlAlchemyPaymentRepository(session)

    project_service = ProjectService(
        session,
        project_repo,
        staff_repo,
        budget_labor_repo,
        budget_expense_repo,
        time_log_repo,
        expense_repo,
        payment_repo,
        default_currency=default_currency,
    )
    staff_service = StaffService(session, staff_repo, project_repo)
    budget_service = BudgetService(
        session,
        budget_labor_repo,
        budget_expense_repo,
        project_repo,
        staff_repo,
    )
    actuals_service = ActualsService(
        session,
        time_log_repo,
        expense_repo,
        project_repo,
        staff_repo,
    )
    payment_service = PaymentService(session, payment_repo, project_repo)
    finance_service = FinanceService(
        project_repo=project_repo,
        staff_repo=staff_repo,
        budget_labor_repo=budget_labor_repo,
        budget_expense_repo=budget_expense_repo,
        time_log_repo=time_log_repo,
        expense_repo=expense_repo,
        payment_repo=payment_repo,
        policy=policy,
    )

    return ServiceGraph(
        session=session,
        project_service=project_service,
        staff_service=staff_service,
        budget_service=budget_service,
        actuals_service=actuals_service,
        payment_service=payment_service,
        finance_service=finance_service,
    )


def build_service_dict(session: Session, config: Optional[AppConfig] = None) -> dict[str, Any]:
    return build_service_graph(session, config).as_dict()


__all__ = ["ServiceGraph", "build_service_graph", "build_service_dict"]
