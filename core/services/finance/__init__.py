from .engine import compute_financial_metrics
from .models import (
    BudgetSummary,
    CollectionSummary,
    CostDistributionRow,
    FinanceDashboard,
    FinancialInputs,
    FinancialMetrics,
    LaborBudgetRow,
    VarianceBar,
)
from .policy import DEFAULT_POLICY, STOPPAGE_LOSS_FACTOR, FinancePolicy
from .service import FinanceService

__all__ = [
    "compute_financial_metrics",
    "FinanceService",
    "FinancialInputs",
    "FinancialMetrics",
    "FinanceDashboard",
    "CostDistributionRow",
    "VarianceBar",
    "BudgetSummary",
    "CollectionSummary",
    "LaborBudgetRow",
    "FinancePolicy",
    "DEFAULT_POLICY",
    "STOPPAGE_LOSS_FACTOR",
]
