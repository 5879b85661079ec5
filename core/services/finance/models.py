from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Optional, Sequence

from core.domain import (
    BudgetExpense,
    BudgetLabor,
    Expense,
    Payment,
    Project,
    Staff,
    TimeLog,
)


@dataclass(frozen=True)
class FinancialInputs:
    """One consistent read of a project's records.

    ``percent_complete`` is the live progress value; when left as ``None`` the
    persisted ``project.percent_complete`` is used.
    """

    project: Project
    staff: Sequence[Staff] = ()
    budget_labor: Sequence[BudgetLabor] = ()
    budget_expenses: Sequence[BudgetExpense] = ()
    time_logs: Sequence[TimeLog] = ()
    expenses: Sequence[Expense] = ()
    payments: Sequence[Payment] = ()
    percent_complete: Optional[Decimal] = None


@dataclass(frozen=True)
class FinancialMetrics:
    project_id: str
    currency: str

    # echoed inputs
    total_contract_value: Decimal
    overhead_multiplier: Decimal
    target_margin: Decimal
    stoppage_days: int
    percent_complete: Decimal

    # revenue
    vo_total: Decimal
    net_revenue: Decimal
    profit_target_amount: Decimal
    production_budget: Decimal

    # payment collection
    total_invoiced: Decimal
    total_collected: Decimal
    financial_completion_rate: Decimal

    # schedule / stoppage
    duration_days: int
    daily_profit_target: Decimal
    stoppage_loss: Decimal

    # actual cost
    total_labor_loaded: Decimal
    total_actual_hours: Decimal
    riyadh_cost: Decimal
    cairo_cost: Decimal
    total_expenses: Decimal
    total_burn: Decimal

    # planned cost
    total_est_labor_cost: Decimal
    total_est_hours: Decimal
    total_est_expenses: Decimal
    BAC: Decimal

    # earned value
    EV: Decimal
    CPI: Decimal
    is_under_budget: bool
    current_margin: Decimal
    budget_utilized: Decimal

    notes: tuple[str, ...] = field(default_factory=tuple)

    def as_float_dict(self) -> dict[str, object]:
        """Display-friendly copy with every Decimal converted to float."""
        out: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Decimal):
                value = float(value)
            elif isinstance(value, tuple):
                value = list(value)
            out[f.name] = value
        return out


@dataclass(frozen=True)
class CostDistributionRow:
    key: str
    label: str
    amount: Decimal


@dataclass(frozen=True)
class VarianceBar:
    key: str
    label: str
    actual: Decimal
    planned: Decimal
    fill_percent: Decimal
    is_over: bool


@dataclass(frozen=True)
class BudgetSummary:
    remaining_budget: Decimal
    planned_profit: Decimal
    margin_potential: Decimal


@dataclass(frozen=True)
class CollectionSummary:
    net_revenue: Decimal
    total_invoiced: Decimal
    total_collected: Decimal
    pending_invoicing: Decimal
    outstanding: Decimal


@dataclass(frozen=True)
class LaborBudgetRow:
    line_id: str
    staff_id: str
    staff_name: Optional[str]
    hours: Decimal
    loaded_rate: Decimal
    estimated_cost: Decimal


@dataclass(frozen=True)
class FinanceDashboard:
    metrics: FinancialMetrics
    cost_distribution: list[CostDistributionRow]
    variance: list[VarianceBar]
    budget: BudgetSummary
    collection: CollectionSummary
    labor_budget: list[LaborBudgetRow]
    project_name: str = ""
    project_code: str = ""


__all__ = [
    "FinancialInputs",
    "FinancialMetrics",
    "CostDistributionRow",
    "VarianceBar",
    "BudgetSummary",
    "CollectionSummary",
    "LaborBudgetRow",
    "FinanceDashboard",
]
