from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from core.domain import BudgetLabor, Project, Staff
from core.services.finance.engine import HUNDRED, ZERO, safe_ratio, to_decimal
from core.services.finance.models import (
    BudgetSummary,
    CollectionSummary,
    CostDistributionRow,
    FinancialMetrics,
    LaborBudgetRow,
    VarianceBar,
)


def build_cost_distribution(metrics: FinancialMetrics) -> list[CostDistributionRow]:
    rows = [
        CostDistributionRow(key="riyadh", label="Riyadh Management", amount=metrics.riyadh_cost),
        CostDistributionRow(key="cairo", label="Cairo Production", amount=metrics.cairo_cost),
        CostDistributionRow(key="expenses", label="External Expenses", amount=metrics.total_expenses),
    ]
    if metrics.stoppage_days > 0:
        rows.append(
            CostDistributionRow(key="stoppage", label="Stoppage Cost", amount=metrics.stoppage_loss)
        )
    return rows


def _variance_bar(*, key: str, label: str, actual: Decimal, planned: Decimal) -> VarianceBar:
    fill = min(safe_ratio(actual, planned) * HUNDRED, HUNDRED)
    return VarianceBar(
        key=key,
        label=label,
        actual=actual,
        planned=planned,
        fill_percent=fill,
        is_over=actual > planned,
    )


def build_variance_bars(metrics: FinancialMetrics) -> list[VarianceBar]:
    return [
        _variance_bar(
            key="cost",
            label="Actual Cost (AC) vs Estimated Cost (BAC)",
            actual=metrics.total_burn,
            planned=metrics.BAC,
        ),
        _variance_bar(
            key="hours",
            label="Actual Hours vs Estimated Hours",
            actual=metrics.total_actual_hours,
            planned=metrics.total_est_hours,
        ),
    ]


def build_budget_summary(metrics: FinancialMetrics) -> BudgetSummary:
    planned_profit = metrics.total_contract_value - metrics.BAC
    return BudgetSummary(
        remaining_budget=metrics.production_budget - metrics.total_burn,
        planned_profit=planned_profit,
        margin_potential=safe_ratio(planned_profit, metrics.total_contract_value) * HUNDRED,
    )


def build_collection_summary(metrics: FinancialMetrics) -> CollectionSummary:
    return CollectionSummary(
        net_revenue=metrics.net_revenue,
        total_invoiced=metrics.total_invoiced,
        total_collected=metrics.total_collected,
        pending_invoicing=metrics.net_revenue - metrics.total_invoiced,
        outstanding=metrics.total_invoiced - metrics.total_collected,
    )


def loaded_rate(staff: Staff, project: Project) -> Decimal:
    return to_decimal(staff.base_rate) * to_decimal(project.overhead_multiplier)


def build_labor_budget_rows(
    *,
    project: Project,
    staff: Iterable[Staff],
    budget_labor: Iterable[BudgetLabor],
) -> list[LaborBudgetRow]:
    staff_by_id = {s.id: s for s in staff}
    rows: list[LaborBudgetRow] = []
    for line in budget_labor:
        person = staff_by_id.get(line.staff_id)
        hours = to_decimal(line.hours)
        rate = ZERO if person is None else loaded_rate(person, project)
        rows.append(
            LaborBudgetRow(
                line_id=line.id,
                staff_id=line.staff_id,
                staff_name=(None if person is None else person.name),
                hours=hours,
                loaded_rate=rate,
                estimated_cost=hours * rate,
            )
        )
    return rows


__all__ = [
    "build_cost_distribution",
    "build_variance_bars",
    "build_budget_summary",
    "build_collection_summary",
    "build_labor_budget_rows",
    "loaded_rate",
]
