"""Financial derivation engine.

Turns one project's raw records into a :class:`FinancialMetrics` snapshot. The
stages run in a fixed order (revenue, payment collection, schedule/stoppage,
actual cost, planned cost, earned value) and each one only reads the output of
the stages before it.

The engine is pure: it performs no I/O, keeps no state between calls and never
raises for degenerate numbers. Every ratio is zero-guarded so the snapshot
never carries NaN or Infinity.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping

from core.domain import (
    BudgetExpense,
    BudgetLabor,
    Expense,
    Payment,
    PaymentStatus,
    PaymentType,
    Staff,
    StaffLocation,
    TimeLog,
)
from core.services.finance.models import FinancialInputs, FinancialMetrics
from core.services.finance.policy import DEFAULT_POLICY, FinancePolicy

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator <= ZERO:
        return ZERO
    return numerator / denominator


@dataclass(frozen=True)
class _Revenue:
    vo_total: Decimal
    net_revenue: Decimal
    profit_target_amount: Decimal
    production_budget: Decimal


@dataclass(frozen=True)
class _Collection:
    total_invoiced: Decimal
    total_collected: Decimal
    financial_completion_rate: Decimal


@dataclass(frozen=True)
class _Schedule:
    duration_days: int
    daily_profit_target: Decimal
    stoppage_loss: Decimal


@dataclass(frozen=True)
class _Burn:
    total_labor_loaded: Decimal
    total_actual_hours: Decimal
    riyadh_cost: Decimal
    cairo_cost: Decimal
    total_expenses: Decimal
    total_burn: Decimal
    unresolved_logs: int


@dataclass(frozen=True)
class _Plan:
    total_est_labor_cost: Decimal
    total_est_hours: Decimal
    total_est_expenses: Decimal
    BAC: Decimal
    unresolved_lines: int


@dataclass(frozen=True)
class _EarnedValue:
    EV: Decimal
    CPI: Decimal
    is_under_budget: bool
    current_margin: Decimal
    budget_utilized: Decimal


def revenue_stage(
    *,
    total_contract_value: Decimal,
    target_margin: Decimal,
    payments: Iterable[Payment],
) -> _Revenue:
    # Contract-type payments are already inside the contract value.
    vo_total = sum(
        (to_decimal(p.amount) for p in payments if p.type == PaymentType.VO),
        ZERO,
    )
    net_revenue = total_contract_value + vo_total
    profit_target_amount = net_revenue * (target_margin / HUNDRED)
    return _Revenue(
        vo_total=vo_total,
        net_revenue=net_revenue,
        profit_target_amount=profit_target_amount,
        production_budget=net_revenue - profit_target_amount,
    )


def collected_amount(payment: Payment) -> Decimal:
    if payment.status == PaymentStatus.PAID_FULL:
        return to_decimal(payment.amount)
    if payment.status == PaymentStatus.PAID_PARTIAL:
        return to_decimal(payment.paid_amount)
    return ZERO


def collection_stage(
    *,
    payments: Iterable[Payment],
    net_revenue: Decimal,
    policy: FinancePolicy,
) -> _Collection:
    payments = list(payments)
    total_invoiced = sum(
        (to_decimal(p.amount) for p in payments if p.status in policy.invoiced_statuses),
        ZERO,
    )
    total_collected = sum((collected_amount(p) for p in payments), ZERO)
    return _Collection(
        total_invoiced=total_invoiced,
        total_collected=total_collected,
        financial_completion_rate=safe_ratio(total_invoiced, net_revenue) * HUNDRED,
    )


def duration_in_days(start: date, end: date) -> int:
    """Calendar days from ``start`` to ``end``, never below 1."""
    return max(1, (end - start).days)


def schedule_stage(
    *,
    start_date: date,
    end_date: date,
    stoppage_days: int,
    profit_target_amount: Decimal,
    policy: FinancePolicy,
) -> _Schedule:
    duration_days = duration_in_days(start_date, end_date)
    daily_profit_target = profit_target_amount / Decimal(duration_days)
    stoppage_loss = daily_profit_target * Decimal(int(stoppage_days or 0)) * policy.stoppage_loss_factor
    return _Schedule(
        duration_days=duration_days,
        daily_profit_target=daily_profit_target,
        stoppage_loss=stoppage_loss,
    )


def burn_stage(
    *,
    staff_by_id: Mapping[str, Staff],
    time_logs: Iterable[TimeLog],
    expenses: Iterable[Expense],
    overhead_multiplier: Decimal,
    stoppage_loss: Decimal,
) -> _Burn:
    total_labor_loaded = ZERO
    total_actual_hours = ZERO
    riyadh_cost = ZERO
    cairo_cost = ZERO
    unresolved = 0

    for log in time_logs:
        person = staff_by_id.get(log.staff_id)
        if person is None:
            unresolved += 1
            continue
        hours = to_decimal(log.hours)
        loaded = hours * to_decimal(person.base_rate) * overhead_multiplier
        total_labor_loaded += loaded
        total_actual_hours += hours
        if person.location == StaffLocation.RIYADH:
            riyadh_cost += loaded
        else:
            cairo_cost += loaded

    total_expenses = sum(
        (to_decimal(e.amount) for e in expenses if not e.reimbursable),
        ZERO,
    )
    return _Burn(
        total_labor_loaded=total_labor_loaded,
        total_actual_hours=total_actual_hours,
        riyadh_cost=riyadh_cost,
        cairo_cost=cairo_cost,
        total_expenses=total_expenses,
        total_burn=total_labor_loaded + total_expenses + stoppage_loss,
        unresolved_logs=unresolved,
    )


def plan_stage(
    *,
    staff_by_id: Mapping[str, Staff],
    budget_labor: Iterable[BudgetLabor],
    budget_expenses: Iterable[BudgetExpense],
    overhead_multiplier: Decimal,
) -> _Plan:
    total_est_labor_cost = ZERO
    total_est_hours = ZERO
    unresolved = 0

    for line in budget_labor:
        person = staff_by_id.get(line.staff_id)
        if person is None:
            unresolved += 1
            continue
        hours = to_decimal(line.hours)
        total_est_labor_cost += hours * to_decimal(person.base_rate) * overhead_multiplier
        total_est_hours += hours

    total_est_expenses = sum((to_decimal(b.amount) for b in budget_expenses), ZERO)
    return _Plan(
        total_est_labor_cost=total_est_labor_cost,
        total_est_hours=total_est_hours,
        total_est_expenses=total_est_expenses,
        BAC=total_est_labor_cost + total_est_expenses,
        unresolved_lines=unresolved,
    )


def earned_value_stage(
    *,
    BAC: Decimal,
    percent_complete: Decimal,
    total_burn: Decimal,
    net_revenue: Decimal,
    production_budget: Decimal,
) -> _EarnedValue:
    EV = BAC * (percent_complete / HUNDRED)
    CPI = safe_ratio(EV, total_burn)
    return _EarnedValue(
        EV=EV,
        CPI=CPI,
        is_under_budget=CPI >= 1,
        current_margin=safe_ratio(net_revenue - total_burn, net_revenue) * HUNDRED,
        budget_utilized=safe_ratio(total_burn, production_budget) * HUNDRED,
    )


def compute_financial_metrics(
    inputs: FinancialInputs,
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> FinancialMetrics:
    project = inputs.project
    total_contract_value = to_decimal(project.total_contract_value)
    overhead_multiplier = to_decimal(project.overhead_multiplier)
    target_margin = to_decimal(project.target_margin)
    stoppage_days = int(project.stoppage_days or 0)
    percent_complete = to_decimal(
        project.percent_complete if inputs.percent_complete is None else inputs.percent_complete
    )
    staff_by_id = {s.id: s for s in inputs.staff}

    revenue = revenue_stage(
        total_contract_value=total_contract_value,
        target_margin=target_margin,
        payments=inputs.payments,
    )
    collection = collection_stage(
        payments=inputs.payments,
        net_revenue=revenue.net_revenue,
        policy=policy,
    )
    schedule = schedule_stage(
        start_date=project.start_date,
        end_date=project.end_date,
        stoppage_days=stoppage_days,
        profit_target_amount=revenue.profit_target_amount,
        policy=policy,
    )
    burn = burn_stage(
        staff_by_id=staff_by_id,
        time_logs=inputs.time_logs,
        expenses=inputs.expenses,
        overhead_multiplier=overhead_multiplier,
        stoppage_loss=schedule.stoppage_loss,
    )
    plan = plan_stage(
        staff_by_id=staff_by_id,
        budget_labor=inputs.budget_labor,
        budget_expenses=inputs.budget_expenses,
        overhead_multiplier=overhead_multiplier,
    )
    ev = earned_value_stage(
        BAC=plan.BAC,
        percent_complete=percent_complete,
        total_burn=burn.total_burn,
        net_revenue=revenue.net_revenue,
        production_budget=revenue.production_budget,
    )

    notes: list[str] = []
    if burn.unresolved_logs:
        notes.append(
            f"{burn.unresolved_logs} time log(s) reference staff that no longer exist and were ignored."
        )
    if plan.unresolved_lines:
        notes.append(
            f"{plan.unresolved_lines} labor budget line(s) reference staff that no longer exist and were ignored."
        )
    if plan.BAC <= ZERO:
        notes.append("BAC is 0 (no labor or expense budget entered); EV and CPI stay at 0.")

    return FinancialMetrics(
        project_id=project.id,
        currency=project.currency,
        total_contract_value=total_contract_value,
        overhead_multiplier=overhead_multiplier,
        target_margin=target_margin,
        stoppage_days=stoppage_days,
        percent_complete=percent_complete,
        vo_total=revenue.vo_total,
        net_revenue=revenue.net_revenue,
        profit_target_amount=revenue.profit_target_amount,
        production_budget=revenue.production_budget,
        total_invoiced=collection.total_invoiced,
        total_collected=collection.total_collected,
        financial_completion_rate=collection.financial_completion_rate,
        duration_days=schedule.duration_days,
        daily_profit_target=schedule.daily_profit_target,
        stoppage_loss=schedule.stoppage_loss,
        total_labor_loaded=burn.total_labor_loaded,
        total_actual_hours=burn.total_actual_hours,
        riyadh_cost=burn.riyadh_cost,
        cairo_cost=burn.cairo_cost,
        total_expenses=burn.total_expenses,
        total_burn=burn.total_burn,
        total_est_labor_cost=plan.total_est_labor_cost,
        total_est_hours=plan.total_est_hours,
        total_est_expenses=plan.total_est_expenses,
        BAC=plan.BAC,
        EV=ev.EV,
        CPI=ev.CPI,
        is_under_budget=ev.is_under_budget,
        current_margin=ev.current_margin,
        budget_utilized=ev.budget_utilized,
        notes=tuple(notes),
    )


__all__ = [
    "compute_financial_metrics",
    "duration_in_days",
    "collected_amount",
    "safe_ratio",
    "to_decimal",
]
