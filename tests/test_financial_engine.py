from __future__ import annotations

from datetime import date
from decimal import Decimal

from core.domain import (
    BudgetExpense,
    BudgetLabor,
    Expense,
    Payment,
    PaymentStatus,
    PaymentType,
    Project,
    Staff,
    StaffLocation,
    TimeLog,
)
from core.services.finance import FinancePolicy, FinancialInputs, compute_financial_metrics
from core.services.finance.engine import duration_in_days


def _project(**overrides) -> Project:
    values = dict(
        id="p-1",
        name="Corniche Tower",
        code="CT-01",
        total_contract_value=Decimal("100000"),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        overhead_multiplier=Decimal("2.0"),
        target_margin=Decimal("20"),
    )
    values.update(overrides)
    return Project(**values)


def _payment(amount, *, type=PaymentType.CONTRACT, status=PaymentStatus.PENDING, paid_amount=Decimal("0")):
    return Payment(
        id=f"pay-{amount}-{type.value}-{status.value}",
        project_id="p-1",
        title="Milestone",
        amount=Decimal(amount),
        date=date(2024, 3, 1),
        type=type,
        status=status,
        paid_amount=paid_amount,
    )


def _staff(staff_id="s-a", rate="100", location=StaffLocation.CAIRO) -> Staff:
    return Staff(id=staff_id, project_id="p-1", name=staff_id, base_rate=Decimal(rate), location=location)


def _log(staff_id="s-a", hours="10") -> TimeLog:
    return TimeLog(
        id=f"log-{staff_id}-{hours}",
        project_id="p-1",
        staff_id=staff_id,
        hours=Decimal(hours),
        phase="Concept",
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 1),
    )


def _expense(amount, reimbursable=False) -> Expense:
    return Expense(
        id=f"exp-{amount}-{reimbursable}",
        project_id="p-1",
        category="Printing",
        amount=Decimal(amount),
        reimbursable=reimbursable,
    )


def test_revenue_stage_adds_variation_orders_only():
    inputs = FinancialInputs(
        project=_project(),
        payments=(
            _payment("10000", type=PaymentType.VO),
            _payment("40000", type=PaymentType.CONTRACT, status=PaymentStatus.INVOICED),
        ),
    )

    m = compute_financial_metrics(inputs)

    assert m.vo_total == Decimal("10000")
    assert m.net_revenue == Decimal("110000")
    assert m.profit_target_amount == Decimal("22000")
    assert m.production_budget == Decimal("88000")


def test_labor_burn_is_loaded_and_bucketed_by_location():
    inputs = FinancialInputs(
        project=_project(),
        staff=(_staff("s-a", "100", StaffLocation.CAIRO),),
        time_logs=(_log("s-a", "10"),),
    )

    m = compute_financial_metrics(inputs)

    assert m.total_labor_loaded == Decimal("2000")
    assert m.total_actual_hours == Decimal("10")
    assert m.cairo_cost == Decimal("2000")
    assert m.riyadh_cost == Decimal("0")


def test_riyadh_staff_cost_goes_to_riyadh_bucket():
    inputs = FinancialInputs(
        project=_project(),
        staff=(_staff("s-r", "250", StaffLocation.RIYADH), _staff("s-c", "80")),
        time_logs=(_log("s-r", "4"), _log("s-c", "5")),
    )

    m = compute_financial_metrics(inputs)

    assert m.riyadh_cost == Decimal("2000")
    assert m.cairo_cost == Decimal("800")
    assert m.total_labor_loaded == m.riyadh_cost + m.cairo_cost


def test_stoppage_loss_uses_daily_profit_target():
    # 182500 at 20% margin gives a 36500 profit target
    inputs = FinancialInputs(
        project=_project(total_contract_value=Decimal("182500"), stoppage_days=10),
    )

    m = compute_financial_metrics(inputs)

    assert m.profit_target_amount == Decimal("36500")
    assert m.duration_days == 365
    assert m.daily_profit_target == Decimal("100")
    assert m.stoppage_loss == Decimal("400")
    assert m.total_burn == Decimal("400")


def test_stoppage_loss_factor_comes_from_policy():
    inputs = FinancialInputs(
        project=_project(total_contract_value=Decimal("182500"), stoppage_days=10),
    )

    m = compute_financial_metrics(inputs, policy=FinancePolicy(stoppage_loss_factor=Decimal("0.5")))

    assert m.stoppage_loss == Decimal("500")


def test_earned_value_and_cpi():
    inputs = FinancialInputs(
        project=_project(),
        budget_expenses=(
            BudgetExpense(id="be-1", project_id="p-1", category="Sub-Consultant", amount=Decimal("50000")),
        ),
        expenses=(_expense("25000"),),
        percent_complete=Decimal("40"),
    )

    m = compute_financial_metrics(inputs)

    assert m.BAC == Decimal("50000")
    assert m.EV == Decimal("20000")
    assert m.total_burn == Decimal("25000")
    assert m.CPI == Decimal("0.8")
    assert m.is_under_budget is False


def test_no_payments_gives_zero_collection():
    m = compute_financial_metrics(FinancialInputs(project=_project()))

    assert m.net_revenue == Decimal("100000")
    assert m.total_invoiced == 0
    assert m.total_collected == 0
    assert m.financial_completion_rate == 0


def test_reimbursable_expenses_stay_out_of_burn():
    inputs = FinancialInputs(
        project=_project(),
        expenses=(_expense("500", reimbursable=True), _expense("300", reimbursable=False)),
    )

    m = compute_financial_metrics(inputs)

    assert m.total_expenses == Decimal("300")
    assert m.total_burn == Decimal("300")


def test_collection_counts_invoiced_statuses_and_partial_payments():
    inputs = FinancialInputs(
        project=_project(),
        payments=(
            _payment("10000", status=PaymentStatus.INVOICED),
            _payment("20000", status=PaymentStatus.PAID_FULL),
            _payment("30000", status=PaymentStatus.PAID_PARTIAL, paid_amount=Decimal("12000")),
            _payment("5000", status=PaymentStatus.CLAIMED),
            _payment("7000", status=PaymentStatus.DUE),
        ),
    )

    m = compute_financial_metrics(inputs)

    assert m.total_invoiced == Decimal("60000")
    assert m.total_collected == Decimal("32000")
    assert m.financial_completion_rate == Decimal("60")


def test_partial_payment_without_paid_amount_collects_nothing():
    inputs = FinancialInputs(
        project=_project(),
        payments=(_payment("30000", status=PaymentStatus.PAID_PARTIAL, paid_amount=None),),
    )

    m = compute_financial_metrics(inputs)

    assert m.total_invoiced == Decimal("30000")
    assert m.total_collected == 0


def test_zero_revenue_never_divides():
    inputs = FinancialInputs(
        project=_project(total_contract_value=Decimal("0")),
        expenses=(_expense("100"),),
        payments=(_payment("1000", status=PaymentStatus.INVOICED),),
    )

    m = compute_financial_metrics(inputs)

    assert m.net_revenue == 0
    assert m.financial_completion_rate == 0
    assert m.current_margin == 0
    assert m.budget_utilized == 0


def test_zero_burn_gives_zero_cpi():
    inputs = FinancialInputs(
        project=_project(),
        budget_expenses=(
            BudgetExpense(id="be-1", project_id="p-1", category="Travel", amount=Decimal("1000")),
        ),
        percent_complete=Decimal("50"),
    )

    m = compute_financial_metrics(inputs)

    assert m.total_burn == 0
    assert m.EV == Decimal("500")
    assert m.CPI == 0
    assert m.is_under_budget is False


def test_duration_is_at_least_one_day():
    assert duration_in_days(date(2024, 5, 1), date(2024, 5, 1)) == 1
    assert duration_in_days(date(2024, 5, 10), date(2024, 5, 1)) == 1
    assert duration_in_days(date(2024, 5, 1), date(2024, 5, 3)) == 2

    m = compute_financial_metrics(
        FinancialInputs(project=_project(start_date=date(2024, 6, 1), end_date=date(2024, 1, 1)))
    )
    assert m.duration_days == 1
    assert m.daily_profit_target == m.profit_target_amount


def test_dangling_staff_references_contribute_nothing():
    inputs = FinancialInputs(
        project=_project(),
        staff=(_staff("s-a"),),
        time_logs=(_log("s-a", "10"), _log("s-gone", "40")),
        budget_labor=(
            BudgetLabor(id="bl-1", project_id="p-1", staff_id="s-a", hours=Decimal("100")),
            BudgetLabor(id="bl-2", project_id="p-1", staff_id="s-gone", hours=Decimal("500")),
        ),
    )

    m = compute_financial_metrics(inputs)

    assert m.total_actual_hours == Decimal("10")
    assert m.total_labor_loaded == Decimal("2000")
    assert m.total_est_hours == Decimal("100")
    assert m.total_est_labor_cost == Decimal("20000")
    assert any("time log" in note for note in m.notes)
    assert any("labor budget line" in note for note in m.notes)


def test_percent_override_wins_over_saved_progress():
    project = _project(percent_complete=Decimal("10"))
    budget = (BudgetExpense(id="be-1", project_id="p-1", category="Others", amount=Decimal("1000")),)

    saved = compute_financial_metrics(FinancialInputs(project=project, budget_expenses=budget))
    live = compute_financial_metrics(
        FinancialInputs(project=project, budget_expenses=budget, percent_complete=Decimal("75"))
    )

    assert saved.EV == Decimal("100")
    assert live.EV == Decimal("750")
    assert live.percent_complete == Decimal("75")


def test_margin_and_budget_utilization():
    inputs = FinancialInputs(
        project=_project(),
        expenses=(_expense("40000"),),
    )

    m = compute_financial_metrics(inputs)

    assert m.current_margin == Decimal("60")
    assert m.budget_utilized == Decimal("50")


def test_empty_project_reports_zero_costs_and_a_bac_note():
    m = compute_financial_metrics(FinancialInputs(project=_project()))

    assert m.total_burn == 0
    assert m.BAC == 0
    assert m.EV == 0
    assert m.CPI == 0
    assert any("BAC is 0" in note for note in m.notes)


def test_engine_is_deterministic():
    inputs = FinancialInputs(
        project=_project(stoppage_days=3),
        staff=(_staff("s-a"), _staff("s-r", "300", StaffLocation.RIYADH)),
        time_logs=(_log("s-a", "7.5"), _log("s-r", "2.25")),
        expenses=(_expense("123.45"),),
        payments=(_payment("9000", type=PaymentType.VO, status=PaymentStatus.PAID_FULL),),
        percent_complete=Decimal("33.3"),
    )

    assert compute_financial_metrics(inputs) == compute_financial_metrics(inputs)


def test_metrics_export_as_floats():
    m = compute_financial_metrics(FinancialInputs(project=_project()))

    data = m.as_float_dict()

    assert data["net_revenue"] == 100000.0
    assert isinstance(data["CPI"], float)
    assert data["duration_days"] == 365
