from __future__ import annotations

from decimal import Decimal

import pytest

from core.exceptions import NotFoundError, ValidationError


def _seed(services, project):
    ss = services["staff_service"]
    bs = services["budget_service"]
    acts = services["actuals_service"]
    pays = services["payment_service"]

    lead = ss.add_staff(project.id, "Faisal", "200", location="Riyadh")
    drafter = ss.add_staff(project.id, "Hana", "80", location="Cairo")
    bs.add_labor_line(project.id, lead.id, "100")
    bs.add_labor_line(project.id, drafter.id, "400")
    bs.add_expense_line(project.id, "Printing", "20000")
    acts.log_time(project.id, lead.id, "40", start_date="2026-01-10")
    acts.log_time(project.id, drafter.id, "100", start_date="2026-01-10")
    acts.add_expense(project.id, "5000", category="Sub-Consultant")
    pays.add_payment(project.id, "Advance", "200000", "2026-01-05", status="PaidFull")
    pays.add_payment(project.id, "Concept", "100000", "2026-02-05", status="Invoiced")


def test_get_metrics_unknown_project(services):
    with pytest.raises(NotFoundError) as exc:
        services["finance_service"].get_metrics("missing")
    assert exc.value.code == "PROJECT_NOT_FOUND"


def test_get_metrics_for_new_project_is_all_zero_costs(services, project):
    m = services["finance_service"].get_metrics(project.id)

    assert m.net_revenue == Decimal("1000000")
    assert m.total_burn == 0
    assert m.BAC == 0
    assert m.CPI == 0
    assert m.duration_days == 100


def test_dashboard_end_to_end(services, project):
    _seed(services, project)

    d = services["finance_service"].get_dashboard(project.id, percent_complete="40")
    m = d.metrics

    # 100h x 200 x 2.5 + 400h x 80 x 2.5 + 20000
    assert m.BAC == Decimal("150000")
    assert m.EV == Decimal("60000")
    # 40h x 200 x 2.5 + 100h x 80 x 2.5 + 5000
    assert m.total_burn == Decimal("45000")
    assert m.CPI == Decimal("60000") / Decimal("45000")
    assert m.is_under_budget is True

    assert d.project_name == "Riyadh Villa"
    assert d.project_code == "RV-01"
    assert d.collection.pending_invoicing == Decimal("700000")
    assert d.collection.outstanding == Decimal("100000")
    assert d.budget.remaining_budget == Decimal("755000")
    assert d.budget.planned_profit == Decimal("850000")
    assert [row.key for row in d.cost_distribution] == ["riyadh", "cairo", "expenses"]
    assert {row.staff_name for row in d.labor_budget} == {"Faisal", "Hana"}


def test_percent_override_is_validated(services, project):
    with pytest.raises(ValidationError) as exc:
        services["finance_service"].get_metrics(project.id, percent_complete="150")
    assert exc.value.code == "PERCENT_OUT_OF_RANGE"


def test_stoppage_from_pause_shows_up_in_burn(services, project):
    from datetime import date

    ps = services["project_service"]
    ps.pause_project(project.id, on=date(2026, 2, 1))
    ps.resume_project(project.id, on=date(2026, 2, 11))

    d = services["finance_service"].get_dashboard(project.id)

    # 200000 profit target over 100 days, 10 days at 40%
    assert d.metrics.stoppage_loss == Decimal("8000")
    assert d.cost_distribution[-1].key == "stoppage"
    assert d.cost_distribution[-1].amount == Decimal("8000")
