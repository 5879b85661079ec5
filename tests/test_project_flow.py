from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import text

from core.exceptions import BusinessRuleError, ConcurrencyError, NotFoundError, ValidationError


def test_create_project_applies_defaults(services):
    ps = services["project_service"]

    project = ps.create_project(
        "Jeddah Clinic",
        "JC-07",
        total_contract_value="250,000",
        start_date="2026-02-01",
        end_date="2026-08-01",
    )

    loaded = ps.get_project(project.id)
    assert loaded.total_contract_value == Decimal("250000")
    assert loaded.overhead_multiplier == Decimal("2.5")
    assert loaded.target_margin == Decimal("20")
    assert loaded.currency == "SAR"
    assert loaded.stoppage_days == 0
    assert loaded.is_paused is False
    assert loaded.version == 1


def test_create_project_rejects_bad_input(services):
    ps = services["project_service"]

    with pytest.raises(ValidationError) as exc:
        ps.create_project("", "X-1", "1000", "2026-01-01", "2026-02-01")
    assert exc.value.code == "PROJECT_NAME_EMPTY"

    with pytest.raises(ValidationError) as exc:
        ps.create_project("Bad value", "X-2", "lots", "2026-01-01", "2026-02-01")
    assert exc.value.code == "INVALID_NUMBER"

    with pytest.raises(ValidationError) as exc:
        ps.create_project("Bad margin", "X-3", "1000", "2026-01-01", "2026-02-01", target_margin="120")
    assert exc.value.code == "PERCENT_OUT_OF_RANGE"

    with pytest.raises(ValidationError) as exc:
        ps.create_project("Bad dates", "X-4", "1000", "2026-03-01", "2026-02-01")
    assert exc.value.code == "PROJECT_INVALID_DATES"


def test_project_codes_are_unique(services, project):
    ps = services["project_service"]

    with pytest.raises(ValidationError) as exc:
        ps.create_project("Other", "rv-01", "1000", "2026-01-01", "2026-02-01")
    assert exc.value.code == "PROJECT_CODE_DUPLICATE"


def test_update_project_rejects_stale_expected_version(services, project):
    ps = services["project_service"]

    updated = ps.update_project(project.id, expected_version=1, name="Riyadh Villa v2")

    assert updated.version == 2
    assert ps.get_project(project.id).name == "Riyadh Villa v2"
    with pytest.raises(ConcurrencyError) as exc:
        ps.update_project(project.id, expected_version=1, name="stale")
    assert exc.value.code == "STALE_WRITE"


def test_set_progress_validates_range(services, project):
    ps = services["project_service"]

    ps.set_progress(project.id, "45.5")
    assert ps.get_project(project.id).percent_complete == Decimal("45.5")

    with pytest.raises(ValidationError) as exc:
        ps.set_progress(project.id, "101")
    assert exc.value.code == "PERCENT_OUT_OF_RANGE"


def test_pause_and_resume_accumulate_stoppage_days(services, project):
    ps = services["project_service"]

    ps.pause_project(project.id, on=date(2026, 3, 1))
    paused = ps.get_project(project.id)
    assert paused.is_paused is True
    assert paused.pause_start_date == date(2026, 3, 1)

    with pytest.raises(BusinessRuleError) as exc:
        ps.pause_project(project.id, on=date(2026, 3, 2))
    assert exc.value.code == "PROJECT_ALREADY_PAUSED"

    ps.resume_project(project.id, on=date(2026, 3, 11))
    resumed = ps.get_project(project.id)
    assert resumed.is_paused is False
    assert resumed.pause_start_date is None
    assert resumed.stoppage_days == 10

    ps.pause_project(project.id, on=date(2026, 4, 1))
    ps.resume_project(project.id, on=date(2026, 4, 6))
    assert ps.get_project(project.id).stoppage_days == 15

    with pytest.raises(BusinessRuleError) as exc:
        ps.resume_project(project.id)
    assert exc.value.code == "PROJECT_NOT_PAUSED"


def test_resume_before_pause_date_adds_nothing(services, project):
    ps = services["project_service"]

    ps.pause_project(project.id, on=date(2026, 3, 10))
    ps.resume_project(project.id, on=date(2026, 3, 5))

    assert ps.get_project(project.id).stoppage_days == 0


def test_delete_project_cascades_to_child_records(services, project):
    ps = services["project_service"]
    ss = services["staff_service"]
    bs = services["budget_service"]
    acts = services["actuals_service"]
    pays = services["payment_service"]

    staff = ss.add_staff(project.id, "Layla", "120", role="Architect")
    bs.add_labor_line(project.id, staff.id, "200")
    bs.add_expense_line(project.id, "Printing", "1500")
    acts.log_time(project.id, staff.id, "8", start_date="2026-01-05", phase="Concept")
    acts.add_expense(project.id, "300", category="Travel")
    pays.add_payment(project.id, "Advance", "100000", "2026-01-10")

    ps.delete_project(project.id)

    with pytest.raises(NotFoundError):
        ps.get_project(project.id)
    assert ss.list_staff(project.id) == []
    assert bs.list_labor_lines(project.id) == []
    assert bs.list_expense_lines(project.id) == []
    assert acts.list_time_logs(project.id) == []
    assert acts.list_expenses(project.id) == []
    assert pays.list_payments(project.id) == []


def test_list_and_search_projects(services, project):
    ps = services["project_service"]
    ps.create_project("Khobar Mall", "KM-02", "5000000", "2026-01-01", "2027-01-01")

    assert {p.code for p in ps.list_projects()} == {"RV-01", "KM-02"}
    assert [p.code for p in ps.search_projects("khobar")] == ["KM-02"]

    ps.pause_project(project.id, on=date(2026, 2, 1))
    assert [p.id for p in ps.list_paused_projects()] == [project.id]


def test_contract_value_reloads_with_every_digit(session, services):
    ps = services["project_service"]
    project = ps.create_project(
        "Diriyah Gate", "DG-01", "12345678901234.5678", "2026-01-01", "2026-06-01"
    )

    session.expire_all()

    loaded = ps.get_project(project.id)
    assert loaded.total_contract_value == Decimal("12345678901234.5678")
    stored_type = session.execute(
        text("SELECT typeof(total_contract_value) FROM projects WHERE id = :id"),
        {"id": project.id},
    ).scalar_one()
    assert stored_type == "text"


def test_progress_and_hours_reload_unrounded(session, services, project):
    ps = services["project_service"]
    ss = services["staff_service"]
    bs = services["budget_service"]
    acts = services["actuals_service"]
    fs = services["finance_service"]

    staff = ss.add_staff(project.id, "Omar", "95.125", location="Cairo")
    bs.add_labor_line(project.id, staff.id, "120.375")
    acts.log_time(project.id, staff.id, "7.125", start_date="2026-01-05")
    live = ps.set_progress(project.id, "33.333333")
    live_ev = fs.get_metrics(project.id, percent_complete="33.333333").EV

    session.expire_all()

    assert ps.get_project(project.id).percent_complete == live.percent_complete == Decimal("33.333333")
    assert ss.list_staff(project.id)[0].base_rate == Decimal("95.125")
    assert bs.list_labor_lines(project.id)[0].hours == Decimal("120.375")
    assert acts.list_time_logs(project.id)[0].hours == Decimal("7.125")
    assert fs.get_metrics(project.id).EV == live_ev
