from __future__ import annotations

from decimal import Decimal

import pytest

from core.exceptions import ValidationError
from infra import version as version_mod
from infra.config import load_config


def test_config_reads_env_overrides():
    config = load_config(
        {
            "AFT_DB_URL": "sqlite:///:memory:",
            "AFT_STOPPAGE_LOSS_FACTOR": "0.25",
            "AFT_DEFAULT_CURRENCY": "egp",
        }
    )

    assert config.db_url == "sqlite:///:memory:"
    assert config.stoppage_loss_factor == Decimal("0.25")
    assert config.default_currency == "EGP"
    assert config.finance_policy().stoppage_loss_factor == Decimal("0.25")


def test_config_defaults_keep_policy_constant():
    config = load_config({"AFT_DB_URL": "sqlite:///:memory:"})

    assert config.stoppage_loss_factor == Decimal("0.40")
    assert config.default_currency == "SAR"


def test_config_rejects_factor_above_one():
    with pytest.raises(ValidationError) as exc:
        load_config({"AFT_DB_URL": "sqlite://", "AFT_STOPPAGE_LOSS_FACTOR": "40"})
    assert exc.value.code == "PERCENT_OUT_OF_RANGE"


def test_configured_currency_and_policy_reach_services(session):
    from infra.services import build_service_dict

    config = load_config(
        {"AFT_DB_URL": "sqlite://", "AFT_STOPPAGE_LOSS_FACTOR": "0.5", "AFT_DEFAULT_CURRENCY": "EGP"}
    )
    services = build_service_dict(session, config)

    project = services["project_service"].create_project(
        "Cairo Office", "CO-1", "365000", "2026-01-01", "2027-01-01"
    )
    services["project_service"].update_project(project.id, stoppage_days=10)
    m = services["finance_service"].get_metrics(project.id)

    assert project.currency == "EGP"
    # 73000 profit target over 365 days, 10 days at 50%
    assert m.stoppage_loss == Decimal("1000")


def test_get_app_version_prefers_env_override(monkeypatch, tmp_path):
    version_file = tmp_path / "app_version.txt"
    version_file.write_text("1.2.0", encoding="utf-8")
    monkeypatch.setattr(version_mod, "_VERSION_FILE", version_file)
    monkeypatch.setenv("AFT_APP_VERSION", "9.9.9")

    assert version_mod.get_app_version() == "9.9.9"


def test_get_app_version_reads_runtime_version_file(monkeypatch, tmp_path):
    version_file = tmp_path / "app_version.txt"
    version_file.write_text("1.2.0", encoding="utf-8")
    monkeypatch.setattr(version_mod, "_VERSION_FILE", version_file)
    monkeypatch.delenv("AFT_APP_VERSION", raising=False)

    assert version_mod.get_app_version() == "1.2.0"


def test_get_app_version_falls_back_when_file_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(version_mod, "_VERSION_FILE", tmp_path / "missing.txt")
    monkeypatch.delenv("AFT_APP_VERSION", raising=False)

    assert version_mod.get_app_version() == version_mod._DEFAULT_APP_VERSION
