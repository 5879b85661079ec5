from __future__ import annotations

from datetime import date

from openpyxl import load_workbook
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import main_cli
from infra.services import build_service_graph


def _graph_for(db_url):
    engine = create_engine(db_url, future=True)
    return build_service_graph(sessionmaker(bind=engine, autoflush=False, autocommit=False)())


def test_cli_metrics_and_export(monkeypatch, tmp_path, capsys):
    db_url = f"sqlite:///{(tmp_path / 'cli.db').as_posix()}"
    monkeypatch.setenv("AFT_DB_URL", db_url)
    monkeypatch.setattr(main_cli, "setup_logging", lambda: None)

    # schema comes from the CLI's own migration run
    assert main_cli.main(["list"]) == 0
    assert "No projects." in capsys.readouterr().out

    seed = _graph_for(db_url)
    project = seed.project_service.create_project("Cli Tower", "CLI-1", "100000", "2026-01-01", "2026-12-31")
    seed.session.close()

    assert main_cli.main(["list"]) == 0
    assert "CLI-1" in capsys.readouterr().out

    assert main_cli.main(["metrics", project.id, "--percent-complete", "10"]) == 0
    out = capsys.readouterr().out
    assert "Cli Tower [CLI-1] (SAR)" in out
    assert "Net revenue" in out

    target = tmp_path / "out.xlsx"
    assert main_cli.main(["export", project.id, str(target)]) == 0
    assert load_workbook(target).sheetnames[0] == "Finance Summary"


def test_cli_reports_domain_errors(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("AFT_DB_URL", f"sqlite:///{(tmp_path / 'cli.db').as_posix()}")
    monkeypatch.setattr(main_cli, "setup_logging", lambda: None)

    assert main_cli.main(["metrics", "missing"]) == 1
    assert "PROJECT_NOT_FOUND" in capsys.readouterr().err


def test_cli_list_paused_filters_running_projects(monkeypatch, tmp_path, capsys):
    db_url = f"sqlite:///{(tmp_path / 'cli.db').as_posix()}"
    monkeypatch.setenv("AFT_DB_URL", db_url)
    monkeypatch.setattr(main_cli, "setup_logging", lambda: None)
    assert main_cli.main(["list"]) == 0
    capsys.readouterr()

    seed = _graph_for(db_url)
    ps = seed.project_service
    ps.create_project("Running Site", "RUN-1", "50000", "2026-01-01", "2026-06-30")
    halted = ps.create_project("Halted Site", "HLT-1", "80000", "2026-01-01", "2026-06-30")
    ps.pause_project(halted.id, on=date(2026, 3, 1))
    seed.session.close()

    assert main_cli.main(["list", "--paused"]) == 0
    out = capsys.readouterr().out
    assert "HLT-1" in out
    assert "paused" in out
    assert "RUN-1" not in out
