# main_cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from core.exceptions import DomainError
from core.reporting.renderers.excel import FinanceExcelRenderer
from infra.config import load_config
from infra.db.base import create_db_engine, create_session_factory
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.services import ServiceGraph, build_service_graph
from infra.version import get_app_version

logger = logging.getLogger(__name__)


def build_services() -> ServiceGraph:
    config = load_config()
    run_migrations(db_url=config.db_url)
    engine = create_db_engine(config.db_url)
    session = create_session_factory(engine)()
    return build_service_graph(session, config)


def _cmd_list(services: ServiceGraph, args: argparse.Namespace) -> int:
    ps = services.project_service
    projects = ps.list_paused_projects() if args.paused else ps.list_projects()
    if not projects:
        print("No projects.")
        return 0
    for p in projects:
        state = "paused" if p.is_paused else "active"
        print(f"{p.id}  {p.code:<12} {p.name:<32} {p.percent_complete:>6}%  {state}")
    return 0


def _cmd_metrics(services: ServiceGraph, args: argparse.Namespace) -> int:
    dashboard = services.finance_service.get_dashboard(
        args.project_id,
        percent_complete=args.percent_complete,
    )
    m = dashboard.metrics
    rows = [
        ("Net revenue", m.net_revenue),
        ("Production budget", m.production_budget),
        ("Invoiced", m.total_invoiced),
        ("Collected", m.total_collected),
        ("Financial completion (%)", m.financial_completion_rate),
        ("Stoppage loss", m.stoppage_loss),
        ("Total burn", m.total_burn),
        ("BAC", m.BAC),
        ("EV", m.EV),
        ("CPI", m.CPI),
        ("Current margin (%)", m.current_margin),
        ("Budget utilized (%)", m.budget_utilized),
        ("Remaining budget", dashboard.budget.remaining_budget),
    ]
    print(f"{dashboard.project_name} [{dashboard.project_code}] ({m.currency})")
    for label, value in rows:
        print(f"  {label:<26} {value:>16,.2f}")
    print(f"  {'Under budget':<26} {'yes' if m.is_under_budget else 'no':>16}")
    for note in m.notes:
        print(f"  note: {note}")
    return 0


def _cmd_export(services: ServiceGraph, args: argparse.Namespace) -> int:
    dashboard = services.finance_service.get_dashboard(
        args.project_id,
        percent_complete=args.percent_complete,
    )
    path = FinanceExcelRenderer().render(dashboard, Path(args.output))
    logger.info("Exported finance workbook to %s", path)
    print(path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fee-tracker",
        description="Project fee and cost tracking for design studios.",
    )
    parser.add_argument("--version", action="version", version=get_app_version())
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List projects")
    p_list.add_argument("--paused", action="store_true", help="Only list paused projects")
    p_list.set_defaults(handler=_cmd_list)

    p_metrics = sub.add_parser("metrics", help="Print the financial snapshot of a project")
    p_metrics.add_argument("project_id")
    p_metrics.add_argument("--percent-complete", default=None, help="Override physical progress (0-100)")
    p_metrics.set_defaults(handler=_cmd_metrics)

    p_export = sub.add_parser("export", help="Export the financial snapshot to an Excel workbook")
    p_export.add_argument("project_id")
    p_export.add_argument("output")
    p_export.add_argument("--percent-complete", default=None, help="Override physical progress (0-100)")
    p_export.set_defaults(handler=_cmd_export)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    services = build_services()
    try:
        return args.handler(services, args)
    except DomainError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"error [{e.code}]: {e}", file=sys.stderr)
        return 1
    finally:
        services.session.close()


if __name__ == "__main__":
    sys.exit(main())
