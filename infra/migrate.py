from pathlib import Path
import logging
import sys
from alembic import command
from alembic.config import Config

from infra.path import APP_NAME

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    """
    Returns the directory where the running app lives.
    - For PyInstaller onefile builds, prefer sys._MEIPASS (temporary extraction dir).
    - For PyInstaller onedir builds, use the folder containing the executable.
    - In dev: return the project root (infra -> project root).
    """
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def _find_script_location(app_dir: Path) -> Path:
    candidates = [
        app_dir / "migration",
        app_dir / "_internal" / "migration",
        app_dir / APP_NAME / "migration",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    raise RuntimeError(
        "Alembic script_location missing. Tried the following locations: "
        + ", ".join(str(p) for p in candidates)
    )


def build_alembic_config(db_url: str, *, configure_logger: bool = False) -> Config:
    script_location = _find_script_location(_app_dir())
    alembic_ini = script_location / "alembic.ini"
    if not alembic_ini.exists():
        raise RuntimeError(f"Alembic config missing: {alembic_ini}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    cfg.attributes["configure_logger"] = configure_logger
    return cfg


def run_migrations(db_url: str) -> None:
    logger.info("Upgrading database schema at %s", db_url)
    command.upgrade(build_alembic_config(db_url), "head")


__all__ = ["build_alembic_config", "run_migrations"]
