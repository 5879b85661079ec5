# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "ArchFeeTracker"
COMPANY_NAME = "ArchStudio"


def user_data_dir() -> Path:
    """
    Returns a per-user data directory, e.g.:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\ArchStudio\\ArchFeeTracker

    macOS:
        ~/Library/Application Support/ArchStudio/ArchFeeTracker

    Linux:
        ~/.local/share/ArchStudio/ArchFeeTracker
    """
    try:
        if sys.platform.startswith("win"):
            base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        elif sys.platform == "darwin":
            base = Path.home() / "Library" / "Application Support"
        else:
            base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))

        path = base / COMPANY_NAME / APP_NAME
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        # Read-only or missing profile directory
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_db_path() -> Path:
    return user_data_dir() / "fee_tracker.db"


def default_db_url() -> str:
    return f"sqlite:///{default_db_path().as_posix()}"


__all__ = ["APP_NAME", "COMPANY_NAME", "user_data_dir", "default_db_path", "default_db_url"]
