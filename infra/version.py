from __future__ import annotations

import os
from pathlib import Path


_DEFAULT_APP_VERSION = "1.0.0"
_VERSION_ENV = "AFT_APP_VERSION"
# Written next to this module by the release build.
_VERSION_FILE = Path(__file__).with_name("app_version.txt")


def _read_version_from_file(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip() or None
    except OSError:
        return None


def get_app_version() -> str:
    """Version from ``AFT_APP_VERSION``, then ``app_version.txt``, then the built-in default."""
    return (
        (os.getenv(_VERSION_ENV) or "").strip()
        or _read_version_from_file(_VERSION_FILE)
        or _DEFAULT_APP_VERSION
    )


__all__ = ["get_app_version"]
