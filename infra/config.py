# infra/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional

from core.exceptions import ValidationError
from core.services.common.parsing import parse_decimal
from core.services.finance.policy import STOPPAGE_LOSS_FACTOR, FinancePolicy
from core.services.project.lifecycle import DEFAULT_CURRENCY_CODE
from infra.path import default_db_url

logger = logging.getLogger(__name__)

ENV_DB_URL = "AFT_DB_URL"
ENV_STOPPAGE_LOSS_FACTOR = "AFT_STOPPAGE_LOSS_FACTOR"
ENV_DEFAULT_CURRENCY = "AFT_DEFAULT_CURRENCY"


@dataclass(frozen=True)
class AppConfig:
    db_url: str
    stoppage_loss_factor: Decimal = STOPPAGE_LOSS_FACTOR
    default_currency: str = DEFAULT_CURRENCY_CODE

    def finance_policy(self) -> FinancePolicy:
        return FinancePolicy(stoppage_loss_factor=self.stoppage_loss_factor)


def _env(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = (environ.get(key) or "").strip()
    return value or None


def _parse_loss_factor(raw: str) -> Decimal:
    factor = parse_decimal(raw, field=ENV_STOPPAGE_LOSS_FACTOR)
    if factor > 1:
        raise ValidationError(
            f"{ENV_STOPPAGE_LOSS_FACTOR} must be a fraction between 0 and 1, got {raw!r}.",
            code="PERCENT_OUT_OF_RANGE",
        )
    return factor


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the runtime configuration from environment overrides.

    ``AFT_STOPPAGE_LOSS_FACTOR`` is a fraction (``0.40`` means 40% of the
    daily profit target is lost per stoppage day).
    """
    environ = os.environ if environ is None else environ

    raw_factor = _env(environ, ENV_STOPPAGE_LOSS_FACTOR)
    config = AppConfig(
        db_url=_env(environ, ENV_DB_URL) or default_db_url(),
        stoppage_loss_factor=(
            _parse_loss_factor(raw_factor) if raw_factor is not None else STOPPAGE_LOSS_FACTOR
        ),
        default_currency=(_env(environ, ENV_DEFAULT_CURRENCY) or DEFAULT_CURRENCY_CODE).upper(),
    )
    logger.debug("Loaded config: %s", config)
    return config


__all__ = [
    "AppConfig",
    "load_config",
    "ENV_DB_URL",
    "ENV_STOPPAGE_LOSS_FACTOR",
    "ENV_DEFAULT_CURRENCY",
]
