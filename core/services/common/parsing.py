"""Boundary parsing: turns raw form/API values into typed domain values.

Money, percentages and hours arrive as decimal strings. They are parsed here,
once, into :class:`~decimal.Decimal` so that no string-typed number ever
reaches the finance engine.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_HUNDRED = Decimal("100")


def parse_decimal(value: Any, *, field: str, allow_negative: bool = False) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number.", code="INVALID_NUMBER")
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, float):
        parsed = Decimal(repr(value))
    elif isinstance(value, str):
        raw = value.strip().replace(",", "")
        if not raw:
            raise ValidationError(f"{field} is required.", code="INVALID_NUMBER")
        try:
            parsed = Decimal(raw)
        except InvalidOperation:
            raise ValidationError(f"{field} must be a number, got {value!r}.", code="INVALID_NUMBER") from None
    else:
        raise ValidationError(f"{field} must be a number.", code="INVALID_NUMBER")

    if not parsed.is_finite():
        raise ValidationError(f"{field} must be a finite number.", code="NON_FINITE_NUMBER")
    if not allow_negative and parsed < 0:
        raise ValidationError(f"{field} cannot be negative.", code="NEGATIVE_AMOUNT")
    return parsed


def parse_percent(value: Any, *, field: str) -> Decimal:
    parsed = parse_decimal(value, field=field)
    if parsed > _HUNDRED:
        raise ValidationError(f"{field} must be between 0 and 100.", code="PERCENT_OUT_OF_RANGE")
    return parsed


def parse_positive(value: Any, *, field: str) -> Decimal:
    parsed = parse_decimal(value, field=field)
    if parsed <= 0:
        raise ValidationError(f"{field} must be greater than zero.", code="NON_POSITIVE_AMOUNT")
    return parsed


def parse_non_negative_int(value: Any, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a whole number.", code="INVALID_NUMBER")
    try:
        parsed = int(str(value).strip()) if not isinstance(value, int) else value
    except ValueError:
        raise ValidationError(f"{field} must be a whole number.", code="INVALID_NUMBER") from None
    if parsed < 0:
        raise ValidationError(f"{field} cannot be negative.", code="NEGATIVE_AMOUNT")
    return parsed


def parse_date(value: Any, *, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(
                f"{field} must be a date in YYYY-MM-DD format, got {value!r}.",
                code="INVALID_DATE",
            ) from None
    raise ValidationError(f"{field} must be a valid date.", code="INVALID_DATE")


def parse_enum(enum_type: type[E], value: Any, *, field: str) -> E:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValidationError(
            f"{field} must be one of: {allowed}; got {value!r}.",
            code="INVALID_ENUM",
        ) from None


def clean_text(value: str | None) -> str | None:
    return (value or "").strip() or None


__all__ = [
    "parse_decimal",
    "parse_percent",
    "parse_positive",
    "parse_non_negative_int",
    "parse_date",
    "parse_enum",
    "clean_text",
]
