"""Utility functions for the application."""

from __future__ import annotations

import datetime
import math
from typing import Any

from .core.constants import MATCH_DATE_FORMAT
from .errors import ValidationError


def _coerce_int(value: Any) -> int | None:
    """Return the non-negative integer an entry stands for, or None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    try:
        number = int(value)
    except (TypeError, ValueError):
        try:
            number = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None
    return number if number >= 0 else None


def parse_int(value: Any, default: int = 0) -> int:
    """Parse free-text form input to a non-negative integer.

    Blank, non-numeric and negative input all fall back to ``default``.
    """
    number = _coerce_int(value)
    return default if number is None else number


def parse_amount(value: Any, default: float = 0.0) -> float:
    """Parse a monetary or duration field to a non-negative float."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number < 0:
        return default
    return number


def is_numeric(value: Any) -> bool:
    """Return True if ``parse_int`` would read a score from the value."""
    return _coerce_int(value) is not None


def format_money(amount: float) -> str:
    """Format an amount with exactly two decimals."""
    return f"{amount:.2f}"


def local_today() -> str:
    """Return today's date in the server's local timezone as YYYY-MM-DD."""
    return datetime.date.today().strftime(MATCH_DATE_FORMAT)


def normalize_match_date(value: Any) -> str:
    """Convert a date input to the canonical YYYY-MM-DD string.

    Datetimes keep their own calendar day; no UTC conversion is applied.
    """
    if value is None or value == "":
        return local_today()
    if isinstance(value, datetime.datetime):
        return value.date().strftime(MATCH_DATE_FORMAT)
    if isinstance(value, datetime.date):
        return value.strftime(MATCH_DATE_FORMAT)
    try:
        parsed = datetime.datetime.strptime(str(value).strip(), MATCH_DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(f"Invalid match date: {value!r}.") from e
    return parsed.date().strftime(MATCH_DATE_FORMAT)


def utc_now() -> datetime.datetime:
    """Return an aware timestamp for createdAt / updatedAt fields."""
    return datetime.datetime.now(datetime.timezone.utc)
