"""
calhijri.core.validation
------------------------
Structural range checks applied before any table lookup.

These checks answer "is this a well-formed date in the plausible domain?" only.
Whether the table actually covers the date is the engine's concern and is
reported separately as OutOfSupportedRangeError.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from .errors import InvalidInputError
from .types import HijriDate

HIJRI_YEAR_MIN = 1300
HIJRI_YEAR_MAX = 1500
HIJRI_MONTH_DAYS_MAX = 30

GREGORIAN_YEAR_MIN = 1900
GREGORIAN_YEAR_MAX = 2100


def _field(obj: Any, name: str) -> int:
    if not hasattr(obj, name):
        raise InvalidInputError(f"date has no '{name}' field: {obj!r}")
    v = getattr(obj, name)
    # bool is an int subclass; True is not a month
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidInputError(f"{name} must be an int, got {v!r}")
    return v


def _check(name: str, v: int, lo: int, hi: int) -> None:
    if not (lo <= v <= hi):
        raise InvalidInputError(f"{name} must be in {lo}..{hi}, got {v}")


def validate_gregorian(d: Any) -> date:
    """
    Accepts a GregorianDate, a datetime.date (datetime is truncated to its date)
    or any object with int year/month/day. Returns a datetime.date.
    """
    if isinstance(d, datetime):
        d = d.date()
    y, m, day = _field(d, "year"), _field(d, "month"), _field(d, "day")
    _check("year", y, GREGORIAN_YEAR_MIN, GREGORIAN_YEAR_MAX)
    _check("month", m, 1, 12)
    _check("day", day, 1, 31)
    try:
        return date(y, m, day)
    except ValueError as e:
        raise InvalidInputError(f"not a calendar date: {y:04d}-{m:02d}-{day:02d}") from e


def validate_hijri_month(year: Any, month: Any) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidInputError(f"year must be an int, got {year!r}")
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidInputError(f"month must be an int, got {month!r}")
    _check("year", year, HIJRI_YEAR_MIN, HIJRI_YEAR_MAX)
    _check("month", month, 1, 12)


def validate_hijri(d: Any) -> HijriDate:
    """Accepts a HijriDate or any object with int year/month/day."""
    y, m, day = _field(d, "year"), _field(d, "month"), _field(d, "day")
    validate_hijri_month(y, m)
    _check("day", day, 1, HIJRI_MONTH_DAYS_MAX)
    return d if isinstance(d, HijriDate) else HijriDate(y, m, day)

