from __future__ import annotations
import re
from datetime import date, timedelta
from typing import Tuple

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(s: str) -> date:
    """Strict YYYY-MM-DD -> date. Raises ValueError on anything else."""
    if not isinstance(s, str) or not ISO_DATE_RE.match(s):
        raise ValueError(f"not an ISO date (YYYY-MM-DD): {s!r}")
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def parse_ymd_triple(s: str) -> Tuple[int, int, int]:
    """Loose Y-M-D with no calendar check (Hijri dates have no datetime type)."""
    parts = s.replace("/", "-").split("-")
    if len(parts) != 3:
        raise ValueError(f"expected Y-M-D, got {s!r}")
    y, m, d = (int(p) for p in parts)
    return y, m, d


def days_between(start: date, end: date) -> int:
    return (end - start).days


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def weekday_sunday_first(d: date) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return (d.weekday() + 1) % 7
