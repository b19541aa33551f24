"""
calhijri.engines.month_grid
---------------------------
A 6-week (42 cell) Sunday-first grid for one Hijri month under a profile,
padded with the tail of the previous month and the head of the next.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple

from ..core.time import add_days, weekday_sunday_first
from ..core.types import CountryProfile, GregorianDate, HijriDate
from .converter import ConversionEngine

GRID_CELLS = 42


@dataclass(frozen=True)
class CalendarCell:
    hijri: Optional[HijriDate]  # None for padding outside the table
    gregorian: GregorianDate
    in_month: bool
    is_today: bool
    weekday: int  # 0 = Sunday .. 6 = Saturday


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    profile: CountryProfile
    days: int
    cells: Tuple[CalendarCell, ...]

    @property
    def first_gregorian(self) -> GregorianDate:
        return next(c.gregorian for c in self.cells if c.in_month)

    def weeks(self) -> Tuple[Tuple[CalendarCell, ...], ...]:
        return tuple(self.cells[i : i + 7] for i in range(0, len(self.cells), 7))


def build_month_grid(
    engine: ConversionEngine,
    year: int,
    month: int,
    profile: Any,
    *,
    today: Optional[date] = None,
) -> MonthGrid:
    today = today if today is not None else date.today()
    days = engine.month_length(year, month)
    first = engine.hijri_to_gregorian(HijriDate(year, month, 1), profile).to_date()

    start = add_days(first, -weekday_sunday_first(first))
    cells = []
    for i in range(GRID_CELLS):
        g = add_days(start, i)
        in_month = 0 <= (g - first).days < days
        if in_month:
            h = HijriDate(year, month, (g - first).days + 1)
        elif engine.is_valid_gregorian_date(g):
            h = engine.gregorian_to_hijri(g, profile)
        else:
            h = None
        cells.append(
            CalendarCell(
                hijri=h,
                gregorian=GregorianDate.from_date(g),
                in_month=in_month,
                is_today=(g == today),
                weekday=weekday_sunday_first(g),
            )
        )
    return MonthGrid(year=year, month=month, profile=profile, days=days, cells=tuple(cells))
