"""
calhijri.engines.lookup
-----------------------
Read-only binary-search accessors over one ReferenceTable.

The table is sorted both by Hijri key (year*12 + month) and by Gregorian start
date, so both searches run over the same tuple with different comparators.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from ..core.types import HijriMonthRecord, ReferenceTable


class MonthIndex:
    def __init__(self, table: ReferenceTable):
        if not table.months:
            raise ValueError("reference table has no months")
        self.table = table
        self._months = table.months

    def __len__(self) -> int:
        return len(self._months)

    @property
    def first(self) -> HijriMonthRecord:
        return self._months[0]

    @property
    def last(self) -> HijriMonthRecord:
        return self._months[-1]

    def find_by_hijri(self, year: int, month: int) -> Optional[HijriMonthRecord]:
        """Exact (year, month) match, or None."""
        target = year * 12 + month
        lo, hi = 0, len(self._months) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            rec = self._months[mid]
            k = rec.key
            if k == target:
                return rec
            if k < target:
                lo = mid + 1
            else:
                hi = mid - 1
        return None

    def find_by_gregorian(self, d: date) -> Optional[HijriMonthRecord]:
        """The month whose span contains d, or None outside the table."""
        lo, hi = 0, len(self._months) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            rec = self._months[mid]
            if d < rec.g_start:
                hi = mid - 1
            elif rec.contains(d):
                return rec
            else:
                lo = mid + 1
        return None

    def supported_year_range(self) -> Tuple[int, int]:
        return (self.first.h_year, self.last.h_year)

    def supported_gregorian_range(self) -> Tuple[date, date]:
        return (self.first.g_start, self.last.g_end)
