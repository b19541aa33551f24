"""
calhijri.engines.converter
--------------------------
Gregorian <-> Hijri conversion over the Umm al-Qura table, shifted by a
country profile's day offset.

Offsets are at most two days, so an adjusted date crosses at most one month
boundary in either direction. Month 12 -> 1 and 1 -> 12 are the only wraps.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..core.errors import (
    CalhijriError,
    DataIntegrityError,
    InvalidInputError,
    NextMonthUnavailableError,
    OutOfSupportedRangeError,
)
from ..core.time import add_days, days_between
from ..core.types import (
    MAX_PROFILE_OFFSET,
    CountryProfile,
    GregorianDate,
    HijriDate,
    SupportedRange,
)
from ..core.validation import validate_gregorian, validate_hijri, validate_hijri_month
from .lookup import MonthIndex

log = logging.getLogger(__name__)

# Assumed length of the month before the first table record.
FALLBACK_MONTH_DAYS = 29


def next_month(year: int, month: int) -> Tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)


def prev_month(year: int, month: int) -> Tuple[int, int]:
    return (year - 1, 12) if month == 1 else (year, month - 1)


def profile_offset(profile: Any) -> int:
    """The day offset of a profile, re-checked for duck-typed profiles."""
    if isinstance(profile, CountryProfile):
        return profile.offset
    off = getattr(profile, "offset", None)
    if isinstance(off, bool) or not isinstance(off, int):
        raise InvalidInputError(f"profile offset must be an int, got {off!r}")
    if not (-MAX_PROFILE_OFFSET <= off <= MAX_PROFILE_OFFSET):
        raise InvalidInputError(f"profile offset must be in [-{MAX_PROFILE_OFFSET}, {MAX_PROFILE_OFFSET}], got {off}")
    return off


class ConversionEngine:
    """
    Stateless converter. Every method is a pure function of its arguments and
    the immutable table behind ``index``; instances are safe to share.
    """
    def __init__(self, index: MonthIndex):
        self.index = index

    # ---------------------------------------------------------
    # Range / errors
    # ---------------------------------------------------------

    def supported_range(self) -> SupportedRange:
        y0, y1 = self.index.supported_year_range()
        g0, g1 = self.index.supported_gregorian_range()
        return SupportedRange(hijri_min=y0, hijri_max=y1, gregorian_min=g0, gregorian_max=g1)

    def _out_of_range(self, what: str) -> OutOfSupportedRangeError:
        y0, y1 = self.index.supported_year_range()
        g0, g1 = self.index.supported_gregorian_range()
        return OutOfSupportedRangeError(
            f"{what} is outside the supported range ({y0}-{y1} AH, {g0.isoformat()} .. {g1.isoformat()})",
            hijri_range=(y0, y1),
            gregorian_range=(g0, g1),
        )

    def _prev_month_days(self, year: int, month: int) -> int:
        """
        Day count of the month before (year, month).

        A miss is only legitimate when (year, month) is the first record; there
        the month length is unknown and FALLBACK_MONTH_DAYS is assumed. A miss
        for a month outside the table is a range error, and a miss anywhere
        inside it means the table has a hole.
        """
        py, pm = prev_month(year, month)
        rec = self.index.find_by_hijri(py, pm)
        if rec is not None:
            return rec.days

        key = year * 12 + month
        first, last = self.index.first, self.index.last
        if key == first.key:
            log.warning(
                "month before %d/%d is not in the table; assuming %d days",
                year, month, FALLBACK_MONTH_DAYS,
            )
            return FALLBACK_MONTH_DAYS
        if key < first.key or key > last.key:
            raise self._out_of_range(f"Hijri month {year}/{month}")
        raise DataIntegrityError(f"reference table has no record for {py}/{pm} inside its range")

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def gregorian_to_hijri(self, d: Any, profile: Any) -> HijriDate:
        g = validate_gregorian(d)
        offset = profile_offset(profile)

        rec = self.index.find_by_gregorian(g)
        if rec is None:
            raise self._out_of_range(f"Date {g.isoformat()}")

        delta = days_between(rec.g_start, g)
        if not (0 <= delta < rec.days):
            raise DataIntegrityError(
                f"{g.isoformat()} resolved to {rec.h_year}/{rec.h_month} but lies {delta} days from its start"
            )

        year, month = rec.h_year, rec.h_month
        day = delta + 1 + offset

        if day > rec.days:
            day -= rec.days
            year, month = next_month(year, month)
        elif day < 1:
            day += self._prev_month_days(year, month)
            year, month = prev_month(year, month)

        return HijriDate(year, month, day)

    def hijri_to_gregorian(self, d: Any, profile: Any) -> GregorianDate:
        h = validate_hijri(d)
        offset = profile_offset(profile)

        year, month = h.year, h.month
        day = h.day - offset
        if day < 1:
            day += self._prev_month_days(year, month)
            year, month = prev_month(year, month)

        rec = self.index.find_by_hijri(year, month)
        if rec is None:
            raise self._out_of_range(f"Hijri date {h.year}/{h.month}/{h.day}")

        if day > rec.days:
            ny, nm = next_month(year, month)
            nxt = self.index.find_by_hijri(ny, nm)
            if nxt is None:
                raise NextMonthUnavailableError(
                    f"Hijri date {h.year}/{h.month}/{h.day} (offset {offset:+d}) spills into {ny}/{nm}, "
                    "which is past the end of the table"
                )
            return GregorianDate.from_date(add_days(nxt.g_start, day - rec.days - 1))

        return GregorianDate.from_date(add_days(rec.g_start, day - 1))

    def today_hijri(self, profile: Any, *, today: Optional[date] = None) -> HijriDate:
        return self.gregorian_to_hijri(today if today is not None else date.today(), profile)

    # ---------------------------------------------------------
    # Predicates / info
    # ---------------------------------------------------------

    def is_valid_hijri_date(self, d: Any) -> bool:
        try:
            h = validate_hijri(d)
        except CalhijriError:
            return False
        rec = self.index.find_by_hijri(h.year, h.month)
        return rec is not None and h.day <= rec.days

    def is_valid_gregorian_date(self, d: Any) -> bool:
        try:
            g = validate_gregorian(d)
        except CalhijriError:
            return False
        return self.index.find_by_gregorian(g) is not None

    def month_length(self, year: int, month: int) -> int:
        """Days in a Hijri month. Offsets move month boundaries, not lengths."""
        validate_hijri_month(year, month)
        rec = self.index.find_by_hijri(year, month)
        if rec is None:
            raise self._out_of_range(f"Hijri month {year}/{month}")
        return rec.days

    def info(self) -> Dict[str, Any]:
        meta = self.index.table.metadata
        return {
            "source": meta.source,
            "range": meta.range,
            "last_updated": meta.last_updated.isoformat(),
            "description": meta.description,
            "months": len(self.index),
            "supported": self.supported_range().as_dict(),
        }
