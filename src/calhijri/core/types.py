from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Literal, Tuple

from .errors import InvalidInputError

Method = Literal["ummalqura", "moonsighting_national", "diyanet"]
METHODS: Tuple[str, ...] = ("ummalqura", "moonsighting_national", "diyanet")

# Regional conventions never drift more than two days from Umm al-Qura.
MAX_PROFILE_OFFSET = 2

MONTH_NAMES: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani",
    "Jumada al-Ula", "Jumada al-Akhirah", "Rajab", "Shaban",
    "Ramadan", "Shawwal", "Dhu al-Qadah", "Dhu al-Hijjah",
)


@dataclass(frozen=True, order=True)
class HijriDate:
    year: int
    month: int
    day: int

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, order=True)
class GregorianDate:
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class HijriMonthRecord:
    """One row of the reference table: a Hijri month and its Gregorian span."""
    h_year: int
    h_month: int
    g_start: date
    days: int  # 29 or 30

    @property
    def key(self) -> int:
        return self.h_year * 12 + self.h_month

    @property
    def g_end(self) -> date:
        """Last Gregorian day of the month (inclusive)."""
        return self.g_start + timedelta(days=self.days - 1)

    def contains(self, d: date) -> bool:
        return self.g_start <= d <= self.g_end


@dataclass(frozen=True)
class TableMetadata:
    source: str
    range: str
    last_updated: date
    description: str


@dataclass(frozen=True)
class ReferenceTable:
    metadata: TableMetadata
    months: Tuple[HijriMonthRecord, ...]

    def __len__(self) -> int:
        return len(self.months)


@dataclass(frozen=True)
class DisplayName:
    en: str
    ar: str


@dataclass(frozen=True)
class CountryProfile:
    """
    A regional calendar convention. Only ``offset`` takes part in conversion;
    the other fields are carried through for callers.
    """
    country: str
    method: Method
    offset: int
    display_name: DisplayName
    timezone: str

    def __post_init__(self) -> None:
        if not (isinstance(self.country, str) and len(self.country) == 2 and self.country.isalpha()):
            raise InvalidInputError(f"country must be a 2-letter code, got {self.country!r}")
        if self.method not in METHODS:
            raise InvalidInputError(f"method must be one of {METHODS}, got {self.method!r}")
        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise InvalidInputError(f"offset must be an int, got {self.offset!r}")
        if not (-MAX_PROFILE_OFFSET <= self.offset <= MAX_PROFILE_OFFSET):
            raise InvalidInputError(
                f"offset must be in [-{MAX_PROFILE_OFFSET}, {MAX_PROFILE_OFFSET}], got {self.offset}"
            )
        if not self.timezone:
            raise InvalidInputError("timezone must be a non-empty string")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "country": self.country,
            "method": self.method,
            "offset": self.offset,
            "displayName": {"en": self.display_name.en, "ar": self.display_name.ar},
            "timezone": self.timezone,
        }


@dataclass(frozen=True)
class SupportedRange:
    hijri_min: int
    hijri_max: int
    gregorian_min: date
    gregorian_max: date

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return {
            "hijri": {"min": self.hijri_min, "max": self.hijri_max},
            "gregorian": {"min": self.gregorian_min.isoformat(), "max": self.gregorian_max.isoformat()},
        }
