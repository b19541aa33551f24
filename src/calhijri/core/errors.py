from __future__ import annotations

from datetime import date
from typing import Optional, Tuple


class CalhijriError(Exception):
    """Base error."""

    code = "CALHIJRI_ERROR"


class InvalidInputError(CalhijriError, ValueError):
    """Structurally malformed date or profile (wrong type, field out of domain)."""

    code = "INVALID_INPUT"


class OutOfSupportedRangeError(CalhijriError, ValueError):
    """A well-formed date that the reference table does not cover."""

    code = "OUT_OF_RANGE"

    def __init__(
        self,
        message: str,
        *,
        hijri_range: Optional[Tuple[int, int]] = None,
        gregorian_range: Optional[Tuple[date, date]] = None,
    ) -> None:
        super().__init__(message)
        self.hijri_range = hijri_range
        self.gregorian_range = gregorian_range


class DataIntegrityError(CalhijriError):
    """The reference table is corrupt, or a lookup guaranteed by its invariants missed."""

    code = "DATA_INTEGRITY"


class TableValidationError(DataIntegrityError):
    """Raised by the loader when the raw table fails validation."""

    code = "TABLE_INVALID"


class NextMonthUnavailableError(CalhijriError):
    """Reverse-offset overflow needs the month after the last table record."""

    code = "NEXT_MONTH_UNAVAILABLE"
