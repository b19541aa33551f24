"""calhijri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    gregorian_to_hijri,
    hijri_to_gregorian,
    today_hijri,
    is_valid_hijri_date,
    is_valid_gregorian_date,
    supported_range,
    month_length,
    month_grid,
    table_info,
    get_engine,
    set_engine,
    resolve_profile,
)
from .core.errors import (
    CalhijriError,
    InvalidInputError,
    OutOfSupportedRangeError,
    DataIntegrityError,
    TableValidationError,
    NextMonthUnavailableError,
)
from .core.types import CountryProfile, DisplayName, GregorianDate, HijriDate, SupportedRange
from .profiles import get_profile, default_profile, all_profiles

__all__ = [
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "today_hijri",
    "is_valid_hijri_date",
    "is_valid_gregorian_date",
    "supported_range",
    "month_length",
    "month_grid",
    "table_info",
    "get_engine",
    "set_engine",
    "resolve_profile",
    "CalhijriError",
    "InvalidInputError",
    "OutOfSupportedRangeError",
    "DataIntegrityError",
    "TableValidationError",
    "NextMonthUnavailableError",
    "CountryProfile",
    "DisplayName",
    "GregorianDate",
    "HijriDate",
    "SupportedRange",
    "get_profile",
    "default_profile",
    "all_profiles",
]
