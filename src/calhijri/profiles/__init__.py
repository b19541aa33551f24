"""Country profiles: a calculation method plus a day offset from Umm al-Qura."""

from .registry import (
    all_profiles,
    default_profile,
    get_profile,
    is_country_supported,
    normalize_country_code,
    profile_from_dict,
    profile_with_fallback,
    profiles_by_method,
    supported_countries,
    validate_profile,
    with_method,
    with_offset,
)
from .specs import ALL_PROFILES, DEFAULT_COUNTRY

__all__ = [
    "ALL_PROFILES",
    "DEFAULT_COUNTRY",
    "all_profiles",
    "default_profile",
    "get_profile",
    "is_country_supported",
    "normalize_country_code",
    "profile_from_dict",
    "profile_with_fallback",
    "profiles_by_method",
    "supported_countries",
    "validate_profile",
    "with_method",
    "with_offset",
]
