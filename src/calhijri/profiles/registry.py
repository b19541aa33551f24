from __future__ import annotations
import re
from dataclasses import replace
from typing import Any, List, Mapping, Optional

from ..core.errors import InvalidInputError
from ..core.types import METHODS, CountryProfile, DisplayName
from .specs import ALL_PROFILES, DEFAULT_COUNTRY

_CODE_RE = re.compile(r"^[A-Z]{2}$")


def normalize_country_code(code: Any) -> Optional[str]:
    """' eg ' -> 'EG'; anything that is not two ASCII letters -> None."""
    if not isinstance(code, str):
        return None
    c = code.strip().upper()
    return c if _CODE_RE.match(c) else None


def get_profile(code: str) -> Optional[CountryProfile]:
    c = normalize_country_code(code)
    return ALL_PROFILES.get(c) if c else None


def default_profile() -> CountryProfile:
    return ALL_PROFILES[DEFAULT_COUNTRY]


def profile_with_fallback(code: Optional[str]) -> CountryProfile:
    p = get_profile(code) if code else None
    return p if p is not None else default_profile()


def all_profiles() -> List[CountryProfile]:
    return list(ALL_PROFILES.values())


def profiles_by_method(method: str) -> List[CountryProfile]:
    if method not in METHODS:
        raise KeyError(f"Unknown method '{method}'. Available: {list(METHODS)}")
    return [p for p in ALL_PROFILES.values() if p.method == method]


def supported_countries() -> List[str]:
    return sorted(ALL_PROFILES)


def is_country_supported(code: str) -> bool:
    return get_profile(code) is not None


def profile_from_dict(obj: Any) -> CountryProfile:
    """
    Build a profile from its wire form:
      {"country", "method", "offset", "displayName": {"en", "ar"}, "timezone"}
    """
    if not isinstance(obj, Mapping):
        raise InvalidInputError("profile must be an object")
    dn = obj.get("displayName")
    if not isinstance(dn, Mapping) or not isinstance(dn.get("en"), str) or not isinstance(dn.get("ar"), str):
        raise InvalidInputError("profile displayName must have string 'en' and 'ar'")
    tz = obj.get("timezone")
    if not isinstance(tz, str):
        raise InvalidInputError("profile timezone must be a string")
    return CountryProfile(
        country=obj.get("country"),
        method=obj.get("method"),
        offset=obj.get("offset"),
        display_name=DisplayName(en=dn["en"], ar=dn["ar"]),
        timezone=tz,
    )


def validate_profile(obj: Any) -> bool:
    try:
        profile_from_dict(obj)
    except InvalidInputError:
        return False
    return True


def with_offset(profile: CountryProfile, offset: int) -> CountryProfile:
    return replace(profile, offset=offset)


def with_method(profile: CountryProfile, method: str) -> CountryProfile:
    return replace(profile, method=method)
