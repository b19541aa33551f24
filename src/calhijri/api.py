from __future__ import annotations

import threading
from datetime import date
from typing import Any, Dict, Optional, Union

from .core.errors import InvalidInputError
from .core.types import CountryProfile, GregorianDate, HijriDate, SupportedRange
from .engines.converter import ConversionEngine
from .engines.month_grid import MonthGrid, build_month_grid
from .profiles import default_profile, get_profile

ProfileLike = Union[CountryProfile, str, None]

_engine: Optional[ConversionEngine] = None
_engine_lock = threading.Lock()


def set_engine(engine: Optional[ConversionEngine]) -> None:
    """Install the engine used by the module-level functions (None = rebuild default lazily)."""
    global _engine
    with _engine_lock:
        _engine = engine


def get_engine() -> ConversionEngine:
    global _engine
    eng = _engine
    if eng is not None:
        return eng
    with _engine_lock:
        if _engine is None:
            from .bootstrap import build_engine
            _engine = build_engine()
        return _engine


def resolve_profile(profile: ProfileLike) -> CountryProfile:
    """CountryProfile as-is, a country code looked up, or the default for None."""
    if profile is None:
        return default_profile()
    if isinstance(profile, str):
        p = get_profile(profile)
        if p is None:
            raise InvalidInputError(f"Unsupported country code: {profile!r}")
        return p
    return profile


def gregorian_to_hijri(d: Union[GregorianDate, date], profile: ProfileLike = None) -> HijriDate:
    return get_engine().gregorian_to_hijri(d, resolve_profile(profile))


def hijri_to_gregorian(h: HijriDate, profile: ProfileLike = None) -> GregorianDate:
    return get_engine().hijri_to_gregorian(h, resolve_profile(profile))


def today_hijri(profile: ProfileLike = None, *, today: Optional[date] = None) -> HijriDate:
    return get_engine().today_hijri(resolve_profile(profile), today=today)


def is_valid_hijri_date(h: Any) -> bool:
    return get_engine().is_valid_hijri_date(h)


def is_valid_gregorian_date(d: Any) -> bool:
    return get_engine().is_valid_gregorian_date(d)


def supported_range() -> SupportedRange:
    return get_engine().supported_range()


def month_length(year: int, month: int) -> int:
    return get_engine().month_length(year, month)


def month_grid(year: int, month: int, profile: ProfileLike = None, *, today: Optional[date] = None) -> MonthGrid:
    return build_month_grid(get_engine(), year, month, resolve_profile(profile), today=today)


def table_info() -> Dict[str, Any]:
    return get_engine().info()
