from __future__ import annotations

from typing import Dict

from ..core.types import CountryProfile, DisplayName


def _p(country: str, method: str, offset: int, en: str, ar: str, tz: str) -> CountryProfile:
    return CountryProfile(
        country=country,
        method=method,  # type: ignore[arg-type]
        offset=offset,
        display_name=DisplayName(en=en, ar=ar),
        timezone=tz,
    )


DEFAULT_COUNTRY = "SA"

# ============================================================
# UMM AL-QURA (offset 0 by definition)
# ============================================================

UMMALQURA_PROFILES = {
    "SA": _p("SA", "ummalqura", 0, "Saudi Arabia", "المملكة العربية السعودية", "Asia/Riyadh"),
    "AE": _p("AE", "ummalqura", 0, "United Arab Emirates", "الإمارات العربية المتحدة", "Asia/Dubai"),
    "QA": _p("QA", "ummalqura", 0, "Qatar", "قطر", "Asia/Qatar"),
    "KW": _p("KW", "ummalqura", 0, "Kuwait", "الكويت", "Asia/Kuwait"),
    "BH": _p("BH", "ummalqura", 0, "Bahrain", "البحرين", "Asia/Bahrain"),
    "YE": _p("YE", "ummalqura", 0, "Yemen", "اليمن", "Asia/Aden"),
}

# ============================================================
# NATIONAL MOON SIGHTING
# ============================================================

MOONSIGHTING_PROFILES = {
    "EG": _p("EG", "moonsighting_national", 0, "Egypt", "مصر", "Africa/Cairo"),
    "JO": _p("JO", "moonsighting_national", 0, "Jordan", "الأردن", "Asia/Amman"),
    "DZ": _p("DZ", "moonsighting_national", 0, "Algeria", "الجزائر", "Africa/Algiers"),
    "TN": _p("TN", "moonsighting_national", 0, "Tunisia", "تونس", "Africa/Tunis"),
    # Offset -1: local sighting usually confirms the new moon a day after Makkah.
    "MA": _p("MA", "moonsighting_national", -1, "Morocco", "المغرب", "Africa/Casablanca"),
    "OM": _p("OM", "moonsighting_national", -1, "Oman", "عُمان", "Asia/Muscat"),
    "PK": _p("PK", "moonsighting_national", -1, "Pakistan", "باكستان", "Asia/Karachi"),
    "IN": _p("IN", "moonsighting_national", -1, "India", "الهند", "Asia/Kolkata"),
    "BD": _p("BD", "moonsighting_national", -1, "Bangladesh", "بنغلاديش", "Asia/Dhaka"),
    "ID": _p("ID", "moonsighting_national", -1, "Indonesia", "إندونيسيا", "Asia/Jakarta"),
    "MY": _p("MY", "moonsighting_national", -1, "Malaysia", "ماليزيا", "Asia/Kuala_Lumpur"),
}

# ============================================================
# DIYANET
# ============================================================

DIYANET_PROFILES = {
    "TR": _p("TR", "diyanet", 0, "Türkiye", "تركيا", "Europe/Istanbul"),
}

ALL_PROFILES: Dict[str, CountryProfile] = {
    **UMMALQURA_PROFILES,
    **MOONSIGHTING_PROFILES,
    **DIYANET_PROFILES,
}
