"""Month and weekday names for the supported calendars."""
from __future__ import annotations

from typing import Dict, List

from hijridate import Hijri

from .calendars import CalendarSystem

__all__ = [
    "GREGORIAN_MONTHS",
    "JALALI_MONTHS",
    "RTL_LOCALES",
    "get_month_names",
    "get_weekday_names",
    "is_rtl_locale",
]

RTL_LOCALES = {"ar", "fa", "he", "ur", "ps", "ku"}

GREGORIAN_MONTHS: List[str] = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

JALALI_MONTHS: Dict[str, List[str]] = {
    "en": [
        "Farvardin",
        "Ordibehesht",
        "Khordad",
        "Tir",
        "Mordad",
        "Shahrivar",
        "Mehr",
        "Aban",
        "Azar",
        "Dey",
        "Bahman",
        "Esfand",
    ],
    "fa": [
        "فروردین",
        "اردیبهشت",
        "خرداد",
        "تیر",
        "مرداد",
        "شهریور",
        "مهر",
        "آبان",
        "آذر",
        "دی",
        "بهمن",
        "اسفند",
    ],
}

# Sunday first.
_WEEKDAYS: Dict[str, List[str]] = {
    "en": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    "ar": ["الأحد", "الإثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"],
    "fa": ["یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه"],
}

_HIJRI_LANGUAGES = {"en", "ar", "bn"}
# Any valid Umm-al-Qura year works for month names.
_HIJRI_NAME_YEAR = 1445


def _language(locale: str) -> str:
    return (locale or "en").replace("_", "-").split("-")[0].lower()


def is_rtl_locale(locale: str) -> bool:
    return _language(locale) in RTL_LOCALES


def get_month_names(system: CalendarSystem, locale: str = "en") -> List[str]:
    language = _language(locale)
    if system is CalendarSystem.ISLAMIC:
        if language not in _HIJRI_LANGUAGES:
            language = "en"
        return [Hijri(_HIJRI_NAME_YEAR, month, 1).month_name(language) for month in range(1, 13)]
    if system is CalendarSystem.JALALI:
        return list(JALALI_MONTHS.get(language, JALALI_MONTHS["en"]))
    return list(GREGORIAN_MONTHS)


def get_weekday_names(locale: str = "en") -> List[str]:
    """Weekday names indexed 0=Sunday..6=Saturday."""

    return list(_WEEKDAYS.get(_language(locale), _WEEKDAYS["en"]))
