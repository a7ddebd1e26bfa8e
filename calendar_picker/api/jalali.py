"""Solar Hijri (Jalali) arithmetic on plain ``(year, month, day)`` tuples.

Months are 1-based here. The 33-year arithmetic cycle places Jalali
979-01-01 on Gregorian 1600-03-20 and counts days forward from there.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Tuple

__all__ = [
    "gregorian_to_jalali",
    "is_jalali_leap",
    "jalali_month_length",
    "jalali_to_gregorian",
]

_JALALI_MONTH_LENGTHS = [31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29]
_EPOCH_YEAR = 979
_EPOCH = date(1600, 3, 20)


def _days_since_epoch(year: int, month: int, day: int) -> int:
    years = year - _EPOCH_YEAR
    days = 365 * years + years // 33 * 8 + ((years % 33) + 3) // 4
    days += sum(_JALALI_MONTH_LENGTHS[: month - 1])
    return days + day - 1


def jalali_to_gregorian(year: int, month: int, day: int) -> date:
    return _EPOCH + timedelta(days=_days_since_epoch(year, month, day))


def is_jalali_leap(year: int) -> bool:
    return _days_since_epoch(year + 1, 1, 1) - _days_since_epoch(year, 1, 1) == 366


def jalali_month_length(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError("month must be in 1..12 for Jalali calendar")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap(year) else 29


def gregorian_to_jalali(value: date) -> Tuple[int, int, int]:
    year = value.year - 621
    start_of_year = jalali_to_gregorian(year, 1, 1)
    if value < start_of_year:
        year -= 1
        start_of_year = jalali_to_gregorian(year, 1, 1)

    days = (value - start_of_year).days
    if days < 186:
        return year, 1 + days // 31, 1 + days % 31
    days -= 186
    return year, 7 + days // 30, 1 + days % 30
