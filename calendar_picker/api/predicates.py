"""Enabled/disabled rules for days, months and years."""
from __future__ import annotations

from datetime import tzinfo as TzInfo
from typing import Optional

from .calendars import CalendarSystem, CanonicalDate
from .converter import CalendarLike, DateLike, to_canonical
from .preferences import DateRule

__all__ = [
    "is_date_disabled",
    "is_month_disabled",
    "is_year_disabled",
    "matches_rule",
]


def matches_rule(
    value: CanonicalDate,
    rule: DateRule,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> bool:
    """Whether ``value`` is listed in ``rule`` or accepted by it.

    Callables receive the native ``datetime``; their exceptions propagate.
    """

    if callable(rule):
        return bool(rule(value.to_datetime()))
    ordinal = value.day_ordinal()
    return any(to_canonical(item, calendar, tz).day_ordinal() == ordinal for item in rule)


def is_date_disabled(
    value: DateLike,
    *,
    min_date: DateLike = None,
    max_date: DateLike = None,
    enabled_dates: Optional[DateRule] = None,
    disabled_dates: Optional[DateRule] = None,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> bool:
    """Evaluate the bounds, then the enabled rule, else the disabled rule."""

    value = to_canonical(value, calendar, tz)
    day = value.day_ordinal()
    if min_date is not None and day < to_canonical(min_date, calendar, tz).day_ordinal():
        return True
    if max_date is not None and day > to_canonical(max_date, calendar, tz).day_ordinal():
        return True
    if enabled_dates is not None:
        return not matches_rule(value, enabled_dates, calendar, tz)
    if disabled_dates is not None:
        return matches_rule(value, disabled_dates, calendar, tz)
    return False


def is_year_disabled(
    year: int,
    *,
    min_date: DateLike = None,
    max_date: DateLike = None,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> bool:
    if min_date is not None and year < to_canonical(min_date, calendar, tz).year:
        return True
    if max_date is not None and year > to_canonical(max_date, calendar, tz).year:
        return True
    return False


def is_month_disabled(
    month: int,
    reference: DateLike,
    *,
    min_date: DateLike = None,
    max_date: DateLike = None,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> bool:
    """A month is disabled only within the year of the bound it falls outside."""

    year = to_canonical(reference, calendar, tz).year
    if min_date is not None:
        lower = to_canonical(min_date, calendar, tz)
        if year == lower.year and month < lower.month:
            return True
    if max_date is not None:
        upper = to_canonical(max_date, calendar, tz)
        if year == upper.year and month > upper.month:
            return True
    return False
