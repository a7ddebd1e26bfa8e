"""Calendar adapter: raw date values to canonical dates and back."""
from __future__ import annotations

from datetime import date, datetime, time
from datetime import tzinfo as TzInfo
from typing import Any, Dict, Optional, Union

from dateutil import parser as dateutil_parser

from ..exceptions import InvalidDate
from .calendars import CalendarStrategy, CalendarSystem, CanonicalDate, get_calendar

__all__ = [
    "DateLike",
    "are_dates_on_same_day",
    "date_to_unix",
    "end_of_day",
    "is_date_between",
    "parse_datetime",
    "parsed_fields",
    "start_of_day",
    "to_canonical",
    "to_native",
]

DateLike = Union[CanonicalDate, datetime, date, str, int, float, None]
CalendarLike = Union[CalendarStrategy, CalendarSystem, str, None]


def parse_datetime(value: DateLike, tz: Optional[TzInfo] = None) -> datetime:
    """Return ``value`` as a native ``datetime`` expressed in ``tz``.

    ``None`` means "now". Naive values are read as wall time in ``tz``;
    aware values are converted to it.
    """

    if value is None:
        return datetime.now(tz)
    if isinstance(value, CanonicalDate):
        moment = value.to_datetime()
    elif isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, bool):
        raise InvalidDate(value, "booleans are not dates")
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDate(value, str(exc)) from exc
    elif isinstance(value, str):
        try:
            moment = dateutil_parser.parse(value)
        except (dateutil_parser.ParserError, OverflowError, ValueError) as exc:
            raise InvalidDate(value, str(exc)) from exc
    else:
        raise InvalidDate(value, f"unsupported type {type(value).__name__}")

    if tz is None:
        return moment
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def to_canonical(
    value: DateLike = None,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> CanonicalDate:
    """Normalize ``value`` into the canonical date of ``calendar``.

    A canonical date already in the requested system is returned unchanged.
    """

    strategy = get_calendar(calendar)
    if isinstance(value, CanonicalDate) and value.system is strategy.system:
        return value
    return strategy.from_gregorian(parse_datetime(value, tz))


def to_native(value: Optional[CanonicalDate]) -> Optional[datetime]:
    return value.to_datetime() if value is not None else None


def start_of_day(value: DateLike, tz: Optional[TzInfo] = None) -> datetime:
    return parse_datetime(value, tz).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: DateLike, tz: Optional[TzInfo] = None) -> datetime:
    return parse_datetime(value, tz).replace(hour=23, minute=59, second=59, microsecond=999999)


def date_to_unix(
    value: DateLike, calendar: CalendarLike = CalendarSystem.GREGORIAN, tz: Optional[TzInfo] = None
) -> float:
    """Seconds since the epoch; Hijri values go through their Gregorian day."""

    return to_canonical(value, calendar, tz).timestamp()


def are_dates_on_same_day(
    a: DateLike,
    b: DateLike,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> bool:
    if a is None or b is None:
        return False
    return to_canonical(a, calendar, tz).same_day(to_canonical(b, calendar, tz))


def is_date_between(
    value: DateLike,
    start_date: DateLike,
    end_date: DateLike,
    calendar: CalendarLike = CalendarSystem.GREGORIAN,
    tz: Optional[TzInfo] = None,
) -> bool:
    """Whether ``value`` falls on or between the days of both bounds."""

    if start_date is None or end_date is None:
        return False
    current = to_canonical(value, calendar, tz).day_ordinal()
    start = to_canonical(start_date, calendar, tz).day_ordinal()
    end = to_canonical(end_date, calendar, tz).day_ordinal()
    return start <= current <= end


def parsed_fields(
    value: DateLike, calendar: CalendarLike = CalendarSystem.GREGORIAN, tz: Optional[TzInfo] = None
) -> Dict[str, Any]:
    """Fields a time picker needs, in the calendar's own year and month."""

    canonical = to_canonical(value, calendar, tz)
    hour12 = canonical.hour % 12 or 12
    return {
        "year": canonical.year,
        "month": canonical.month,
        "hour": canonical.hour,
        "hour12": hour12,
        "minute": canonical.minute,
        "period": "AM" if canonical.hour < 12 else "PM",
    }
