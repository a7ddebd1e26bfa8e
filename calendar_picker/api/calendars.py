"""Calendar systems: canonical date variants and per-system strategies.

Each calendar system owns one frozen :class:`CanonicalDate` subclass and one
:class:`CalendarStrategy`. Strategies are the only place that knows month
lengths and weekday rules; everything else asks them. Months are 0-based and
weekdays run 0=Sunday..6=Saturday throughout.
"""
from __future__ import annotations

import calendar
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from datetime import tzinfo as TzInfo
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Union

from hijridate import Gregorian, Hijri

from ..exceptions import InvalidDate, UnsupportedCalendarSystem
from .jalali import gregorian_to_jalali, jalali_month_length, jalali_to_gregorian

__all__ = [
    "CalendarStrategy",
    "CalendarSystem",
    "CanonicalDate",
    "GregorianCalendar",
    "GregorianDate",
    "IslamicCalendar",
    "IslamicDate",
    "JalaliCalendar",
    "JalaliDate",
    "get_calendar",
    "normalize_calendar",
    "register_calendar",
    "registered_calendars",
    "unregister_calendar",
]

logger = logging.getLogger(__name__)


class CalendarSystem(str, Enum):
    GREGORIAN = "gregory"
    ISLAMIC = "islamic"
    JALALI = "jalali"


_ALIASES = {
    "gregory": CalendarSystem.GREGORIAN,
    "gregorian": CalendarSystem.GREGORIAN,
    "islamic": CalendarSystem.ISLAMIC,
    "hijri": CalendarSystem.ISLAMIC,
    "jalali": CalendarSystem.JALALI,
    "persian": CalendarSystem.JALALI,
}


def normalize_calendar(value: Union[str, CalendarSystem, None]) -> CalendarSystem:
    """Map a calendar tag to :class:`CalendarSystem` or fail fast."""

    if isinstance(value, CalendarSystem):
        return value
    if value is None:
        return CalendarSystem.GREGORIAN
    if isinstance(value, str):
        normalized = _ALIASES.get(value.strip().lower())
        if normalized is not None:
            return normalized
    raise UnsupportedCalendarSystem(value, [system.value for system in CalendarSystem])


@dataclass(frozen=True)
class CanonicalDate(ABC):
    """A point in time expressed in the fields of one calendar system."""

    system: ClassVar[CalendarSystem]

    year: int
    month: int
    day: int
    weekday: int
    hour: int
    minute: int
    tzinfo: Optional[TzInfo] = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValueError("month must be in 0..11")
        if not 0 <= self.weekday <= 6:
            raise ValueError("weekday must be in 0..6")

    @abstractmethod
    def gregorian_date(self) -> date:
        """The Gregorian day this date falls on."""

    def to_datetime(self) -> datetime:
        """Return the native value for this date, in its own time zone."""

        moment = self.gregorian_date()
        return datetime(
            moment.year, moment.month, moment.day, self.hour, self.minute, tzinfo=self.tzinfo
        )

    def timestamp(self) -> float:
        return self.to_datetime().timestamp()

    def day_ordinal(self) -> int:
        return self.gregorian_date().toordinal()

    def sort_key(self) -> Tuple[int, int, int]:
        return self.day_ordinal(), self.hour, self.minute

    def same_day(self, other: "CanonicalDate") -> bool:
        return self.day_ordinal() == other.day_ordinal()

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month + 1:02d}{sep}{self.day:02d}"


@dataclass(frozen=True)
class GregorianDate(CanonicalDate):
    system: ClassVar[CalendarSystem] = CalendarSystem.GREGORIAN

    def gregorian_date(self) -> date:
        return date(self.year, self.month + 1, self.day)


@dataclass(frozen=True)
class IslamicDate(CanonicalDate):
    """Umm-al-Qura date paired with the Gregorian day it falls on."""

    system: ClassVar[CalendarSystem] = CalendarSystem.ISLAMIC

    gregorian_year: int
    gregorian_month: int
    gregorian_day: int

    def gregorian_date(self) -> date:
        return date(self.gregorian_year, self.gregorian_month, self.gregorian_day)


@dataclass(frozen=True)
class JalaliDate(CanonicalDate):
    system: ClassVar[CalendarSystem] = CalendarSystem.JALALI

    def gregorian_date(self) -> date:
        return jalali_to_gregorian(self.year, self.month + 1, self.day)


def _sunday_based(value: date) -> int:
    return value.isoweekday() % 7


class CalendarStrategy(ABC):
    """Month-length and weekday rules for one calendar system."""

    system: ClassVar[CalendarSystem]

    @abstractmethod
    def days_in_month(self, year: int, month: int) -> int:
        """Number of days in the 0-based ``month`` of ``year``."""

    @abstractmethod
    def weekday_of(self, year: int, month: int, day: int) -> int:
        """Weekday of a date, 0=Sunday."""

    @abstractmethod
    def make(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        tzinfo: Optional[TzInfo] = None,
    ) -> CanonicalDate:
        """Build a validated canonical date from this system's fields."""

    @abstractmethod
    def from_gregorian(self, moment: datetime) -> CanonicalDate:
        """Express a native value in this calendar system."""

    def add_days(self, value: CanonicalDate, days: int) -> CanonicalDate:
        return self.from_gregorian(value.to_datetime() + timedelta(days=days))

    def add_months(self, value: CanonicalDate, months: int) -> CanonicalDate:
        year, month = divmod(value.year * 12 + value.month + months, 12)
        day = min(value.day, self.days_in_month(year, month))
        return self.make(year, month, day, value.hour, value.minute, value.tzinfo)

    def with_day(self, value: CanonicalDate, day: int) -> CanonicalDate:
        return self.make(value.year, value.month, day, value.hour, value.minute, value.tzinfo)

    def with_month(self, value: CanonicalDate, month: int) -> CanonicalDate:
        day = min(value.day, self.days_in_month(value.year, month))
        return self.make(value.year, month, day, value.hour, value.minute, value.tzinfo)

    def with_year(self, value: CanonicalDate, year: int) -> CanonicalDate:
        day = min(value.day, self.days_in_month(year, value.month))
        return self.make(year, value.month, day, value.hour, value.minute, value.tzinfo)

    def start_of_week(self, value: CanonicalDate, first_day_of_week: int = 0) -> CanonicalDate:
        return self.add_days(value, -((value.weekday - first_day_of_week) % 7))

    def previous_month(self, year: int, month: int) -> Tuple[int, int]:
        return (year - 1, 11) if month == 0 else (year, month - 1)

    def next_month(self, year: int, month: int) -> Tuple[int, int]:
        return (year + 1, 0) if month == 11 else (year, month + 1)


class GregorianCalendar(CalendarStrategy):
    system = CalendarSystem.GREGORIAN

    def days_in_month(self, year: int, month: int) -> int:
        return calendar.monthrange(year, month + 1)[1]

    def weekday_of(self, year: int, month: int, day: int) -> int:
        return _sunday_based(date(year, month + 1, day))

    def make(self, year, month, day, hour=0, minute=0, tzinfo=None) -> GregorianDate:
        try:
            moment = date(year, month + 1, day)
        except ValueError as exc:
            raise InvalidDate((year, month, day), str(exc)) from exc
        return GregorianDate(year, month, day, _sunday_based(moment), hour, minute, tzinfo)

    def from_gregorian(self, moment: datetime) -> GregorianDate:
        return GregorianDate(
            moment.year,
            moment.month - 1,
            moment.day,
            _sunday_based(moment.date()),
            moment.hour,
            moment.minute,
            moment.tzinfo,
        )


class IslamicCalendar(CalendarStrategy):
    """Hijri calendar backed by the Umm-al-Qura tables of ``hijridate``."""

    system = CalendarSystem.ISLAMIC

    @staticmethod
    def _hijri(year: int, month: int, day: int) -> Hijri:
        try:
            return Hijri(year, month + 1, day)
        except (ValueError, OverflowError) as exc:
            raise InvalidDate((year, month, day), str(exc)) from exc

    def days_in_month(self, year: int, month: int) -> int:
        return self._hijri(year, month, 1).month_length()

    def weekday_of(self, year: int, month: int, day: int) -> int:
        return self._hijri(year, month, day).isoweekday() % 7

    def _from_hijri(self, hijri: Hijri, hour: int, minute: int, tzinfo) -> IslamicDate:
        paired = hijri.to_gregorian()
        return IslamicDate(
            hijri.year,
            hijri.month - 1,
            hijri.day,
            hijri.isoweekday() % 7,
            hour,
            minute,
            tzinfo,
            paired.year,
            paired.month,
            paired.day,
        )

    def make(self, year, month, day, hour=0, minute=0, tzinfo=None) -> IslamicDate:
        return self._from_hijri(self._hijri(year, month, day), hour, minute, tzinfo)

    def from_gregorian(self, moment: datetime) -> IslamicDate:
        try:
            hijri = Gregorian(moment.year, moment.month, moment.day).to_hijri()
        except (ValueError, OverflowError) as exc:
            raise InvalidDate(moment, str(exc)) from exc
        return self._from_hijri(hijri, moment.hour, moment.minute, moment.tzinfo)


class JalaliCalendar(CalendarStrategy):
    system = CalendarSystem.JALALI

    def days_in_month(self, year: int, month: int) -> int:
        return jalali_month_length(year, month + 1)

    def weekday_of(self, year: int, month: int, day: int) -> int:
        return _sunday_based(jalali_to_gregorian(year, month + 1, day))

    def make(self, year, month, day, hour=0, minute=0, tzinfo=None) -> JalaliDate:
        if not 0 <= month <= 11 or not 1 <= day <= self.days_in_month(year, month):
            raise InvalidDate((year, month, day), "day outside the Jalali month")
        return JalaliDate(year, month, day, self.weekday_of(year, month, day), hour, minute, tzinfo)

    def from_gregorian(self, moment: datetime) -> JalaliDate:
        year, month, day = gregorian_to_jalali(moment.date())
        return JalaliDate(
            year,
            month - 1,
            day,
            _sunday_based(moment.date()),
            moment.hour,
            moment.minute,
            moment.tzinfo,
        )


_REGISTRY: Dict[CalendarSystem, CalendarStrategy] = {}


def register_calendar(strategy: CalendarStrategy, *, replace: bool = False) -> CalendarStrategy:
    """Register ``strategy`` for its system and return the active strategy.

    Registering the same kind of strategy twice is a no-op.
    """

    current = _REGISTRY.get(strategy.system)
    if current is not None and (type(current) is type(strategy) or not replace):
        return current
    _REGISTRY[strategy.system] = strategy
    logger.debug("Registered %s for calendar %r", type(strategy).__name__, strategy.system.value)
    return strategy


def unregister_calendar(system: Union[str, CalendarSystem]) -> Optional[CalendarStrategy]:
    return _REGISTRY.pop(normalize_calendar(system), None)


def registered_calendars() -> Tuple[CalendarSystem, ...]:
    return tuple(_REGISTRY)


def get_calendar(system: Union[str, CalendarSystem, CalendarStrategy, None]) -> CalendarStrategy:
    """Return the strategy registered for ``system``."""

    if isinstance(system, CalendarStrategy):
        return system
    normalized = normalize_calendar(system)
    try:
        return _REGISTRY[normalized]
    except KeyError:
        raise UnsupportedCalendarSystem(
            normalized.value, [registered.value for registered in _REGISTRY]
        ) from None
