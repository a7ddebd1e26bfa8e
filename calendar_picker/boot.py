"""Startup registration of the built-in calendar systems."""
from __future__ import annotations

from typing import Tuple

from .api.calendars import (
    CalendarSystem,
    GregorianCalendar,
    IslamicCalendar,
    JalaliCalendar,
    register_calendar,
    registered_calendars,
)


def register_default_calendars() -> Tuple[CalendarSystem, ...]:
    """Register the Gregorian, Umm-al-Qura and Jalali backends.

    Safe to call more than once; strategies already in place are kept.
    """

    for strategy in (GregorianCalendar(), IslamicCalendar(), JalaliCalendar()):
        register_calendar(strategy)
    return registered_calendars()
