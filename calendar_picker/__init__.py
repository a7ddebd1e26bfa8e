"""Calendar grid and selection engine for date pickers."""
from __future__ import annotations

from .api.calendars import CalendarSystem, CanonicalDate, get_calendar, register_calendar
from .api.converter import to_canonical
from .api.grid import DayCell, MonthGridSpec, build_month_days, get_month_grid_spec
from .api.numerals import format_number
from .api.predicates import is_date_disabled, is_month_disabled, is_year_disabled
from .api.preferences import PickerConfig, resolve_config
from .api.selection import (
    MultipleSelection,
    RangeSelection,
    SingleSelection,
    add_time,
    select,
    select_multiple,
    select_range,
    select_single,
)
from .boot import register_default_calendars
from .exceptions import (
    CalendarPickerError,
    InvalidDate,
    OutOfRangeSelection,
    UnsupportedCalendarSystem,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarPickerError",
    "CalendarSystem",
    "CanonicalDate",
    "DayCell",
    "InvalidDate",
    "MonthGridSpec",
    "MultipleSelection",
    "OutOfRangeSelection",
    "PickerConfig",
    "RangeSelection",
    "SingleSelection",
    "UnsupportedCalendarSystem",
    "add_time",
    "build_month_days",
    "format_number",
    "get_calendar",
    "get_month_grid_spec",
    "is_date_disabled",
    "is_month_disabled",
    "is_year_disabled",
    "register_calendar",
    "register_default_calendars",
    "resolve_config",
    "select",
    "select_multiple",
    "select_range",
    "select_single",
    "to_canonical",
]

register_default_calendars()
