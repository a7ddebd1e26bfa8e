"""Picker configuration shared by the grid, predicate and selection helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from datetime import tzinfo as TzInfo
from typing import Any, Callable, Dict, Iterable, Literal, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .calendars import CalendarStrategy, CalendarSystem, get_calendar, normalize_calendar
from .converter import DateLike
from .locales import is_rtl_locale
from .numerals import DEFAULT_NUMERALS, NUMERAL_SYSTEMS

__all__ = [
    "DEFAULT_CALENDAR",
    "DEFAULT_LOCALE",
    "DateRule",
    "PickerConfig",
    "SelectionMode",
    "VALID_MODES",
    "resolve_config",
]

SelectionMode = Literal["single", "range", "multiple"]
DateRule = Union[Iterable[DateLike], Callable[[datetime], bool]]

DEFAULT_CALENDAR = CalendarSystem.GREGORIAN
DEFAULT_LOCALE = "en"
VALID_MODES = {"single", "range", "multiple"}

_OPTION_ALIASES = {
    "firstDayOfWeek": "first_day_of_week",
    "showOutsideDays": "show_outside_days",
    "timePicker": "time_picker",
    "minDate": "min_date",
    "maxDate": "max_date",
    "enabledDates": "enabled_dates",
    "disabledDates": "disabled_dates",
    "timeZone": "time_zone",
    "min": "min_days",
    "max": "max_days",
}


def _normalize_mode(value: Optional[str]) -> str:
    normalized = (value or "single").strip().lower()
    if normalized not in VALID_MODES:
        raise ValueError("mode must be one of: {}".format(", ".join(sorted(VALID_MODES))))
    return normalized


def _normalize_numerals(value: Optional[str]) -> str:
    normalized = (value or DEFAULT_NUMERALS).strip()
    if normalized not in NUMERAL_SYSTEMS:
        raise ValueError(
            "numerals must be one of: {}".format(", ".join(sorted(NUMERAL_SYSTEMS)))
        )
    return normalized


def _normalize_first_day(value: Optional[int]) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and 0 < value <= 6:
        return value
    return 0


def _resolve_time_zone(value: Optional[str]) -> Optional[TzInfo]:
    if not value:
        return None
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone: {value!r}") from exc


def _normalize_count(name: str, value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return value


@dataclass(frozen=True)
class PickerConfig:
    """Validated picker options.

    The calendar strategy and time zone are resolved once here and handed to
    every engine call through ``strategy`` and ``tzinfo``.
    """

    mode: SelectionMode = "single"
    calendar: Union[CalendarSystem, str] = DEFAULT_CALENDAR
    locale: str = DEFAULT_LOCALE
    numerals: str = DEFAULT_NUMERALS
    first_day_of_week: int = 0
    show_outside_days: bool = False
    time_picker: bool = False
    min_date: DateLike = None
    max_date: DateLike = None
    enabled_dates: Optional[DateRule] = None
    disabled_dates: Optional[DateRule] = None
    min_days: Optional[int] = None
    max_days: Optional[int] = None
    time_zone: Optional[str] = None
    strategy: CalendarStrategy = field(init=False, repr=False, compare=False)
    tzinfo: Optional[TzInfo] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        system = normalize_calendar(self.calendar)
        object.__setattr__(self, "calendar", system)
        object.__setattr__(self, "strategy", get_calendar(system))
        object.__setattr__(self, "mode", _normalize_mode(self.mode))
        object.__setattr__(self, "locale", (self.locale or DEFAULT_LOCALE).strip().lower())
        object.__setattr__(self, "numerals", _normalize_numerals(self.numerals))
        object.__setattr__(self, "first_day_of_week", _normalize_first_day(self.first_day_of_week))
        object.__setattr__(self, "min_days", _normalize_count("min_days", self.min_days))
        object.__setattr__(self, "max_days", _normalize_count("max_days", self.max_days))
        object.__setattr__(self, "tzinfo", _resolve_time_zone(self.time_zone))

    @property
    def is_rtl(self) -> bool:
        return self.calendar is CalendarSystem.JALALI or is_rtl_locale(self.locale)

    def to_context(self) -> Dict[str, object]:
        """Return a serialisable summary of the resolved options."""

        context: Dict[str, object] = {
            "mode": self.mode,
            "calendar": self.calendar.value,
            "locale": self.locale,
            "numerals": self.numerals,
            "first_day_of_week": self.first_day_of_week,
            "show_outside_days": self.show_outside_days,
            "time_picker": self.time_picker,
            "is_rtl": self.is_rtl,
        }
        if self.time_zone:
            context["time_zone"] = self.time_zone
        return context


def resolve_config(**options: Any) -> PickerConfig:
    """Build a :class:`PickerConfig` from snake_case or camelCase option names."""

    normalized: Dict[str, Any] = {}
    for key, value in options.items():
        normalized[_OPTION_ALIASES.get(key, key)] = value
    return PickerConfig(**normalized)
