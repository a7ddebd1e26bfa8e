"""Errors raised by the calendar picker engine."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

__all__ = [
    "CalendarPickerError",
    "InvalidDate",
    "OutOfRangeSelection",
    "UnsupportedCalendarSystem",
]


class CalendarPickerError(Exception):
    """Base exception for engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDate(CalendarPickerError, ValueError):
    """Raised when a raw value cannot be read as a date."""

    def __init__(self, value: Any, reason: Optional[str] = None) -> None:
        message = f"Cannot interpret {value!r} as a date"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={"value": value})
        self.value = value


class UnsupportedCalendarSystem(CalendarPickerError, ValueError):
    """Raised when a calendar tag is unknown or has no registered backend."""

    def __init__(self, calendar: Any, supported: Optional[Iterable[str]] = None) -> None:
        message = f"Calendar system {calendar!r} is not supported"
        supported_list = sorted(supported) if supported else []
        if supported_list:
            message += ". Supported calendars: {}".format(", ".join(supported_list))
        super().__init__(
            message,
            details={"calendar": calendar, "supported": supported_list},
        )
        self.calendar = calendar


class OutOfRangeSelection(CalendarPickerError):
    """Raised when a range span falls outside the configured day-count bounds."""

    def __init__(self, span: int, min_days: Optional[int], max_days: Optional[int]) -> None:
        super().__init__(
            f"Range of {span} day(s) is outside [{min_days}, {max_days}]",
            details={"span": span, "min_days": min_days, "max_days": max_days},
        )
        self.span = span
