"""Calendar arithmetic exposed by the picker engine."""

from . import (
    calendars,
    converter,
    grid,
    jalali,
    locales,
    navigation,
    numerals,
    predicates,
    preferences,
    selection,
)

__all__ = [
    "calendars",
    "converter",
    "grid",
    "jalali",
    "locales",
    "navigation",
    "numerals",
    "predicates",
    "preferences",
    "selection",
]
