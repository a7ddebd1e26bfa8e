"""Month/year navigation and the initial view of a picker."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from .calendars import CanonicalDate
from .converter import DateLike, to_canonical
from .locales import get_month_names, get_weekday_names
from .predicates import is_month_disabled, is_year_disabled
from .preferences import PickerConfig
from .selection import MultipleSelection, RangeSelection, SelectionState, SingleSelection

__all__ = [
    "MonthOption",
    "ViewChange",
    "WeekdayHeader",
    "YEAR_PAGE_SIZE",
    "change_month",
    "change_year",
    "clamp_to_bounds",
    "get_disabled_years",
    "get_initial_view_date",
    "get_months_array",
    "get_weekdays",
    "get_year_range",
    "normalize_selection",
    "step_month",
]

YEAR_PAGE_SIZE = 12


@dataclass(frozen=True)
class ViewChange:
    date: CanonicalDate
    changed: bool


@dataclass(frozen=True)
class MonthOption:
    index: int
    full_name: str
    short_name: str
    is_disabled: bool


@dataclass(frozen=True)
class WeekdayHeader:
    index: int
    full_name: str
    short_name: str
    min_name: str


def get_year_range(year: int) -> List[int]:
    """The page of :data:`YEAR_PAGE_SIZE` years that contains ``year``."""

    end_year = YEAR_PAGE_SIZE * -(-year // YEAR_PAGE_SIZE)
    start_year = end_year if end_year == year else end_year - YEAR_PAGE_SIZE
    start_year = max(start_year, 0)
    return [start_year + offset for offset in range(YEAR_PAGE_SIZE)]


def clamp_to_bounds(value: DateLike, config: PickerConfig) -> Optional[datetime]:
    """Move ``value`` into ``[min_date, max_date]``, keeping ``None`` as is."""

    if value is None:
        return None
    canonical = to_canonical(value, config.strategy, config.tzinfo)
    if config.max_date is not None:
        upper = to_canonical(config.max_date, config.strategy, config.tzinfo)
        if canonical.sort_key() > upper.sort_key():
            canonical = upper
    if config.min_date is not None:
        lower = to_canonical(config.min_date, config.strategy, config.tzinfo)
        if canonical.sort_key() < lower.sort_key():
            canonical = lower
    return canonical.to_datetime()


def normalize_selection(state: SelectionState, config: PickerConfig) -> SelectionState:
    """Clamp a caller-supplied selection into the configured bounds."""

    if isinstance(state, SingleSelection):
        return SingleSelection(clamp_to_bounds(state.date, config))
    if isinstance(state, RangeSelection):
        return RangeSelection(
            clamp_to_bounds(state.start_date, config),
            clamp_to_bounds(state.end_date, config),
        )
    dates = tuple(clamp_to_bounds(value, config) for value in state.dates)
    return MultipleSelection(dates, state.change, state.date_pressed)


def get_initial_view_date(
    config: PickerConfig,
    *,
    date: DateLike = None,
    start_date: DateLike = None,
    dates: Optional[Sequence[DateLike]] = None,
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> CanonicalDate:
    """Reference date of the month a picker opens on."""

    strategy = config.strategy
    anchor: DateLike = None
    if config.mode == "single" and date is not None:
        anchor = date
    elif config.mode == "range" and start_date is not None:
        anchor = start_date
    elif config.mode == "multiple" and dates:
        anchor = dates[0]
    initial = to_canonical(anchor, strategy, config.tzinfo)

    if config.min_date is not None:
        lower = to_canonical(config.min_date, strategy, config.tzinfo)
        if initial.sort_key() < lower.sort_key():
            initial = lower
    if month is not None and 0 <= month <= 11:
        initial = strategy.with_month(initial, month)
    if year is not None and year >= 0:
        initial = strategy.with_year(initial, year)
    return initial


def change_month(current: DateLike, month: int, config: PickerConfig) -> ViewChange:
    if not 0 <= month <= 11:
        raise ValueError("month must be in 0..11")
    reference = to_canonical(current, config.strategy, config.tzinfo)
    return ViewChange(config.strategy.with_month(reference, month), month != reference.month)


def change_year(current: DateLike, year: int, config: PickerConfig) -> ViewChange:
    reference = to_canonical(current, config.strategy, config.tzinfo)
    return ViewChange(config.strategy.with_year(reference, year), year != reference.year)


def step_month(current: DateLike, months: int, config: PickerConfig) -> CanonicalDate:
    """Move the view ``months`` forward, or backward when negative."""

    reference = to_canonical(current, config.strategy, config.tzinfo)
    return config.strategy.add_months(reference, months)


def get_months_array(reference: DateLike, config: PickerConfig) -> List[MonthOption]:
    names = get_month_names(config.calendar, config.locale)
    return [
        MonthOption(
            index=index,
            full_name=name,
            short_name=name[:3] if config.locale.startswith("en") else name,
            is_disabled=is_month_disabled(
                index,
                reference,
                min_date=config.min_date,
                max_date=config.max_date,
                calendar=config.strategy,
                tz=config.tzinfo,
            ),
        )
        for index, name in enumerate(names)
    ]


def get_disabled_years(years: Sequence[int], config: PickerConfig) -> List[int]:
    return [
        year
        for year in years
        if is_year_disabled(
            year,
            min_date=config.min_date,
            max_date=config.max_date,
            calendar=config.strategy,
            tz=config.tzinfo,
        )
    ]


def get_weekdays(config: PickerConfig) -> List[WeekdayHeader]:
    """Weekday headers in column order, starting at ``first_day_of_week``."""

    names = get_weekday_names(config.locale)
    short = config.locale.startswith("en")
    order = [(config.first_day_of_week + column) % 7 for column in range(7)]
    return [
        WeekdayHeader(
            index=index,
            full_name=names[index],
            short_name=names[index][:3] if short else names[index],
            min_name=names[index][:2] if short else names[index][:1],
        )
        for index in order
    ]
