"""Month grid: the day cells shown for one month of a calendar."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import InvalidDate
from .calendars import CalendarStrategy, CanonicalDate
from .converter import DateLike, to_canonical
from .numerals import format_number
from .predicates import is_date_disabled
from .preferences import PickerConfig

__all__ = [
    "DayCell",
    "MonthGridSpec",
    "build_month_days",
    "get_month_grid_spec",
]

_SHORT_GRID = 35
_FULL_GRID = 42


def _neighbour_length(strategy: CalendarStrategy, year: int, month: int) -> int:
    """Length of an adjacent month, or 0 when the calendar has no data for it."""

    try:
        return strategy.days_in_month(year, month)
    except InvalidDate:
        return 0


@dataclass(frozen=True)
class MonthGridSpec:
    prev_month_day_count: int
    prev_month_offset: int
    current_month_day_count: int
    next_month_day_count: int

    @property
    def total_cells(self) -> int:
        return self.prev_month_offset + self.current_month_day_count + self.next_month_day_count


@dataclass(frozen=True)
class DayCell:
    display_number: str
    raw_number: int
    date: CanonicalDate
    is_current_month: bool
    is_disabled: bool
    position_index: int
    is_start_of_week: bool
    is_end_of_week: bool


def get_month_grid_spec(reference: DateLike, config: PickerConfig) -> MonthGridSpec:
    strategy = config.strategy
    current = to_canonical(reference, strategy, config.tzinfo)

    current_days = strategy.days_in_month(current.year, current.month)
    prev_days = _neighbour_length(strategy, *strategy.previous_month(current.year, current.month))
    first_weekday = strategy.weekday_of(current.year, current.month, 1)
    offset = (first_weekday - config.first_day_of_week) % 7

    next_days = 0
    if config.show_outside_days:
        filled = offset + current_days
        next_days = (_FULL_GRID if filled > _SHORT_GRID else _SHORT_GRID) - filled

    return MonthGridSpec(prev_days, offset, current_days, next_days)


def _make_cell(
    number: int,
    value: CanonicalDate,
    is_current_month: bool,
    position: int,
    config: PickerConfig,
) -> DayCell:
    return DayCell(
        display_number=format_number(number, config.numerals),
        raw_number=number,
        date=value,
        is_current_month=is_current_month,
        is_disabled=is_date_disabled(
            value,
            min_date=config.min_date,
            max_date=config.max_date,
            enabled_dates=config.enabled_dates,
            disabled_dates=config.disabled_dates,
            calendar=config.strategy,
            tz=config.tzinfo,
        ),
        position_index=position,
        is_start_of_week=value.weekday == config.first_day_of_week,
        is_end_of_week=value.weekday == (config.first_day_of_week + 6) % 7,
    )


def build_month_days(reference: DateLike, config: PickerConfig) -> List[Optional[DayCell]]:
    """Return the cells of the month containing ``reference``.

    With outside days hidden, the leading cells are ``None`` placeholders and
    nothing follows the month's last day. Outside cells that fall beyond the
    calendar's supported range are ``None`` as well.
    """

    strategy = config.strategy
    current = to_canonical(reference, strategy, config.tzinfo)
    spec = get_month_grid_spec(current, config)
    year, month = current.year, current.month

    cells: List[Optional[DayCell]] = []
    if config.show_outside_days and spec.prev_month_day_count:
        prev_year, prev_month = strategy.previous_month(year, month)
        first_shown = spec.prev_month_day_count - spec.prev_month_offset + 1
        for index in range(spec.prev_month_offset):
            number = first_shown + index
            value = strategy.make(prev_year, prev_month, number, tzinfo=current.tzinfo)
            cells.append(_make_cell(number, value, False, index + 1, config))
    else:
        cells.extend([None] * spec.prev_month_offset)

    for number in range(1, spec.current_month_day_count + 1):
        value = strategy.make(year, month, number, tzinfo=current.tzinfo)
        cells.append(_make_cell(number, value, True, spec.prev_month_offset + number, config))

    next_year, next_month = strategy.next_month(year, month)
    if spec.next_month_day_count and not _neighbour_length(strategy, next_year, next_month):
        cells.extend([None] * spec.next_month_day_count)
        return cells
    for number in range(1, spec.next_month_day_count + 1):
        value = strategy.make(next_year, next_month, number, tzinfo=current.tzinfo)
        position = spec.prev_month_offset + spec.current_month_day_count + number
        cells.append(_make_cell(number, value, False, position, config))

    return cells
