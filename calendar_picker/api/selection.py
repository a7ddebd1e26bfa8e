"""Selection state machine for single, range and multiple pickers.

States and notifications hold native ``datetime`` values only. The caller
keeps the current state and passes it back with every pick.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional, Tuple, Union

from ..exceptions import InvalidDate, OutOfRangeSelection
from .converter import DateLike, end_of_day, parse_datetime, start_of_day, to_canonical
from .preferences import PickerConfig

__all__ = [
    "MultipleSelection",
    "RangeSelection",
    "SelectionState",
    "SingleSelection",
    "add_time",
    "select",
    "select_multiple",
    "select_range",
    "select_single",
]

logger = logging.getLogger(__name__)

Change = Literal["added", "removed"]


@dataclass(frozen=True)
class SingleSelection:
    date: Optional[datetime] = None


@dataclass(frozen=True)
class RangeSelection:
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class MultipleSelection:
    dates: Tuple[datetime, ...] = ()
    change: Optional[Change] = None
    date_pressed: Optional[datetime] = None


SelectionState = Union[SingleSelection, RangeSelection, MultipleSelection]


def _day(value: DateLike, config: PickerConfig) -> datetime:
    """Start of the value's day in the configured zone, through its calendar."""

    canonical = to_canonical(value, config.strategy, config.tzinfo)
    return start_of_day(canonical.to_datetime(), config.tzinfo)


def _pick(picked: DateLike, config: PickerConfig) -> datetime:
    if picked is None:
        raise InvalidDate(picked, "a pick needs a date")
    return _day(picked, config)


def _ordinal(value: datetime) -> int:
    return value.date().toordinal()


def select_single(
    state: Optional[SingleSelection], picked: DateLike, config: PickerConfig
) -> SingleSelection:
    if not config.time_picker:
        return SingleSelection(_pick(picked, config))
    if picked is None:
        raise InvalidDate(picked, "a pick needs a date")
    return SingleSelection(parse_datetime(picked, config.tzinfo))


def add_time(
    value: DateLike,
    config: PickerConfig,
    hour: Optional[int] = None,
    minute: Optional[int] = None,
) -> datetime:
    """Set the time of day on ``value`` in the configured calendar.

    With neither ``hour`` nor ``minute`` the result is midnight; otherwise a
    missing field keeps the current value.
    """

    if value is None:
        raise InvalidDate(value, "a time needs a date")
    canonical = to_canonical(value, config.strategy, config.tzinfo)
    if hour is None and minute is None:
        hour = minute = 0
    hour = canonical.hour if hour is None else hour
    minute = canonical.minute if minute is None else minute
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidDate((hour, minute), "time of day out of range")
    return config.strategy.make(
        canonical.year, canonical.month, canonical.day, hour, minute, canonical.tzinfo
    ).to_datetime()


def _check_span(span: int, config: PickerConfig) -> None:
    if (config.max_days and span > config.max_days) or (
        config.min_days and span < config.min_days
    ):
        raise OutOfRangeSelection(span, config.min_days, config.max_days)


def select_range(
    state: Optional[RangeSelection], picked: DateLike, config: PickerConfig
) -> RangeSelection:
    """Apply a pick to a range selection.

    The first pick anchors the start. Picking again on or after the start
    sets the end; picking before it moves the start. Re-picking the start
    while an end exists clears the range, and so does re-picking a lone
    start when ``min_days`` or ``max_days`` is set. A span outside
    ``min_days`` / ``max_days`` restarts the range at the picked day.
    """

    state = state or RangeSelection()
    start = _day(state.start_date, config) if state.start_date is not None else None
    end = _day(state.end_date, config) if state.end_date is not None else None
    selected = _pick(picked, config)

    selected_day = _ordinal(selected)
    start_day = _ordinal(start) if start is not None else None
    end_day = _ordinal(end) if end is not None else None

    if start_day is not None and end_day is not None and selected_day == start_day:
        logger.debug("Range anchor %s picked again, clearing range", selected.date())
        return RangeSelection()

    is_start = True
    if start_day is not None and selected_day >= start_day and selected_day != end_day:
        is_start = False
    if start_day is not None and end_day is not None and selected_day == end_day:
        # Re-picking the end makes it the only anchor.
        end = None
    if start is not None and end is None and selected_day < start_day:
        end = start

    if config.min_days or config.max_days:
        if not is_start and selected_day == start_day:
            logger.debug("Lone range start %s picked again, clearing range", selected.date())
            return RangeSelection()
        try:
            if is_start and end is not None:
                _check_span(_ordinal(end) - selected_day, config)
            elif not is_start:
                _check_span(selected_day - start_day, config)
        except OutOfRangeSelection as exc:
            logger.debug("Restarting range at %s: %s", selected.date(), exc)
            is_start = True
            end = None

    if is_start:
        new_end = end_of_day(end, config.tzinfo) if end is not None else None
        return RangeSelection(selected, new_end)
    return RangeSelection(start, end_of_day(selected, config.tzinfo))


def select_multiple(
    state: Optional[MultipleSelection], picked: DateLike, config: PickerConfig
) -> Optional[MultipleSelection]:
    """Toggle ``picked`` in a multiple selection.

    Returns ``None`` when adding the day would exceed ``max_days``.
    """

    current = state.dates if state else ()
    selected = _pick(picked, config)
    selected_day = _ordinal(selected)

    days = [_day(value, config) for value in current]
    exists = any(_ordinal(value) == selected_day for value in days)
    if exists:
        days = [value for value in days if _ordinal(value) != selected_day]
    else:
        days.append(selected)

    if config.max_days and len(days) > config.max_days:
        logger.debug(
            "Ignoring %s: at most %d dates may be selected", selected.date(), config.max_days
        )
        return None

    days.sort(key=_ordinal)
    return MultipleSelection(
        dates=tuple(days),
        change="removed" if exists else "added",
        date_pressed=selected,
    )


def select(
    state: Optional[SelectionState], picked: DateLike, config: PickerConfig
) -> Optional[SelectionState]:
    """Dispatch ``picked`` to the handler of ``config.mode``."""

    if config.mode == "range":
        return select_range(state, picked, config)  # type: ignore[arg-type]
    if config.mode == "multiple":
        return select_multiple(state, picked, config)  # type: ignore[arg-type]
    return select_single(state, picked, config)  # type: ignore[arg-type]
