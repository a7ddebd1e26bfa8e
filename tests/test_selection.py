from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from calendar_picker.api.preferences import PickerConfig
from calendar_picker.api.selection import (
    MultipleSelection,
    RangeSelection,
    SingleSelection,
    add_time,
    select,
    select_multiple,
    select_range,
    select_single,
)
from calendar_picker.exceptions import InvalidDate

END = (23, 59, 59, 999999)


def day(value, *end):
    return datetime(2024, 1, value, *end)


RANGE = PickerConfig(mode="range")
MULTIPLE = PickerConfig(mode="multiple")


def test_single_selection_starts_the_day():
    result = select_single(None, datetime(2024, 1, 10, 15, 30), PickerConfig())
    assert result == SingleSelection(day(10))


def test_single_selection_keeps_time_with_time_picker():
    result = select_single(None, datetime(2024, 1, 10, 15, 30), PickerConfig(time_picker=True))
    assert result.date == datetime(2024, 1, 10, 15, 30)


def test_time_picker_keeps_seconds():
    picked = datetime(2024, 1, 10, 15, 30, 45, 120000)
    result = select_single(None, picked, PickerConfig(time_picker=True))
    assert result.date == picked


def test_single_selection_in_time_zone():
    config = PickerConfig(time_zone="Asia/Riyadh")
    result = select_single(None, datetime(2024, 1, 9, 22, 30, tzinfo=timezone.utc), config)
    assert result.date == datetime(2024, 1, 10, tzinfo=ZoneInfo("Asia/Riyadh"))


def test_first_range_pick_sets_the_start():
    assert select_range(None, day(10, 9), RANGE) == RangeSelection(day(10), None)


def test_range_from_single_day_extends_to_later_pick():
    state = RangeSelection(day(10), day(10, *END))
    assert select_range(state, day(15), RANGE) == RangeSelection(day(10), day(15, *END))


def test_repicking_the_start_clears_the_range():
    state = RangeSelection(day(10), day(15, *END))
    assert select_range(state, day(10), RANGE) == RangeSelection(None, None)


def test_pick_after_start_sets_the_end():
    state = RangeSelection(day(10), None)
    assert select_range(state, day(12), RANGE) == RangeSelection(day(10), day(12, *END))


def test_pick_before_lone_start_swaps_the_bounds():
    state = RangeSelection(day(10), None)
    assert select_range(state, day(5), RANGE) == RangeSelection(day(5), day(10, *END))


def test_pick_before_start_moves_the_start():
    state = RangeSelection(day(10), day(15, *END))
    assert select_range(state, day(8), RANGE) == RangeSelection(day(8), day(15, *END))


def test_pick_inside_range_moves_the_end():
    state = RangeSelection(day(10), day(15, *END))
    assert select_range(state, day(12), RANGE) == RangeSelection(day(10), day(12, *END))


def test_repicking_the_end_keeps_it_as_the_only_anchor():
    state = RangeSelection(day(10), day(15, *END))
    assert select_range(state, day(15), RANGE) == RangeSelection(day(15), None)


def test_repicking_lone_start_gives_one_day_range():
    state = RangeSelection(day(10), None)
    assert select_range(state, day(10, 8), RANGE) == RangeSelection(day(10), day(10, *END))


@pytest.mark.parametrize("bounds", [{"max_days": 3}, {"min_days": 2}])
def test_repicking_lone_start_with_span_bounds_clears_the_range(bounds):
    config = PickerConfig(mode="range", **bounds)
    state = RangeSelection(day(10), None)
    assert select_range(state, day(10), config) == RangeSelection(None, None)


def test_span_above_max_restarts_the_range():
    config = PickerConfig(mode="range", max_days=3)
    state = RangeSelection(day(10), None)
    assert select_range(state, day(20), config) == RangeSelection(day(20), None)
    assert select_range(state, day(12), config) == RangeSelection(day(10), day(12, *END))


def test_span_below_min_restarts_the_range():
    config = PickerConfig(mode="range", min_days=5)
    state = RangeSelection(day(10), None)
    assert select_range(state, day(12), config) == RangeSelection(day(12), None)
    assert select_range(state, day(16), config) == RangeSelection(day(10), day(16, *END))


def test_moving_the_start_respects_max_span():
    config = PickerConfig(mode="range", max_days=7)
    state = RangeSelection(day(10), day(15, *END))
    assert select_range(state, day(2), config) == RangeSelection(day(2), None)
    assert select_range(state, day(9), config) == RangeSelection(day(9), day(15, *END))


def test_hijri_range_reports_native_dates():
    config = PickerConfig(mode="range", calendar="islamic")
    state = RangeSelection(day(10), day(10, *END))
    result = select_range(state, day(15), config)
    assert result == RangeSelection(day(10), day(15, *END))
    assert type(result.start_date) is datetime


def test_multiple_pick_toggles_off_existing_day():
    state = MultipleSelection((day(5), day(10)))
    result = select_multiple(state, day(5, 17), MULTIPLE)
    assert result.dates == (day(10),)
    assert result.change == "removed"


def test_multiple_pick_adds_and_sorts():
    state = MultipleSelection((day(5), day(10)))
    result = select_multiple(state, day(3), MULTIPLE)
    assert result.dates == (day(3), day(5), day(10))
    assert result.change == "added"
    assert result.date_pressed == day(3)


def test_multiple_pick_beyond_max_is_ignored():
    config = PickerConfig(mode="multiple", max_days=2)
    state = MultipleSelection((day(5), day(10)))
    assert select_multiple(state, day(3), config) is None
    assert select_multiple(state, day(5), config).dates == (day(10),)


@pytest.mark.parametrize(
    "config,state,expected_type",
    [
        (PickerConfig(), None, SingleSelection),
        (RANGE, None, RangeSelection),
        (MULTIPLE, None, MultipleSelection),
    ],
)
def test_select_dispatches_on_mode(config, state, expected_type):
    assert isinstance(select(state, day(10), config), expected_type)


@pytest.mark.parametrize("config", [PickerConfig(), RANGE, MULTIPLE])
def test_missing_pick_is_an_invalid_date(config):
    with pytest.raises(InvalidDate):
        select(None, None, config)


@pytest.mark.parametrize(
    "hour,minute,expected",
    [
        (9, 15, datetime(2024, 1, 10, 9, 15)),
        (None, None, datetime(2024, 1, 10)),
        (9, None, datetime(2024, 1, 10, 9, 40)),
        (None, 5, datetime(2024, 1, 10, 18, 5)),
        (0, 0, datetime(2024, 1, 10)),
    ],
)
def test_add_time(hour, minute, expected):
    assert add_time(datetime(2024, 1, 10, 18, 40), PickerConfig(), hour, minute) == expected


def test_add_time_keeps_the_hijri_day():
    config = PickerConfig(calendar="islamic", time_picker=True)
    first_of_ramadan = config.strategy.make(1445, 8, 1)
    assert add_time(first_of_ramadan, config, 21, 30) == datetime(2024, 3, 11, 21, 30)
    assert add_time(date(2024, 3, 11), config, 6) == datetime(2024, 3, 11, 6, 0)


@pytest.mark.parametrize("hour,minute", [(24, 0), (10, 60), (-1, 0)])
def test_add_time_rejects_out_of_range_time(hour, minute):
    with pytest.raises(InvalidDate):
        add_time(datetime(2024, 1, 10), PickerConfig(), hour, minute)
