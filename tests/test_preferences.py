from zoneinfo import ZoneInfo

import pytest

from calendar_picker.api.calendars import CalendarSystem, IslamicCalendar
from calendar_picker.api.preferences import PickerConfig, resolve_config
from calendar_picker.exceptions import UnsupportedCalendarSystem


def test_defaults():
    config = PickerConfig()
    assert config.mode == "single"
    assert config.calendar is CalendarSystem.GREGORIAN
    assert config.numerals == "latn"
    assert config.first_day_of_week == 0
    assert config.tzinfo is None
    assert not config.is_rtl


def test_strategy_is_resolved_once_from_the_calendar_tag():
    config = PickerConfig(calendar="Islamic")
    assert config.calendar is CalendarSystem.ISLAMIC
    assert isinstance(config.strategy, IslamicCalendar)


def test_resolve_config_accepts_camel_case_options():
    config = resolve_config(
        mode="range",
        calendar="jalali",
        locale="FA",
        firstDayOfWeek=6,
        showOutsideDays=True,
        timeZone="Asia/Tehran",
        min=2,
        max=10,
    )
    assert config.mode == "range"
    assert config.first_day_of_week == 6
    assert config.show_outside_days
    assert config.min_days == 2 and config.max_days == 10
    assert config.tzinfo == ZoneInfo("Asia/Tehran")
    context = config.to_context()
    assert context["calendar"] == "jalali"
    assert context["locale"] == "fa"
    assert context["is_rtl"] is True
    assert context["time_zone"] == "Asia/Tehran"


@pytest.mark.parametrize("value", [-1, 7, None, True])
def test_out_of_range_first_day_of_week_falls_back_to_sunday(value):
    assert PickerConfig(first_day_of_week=value).first_day_of_week == 0


def test_unknown_calendar_fails_at_configuration_time():
    with pytest.raises(UnsupportedCalendarSystem):
        PickerConfig(calendar="lunar")


@pytest.mark.parametrize(
    "options",
    [
        {"mode": "week"},
        {"numerals": "roman"},
        {"time_zone": "Mars/Olympus_Mons"},
        {"max_days": -1},
    ],
)
def test_invalid_options_raise_value_error(options):
    with pytest.raises(ValueError):
        PickerConfig(**options)


def test_arabic_locale_is_rtl():
    assert PickerConfig(locale="ar-SA").is_rtl
