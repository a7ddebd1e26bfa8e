from datetime import date

import pytest

from calendar_picker.api.jalali import (
    gregorian_to_jalali,
    is_jalali_leap,
    jalali_month_length,
    jalali_to_gregorian,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(2024, 3, 20), (1403, 1, 1)),
        (date(2023, 3, 21), (1402, 1, 1)),
        (date(2017, 1, 1), (1395, 10, 12)),
        (date(2025, 3, 20), (1403, 12, 30)),
    ],
)
def test_gregorian_to_jalali_known_values(value, expected):
    assert gregorian_to_jalali(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ((1403, 1, 1), date(2024, 3, 20)),
        ((1402, 1, 1), date(2023, 3, 21)),
        ((1395, 10, 12), date(2017, 1, 1)),
    ],
)
def test_jalali_to_gregorian_known_values(value, expected):
    assert jalali_to_gregorian(*value) == expected


@pytest.mark.parametrize(
    "gregorian",
    [
        date(2000, 2, 29),
        date(1991, 8, 6),
        date(2010, 12, 31),
        date(2030, 6, 1),
    ],
)
def test_roundtrip_conversion(gregorian):
    assert jalali_to_gregorian(*gregorian_to_jalali(gregorian)) == gregorian


def test_is_jalali_leap_matches_known_years():
    assert is_jalali_leap(1399)
    assert not is_jalali_leap(1400)
    assert is_jalali_leap(1403)


def test_month_lengths_follow_solar_hijri_rule():
    assert [jalali_month_length(1402, month) for month in range(1, 13)] == (
        [31] * 6 + [30] * 5 + [29]
    )
    assert jalali_month_length(1403, 12) == 30
    with pytest.raises(ValueError):
        jalali_month_length(1403, 13)
