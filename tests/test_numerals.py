import pytest

from calendar_picker.api.numerals import NUMERAL_SYSTEMS, format_number, replace_digits


@pytest.mark.parametrize(
    "numerals,expected",
    [
        ("latn", "2024"),
        ("arab", "٢٠٢٤"),
        ("arabext", "۲۰۲۴"),
        ("deva", "२०२४"),
        ("thai", "๒๐๒๔"),
        ("hanidec", "二〇二四"),
    ],
)
def test_format_number(numerals, expected):
    assert format_number(2024, numerals) == expected


def test_every_system_has_ten_distinct_digits():
    for glyphs in NUMERAL_SYSTEMS.values():
        assert len(glyphs) == 10
        assert len(set(glyphs)) == 10


def test_replace_digits_leaves_other_characters():
    assert replace_digits("1403/01/09 - Farvardin", "arabext") == "۱۴۰۳/۰۱/۰۹ - Farvardin"


def test_unknown_numerals_raise_value_error():
    with pytest.raises(ValueError):
        format_number(1, "roman")
