"""Digit substitution for the numeral systems a picker can display."""
from __future__ import annotations

import re
from typing import Dict, Union

__all__ = [
    "DEFAULT_NUMERALS",
    "NUMERAL_SYSTEMS",
    "format_number",
    "get_digit_map",
    "replace_digits",
]

DEFAULT_NUMERALS = "latn"

# Code point of the zero glyph; the nine following code points are 1..9.
_ZERO_CODE_POINTS = {
    "latn": 0x0030,
    "arab": 0x0660,
    "arabext": 0x06F0,
    "deva": 0x0966,
    "beng": 0x09E6,
    "guru": 0x0A66,
    "gujr": 0x0AE6,
    "orya": 0x0B66,
    "tamldec": 0x0BE6,
    "telu": 0x0C66,
    "knda": 0x0CE6,
    "mlym": 0x0D66,
    "thai": 0x0E50,
    "laoo": 0x0ED0,
    "tibt": 0x0F20,
    "mymr": 0x1040,
    "khmr": 0x17E0,
    "mong": 0x1810,
    "fullwide": 0xFF10,
}

NUMERAL_SYSTEMS: Dict[str, str] = {
    key: "".join(chr(zero + offset) for offset in range(10))
    for key, zero in _ZERO_CODE_POINTS.items()
}
NUMERAL_SYSTEMS["hanidec"] = "〇一二三四五六七八九"

_DIGIT_PATTERN = re.compile(r"[0-9]")


def get_digit_map(numerals: str) -> Dict[str, str]:
    try:
        glyphs = NUMERAL_SYSTEMS[numerals]
    except KeyError:
        raise ValueError(
            "numerals must be one of: {}".format(", ".join(sorted(NUMERAL_SYSTEMS)))
        ) from None
    return {str(index): glyph for index, glyph in enumerate(glyphs)}


def replace_digits(text: str, numerals: str = DEFAULT_NUMERALS) -> str:
    """Replace every ASCII digit in ``text`` with the glyph of ``numerals``."""

    digit_map = get_digit_map(numerals)
    return _DIGIT_PATTERN.sub(lambda match: digit_map[match.group(0)], text)


def format_number(value: Union[int, str], numerals: str = DEFAULT_NUMERALS) -> str:
    return replace_digits(str(value), numerals)
