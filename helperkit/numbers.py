"""Integer, boolean and angle helpers.

Keep this dependency-free: every function here is a pure transformation of a
single scalar value.
"""

from __future__ import annotations

import math

_ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

_TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Index i is the scale word for 1000**i.
_SCALES = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
)

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


# region Words
def _tens_to_words(value: int) -> str:
    if value < 20:
        return _ONES[value]
    tens, units = divmod(value, 10)
    if units == 0:
        return _TENS[tens]
    return f"{_TENS[tens]}-{_ONES[units]}"


def _hundreds_to_words(value: int) -> str:
    hundreds, remainder = divmod(value, 100)
    if hundreds == 0:
        return _tens_to_words(remainder)
    words = f"{_ONES[hundreds]} hundred"
    if remainder:
        words += f" and {_tens_to_words(remainder)}"
    return words


def to_words(value: int) -> str:
    """Render an integer as English words.

    Examples:
    - 999 -> "nine hundred and ninety-nine"
    - -1234 -> "minus one thousand two hundred and thirty-four"
    - 23000000 -> "twenty-three million"
    """
    number = int(value)
    if number == 0:
        return _ONES[0]
    if number < 0:
        return f"minus {to_words(-number)}"

    groups: list[int] = []
    while number:
        number, group = divmod(number, 1000)
        groups.append(group)
    if len(groups) > len(_SCALES):
        raise ValueError(f"value is too large to render as words: {value!r}")

    parts: list[str] = []
    for scale_idx in range(len(groups) - 1, -1, -1):
        group = groups[scale_idx]
        if not group:
            continue
        words = _hundreds_to_words(group)
        scale = _SCALES[scale_idx]
        parts.append(f"{words} {scale}" if scale else words)
    return " ".join(parts)


def ordinal(value: int) -> str:
    """Append the English ordinal suffix: 1 -> '1st', 12 -> '12th', 22 -> '22nd'.

    Zero and negative numbers have no ordinal form and are returned as digits.
    """
    number = int(value)
    if number <= 0:
        return str(number)
    if number % 100 in (11, 12, 13):
        return f"{number}th"
    return f"{number}{_ORDINAL_SUFFIXES.get(number % 10, 'th')}"
# endregion


# region Booleans
def bool_to_int(value: bool) -> int:
    return 1 if value else 0


def toggle(value: bool) -> bool:
    return not value
# endregion


# region Geometry
def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def to_radians(degrees: float) -> float:
    return degrees / 180.0 * math.pi
# endregion
