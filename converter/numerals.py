# converter/numerals.py
from __future__ import annotations

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

_SCALES = ("", "thousand", "million", "billion", "trillion", "quadrillion")

# 999 quadrillion ... is the last value the scale table can name
MAX_MAGNITUDE = 1000 ** len(_SCALES)


class NumberOutOfRangeError(ValueError):
    """The number cannot be named with the available scale words."""

    def __init__(self, n: int):
        self.number = n
        super().__init__(f"{n} is out of range: magnitude must be below {MAX_MAGNITUDE}.")


def check_range(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if abs(n) >= MAX_MAGNITUDE:
        raise NumberOutOfRangeError(n)
    return n


def chunk_to_words(n: int) -> str:
    """
    Spell a single group (0-999):
    7   -> 'seven'
    115 -> 'one hundred fifteen'
    340 -> 'three hundred forty'
    """
    words = ""
    if n >= 100:
        words += _ONES[n // 100] + " hundred"
        n %= 100
        if n > 0:
            words += " "

    if n >= 20:
        words += _TENS[n // 10]
        if n % 10:
            words += " " + _ONES[n % 10]
    elif n > 0:
        # 1-19, teens are irregular
        words += _ONES[n]

    return words


def to_words(n: int) -> str:
    """
    Spell an integer in English words, no 'and', no hyphens.
    0       -> 'zero'
    -42     -> 'negative forty two'
    1001    -> 'one thousand one'
    Raises NumberOutOfRangeError for |n| >= 10**18.
    """
    check_range(n)
    if n == 0:
        return "zero"
    if n < 0:
        return "negative " + to_words(-n)

    groups = []
    scale_index = 0
    while n > 0:
        n, chunk = divmod(n, 1000)
        if chunk:
            text = chunk_to_words(chunk)
            if scale_index > 0:
                text = f"{text} {_SCALES[scale_index]}"
            groups.insert(0, text)
        scale_index += 1

    return " ".join(groups)
