"""Letter counts of numbers written out in British English."""

from __future__ import annotations

_SMALL = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def _words(n: int) -> list[str]:
    if n == 1000:
        return ["one", "thousand"]
    hundreds, rest = divmod(n, 100)
    words = []
    if hundreds:
        words += [_SMALL[hundreds], "hundred"]
        if rest:
            words.append("and")
    if rest >= 20:
        tens, ones = divmod(rest, 10)
        words.append(_TENS[tens])
        if ones:
            words.append(_SMALL[ones])
    elif rest:
        words.append(_SMALL[rest])
    return words


def number_letter_count(n: int) -> int:
    """Letters used to write ``n`` (0..1000) in words, without spaces or hyphens.

    Zero counts as nothing, since it only ever appears as a silent trailing digit.
    """
    if not 0 <= n <= 1000:
        raise ValueError("n must be between 0 and 1000")
    return sum(len(word) for word in _words(n))


def total_letter_count() -> int:
    """Letters used to write out every number from 1 to 1000."""
    return sum(number_letter_count(n) for n in range(1, 1001))