"""Two-digit fractions that survive cancelling a shared digit."""

from __future__ import annotations

from fractions import Fraction
from itertools import product


def is_curious_fraction(a: int, b: int, c: int, d: int) -> bool:
    """True if ab/cd is at most 1, shares digit b == c, and equals a/d after cancelling it."""
    if any(not 1 <= digit <= 9 for digit in (a, b, c, d)):
        raise ValueError("digits must lie between 1 and 9")
    numerator = 10 * a + b
    denominator = 10 * c + d
    if numerator > denominator or b != c or b == d:
        return False
    return Fraction(numerator, denominator) == Fraction(a, d)


def curious_fractions() -> list[tuple[int, int]]:
    """All curious fractions as (numerator, denominator) pairs, in ascending order."""
    return [
        (10 * a + b, 10 * c + d)
        for a, b, c, d in product(range(1, 10), repeat=4)
        if is_curious_fraction(a, b, c, d)
    ]