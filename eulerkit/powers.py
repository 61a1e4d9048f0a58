"""Distinct powers and numbers equal to the sum of powers of their digits."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations_with_replacement


def distinct_powers(limit: int) -> int:
    """Number of distinct values of a**b for 2 <= a, b <= ``limit``."""
    bases = range(2, limit + 1)
    return len({a**b for a in bases for b in bases})


def is_digit_power_sum(digits: Iterable[int], power: int) -> bool:
    """True if the number spelt by ``digits`` equals the sum of their ``power``-th powers.

    The trivial values 0 and 1 do not count.
    """
    values = list(digits)
    if any(not 0 <= d <= 9 for d in values):
        raise ValueError("digits must lie between 0 and 9")
    number = int("".join(map(str, values))) if values else 0
    return number > 1 and number == sum(d**power for d in values)


def digit_power_sums(power: int, length: int) -> list[int]:
    """All numbers of at most ``length`` digits equal to the sum of ``power``-th powers of their digits."""
    if power < 1:
        raise ValueError("power must be positive")
    if length < 1:
        raise ValueError("length must be positive")
    found = set()
    for combo in combinations_with_replacement(range(10), length):
        total = sum(d**power for d in combo)
        text = str(total)
        if total > 1 and len(text) <= length and sorted(map(int, text.zfill(length))) == list(combo):
            found.add(total)
    return sorted(found)