"""Digits of Champernowne's constant 0.123456789101112..."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count, takewhile
from math import prod


def champernowne_digits() -> Iterator[int]:
    """Endless stream of the fractional digits: 1, 2, ..., 9, 1, 0, 1, 1, ..."""
    for number in count(1):
        yield from map(int, str(number))


def _digit_at(position: int) -> int:
    width, block_start, block_size = 1, 1, 9
    while position > width * block_size:
        position -= width * block_size
        width += 1
        block_start *= 10
        block_size *= 10
    number = block_start + (position - 1) // width
    return int(str(number)[(position - 1) % width])


def champernowne_product(limit: int) -> int:
    """Product of the digits at positions 1, 10, 100, ... not beyond ``limit``."""
    if limit < 1:
        raise ValueError("limit must be positive")
    positions = takewhile(lambda p: p <= limit, (10**k for k in count()))
    return prod(_digit_at(p) for p in positions)