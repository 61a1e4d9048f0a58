"""Recurring cycles in the decimal expansion of unit fractions."""

from __future__ import annotations


def reciprocal_cycle_length(d: int) -> int:
    """Length of the recurring cycle of 1/d; 0 when the expansion terminates."""
    if d < 1:
        raise ValueError("d must be positive")
    seen: dict[int, int] = {}
    remainder = 1 % d
    position = 0
    while remainder and remainder not in seen:
        seen[remainder] = position
        remainder = remainder * 10 % d
        position += 1
    return position - seen[remainder] if remainder else 0


def longest_reciprocal_cycle(limit: int) -> int:
    """The d below ``limit`` whose 1/d has the longest cycle; ties go to the smaller d."""
    if limit < 2:
        raise ValueError("limit must be at least 2")
    return max(range(1, limit), key=reciprocal_cycle_length)