"""The Collatz sequence and the longest chain in a range."""

from __future__ import annotations


def collatz_step(n: int) -> int:
    """One step of the sequence: halve an even number, map an odd one to 3n + 1."""
    if n < 1:
        raise ValueError("n must be positive")
    return n // 2 if n % 2 == 0 else 3 * n + 1


def collatz_length(n: int) -> int:
    """Number of terms from ``n`` down to 1, both included."""
    if n < 1:
        raise ValueError("n must be positive")
    length = 1
    while n != 1:
        n = collatz_step(n)
        length += 1
    return length


def longest_collatz_start(lower: int, upper: int) -> int:
    """Start in ``lower..upper`` with the longest chain; ties go to the larger start."""
    if lower < 1 or upper < lower:
        raise ValueError("need 1 <= lower <= upper")
    known = {1: 1}

    def length(n: int) -> int:
        path = []
        while n not in known:
            path.append(n)
            n = collatz_step(n)
        steps = known[n]
        for value in reversed(path):
            steps += 1
            known[value] = steps
        return steps

    best_start, best_length = upper, 0
    for start in range(upper, lower - 1, -1):
        current = length(start)
        if current > best_length:
            best_start, best_length = start, current
    return best_start