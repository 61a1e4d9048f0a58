"""Lexicographic permutations."""

from __future__ import annotations

from collections.abc import Iterable
from math import factorial
from typing import Any


def next_permutation(sequence: Iterable[Any]) -> list[Any]:
    """The lexicographically next arrangement of ``sequence``, as a new list.

    Raises ValueError when the sequence is already in its last arrangement.
    """
    items = list(sequence)
    pivot = next(
        (i - 1 for i in range(len(items) - 1, 0, -1) if items[i - 1] < items[i]),
        None,
    )
    if pivot is None:
        raise ValueError("sequence is already the last permutation")
    successor = next(i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot])
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return items


def nth_permutation(items: Iterable[Any], n: int) -> list[Any]:
    """The n-th (counting from 1) lexicographic permutation of distinct ``items``."""
    pool = sorted(items)
    if any(a == b for a, b in zip(pool, pool[1:])):
        raise ValueError("items must be distinct")
    if not 1 <= n <= factorial(len(pool)):
        raise ValueError("n is outside the number of permutations")
    rank = n - 1
    result = []
    while pool:
        index, rank = divmod(rank, factorial(len(pool) - 1))
        result.append(pool.pop(index))
    return result