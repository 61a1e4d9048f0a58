"""Divisor counts and sums: triangle numbers, amicable and abundant numbers."""

from __future__ import annotations

import itertools
from collections import Counter
from math import isqrt, prod

from eulerkit.primes import prime_factors


def number_of_factors(n: int) -> int:
    """Number of divisors of ``n``, including 1 and ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    return prod(e + 1 for e in Counter(prime_factors(n)).values())


def first_triangle_with_factors(count: int) -> int:
    """First triangle number with at least ``count`` divisors."""
    for k in itertools.count(1):
        triangle = k * (k + 1) // 2
        if number_of_factors(triangle) >= count:
            return triangle


def proper_divisor_sum(n: int) -> int:
    """Sum of the divisors of ``n`` smaller than ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    total = 1
    for i in range(2, isqrt(n) + 1):
        if n % i == 0:
            partner = n // i
            total += i if partner == i else i + partner
    return total


def has_amicable_pair(a: int) -> bool:
    """True if ``a`` is one half of an amicable pair."""
    b = proper_divisor_sum(a)
    return a != b and b >= 1 and proper_divisor_sum(b) == a


def amicable_sum(limit: int) -> int:
    """Sum of all amicable numbers from 2 up to ``limit`` inclusive."""
    return sum(i for i in range(2, limit + 1) if has_amicable_pair(i))


def is_abundant(n: int) -> bool:
    """True if the proper divisors of ``n`` sum to more than ``n``."""
    return proper_divisor_sum(n) > n


def is_sum_of_two_abundant(n: int) -> bool:
    """True if ``n`` can be written as the sum of two abundant numbers."""
    return any(is_abundant(i) and is_abundant(n - i) for i in range(12, n // 2 + 1))


def non_abundant_sum(limit: int) -> int:
    """Sum of the positive integers below ``limit`` that are not a sum of two abundant numbers."""
    if limit <= 1:
        return 0
    divisor_sums = [0] * limit
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit, d):
            divisor_sums[multiple] += d
    abundant = [n for n in range(1, limit) if divisor_sums[n] > n]
    abundant_set = set(abundant)

    def expressible(n: int) -> bool:
        half = n // 2
        return any(
            n - a in abundant_set
            for a in itertools.takewhile(lambda a: a <= half, abundant)
        )

    return sum(n for n in range(1, limit) if not expressible(n))