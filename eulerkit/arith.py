"""Closed forms and small recurrences over the integers."""

from __future__ import annotations

import math
from itertools import count


def consecutive_sum(step: int, maximum: int) -> int:
    """Sum of the multiples of ``step`` from ``step`` up to ``maximum`` inclusive."""
    if step < 1:
        raise ValueError("step must be positive")
    terms = max(maximum, 0) // step
    return step * (terms * terms + terms) // 2


def multiples_sum(limit: int) -> int:
    """Sum of the natural numbers below ``limit`` that are multiples of 3 or 5."""
    top = limit - 1
    return consecutive_sum(3, top) + consecutive_sum(5, top) - consecutive_sum(15, top)


def _fibonacci_terms():
    a, b = 1, 2
    while True:
        yield a
        a, b = b, a + b


def modulus_fib_sum(modulus: int, maximum: int) -> int:
    """Sum of the Fibonacci terms (1, 2, 3, 5, ...) not above ``maximum`` that ``modulus`` divides."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    total = 0
    for term in _fibonacci_terms():
        if term > maximum:
            return total
        if term % modulus == 0:
            total += term


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; ``a`` must not be smaller than ``b``."""
    if b < 1:
        raise ValueError("b must be positive")
    if b > a:
        raise ValueError("a must not be smaller than b")
    while a % b:
        a, b = b, a % b
    return b


def lcm(a: int, b: int) -> int:
    """Lowest common multiple; ``a`` must not be smaller than ``b``."""
    if b > a:
        raise ValueError("a must not be smaller than b")
    return a * b // gcd(a, b)


def smallest_multiple(limit: int) -> int:
    """Smallest positive number evenly divisible by every integer from 1 to ``limit``."""
    if limit < 1:
        raise ValueError("limit must be positive")
    current = limit
    for k in range(limit - 1, 0, -1):
        current = lcm(current, k)
    return current


def sum_square_difference(n: int) -> int:
    """Square of the sum of 1..n minus the sum of the squares of 1..n."""
    square_of_sum = consecutive_sum(1, n) ** 2
    sum_of_squares = sum(i * i for i in range(1, n + 1))
    return square_of_sum - sum_of_squares


def binomial_coefficient(n: int) -> int:
    """Number of lattice routes through an n by n grid: (2n)! / (n! n!)."""
    if n < 0:
        raise ValueError("n must not be negative")
    return math.comb(2 * n, n)


def spiral_diagonal_sum(size: int) -> int:
    """Sum of both diagonals of a clockwise number spiral of side ``size``."""
    if size < 1 or size % 2 == 0:
        raise ValueError("size must be a positive odd number")
    total = 1
    corner = 1
    last = size * size
    for gap in count(2, 2):
        if corner >= last:
            return total
        for _ in range(4):
            corner += gap
            total += corner