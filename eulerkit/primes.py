"""Primality, prime sums, factorisation and prime-producing forms."""

from __future__ import annotations

from itertools import chain, count, cycle, permutations


def is_prime(number: int) -> bool:
    """True if ``number`` is prime, by 6k +/- 1 trial division."""
    if number < 2:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False
    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6
    return True


def nth_prime(n: int) -> int:
    """The n-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError("n must be positive")
    primes = (i for i in count(2) if is_prime(i))
    for index, prime in enumerate(primes, start=1):
        if index == n:
            return prime


def prime_sum_below(limit: int) -> int:
    """Sum of all primes below ``limit``."""
    if limit <= 2:
        return 0
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for p in range(2, int(limit**0.5) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return sum(i for i, flag in enumerate(sieve) if flag)


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, with multiplicity (2-3-5 wheel)."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    steps = chain((1, 2, 2), cycle((4, 2, 4, 2, 4, 6, 2, 6)))
    f = 2
    while f * f <= n:
        if n % f == 0:
            factors.append(f)
            n //= f
        else:
            f += next(steps)
    if n > 1:
        factors.append(n)
    return factors


def quadratic_prime_run(a: int, b: int) -> int:
    """Number of consecutive n from 0 for which |n^2 + a n + b| is prime."""
    return next(n for n in count() if not is_prime(abs(n * n + a * n + b)))


def best_quadratic(limit: int) -> tuple[int, int, int]:
    """Coefficients |a|, |b| <= limit giving the longest prime run, as (a, b, run)."""
    best = (0, 0, 0)
    for b in range(-limit, limit + 1):
        if not is_prime(abs(b)):
            continue
        for a in range(-limit, limit + 1):
            run = quadratic_prime_run(a, b)
            if run > best[2]:
                best = (a, b, run)
    return best


def is_pandigital(number: int) -> bool:
    """True if an n-digit ``number`` uses each digit 1..n exactly once."""
    if number <= 0:
        return False
    digits = str(number)
    return sorted(digits) == [str(d) for d in range(1, len(digits) + 1)]


def largest_pandigital_prime() -> int:
    """Largest n-digit pandigital number that is prime."""
    for length in range(9, 0, -1):
        # A digit sum divisible by 3 makes every arrangement divisible by 3.
        if length > 1 and sum(range(1, length + 1)) % 3 == 0:
            continue
        digits = "".join(str(d) for d in range(length, 0, -1))
        for arrangement in permutations(digits):
            candidate = int("".join(arrangement))
            if is_prime(candidate):
                return candidate
    raise LookupError("no pandigital prime exists")