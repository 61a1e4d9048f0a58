"""Number-theory helpers for recreational mathematics: primes, divisors, digits, sequences and more."""

__version__ = "0.1.0"