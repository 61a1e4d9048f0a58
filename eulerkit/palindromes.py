"""Palindromic numbers and palindromic products."""

from __future__ import annotations


def is_palindrome(n: int) -> bool:
    """True if the decimal digits of ``n`` read the same in both directions."""
    if n < 0:
        return False
    text = str(n)
    return text == text[::-1]


def largest_palindrome_product(digits: int) -> int:
    """Largest palindrome that is a product of two distinct ``digits``-digit factors.

    Both factors lie strictly above ``10 ** (digits - 1)`` and below ``10 ** digits``.
    Returns 0 when no such product is a palindrome.
    """
    if digits < 1:
        raise ValueError("digits must be positive")
    upper = 10**digits - 1
    lower = 10 ** (digits - 1)
    best = 0
    for i in range(upper, lower, -1):
        if i * upper <= best:
            break
        for j in range(upper, i, -1):
            product = i * j
            if product <= best:
                break
            if is_palindrome(product):
                best = product
                break
    return best