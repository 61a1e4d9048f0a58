import pytest

from eulerkit.palindromes import is_palindrome, largest_palindrome_product


@pytest.mark.parametrize(
    ("number", "expected"),
    [(101, True), (123, False), (9009, True), (956459, False)],
)
def test_is_palindrome_source_cases(number, expected):
    assert is_palindrome(number) is expected


@pytest.mark.parametrize("number", [0, 7, 11, 1221, 12321])
def test_palindromes_are_recognised(number):
    assert is_palindrome(number) is True


def test_negative_numbers_are_not_palindromes():
    assert is_palindrome(-121) is False


def test_two_digit_product():
    assert largest_palindrome_product(2) == 9009


def test_three_digit_product_is_palindromic_product_of_three_digit_factors():
    result = largest_palindrome_product(3)
    assert is_palindrome(result)
    factors = [i for i in range(101, 1000) if result % i == 0 and 100 < result // i < 1000]
    assert factors
    assert result > largest_palindrome_product(2)


def test_result_is_palindrome_for_two_digits():
    assert is_palindrome(largest_palindrome_product(2))


def test_invalid_digit_count():
    with pytest.raises(ValueError):
        largest_palindrome_product(0)