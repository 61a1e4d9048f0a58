import pytest

from eulerkit.divisors import (
    amicable_sum,
    first_triangle_with_factors,
    has_amicable_pair,
    is_abundant,
    is_sum_of_two_abundant,
    non_abundant_sum,
    number_of_factors,
    proper_divisor_sum,
)


def test_number_of_factors_source_cases():
    assert number_of_factors(3) == 2
    assert number_of_factors(28) == 6


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11])
def test_number_of_factors_prime_powers(p):
    for k in range(0, 6):
        assert number_of_factors(p**k) == k + 1


def test_number_of_factors_multiplicative():
    assert number_of_factors(9 * 28) == number_of_factors(9) * number_of_factors(28)


def test_number_of_factors_rejects_zero():
    with pytest.raises(ValueError):
        number_of_factors(0)


def test_first_triangle_with_factors_example():
    assert first_triangle_with_factors(5) == 28


def test_first_triangle_with_factors_is_first():
    result = first_triangle_with_factors(50)
    assert number_of_factors(result) >= 50
    k = 1
    while k * (k + 1) // 2 < result:
        assert number_of_factors(k * (k + 1) // 2) < 50
        k += 1
    assert k * (k + 1) // 2 == result


def test_proper_divisor_sum_source_cases():
    assert proper_divisor_sum(220) == 284
    assert proper_divisor_sum(284) == 220
    assert proper_divisor_sum(12) == 16


@pytest.mark.parametrize("p", [2, 13, 97])
def test_proper_divisor_sum_of_prime(p):
    assert proper_divisor_sum(p) == 1


def test_proper_divisor_sum_of_square_counts_root_once():
    assert proper_divisor_sum(49) == 1 + 7


def test_has_amicable_pair():
    assert has_amicable_pair(220)
    assert has_amicable_pair(284)
    assert not has_amicable_pair(6)
    assert not has_amicable_pair(221)


def test_amicable_sum_small_limit():
    assert amicable_sum(300) == 220 + 284
    assert amicable_sum(283) == 220


def test_is_abundant():
    assert is_abundant(12)
    assert not is_abundant(13)
    assert not is_abundant(28)


def test_is_sum_of_two_abundant():
    assert is_sum_of_two_abundant(24)
    assert not is_sum_of_two_abundant(23)


def test_non_abundant_sum_agrees_with_predicate():
    expected = sum(n for n in range(1, 200) if not is_sum_of_two_abundant(n))
    assert non_abundant_sum(200) == expected


def test_non_abundant_sum_full():
    assert non_abundant_sum(28123) == 4179871