import pytest

from eulerkit.arith import (
    binomial_coefficient,
    consecutive_sum,
    gcd,
    lcm,
    modulus_fib_sum,
    multiples_sum,
    smallest_multiple,
    spiral_diagonal_sum,
    sum_square_difference,
)


@pytest.mark.parametrize("step", [3, 5, 15])
def test_consecutive_sum_scales_with_step(step):
    for k in range(1, 20):
        assert consecutive_sum(step, step * k) == step * consecutive_sum(1, k)


def test_consecutive_sum_ignores_remainder():
    assert consecutive_sum(3, 11) == consecutive_sum(3, 9)


def test_consecutive_sum_increments_by_n():
    for n in range(1, 50):
        assert consecutive_sum(1, n) - consecutive_sum(1, n - 1) == n


def test_consecutive_sum_rejects_bad_step():
    with pytest.raises(ValueError):
        consecutive_sum(0, 10)


def test_multiples_sum_example():
    assert multiples_sum(10) == 23


def test_multiples_sum_steps():
    for n in range(1, 100):
        gained = multiples_sum(n + 1) - multiples_sum(n)
        assert gained == (n if n % 3 == 0 or n % 5 == 0 else 0)


def test_modulus_fib_sum_only_counts_terms_reached():
    assert modulus_fib_sum(2, 33) == modulus_fib_sum(2, 8)
    assert modulus_fib_sum(2, 34) - modulus_fib_sum(2, 33) == 34


def test_modulus_fib_sum_other_modulus():
    assert modulus_fib_sum(3, 21) - modulus_fib_sum(3, 20) == 21


def test_modulus_fib_sum_rejects_bad_modulus():
    with pytest.raises(ValueError):
        modulus_fib_sum(0, 100)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (210, 45, 15),
        (210, 60, 30),
        (210, 153, 3),
        (25326, 2351, 1),
        (998526, 2562, 6),
        (60, 24, 12),
    ],
)
def test_gcd_cases(a, b, expected):
    assert gcd(a, b) == expected


def test_gcd_requires_order():
    with pytest.raises(ValueError):
        gcd(45, 210)


@pytest.mark.parametrize("a, b", [(210, 45), (60, 24), (998526, 2562)])
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b


def test_lcm_requires_order():
    with pytest.raises(ValueError):
        lcm(24, 60)


def test_smallest_multiple_is_minimal():
    result = smallest_multiple(20)
    assert all(result % k == 0 for k in range(1, 21))
    for p in (2, 3, 5, 7, 11, 13, 17, 19):
        smaller = result // p
        assert not all(smaller % k == 0 for k in range(1, 21))


def test_sum_square_difference_increments():
    for n in range(2, 40):
        assert sum_square_difference(n) - sum_square_difference(n - 1) == n**3 - n**2


def test_binomial_coefficient_example():
    assert binomial_coefficient(2) == 6


def test_binomial_coefficient_recurrence():
    for n in range(0, 25):
        assert binomial_coefficient(n + 1) * (n + 1) == binomial_coefficient(n) * 2 * (2 * n + 1)


def test_binomial_coefficient_rejects_negative():
    with pytest.raises(ValueError):
        binomial_coefficient(-1)


def test_spiral_diagonal_sum_example():
    assert spiral_diagonal_sum(5) == 101


def test_spiral_diagonal_sum_adds_four_corners():
    for size in range(3, 51, 2):
        corners = 4 * size * size - 6 * (size - 1)
        assert spiral_diagonal_sum(size) - spiral_diagonal_sum(size - 2) == corners


@pytest.mark.parametrize("size", [0, 4, -3])
def test_spiral_diagonal_sum_rejects_bad_size(size):
    with pytest.raises(ValueError):
        spiral_diagonal_sum(size)