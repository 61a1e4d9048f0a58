import pytest

from eulerkit.cycles import longest_reciprocal_cycle, reciprocal_cycle_length


def _core(d):
    while d % 2 == 0:
        d //= 2
    while d % 5 == 0:
        d //= 5
    return d


_RECURRING = [d for d in range(3, 120) if _core(d) > 1]


def test_one_seventh():
    assert reciprocal_cycle_length(7) == 6


@pytest.mark.parametrize("d", [1, 2, 4, 5, 8, 10, 16, 20, 25, 40, 125, 1000])
def test_terminating_expansions_have_no_cycle(d):
    assert reciprocal_cycle_length(d) == 0


@pytest.mark.parametrize("d", _RECURRING)
def test_cycle_is_order_of_ten(d):
    core = _core(d)
    length = reciprocal_cycle_length(d)
    assert pow(10, length, core) == 1
    assert all(pow(10, k, core) != 1 for k in range(1, length))


@pytest.mark.parametrize("p", [7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 97])
def test_prime_cycle_divides_p_minus_one(p):
    assert (p - 1) % reciprocal_cycle_length(p) == 0


@pytest.mark.parametrize("d", [3, 7, 13, 21])
def test_powers_of_two_and_five_do_not_change_cycle(d):
    assert reciprocal_cycle_length(d * 40) == reciprocal_cycle_length(d)


def test_longest_below_thousand():
    assert longest_reciprocal_cycle(1000) == 983


def test_longest_beats_every_smaller_denominator():
    best = longest_reciprocal_cycle(60)
    best_length = reciprocal_cycle_length(best)
    assert all(reciprocal_cycle_length(d) <= best_length for d in range(1, 60))
    assert all(reciprocal_cycle_length(d) < best_length for d in range(1, best))


def test_invalid_denominator():
    with pytest.raises(ValueError):
        reciprocal_cycle_length(0)


def test_invalid_limit():
    with pytest.raises(ValueError):
        longest_reciprocal_cycle(1)