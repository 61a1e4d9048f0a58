# eulerkit

A small library of number-theory helpers and solvers for classic
recreational mathematics problems: sums of multiples, primes, divisors,
palindromic products, grid and triangle paths, Collatz chains, big-number
digit sums, lexicographic permutations, calendar counting, reciprocal
cycles, digit powers, curious fractions and Champernowne's constant.

It uses only the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from eulerkit.primes import is_prime, nth_prime
from eulerkit.arith import gcd, smallest_multiple
from eulerkit.palindromes import is_palindrome, largest_palindrome_product
from eulerkit.permutations import next_permutation
from eulerkit.cycles import reciprocal_cycle_length

nth_prime(6)                      # 13
is_prime(97)                      # True
gcd(210, 45)                      # 15
is_palindrome(9009)               # True
largest_palindrome_product(2)     # 9009
next_permutation([0, 1, 2])       # [0, 2, 1]
reciprocal_cycle_length(7)        # 6
```

Functions that take an argument out of range raise `ValueError`; for
example `gcd` expects its first argument not to be smaller than its second,
and `next_permutation` raises when the sequence is already in its last
arrangement.

## Modules

- `eulerkit.arith`: `consecutive_sum`, `multiples_sum`, `modulus_fib_sum`,
  `gcd`, `lcm`, `smallest_multiple`, `sum_square_difference`,
  `binomial_coefficient`, `spiral_diagonal_sum`
- `eulerkit.primes`: `is_prime`, `nth_prime`, `prime_sum_below`,
  `prime_factors`, `quadratic_prime_run`, `best_quadratic`,
  `is_pandigital`, `largest_pandigital_prime`
- `eulerkit.divisors`: `number_of_factors`, `first_triangle_with_factors`,
  `proper_divisor_sum`, `has_amicable_pair`, `amicable_sum`, `is_abundant`,
  `is_sum_of_two_abundant`, `non_abundant_sum`
- `eulerkit.palindromes`: `is_palindrome`, `largest_palindrome_product`
- `eulerkit.grids`: `largest_adjacent_product`, `largest_grid_product`,
  `max_triangle_path`, with the data sets `THOUSAND_DIGITS`, `GRID_20` and
  `TRIANGLE_15`
- `eulerkit.collatz`: `collatz_step`, `collatz_length`,
  `longest_collatz_start`
- `eulerkit.words`: `number_letter_count` (0 to 1000, British English),
  `total_letter_count`
- `eulerkit.bignum`: `sum_numbers`, `digit_sum`, `factorial_digit_sum`,
  `first_fibonacci_with_digits`, with the data set `FIFTY_DIGIT_NUMBERS`
- `eulerkit.permutations`: `next_permutation`, `nth_permutation`
- `eulerkit.dates`: `is_leap_year`, `sundays_on_first` (weekdays 0 =
  Sunday to 6 = Saturday), `count_first_sundays`
- `eulerkit.cycles`: `reciprocal_cycle_length`, `longest_reciprocal_cycle`
- `eulerkit.powers`: `distinct_powers`, `is_digit_power_sum`,
  `digit_power_sums`
- `eulerkit.curious`: `is_curious_fraction`, `curious_fractions`
- `eulerkit.champernowne`: `champernowne_digits` (an endless generator),
  `champernowne_product`

## What it does not do

- There is no command-line tool and no way to solve a problem by its
  number; everything is used by importing the functions above.
- There are no functions for Pythagorean triplets or for counting right
  triangles with a given perimeter.