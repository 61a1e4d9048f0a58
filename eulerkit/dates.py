"""Counting Sundays that fall on the first of a month."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class YearSundays(NamedTuple):
    """Weekday of 1 January of the following year (0 = Sunday) and the Sundays found."""

    next_day: int
    count: int


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4, and centuries only when divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def sundays_on_first(starting_day: int, year: int) -> YearSundays:
    """Months of ``year`` that begin on a Sunday, given the weekday of 1 January.

    Weekdays run from 0 (Sunday) to 6 (Saturday).
    """
    if not 0 <= starting_day <= 6:
        raise ValueError("starting_day must be between 0 and 6")
    lengths = list(_MONTH_DAYS)
    if is_leap_year(year):
        lengths[1] = 29
    day = starting_day
    found = 0
    for length in lengths:
        if day == 0:
            found += 1
        day = (day + length) % 7
    return YearSundays(day, found)


def count_first_sundays(start_year: int, end_year: int) -> int:
    """Sundays falling on the first of a month from 1 Jan ``start_year`` to 31 Dec ``end_year``."""
    if start_year < 1:
        raise ValueError("start_year must be positive")
    if end_year < start_year:
        raise ValueError("end_year must not precede start_year")
    day = (date(start_year, 1, 1).weekday() + 1) % 7
    total = 0
    for year in range(start_year, end_year + 1):
        day, found = sundays_on_first(day, year)
        total += found
    return total