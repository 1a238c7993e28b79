"""Gregorian calendar rules for datecalc.

This module provides the leap-year rule, month lengths, and month
rollover used by the public calculation functions.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from datecalc._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def normalize_month(month: int, year: int) -> tuple[int, int]:
    """Roll an out-of-range month over into the neighbouring years.

    Month 13 of 2023 is January 2024, month 0 of 2024 is December 2023.

    Args:
        month: The month, any integer.
        year: The year the month is counted from.

    Returns:
        Tuple of (month, year) with month in 1-12.
    """
    carry, index = divmod(month - 1, 12)
    return index + 1, year + carry


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def iter_month(year: int, month: int) -> Iterator[date]:
    """Yield every date of the month, first to last."""
    first = date(year, month, 1)
    for offset in range(days_in_month(year, month)):
        yield first + timedelta(days=offset)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, both inclusive.

    Nothing is yielded when end is before start.
    """
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


__all__ = [
    "is_leap_year",
    "normalize_month",
    "days_in_month",
    "iter_month",
    "iter_days",
]
