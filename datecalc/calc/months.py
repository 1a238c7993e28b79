"""Month, quarter and year calculations.

Functions:
    get_count_days_in_month: Length of a month, 28-31.
    get_quarter: Quarter of the year, 1-4.
    is_leap_year: Gregorian leap-year test on the year of a date.
"""

from __future__ import annotations

import math
from datetime import tzinfo
from typing import Union

from datecalc._internal import calendar
from datecalc._internal.decorators import parse_failure_returns
from datecalc._internal.reference import InstantLike, to_reference


def get_count_days_in_month(month: int, year: int) -> int:
    """Return the number of days in a month.

    Out-of-range months roll over into the neighbouring years, so month 13
    of 2023 is January 2024.

    Args:
        month: The month, 1 for January.
        year: The four-digit year.

    Examples:
        >>> get_count_days_in_month(1, 2024)
        31
        >>> get_count_days_in_month(2, 2024)
        29
    """
    month, year = calendar.normalize_month(month, year)
    return calendar.days_in_month(year, month)


@parse_failure_returns(math.nan)
def get_quarter(date: InstantLike, *, tz: tzinfo | None = None) -> int:
    """Return the quarter of the year (1-4) a date falls in.

    Examples:
        >>> from datetime import datetime
        >>> get_quarter(datetime(2024, 2, 13))
        1
        >>> get_quarter(datetime(2024, 11, 10))
        4
    """
    return (to_reference(date, tz).month - 1) // 3 + 1


@parse_failure_returns(False)
def is_leap_year(date: Union[int, InstantLike], *, tz: tzinfo | None = None) -> bool:
    """Return True if the year of date is a Gregorian leap year.

    Args:
        date: An instant, or a plain year as an int.
        tz: Reference zone. Defaults to UTC.

    Returns:
        True for leap years; False otherwise, including unparseable input.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    if isinstance(date, int):
        year = date
    else:
        year = to_reference(date, tz).year
    return calendar.is_leap_year(year)


__all__ = [
    "get_count_days_in_month",
    "get_quarter",
    "is_leap_year",
]
