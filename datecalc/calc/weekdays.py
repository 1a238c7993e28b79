"""Weekday-driven calculations.

Functions:
    get_day_name: English weekday name of an instant.
    get_next_weekday: First instant strictly after the input on a weekday.
    get_next_friday: get_next_weekday for Friday.
    get_next_friday_the_13th: First Friday the 13th strictly after the input.
    get_count_weekends_in_month: Saturdays plus Sundays in a month.
    get_week_number_by_date: Week of the year, week 1 starting on January 1.

The forward scans step one calendar day at a time in the reference zone,
keeping the time of day, and give up with ScanLimitError after a fixed
number of steps.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, tzinfo
from typing import Callable

from datecalc._internal.calendar import iter_month, normalize_month
from datecalc._internal.constants import (
    MAX_FRIDAY_13TH_SCAN_DAYS,
    MAX_WEEKDAY_SCAN_DAYS,
)
from datecalc._internal.decorators import parse_failure_returns
from datecalc._internal.reference import InstantLike, to_reference
from datecalc.errors import ScanLimitError
from datecalc.units.weekday import Weekday

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def _scan_forward(
    start: datetime,
    predicate: Callable[[datetime], bool],
    limit: int,
    target: str,
) -> datetime:
    """Step one day at a time after start until predicate holds.

    Raises:
        ScanLimitError: If predicate does not hold within limit steps.
    """
    current = start
    for _ in range(limit):
        current = current + _ONE_DAY
        if predicate(current):
            return current
    logger.error("no %s within %d days after %s", target, limit, start.isoformat())
    raise ScanLimitError(f"no {target} within {limit} days after {start.isoformat()}")


@parse_failure_returns(None)
def get_day_name(date: InstantLike, *, tz: tzinfo | None = None) -> str:
    """Return the weekday name of an instant.

    Args:
        date: The instant, e.g. '03 Dec 1995 00:12:00 UTC'.
        tz: Reference zone. Defaults to UTC; pass
            datetime.now().astimezone().tzinfo for the host's local zone.

    Returns:
        'Sunday' through 'Saturday', or None if date cannot be parsed.

    Examples:
        >>> get_day_name("2024-01-30T00:00:00.000Z")
        'Tuesday'
    """
    return Weekday.from_date(to_reference(date, tz)).title


@parse_failure_returns(None)
def get_next_weekday(
    date: InstantLike,
    weekday: Weekday,
    *,
    tz: tzinfo | None = None,
) -> datetime:
    """Return the first instant strictly after date that falls on weekday.

    An input already on that weekday advances a full week.

    Args:
        date: The starting instant.
        weekday: The weekday to land on.
        tz: Reference zone. Defaults to UTC.

    Returns:
        An aware datetime with the same time of day, or None if date
        cannot be parsed.
    """
    weekday = Weekday(weekday)
    return _scan_forward(
        to_reference(date, tz),
        lambda d: Weekday.from_date(d) == weekday,
        MAX_WEEKDAY_SCAN_DAYS,
        weekday.title,
    )


def get_next_friday(date: InstantLike, *, tz: tzinfo | None = None) -> datetime:
    """Return the next Friday strictly after date.

    Examples:
        >>> get_next_friday("2024-02-03T00:00:00Z").day
        9
        >>> get_next_friday("2024-02-16T00:00:00Z").day  # a Friday
        23
    """
    return get_next_weekday(date, Weekday.FRIDAY, tz=tz)


@parse_failure_returns(None)
def get_next_friday_the_13th(date: InstantLike, *, tz: tzinfo | None = None) -> datetime:
    """Return the next Friday the 13th strictly after date.

    Args:
        date: The starting instant.
        tz: Reference zone. Defaults to UTC.

    Returns:
        An aware datetime with the same time of day, or None if date
        cannot be parsed.

    Examples:
        >>> from datetime import datetime
        >>> get_next_friday_the_13th(datetime(2023, 2, 1)).date()
        datetime.date(2023, 10, 13)
    """
    return _scan_forward(
        to_reference(date, tz),
        lambda d: d.day == 13 and Weekday.from_date(d) == Weekday.FRIDAY,
        MAX_FRIDAY_13TH_SCAN_DAYS,
        "Friday the 13th",
    )


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Return the number of Saturdays and Sundays in a month.

    Weekdays of calendar dates do not depend on a zone. Out-of-range months
    roll over into the neighbouring years.

    Examples:
        >>> get_count_weekends_in_month(5, 2022)
        9
        >>> get_count_weekends_in_month(12, 2023)
        10
    """
    month, year = normalize_month(month, year)
    return sum(1 for day in iter_month(year, month) if Weekday.from_date(day).is_weekend)


@parse_failure_returns(math.nan)
def get_week_number_by_date(date: InstantLike, *, tz: tzinfo | None = None) -> int:
    """Return the week of the year, counting from 1.

    Week 1 starts on January 1 whatever its weekday; every Monday after
    January 1 starts a new week. This is not ISO 8601 week numbering.

    Args:
        date: The instant.
        tz: Reference zone. Defaults to UTC.

    Returns:
        The week number, or math.nan if date cannot be parsed.

    Examples:
        >>> from datetime import datetime
        >>> get_week_number_by_date(datetime(2024, 1, 31))
        5
        >>> get_week_number_by_date(datetime(2024, 2, 23))
        8
    """
    day = to_reference(date, tz).date()
    jan_1 = day.replace(month=1, day=1)
    # Mondays in (jan_1, day]; weekday() counts Monday as 0
    return ((day - jan_1).days + jan_1.weekday()) // 7 + 1


__all__ = [
    "get_day_name",
    "get_next_weekday",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
]
