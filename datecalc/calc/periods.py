"""Period calculations.

Functions:
    get_count_days_on_period: Days between two instants, both ends counted.
    is_date_in_period: Inclusive containment test.
"""

from __future__ import annotations

import math
from datetime import tzinfo

from datecalc._internal.constants import MS_PER_DAY
from datecalc._internal.decorators import parse_failure_returns
from datecalc._internal.reference import InstantLike, to_reference
from datecalc.convert.epoch import to_unix_millis
from datecalc.core.period import PeriodLike, period_bounds


@parse_failure_returns(math.nan)
def get_count_days_on_period(
    date_start: InstantLike,
    date_end: InstantLike,
    *,
    tz: tzinfo | None = None,
) -> int:
    """Return the number of days from start to end, counting both.

    Computed as floor((end - start) / 86_400_000 ms) + 1. Exact when both
    boundaries sit on midnight.

    Args:
        date_start: Start of the period.
        date_end: End of the period.
        tz: Reference zone for values without a zone. Defaults to UTC.

    Returns:
        The day count, or math.nan if a boundary cannot be parsed.

    Examples:
        >>> get_count_days_on_period("2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z")
        12
    """
    elapsed = to_unix_millis(date_end, tz=tz) - to_unix_millis(date_start, tz=tz)
    return elapsed // MS_PER_DAY + 1


@parse_failure_returns(False)
def is_date_in_period(
    date: InstantLike,
    period: PeriodLike,
    *,
    tz: tzinfo | None = None,
) -> bool:
    """Return True if start <= date <= end.

    Args:
        date: The instant to test.
        period: A Period, or a mapping with "start" and "end" keys.
        tz: Reference zone for values without a zone. Defaults to UTC.

    Returns:
        True if date lies in the period, boundaries included. False also
        when a value cannot be parsed, and for a period whose end is
        before its start.

    Raises:
        ValidationError: If the period mapping lacks a boundary.

    Examples:
        >>> is_date_in_period("2024-02-01", {"start": "2024-02-02", "end": "2024-03-02"})
        False
        >>> is_date_in_period("2024-02-02", {"start": "2024-02-02", "end": "2024-03-02"})
        True
    """
    start, end = period_bounds(period, tz=tz)
    instant = to_reference(date, tz if tz is not None else start.tzinfo)
    return start <= instant <= end


__all__ = [
    "get_count_days_on_period",
    "is_date_in_period",
]
