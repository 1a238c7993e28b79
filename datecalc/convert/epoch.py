"""Epoch-millisecond conversion.

This module converts between instants and Unix timestamps in
milliseconds. The Unix epoch is 1970-01-01 00:00:00 UTC.

Functions:
    to_unix_millis: Convert an instant to Unix milliseconds.
    from_unix_millis: Create an aware datetime from Unix milliseconds.
    date_to_timestamp: Parse a date string to Unix milliseconds, NaN if invalid.

Examples:
    >>> date_to_timestamp("04 Dec 1995 00:12:00 UTC")
    818035920000

    >>> from_unix_millis(0).year
    1970
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, tzinfo

from datecalc._internal.constants import EPOCH
from datecalc._internal.decorators import parse_failure_returns
from datecalc._internal.reference import InstantLike, resolve_tz, to_reference

_ONE_MS = timedelta(milliseconds=1)


def to_unix_millis(value: InstantLike, *, tz: tzinfo | None = None) -> int:
    """Convert an instant to Unix timestamp in milliseconds.

    Sub-millisecond precision is floored.

    Args:
        value: The instant. Naive values are read in the reference zone.
        tz: Reference zone. Defaults to UTC.

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC.

    Raises:
        ParseError: If value is an unparseable string.
    """
    return (to_reference(value, tz) - EPOCH) // _ONE_MS


def from_unix_millis(millis: int, *, tz: tzinfo | None = None) -> datetime:
    """Create an aware datetime from Unix milliseconds.

    Args:
        millis: Milliseconds since 1970-01-01 00:00:00 UTC.
        tz: Zone of the result. Defaults to UTC.

    Examples:
        >>> from_unix_millis(818035920000).isoformat()
        '1995-12-04T00:12:00+00:00'
    """
    return (EPOCH + timedelta(milliseconds=millis)).astimezone(resolve_tz(tz))


@parse_failure_returns(math.nan)
def date_to_timestamp(date: InstantLike, *, tz: tzinfo | None = None) -> int:
    """Return the milliseconds elapsed from the epoch to the given date.

    Args:
        date: A date string in a recognized format, or an instant.
        tz: Reference zone for strings without a zone. Defaults to UTC.

    Returns:
        Unix milliseconds, or math.nan if the string cannot be parsed.

    Examples:
        >>> date_to_timestamp("01 Jan 1970 00:00:00 UTC")
        0
        >>> import math
        >>> math.isnan(date_to_timestamp("tomorrow-ish"))
        True
    """
    return to_unix_millis(date, tz=tz)


__all__ = [
    "to_unix_millis",
    "from_unix_millis",
    "date_to_timestamp",
]
