"""Clock and long-format rendering.

Functions:
    get_time: 24-hour "HH:MM:SS".
    format_date: "M/D/YYYY, h:mm:ss AM|PM".

Every field is read from the instant after conversion to the reference
zone; no field is taken from a different zone than the others.

Examples:
    >>> format_date("2024-02-01T15:00:00.000Z")
    '2/1/2024, 3:00:00 PM'
"""

from __future__ import annotations

from datetime import tzinfo

from datecalc._internal.decorators import parse_failure_returns
from datecalc._internal.reference import InstantLike, to_reference


def _twelve_hour(hour: int) -> tuple[int, str]:
    """Map a 0-23 hour onto the 12-hour clock: 0 -> (12, 'AM'), 12 -> (12, 'PM')."""
    meridiem = "AM" if hour < 12 else "PM"
    return (hour % 12 or 12), meridiem


@parse_failure_returns(None)
def get_time(date: InstantLike, *, tz: tzinfo | None = None) -> str:
    """Return the time of day as zero-padded 24-hour HH:MM:SS.

    Args:
        date: The instant.
        tz: Reference zone. Defaults to UTC; pass
            datetime.now().astimezone().tzinfo for the host's local zone.

    Returns:
        The time string, or None if date is an unparseable string.

    Examples:
        >>> from datetime import datetime
        >>> get_time(datetime(2023, 6, 1, 8, 20, 55))
        '08:20:55'
    """
    dt = to_reference(date, tz)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


@parse_failure_returns(None)
def format_date(date: InstantLike, *, tz: tzinfo | None = None) -> str:
    """Render an instant as 'M/D/YYYY, h:mm:ss AM|PM'.

    Month, day and hour carry no leading zero; minutes and seconds are
    zero-padded. Midnight is 12 AM, noon is 12 PM.

    Args:
        date: The instant.
        tz: Reference zone. Defaults to UTC; pass
            datetime.now().astimezone().tzinfo for the host's local zone.

    Returns:
        The formatted string, or None if date is an unparseable string.

    Examples:
        >>> format_date("1999-01-05T02:20:00.000Z")
        '1/5/1999, 2:20:00 AM'
        >>> format_date("2010-12-15T22:59:00.000Z")
        '12/15/2010, 10:59:00 PM'
    """
    dt = to_reference(date, tz)
    hour, meridiem = _twelve_hour(dt.hour)
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )


__all__ = ["get_time", "format_date"]
