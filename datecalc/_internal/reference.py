"""Reference-zone coercion for instant-like inputs.

Every calculation reads all of its calendar and clock fields from one
zone. This module turns the accepted inputs (datetime, date, or a date
string) into an aware datetime in that zone.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from typing import Union

from datecalc._internal.constants import DEFAULT_TZ
from datecalc.errors import ParseError
from datecalc.parse.instant import parse_instant

InstantLike = Union[datetime, date, str]


def resolve_tz(tz: tzinfo | None) -> tzinfo:
    """Return tz, or the package default reference zone for None."""
    return tz if tz is not None else DEFAULT_TZ


def to_reference(value: InstantLike, tz: tzinfo | None = None) -> datetime:
    """Coerce an instant-like value into an aware datetime in the reference zone.

    Args:
        value: A datetime (aware or naive), a date (taken at midnight), or a
            date string in a recognized format.
        tz: Reference zone. Defaults to UTC.

    Returns:
        An aware datetime in the reference zone.

    Raises:
        ParseError: If value is a string in no recognized format, or an
            aware datetime that falls outside the supported range once
            converted to the reference zone.
        TypeError: If value is none of the accepted types.
    """
    reference = resolve_tz(tz)

    if isinstance(value, str):
        return parse_instant(value, tz=reference)
    # datetime is a subclass of date, so it must be checked first
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return value.replace(tzinfo=reference)
        try:
            return value.astimezone(reference)
        except OverflowError as e:
            raise ParseError(
                f"{value.isoformat()} is out of range in the reference zone"
            ) from e
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=reference)

    raise TypeError(
        f"expected datetime, date, or str, got {type(value).__name__}"
    )


__all__ = ["InstantLike", "resolve_tz", "to_reference"]
