"""Explicit date string parsing.

This module turns date strings into datetimes. Only the formats listed
below are recognized; anything else raises ParseError instead of being
guessed at.

Instants:
    - YYYY-MM-DD
    - YYYY-MM-DDTHH:MM[:SS[.fff]] with optional Z or +HH:MM / -HH:MM
    - [Www, ]DD Mon YYYY [HH:MM[:SS]] [UTC|GMT|UT|Z|+HHMM|-HHMM]

Calendar dates:
    - DD-MM-YYYY

Strings without a zone are wall-clock readings in the reference zone.

Examples:
    >>> parse_instant("04 Dec 1995 00:12:00 UTC")
    datetime.datetime(1995, 12, 4, 0, 12, tzinfo=datetime.timezone.utc)

    >>> parse_day_month_year("15-01-2024")
    datetime.date(2024, 1, 15)
"""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo

from datecalc._internal.constants import DEFAULT_TZ
from datecalc.errors import ParseError
from datecalc.parse._formats import (
    DAY_MONTH_YEAR_TEMPLATE,
    INSTANT_TEMPLATES,
    Components,
)


def _match_components(text: str) -> tuple[str, Components]:
    """Run text through the instant templates, first match wins."""
    for template in INSTANT_TEMPLATES:
        match = template.pattern.match(text)
        if match is None:
            continue
        try:
            return template.name, template.extractor(match)
        except ValueError as e:
            raise ParseError(f"invalid {template.name} string {text!r}: {e}") from e
    raise ParseError(
        f"unrecognized date format: {text!r}. "
        "Expected YYYY-MM-DD, YYYY-MM-DDTHH:MM:SS[Z|+HH:MM] "
        "or DD Mon YYYY HH:MM:SS ZONE"
    )


def parse_instant(text: str, *, tz: tzinfo | None = None) -> datetime:
    """Parse a date string into an aware datetime in the reference zone.

    Args:
        text: The string to parse.
        tz: Reference zone. Defaults to UTC.

    Returns:
        An aware datetime expressed in the reference zone.

    Raises:
        ParseError: If the string is not in a recognized format, or its
            components are outside the calendar.

    Examples:
        >>> parse_instant("2024-01-30T00:00:00.000Z")
        datetime.datetime(2024, 1, 30, 0, 0, tzinfo=datetime.timezone.utc)

        >>> parse_instant("01 Jan 1970 00:00:00 UTC").year
        1970
    """
    if not isinstance(text, str):
        raise ParseError(f"expected a date string, got {type(text).__name__}")

    text = text.strip()
    if not text:
        raise ParseError("empty string")

    reference = tz if tz is not None else DEFAULT_TZ
    name, components = _match_components(text)
    offset = components.pop("offset", None)

    try:
        if offset is None:
            return datetime(tzinfo=reference, **components)  # type: ignore[arg-type]
        parsed = datetime(tzinfo=timezone(offset), **components)  # type: ignore[arg-type]
        return parsed.astimezone(reference)
    except (ValueError, OverflowError) as e:
        raise ParseError(f"invalid {name} string {text!r}: {e}") from e


def parse_day_month_year(text: str) -> date:
    """Parse a DD-MM-YYYY string into a calendar date.

    Args:
        text: The string to parse, e.g. "01-02-2024" for February 1st.

    Returns:
        The calendar date.

    Raises:
        ParseError: If the string is not DD-MM-YYYY or names no real day.
    """
    if not isinstance(text, str):
        raise ParseError(f"expected a date string, got {type(text).__name__}")

    match = DAY_MONTH_YEAR_TEMPLATE.pattern.match(text.strip())
    if match is None:
        raise ParseError(f"expected DD-MM-YYYY, got {text!r}")

    try:
        return date(**DAY_MONTH_YEAR_TEMPLATE.extractor(match))  # type: ignore[arg-type]
    except ValueError as e:
        raise ParseError(f"invalid date {text!r}: {e}") from e


def format_day_month_year(value: date) -> str:
    """Format a calendar date as DD-MM-YYYY.

    Examples:
        >>> format_day_month_year(date(2024, 1, 5))
        '05-01-2024'
    """
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


__all__ = ["parse_instant", "parse_day_month_year", "format_day_month_year"]
