"""Recognized date string formats.

Each template pairs a regex with an extractor that pulls calendar and
clock components (and an optional UTC offset) out of a match. The set is
closed: a string matching none of these templates is not a date.

Internal module - use parse_instant() from datecalc.parse instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Pattern

Components = dict[str, "int | timedelta | None"]


@dataclass(frozen=True)
class FormatTemplate:
    """A format template for matching date strings.

    Attributes:
        name: Human-readable name for the format.
        pattern: Compiled regex pattern for matching.
        extractor: Function to extract components from a regex match.
    """

    name: str
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str]], Components]


MONTH_ABBREVIATIONS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Optional weekday prefix of RFC 2822-like strings
WEEKDAY_ABBREVIATIONS = frozenset({"sun", "mon", "tue", "wed", "thu", "fri", "sat"})

# Zone names accepted in RFC 2822-like strings; all mean UTC
UTC_ZONE_NAMES = frozenset({"UTC", "GMT", "UT", "Z"})


def _fraction_to_microseconds(frac: str | None) -> int:
    if not frac:
        return 0
    return int(frac.ljust(6, "0")[:6])


def _offset_from_iso(tz_string: str | None) -> timedelta | None:
    """Turn 'Z', '+05:30' or '-0800' into a timedelta, None if absent."""
    if tz_string is None:
        return None
    if tz_string in ("Z", "z"):
        return timedelta(0)
    sign = -1 if tz_string[0] == "-" else 1
    digits = tz_string[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if minutes > 59:
        raise ValueError(f"offset minutes must be 0-59, got {minutes}")
    return sign * timedelta(hours=hours, minutes=minutes)


# ISO 8601 Date: YYYY-MM-DD
_ISO_DATE_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})$",
    re.ASCII,
)


def _extract_iso_date(match: re.Match[str]) -> Components:
    """Extract components from ISO date match."""
    return {
        "year": int(match.group(1)),
        "month": int(match.group(2)),
        "day": int(match.group(3)),
    }


# ISO 8601 DateTime: YYYY-MM-DDTHH:MM[:SS[.fff]] with optional offset
_ISO_DATETIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?"
    r"([Zz]|[+-]\d{2}:?\d{2})?$",
    re.ASCII,
)


def _extract_iso_datetime(match: re.Match[str]) -> Components:
    """Extract components from ISO datetime match."""
    return {
        "year": int(match.group(1)),
        "month": int(match.group(2)),
        "day": int(match.group(3)),
        "hour": int(match.group(4)),
        "minute": int(match.group(5)),
        "second": int(match.group(6) or 0),
        "microsecond": _fraction_to_microseconds(match.group(7)),
        "offset": _offset_from_iso(match.group(8)),
    }


# RFC 2822-like: [Www, ]DD Mon YYYY HH:MM[:SS] [ZONE]
_RFC2822_PATTERN = re.compile(
    r"^(?:([A-Za-z]{3}),?\s+)?(\d{1,2})\s+([A-Za-z]{3})\s+(\d{4})"
    r"(?:\s+(\d{1,2}):(\d{2})(?::(\d{2}))?)?"
    r"(?:\s+([A-Za-z]{1,3}|[+-]\d{4}))?$",
    re.ASCII,
)


def _extract_rfc2822(match: re.Match[str]) -> Components:
    """Extract components from an RFC 2822-like match.

    Raises:
        ValueError: Unknown weekday, month abbreviation or zone name.
    """
    weekday = match.group(1)
    if weekday is not None and weekday.lower() not in WEEKDAY_ABBREVIATIONS:
        raise ValueError(f"unknown weekday {weekday!r}")

    month = MONTH_ABBREVIATIONS.get(match.group(3).lower())
    if month is None:
        raise ValueError(f"unknown month {match.group(3)!r}")

    zone = match.group(8)
    offset: timedelta | None
    if zone is None:
        offset = None
    elif zone[0] in "+-":
        offset = _offset_from_iso(zone)
    elif zone.upper() in UTC_ZONE_NAMES:
        offset = timedelta(0)
    else:
        raise ValueError(f"unknown zone {zone!r}")

    return {
        "year": int(match.group(4)),
        "month": month,
        "day": int(match.group(2)),
        "hour": int(match.group(5) or 0),
        "minute": int(match.group(6) or 0),
        "second": int(match.group(7) or 0),
        "microsecond": 0,
        "offset": offset,
    }


# Day-first dashed date: DD-MM-YYYY
_DAY_MONTH_YEAR_PATTERN = re.compile(
    r"^(\d{2})-(\d{2})-(\d{4})$",
    re.ASCII,
)


def _extract_day_month_year(match: re.Match[str]) -> Components:
    """Extract components from a DD-MM-YYYY match."""
    return {
        "year": int(match.group(3)),
        "month": int(match.group(2)),
        "day": int(match.group(1)),
    }


# Templates tried by parse_instant, in order
INSTANT_TEMPLATES = [
    FormatTemplate(
        name="iso_datetime",
        pattern=_ISO_DATETIME_PATTERN,
        extractor=_extract_iso_datetime,
    ),
    FormatTemplate(
        name="iso_date",
        pattern=_ISO_DATE_PATTERN,
        extractor=_extract_iso_date,
    ),
    FormatTemplate(
        name="rfc2822",
        pattern=_RFC2822_PATTERN,
        extractor=_extract_rfc2822,
    ),
]

DAY_MONTH_YEAR_TEMPLATE = FormatTemplate(
    name="day_month_year",
    pattern=_DAY_MONTH_YEAR_PATTERN,
    extractor=_extract_day_month_year,
)


__all__ = [
    "Components",
    "FormatTemplate",
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_ABBREVIATIONS",
    "UTC_ZONE_NAMES",
    "INSTANT_TEMPLATES",
    "DAY_MONTH_YEAR_TEMPLATE",
]
