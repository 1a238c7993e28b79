"""Date string parsing.

This module provides the explicit parser used by every calculation that
accepts a date string:
    - parse_instant: recognized instant formats to an aware datetime
    - parse_day_month_year: DD-MM-YYYY to a calendar date
    - format_day_month_year: calendar date to DD-MM-YYYY

Examples:
    >>> from datecalc.parse import parse_instant
    >>> parse_instant("2024-02-01T15:00:00.000Z").hour
    15
"""

from __future__ import annotations

from datecalc.parse.instant import (
    format_day_month_year,
    parse_day_month_year,
    parse_instant,
)

__all__: list[str] = [
    "parse_instant",
    "parse_day_month_year",
    "format_day_month_year",
]
