"""Instant conversion utilities.

This module provides functions for converting instants to and from Unix
epoch milliseconds.

Examples:
    >>> from datecalc.convert import date_to_timestamp, from_unix_millis
    >>> ts = date_to_timestamp("2024-01-30T00:00:00Z")
    >>> from_unix_millis(ts).day
    30
"""

from __future__ import annotations

from datecalc.convert.epoch import (
    date_to_timestamp,
    from_unix_millis,
    to_unix_millis,
)

__all__ = [
    "date_to_timestamp",
    "to_unix_millis",
    "from_unix_millis",
]
