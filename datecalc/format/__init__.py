"""Instant rendering.

This module provides string renderings of instants:
    - get_time: 24-hour clock time, HH:MM:SS
    - format_date: M/D/YYYY, h:mm:ss AM|PM
"""

from __future__ import annotations

from datecalc.format.clock import format_date, get_time

__all__: list[str] = [
    "get_time",
    "format_date",
]
