"""Weekday enumeration.

This module provides the Weekday enum with Sunday-first numbering
(Sunday=0 ... Saturday=6), as used by the day-name lookup and the
weekday scans.
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered Sunday=0 through Saturday=6.

    Python's own date.weekday() counts Monday=0; use from_date() to convert.

    Examples:
        >>> Weekday.THURSDAY.title
        'Thursday'

        >>> Weekday.from_date(date(1970, 1, 1))
        <Weekday.THURSDAY: 4>

        >>> Weekday.SATURDAY.is_weekend
        True
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, value: date) -> Weekday:
        """Return the weekday of a date or datetime, as read from its fields."""
        return cls((value.weekday() + 1) % 7)

    @property
    def title(self) -> str:
        """Return the English day name, e.g. 'Sunday'."""
        return self.name.capitalize()

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


__all__ = ["Weekday"]
