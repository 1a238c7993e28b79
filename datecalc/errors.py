"""datecalc exception hierarchy.

All datecalc-specific exceptions inherit from DateCalcError. The public
calculation functions never let ParseError escape: they turn it into an
invalid-result sentinel at their boundary.
"""

from __future__ import annotations


class DateCalcError(Exception):
    """Base exception for all datecalc errors."""

    pass


class ParseError(DateCalcError):
    """Failed to parse a date string.

    Raised when a string is not in one of the recognized formats, or when
    its components fall outside the calendar.

    Examples:
        - "not a date"
        - "2024-13-01" (month 13)
        - "31-02-2024" (February 31)
    """

    pass


class ValidationError(DateCalcError):
    """Invalid input values.

    Examples:
        - A Period whose start is after its end
        - A period mapping without a "start" or "end" key
    """

    pass


class ScanLimitError(DateCalcError):
    """A forward day-by-day scan exceeded its step limit.

    The limits are chosen so that any real Gregorian date reaches its
    target well within them.
    """

    pass


__all__ = [
    "DateCalcError",
    "ParseError",
    "ValidationError",
    "ScanLimitError",
]
