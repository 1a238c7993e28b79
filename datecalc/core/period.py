"""Period class representing an inclusive range between two instants.

This module provides the Period class: a closed range [start, end] where
both boundaries belong to the period.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta, tzinfo
from typing import Union

from datecalc._internal.constants import MS_PER_DAY
from datecalc._internal.reference import InstantLike, to_reference
from datecalc.errors import ValidationError

_ONE_MS = timedelta(milliseconds=1)


class Period:
    """An inclusive range of instants, closed at both ends [start, end].

    Both boundaries are converted to aware datetimes in the reference zone
    on construction, so strings, dates and datetimes can be mixed.

    Attributes:
        start: Start of the period (inclusive).
        end: End of the period (inclusive).

    Examples:
        >>> p = Period("2024-02-02", "2024-03-02")
        >>> "2024-02-02" in p  # Start is inclusive
        True
        >>> "2024-03-02" in p  # So is the end
        True
        >>> p.count_days()
        30
    """

    __slots__ = ("_start", "_end")

    def __init__(
        self,
        start: InstantLike,
        end: InstantLike,
        *,
        tz: tzinfo | None = None,
    ) -> None:
        """Create a period [start, end].

        Args:
            start: Start of the period (inclusive).
            end: End of the period (inclusive).
            tz: Reference zone. Defaults to UTC.

        Raises:
            ParseError: If a boundary is an unparseable string.
            ValidationError: If end is before start.
        """
        start_dt = to_reference(start, tz)
        end_dt = to_reference(end, tz)
        if end_dt < start_dt:
            raise ValidationError(
                f"end must not be before start: got start={start_dt.isoformat()}, "
                f"end={end_dt.isoformat()}"
            )
        self._start = start_dt
        self._end = end_dt

    @classmethod
    def coerce(cls, value: PeriodLike, *, tz: tzinfo | None = None) -> Period:
        """Return value as a Period.

        Args:
            value: A Period, or a mapping with "start" and "end" keys.
            tz: Reference zone for a mapping's boundaries.

        Raises:
            ValidationError: If a mapping lacks "start" or "end", or end is
                before start.
            ParseError: If a boundary is an unparseable string.
        """
        if isinstance(value, Period):
            return value
        start, end = _mapping_bounds(value)
        return cls(start, end, tz=tz)

    @property
    def start(self) -> datetime:
        """Return the start of the period (inclusive)."""
        return self._start

    @property
    def end(self) -> datetime:
        """Return the end of the period (inclusive)."""
        return self._end

    def contains(self, value: InstantLike, *, tz: tzinfo | None = None) -> bool:
        """Return True if start <= value <= end.

        Args:
            value: The instant to test.
            tz: Reference zone used if value is naive or a string.

        Raises:
            ParseError: If value is an unparseable string.
        """
        instant = to_reference(value, tz if tz is not None else self._start.tzinfo)
        return self._start <= instant <= self._end

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def count_days(self) -> int:
        """Return the number of days touched, counting both boundaries.

        Computed as floor((end - start) / one day) + 1, so a period whose
        boundaries share an instant counts one day.
        """
        elapsed_ms = (self._end - self._start) // _ONE_MS
        return elapsed_ms // MS_PER_DAY + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Period({self._start.isoformat()!r}, {self._end.isoformat()!r})"


PeriodLike = Union[Period, Mapping[str, InstantLike]]


def _mapping_bounds(value: object) -> tuple[InstantLike, InstantLike]:
    if not isinstance(value, Mapping):
        raise TypeError(f"expected Period or mapping, got {type(value).__name__}")
    missing = [key for key in ("start", "end") if key not in value]
    if missing:
        raise ValidationError(f"period is missing {', '.join(missing)}")
    return value["start"], value["end"]


def period_bounds(
    value: PeriodLike, *, tz: tzinfo | None = None
) -> tuple[datetime, datetime]:
    """Return the (start, end) instants of a period, in the given order.

    Unlike Period.coerce, an end before the start is not an error here.

    Raises:
        ValidationError: If a mapping lacks "start" or "end".
        ParseError: If a boundary is an unparseable string.
    """
    if isinstance(value, Period):
        return value.start, value.end
    start, end = _mapping_bounds(value)
    return to_reference(start, tz), to_reference(end, tz)


__all__ = ["Period", "PeriodLike", "period_bounds"]
