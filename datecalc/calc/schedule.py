"""Work schedule generation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from datecalc._internal.calendar import iter_days
from datecalc.errors import ParseError, ValidationError
from datecalc.parse.instant import format_day_month_year, parse_day_month_year

logger = logging.getLogger(__name__)


def get_work_schedule(
    period: Mapping[str, str],
    count_work_days: int,
    count_off_days: int,
) -> list[str]:
    """List the working days of a repeating work/off cycle within a period.

    The cycle starts on the period's first day: count_work_days working
    days, then count_off_days days off, repeated. Both period boundaries
    are included.

    Args:
        period: Mapping with "start" and "end" as DD-MM-YYYY strings.
        count_work_days: Consecutive working days per cycle.
        count_off_days: Consecutive days off per cycle. Negative counts as 0.

    Returns:
        Working days as DD-MM-YYYY strings in chronological order. Empty
        when count_work_days is not positive, the period ends before it
        starts, or a boundary cannot be parsed.

    Raises:
        ValidationError: If period lacks "start" or "end".

    Examples:
        >>> get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
        ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']
    """
    missing = [key for key in ("start", "end") if key not in period]
    if missing:
        raise ValidationError(f"period is missing {', '.join(missing)}")

    try:
        start = parse_day_month_year(period["start"])
        end = parse_day_month_year(period["end"])
    except ParseError as e:
        logger.debug("get_work_schedule: unparseable period, returning []: %s", e)
        return []

    if count_work_days <= 0:
        return []

    cycle = count_work_days + max(count_off_days, 0)
    return [
        format_day_month_year(day)
        for offset, day in enumerate(iter_days(start, end))
        if offset % cycle < count_work_days
    ]


__all__ = ["get_work_schedule"]
