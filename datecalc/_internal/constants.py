"""Internal constants for datecalc.

These constants define the limits and magic numbers used throughout
the package. This module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime, timezone

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000

# Reference zone used when a caller does not pass tz=. Callers wanting the
# host's local zone pass datetime.now().astimezone().tzinfo
DEFAULT_TZ = timezone.utc

# 1970-01-01T00:00:00Z
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Step caps for forward weekday scans.
# Any weekday recurs within 7 days; a year is the documented cap.
MAX_WEEKDAY_SCAN_DAYS: int = 366
# Longest gap between two Fridays the 13th is 427 days (e.g. 2001-07-13 to
# 2002-09-13), so fourteen 31-day months always suffice.
MAX_FRIDAY_13TH_SCAN_DAYS: int = 14 * 31


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "DEFAULT_TZ",
    "EPOCH",
    "DAYS_IN_MONTH",
    "MAX_WEEKDAY_SCAN_DAYS",
    "MAX_FRIDAY_13TH_SCAN_DAYS",
]
