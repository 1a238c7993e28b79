"""Core value types.

This module provides:
    - Period: inclusive range between two instants [start, end]
"""

from __future__ import annotations

from datecalc.core.period import Period, PeriodLike, period_bounds

__all__: list[str] = [
    "Period",
    "PeriodLike",
    "period_bounds",
]
