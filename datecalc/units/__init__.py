"""Calendar units and enumerations.

This module provides:
    - Weekday: day of the week, Sunday=0 through Saturday=6
"""

from __future__ import annotations

from datecalc.units.weekday import Weekday

__all__: list[str] = [
    "Weekday",
]
