"""Internal utilities for datecalc.

This module contains private implementation details:
    - Constants and magic numbers
    - Gregorian calendar rules
    - Reference-zone coercion
    - The parse-failure sentinel decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datecalc._internal.decorators import parse_failure_returns
from datecalc._internal.reference import InstantLike, resolve_tz, to_reference

__all__: list[str] = [
    "InstantLike",
    "parse_failure_returns",
    "resolve_tz",
    "to_reference",
]
