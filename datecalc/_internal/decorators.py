"""Custom decorators for datecalc.

This module provides decorator utilities for the package:
    - @parse_failure_returns(sentinel): turn a ParseError raised inside the
      wrapped function into an invalid-result sentinel

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, ParamSpec, TypeVar

from datecalc.errors import ParseError

P = ParamSpec("P")
T = TypeVar("T")
S = TypeVar("S")

logger = logging.getLogger(__name__)


def parse_failure_returns(
    sentinel: S,
) -> Callable[[Callable[P, T]], Callable[P, T | S]]:
    """Return sentinel instead of raising when the input cannot be parsed.

    Only ParseError is caught; any other exception propagates. The failure
    is logged at DEBUG with the wrapped function's name.

    Args:
        sentinel: The value to return for unparseable input.

    Returns:
        A decorator function.

    Examples:
        >>> from datecalc.parse import parse_instant
        >>> @parse_failure_returns(None)
        ... def weekday_of(text: str) -> int:
        ...     return parse_instant(text).weekday()

        >>> weekday_of("not a date") is None
        True
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T | S]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T | S:
            try:
                return func(*args, **kwargs)
            except ParseError as e:
                logger.debug("%s: unparseable input, returning %r: %s", func.__name__, sentinel, e)
                return sentinel

        wrapper._invalid_result = sentinel  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = ["parse_failure_returns"]
