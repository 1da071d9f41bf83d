"""
Higher-order helpers that turn partial (raising) callables into total ones.

    parse = to_try(int)
    parse("42")        # → Success(42)
    parse("x")         # → Failure(ValueError(...))

    to_optional(int)("x")        # → None
    to_either(int)("42")         # → Right(42)

    elapsed = measure(lambda: build_index(docs))   # → datetime.timedelta
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Callable, Optional, TypeVar

from fpcore.either import Either
from fpcore.result import Try

T = TypeVar("T")
R = TypeVar("R")


def to_try(func: Callable[[T], R]) -> Callable[[T], Try[R]]:
    """Lift T → R into T → Try[R]."""
    return Try.catching(func)


def to_either(func: Callable[[T], R]) -> Callable[[T], Either[Exception, R]]:
    """Lift T → R into T → Either[Exception, R]."""
    return Either.catching_function(func)


def to_optional(func: Callable[[T], R]) -> Callable[[T], Optional[R]]:
    """Lift T → R into T → Optional[R]. A raised Exception yields None."""

    def lifted(param: T) -> Optional[R]:
        try:
            return func(param)
        except Exception:
            return None

    return lifted


def to_optional_supplier(supplier: Callable[[], R]) -> Callable[[], Optional[R]]:
    """Same as to_optional for zero-argument suppliers."""

    def lifted() -> Optional[R]:
        try:
            return supplier()
        except Exception:
            return None

    return lifted


def measure(runnable: Callable[[], Any]) -> timedelta:
    """
    Wall-clock duration of one synchronous call, from the monotonic clock.

    Exceptions raised by the runnable propagate; nothing is measured then.
    """
    start = time.monotonic()
    runnable()
    return timedelta(seconds=time.monotonic() - start)
