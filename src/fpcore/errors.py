"""
Library exceptions — raised by terminal operations and stored by combinators.

Everything the library itself raises derives from FunctionalError, and each
concrete error also derives from the closest built-in so callers can keep
catching the standard hierarchy:

    IllegalStateError     → RuntimeError   (get() on a Failure, error() on a Success)
    PredicateFailedError  → LookupError    (Try.filter rejected the value)

Exceptions raised by user callbacks are never wrapped in these types; they
are stored or re-raised as they are.
"""

from __future__ import annotations

from typing import Any


class FunctionalError(Exception):
    """Base class for errors raised by fpcore itself."""


class IllegalStateError(FunctionalError, RuntimeError):
    """
    An accessor was called on the wrong variant.

    When raised by Try.get(), the held exception is attached as __cause__.
    """


class PredicateFailedError(FunctionalError, LookupError):
    """
    A Try.filter predicate rejected the success value.

    >>> err = PredicateFailedError(7)
    >>> err.value
    7
    """

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Predicate does not hold for {value!r}")
