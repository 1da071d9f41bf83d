"""
Retry — run a raising supplier until it succeeds, then hand back a Try.

    connection = (
        Retry.of(lambda: connect(dsn))
        .max_tries(5)
        .delay(timedelta(milliseconds=200))
        .retry_on(ConnectionError, TimeoutError)
        .with_error_handler(lambda n, max_n, e: print(f"try {n}/{max_n} failed: {e}"))
        .retry()
    )   # → Try[Connection]

Attempts run synchronously on the caller's thread with a fixed pause
between them (tenacity does the looping and sleeping). When every attempt
fails, the Try holds the last exception. An exception whose type is not in
retry_on() ends the loop immediately.

Defaults (10 tries, 1 second) come from FpcoreSettings.retry.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Generic, Optional, Protocol, TypeVar

import structlog
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_never,
    wait_fixed,
)

from fpcore.config import get_settings
from fpcore.result import Try

T = TypeVar("T")

log = structlog.get_logger()


class ErrorHandler(Protocol):
    """Called after every failed attempt, including the last one."""

    def __call__(self, current_try: int, max_tries: int, exception: BaseException) -> object:
        ...


class Retry:
    """Entry point: Retry.of(supplier) returns a RetryBuilder."""

    @staticmethod
    def of(supplier: Callable[[], T]) -> RetryBuilder[T]:
        """Build a retry for a supplier (or a runnable; its result is then None)."""
        return RetryBuilder(supplier)


class RetryBuilder(Generic[T]):
    """Fluent retry configuration. retry() runs the attempts."""

    def __init__(self, supplier: Callable[[], T]) -> None:
        defaults = get_settings().retry
        self._supplier = supplier
        self._max_tries = defaults.max_tries
        self._delay = defaults.delay_seconds
        self._retry_on: tuple[type[BaseException], ...] = (Exception,)
        self._error_handler: Optional[ErrorHandler] = None

    def max_tries(self, max_tries: int) -> RetryBuilder[T]:
        """Maximum number of attempts. Zero or negative means forever."""
        self._max_tries = max_tries
        return self

    def forever(self) -> RetryBuilder[T]:
        self._max_tries = 0
        return self

    def delay(self, delay: float | timedelta) -> RetryBuilder[T]:
        """Pause between attempts, in seconds or as a timedelta."""
        seconds = delay.total_seconds() if isinstance(delay, timedelta) else float(delay)
        if seconds < 0:
            raise ValueError(f"Retry delay must be non-negative, got {seconds}")
        self._delay = seconds
        return self

    def retry_on(self, *exception_types: type[Exception]) -> RetryBuilder[T]:
        """Only retry these exception types. Default: any Exception."""
        if not exception_types:
            raise ValueError("At least one exception type is required")
        self._retry_on = exception_types
        return self

    def with_error_handler(self, handler: ErrorHandler) -> RetryBuilder[T]:
        self._error_handler = handler
        return self

    def retry(self) -> Try[T]:
        """Run the attempts and capture the final outcome."""
        return Try.of(self._run)

    # ──────────────────────── Internals ────────────────────────

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_never if self._max_tries <= 0 else stop_after_attempt(self._max_tries),
            wait=wait_fixed(self._delay),
            retry=retry_if_exception_type(self._retry_on),
            reraise=True,
        )

    def _run(self) -> T:
        for attempt in self._retrying():
            with attempt:
                try:
                    return self._supplier()
                except Exception as e:
                    self._handle_error(attempt.retry_state.attempt_number, e)
                    raise
        raise TypeError("unreachable")  # pragma: no cover

    def _handle_error(self, current_try: int, exception: Exception) -> None:
        log.debug(
            "retry.attempt_failed",
            attempt=current_try,
            max_tries=self._max_tries,
            error=repr(exception),
        )
        if self._error_handler is None:
            return
        try:
            self._error_handler(current_try, self._max_tries, exception)
        except Exception as handler_error:
            log.warning(
                "retry.error_handler_failed",
                attempt=current_try,
                error=repr(handler_error),
            )
