"""
Execution contexts — wrap a Try-producing computation with cross-cutting behaviour.

The combinators themselves never log or time anything. When a caller wants
that, it runs the computation inside a context:

    ctx = LoggingExecutionContext(operation="load-config")
    config = ctx.execute(lambda: Try.of(read_file).map(parse_toml))

    # or as a decorator
    @with_context(ctx)
    def load_config() -> Try[Config]:
        return Try.of(read_file).map(parse_toml)

Contexts compose: ComposableExecutionContext(outer, inner) runs the
computation inside inner, inside outer.
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import structlog

from fpcore.result import Failure, Try

T = TypeVar("T")

log = structlog.get_logger()


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Anything with execute(computation) -> Try.

    Structural typing: no inheritance needed.
    """

    def execute(self, computation: Callable[[], Try[T]]) -> Try[T]:
        """Execute a Try-returning computation within this context."""
        ...


# ──────────────────────── NoOp ────────────────────────


class NoOpExecutionContext:
    """Passthrough context. Handy as a default and in tests."""

    def execute(self, computation: Callable[[], Try[T]]) -> Try[T]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Logs start, duration and final state of a computation.

    An exception escaping the computation is captured as a Failure and
    logged at error level. Wraps another context (decorator pattern).

        ctx = LoggingExecutionContext(inner, operation="sync-catalog")
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation

    def execute(self, computation: Callable[[], Try[T]]) -> Try[T]:
        log.info("execution.started", operation=self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            log.error(
                "execution.raised",
                operation=self._operation,
                elapsed=round(time.monotonic() - start, 3),
                error=repr(e),
            )
            return Failure(e)

        elapsed = round(time.monotonic() - start, 3)
        if result.is_success():
            log.info("execution.completed", operation=self._operation, elapsed=elapsed, state="SUCCESS")
        else:
            log.warning(
                "execution.completed",
                operation=self._operation,
                elapsed=elapsed,
                state="FAILURE",
                error=repr(result.error()),
            )
        return result


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Compose several contexts into one. The first one is the outermost.

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="import"),
            TimingContext(),
        )
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = list(contexts)

    def execute(self, computation: Callable[[], Try[T]]) -> Try[T]:
        wrapped = computation
        for ctx in reversed(self._contexts):
            wrapped = functools.partial(ctx.execute, wrapped)
        return wrapped()


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable:
    """Run every call of the decorated Try-returning function inside ctx."""

    def decorator(fn: Callable[..., Try[T]]) -> Callable[..., Try[T]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Try[T]:
            return ctx.execute(lambda: fn(*args, **kwargs))

        return wrapper

    return decorator
