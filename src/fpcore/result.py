"""
Try monad — capture exceptions as values instead of control flow.

A Try[T] is either Success(value: T) or Failure(exception). Computations are
lifted at the boundary with Try.of(...) and then composed with map/flat_map.
Every combinator guards its own callback: if the callback raises, the chain
degrades to a Failure instead of throwing mid-chain. Nothing is raised again
until a terminal call chooses to (.get(), .or_else_throw()).

    ┌────────────┐   map       ┌────────────┐   flat_map   ┌────────────┐
    │ Try.of(…)  │──Success────│  transform │──Success─────│   persist  │──→ Try[T]
    │            │             │            │              │            │
    └─────┬──────┘             └─────┬──────┘              └─────┬──────┘
          │ Failure(e)               │ Failure(e)                │ Failure(e)
          └──────────────────────────┴──────────────────────────┴──→ .recover(…)

Once a Try is a Failure, recover()/recover_with() are the only way back to
Success. Several recover() calls can be chained as fallback strategies: the
first one that succeeds wins and the rest have no effect.

Only Exception subclasses are captured. KeyboardInterrupt, SystemExit and
other BaseExceptions always propagate.

Result is an alias of Try.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from fpcore.errors import IllegalStateError, PredicateFailedError

if TYPE_CHECKING:
    from fpcore.either import Either

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _links(exception: BaseException) -> Iterator[BaseException]:
    """Walk an exception and everything it was raised from or during, stopping at cycles."""
    seen: set[int] = set()
    current: Optional[BaseException] = exception
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ if current.__cause__ is not None else current.__context__


def _chain(raised: BaseException, original: BaseException) -> BaseException:
    """
    Attach original at the end of raised's exception chain.

    raised may already carry a context of its own (it was raised inside an
    except block); original then goes after the last link so neither is lost.
    """
    if any(link is original for link in _links(raised)):
        return raised
    if any(link is raised for link in _links(original)):
        return raised
    *_, tail = _links(raised)
    tail.__context__ = original
    return raised


def _recovered(attempt: Try[T], original: BaseException) -> Try[T]:
    """A failed recovery attempt keeps the exception it was recovering from as context."""
    match attempt:
        case Failure(exception):
            _chain(exception, original)
    return attempt


class Try(Generic[T]):
    """
    Outcome of a computation that may raise.

    Two possible states:
      - Success(value: T)        — the computation returned
      - Failure(exception)       — the computation raised

    Usage:
        >>> Try.of(lambda: 10 // 2).map(lambda v: v * 2).or_else_throw()
        10

        >>> Try.of(lambda: 10 // 0).recover(lambda: 0)
        Success(0)
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Try is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Try is a Failure."""
        return isinstance(self, Failure)

    def get(self) -> T:
        """
        Extract the success value.

        Raises IllegalStateError on a Failure, with the captured exception
        attached as __cause__. Use .or_else_throw() to re-raise the captured
        exception itself.
        """
        match self:
            case Success(value):
                return value
            case Failure(exception):
                raise IllegalStateError(
                    f"Cannot get value from a Failure: {exception!r}"
                ) from exception
        raise TypeError("unreachable")  # pragma: no cover

    def or_else_throw(
        self,
        exception_mapper: Optional[Callable[[BaseException], BaseException]] = None,
    ) -> T:
        """
        Extract the success value or re-raise the captured exception.

        The original exception object is raised, so its type and traceback
        are preserved:

            try:
                Try.of(load_config).or_else_throw()
            except FileNotFoundError:
                ...

        With exception_mapper, the mapped exception is raised instead, chained
        to the original with `from`.
        """
        match self:
            case Success(value):
                return value
            case Failure(exception):
                if exception_mapper is not None:
                    raise exception_mapper(exception) from exception
                raise exception
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> BaseException:
        """
        Extract the captured exception. Raises IllegalStateError on a Success.

        Prefer .fold() or match/case for safe access.
        """
        match self:
            case Failure(exception):
                return exception
            case Success(value):
                raise IllegalStateError(f"Cannot get error from a Success: {value!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: T) -> T:
        """Extract value or return a default on failure."""
        match self:
            case Success(value):
                return value
            case _:
                return default

    def get_or_else_get(self, fallback: Callable[[BaseException], T]) -> T:
        """Extract value or compute a default from the captured exception."""
        return self.fold(lambda value: value, fallback)

    # ──────────────────────── Core Transformations ────────────────────────

    def fold(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[BaseException], R],
    ) -> R:
        """
        Apply one of two functions depending on the state.

        Terminal operation: exceptions raised by either function propagate.

            message = result.fold(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda e: f"Error: {e}",
            )
        """
        match self:
            case Success(value):
                return on_success(value)
            case Failure(exception):
                return on_failure(exception)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Try[U]:
        """
        Transform the success value. Short-circuits on failure.

        If the mapper raises, the result is a Failure holding that exception.

            Try.success(5).map(lambda x: x * 2)     # → Success(10)
            Try.success(5).map(lambda x: x // 0)    # → Failure(ZeroDivisionError)
        """
        match self:
            case Success(value):
                try:
                    return Success(mapper(value))
                except Exception as e:
                    return Failure(e)
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Try[U]]) -> Try[U]:
        """
        Chain a Try-returning function. Short-circuits on failure.

        The mapper is never invoked on a Failure. If it raises, or returns
        something that is not a Try, the result is a Failure.

            def parse(s: str) -> Try[int]:
                return Try.of(lambda: int(s))

            Try.success("42").flat_map(parse)  # → Success(42)
            Try.success("x").flat_map(parse)   # → Failure(ValueError)
        """
        match self:
            case Success(value):
                try:
                    result = mapper(value)
                except Exception as e:
                    return Failure(e)
                if not isinstance(result, Try):
                    return Failure(
                        TypeError(f"flat_map mapper must return a Try, got {type(result).__name__}")
                    )
                return result
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        """
        Keep the success value only if the predicate holds.

        A rejected value becomes Failure(PredicateFailedError(value)).
        Has no effect on a Failure.
        """
        return self.flat_map(
            lambda value: self if predicate(value) else Failure(PredicateFailedError(value))
        )

    # ──────────────────────── Side Effects ────────────────────────

    def on_success(self, consumer: Callable[[T], Any]) -> Try[T]:
        """
        Run a side effect on the success value without altering the Try.

        If the consumer raises, the chain becomes a Failure holding that exception.

            Try.of(load_user).on_success(lambda user: log.info("user.loaded", id=user.id))
        """
        match self:
            case Success(value):
                try:
                    consumer(value)
                except Exception as e:
                    return Failure(e)
        return self

    def on_failure(self, consumer: Callable[[BaseException], Any]) -> Try[T]:
        """
        Run a side effect on the captured exception without altering the Try.

        If the consumer raises, its exception replaces the failure and keeps
        the original one as __context__.
        """
        match self:
            case Failure(exception):
                try:
                    consumer(exception)
                except Exception as e:
                    return Failure(_chain(e, exception))
        return self

    def peek(self, consumer: Callable[[Try[T]], Any]) -> Try[T]:
        """
        Give a consumer access to the whole Try (not just the value).

        If the consumer raises, the result is a Failure holding that exception.
        """
        try:
            consumer(self)
        except Exception as e:
            match self:
                case Failure(exception):
                    return Failure(_chain(e, exception))
            return Failure(e)
        return self

    def and_finally(self, action: Callable[[], Any]) -> Try[T]:
        """
        Run an action regardless of state, like a `finally:` block.

        If the action succeeds, this Try is returned unchanged. If it raises,
        the result is Failure(action_exception); when this Try was already a
        Failure, the original exception is kept as the new one's __context__,
        the same way Python chains an exception raised inside `finally:`.
        """
        try:
            action()
        except Exception as e:
            match self:
                case Failure(exception):
                    return Failure(_chain(e, exception))
            return Failure(e)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def recover(
        self,
        supplier: Callable[[], T],
        predicate: Optional[Callable[[BaseException], bool]] = None,
    ) -> Try[T]:
        """
        Replace a Failure with a fresh attempt. Has no effect on a Success.

        With a predicate, recovery is attempted only if the predicate accepts
        the captured exception; otherwise the original Failure is kept.

            (
                Try.of(read_from_cache)
                .recover(read_from_db, lambda e: isinstance(e, KeyError))
                .recover(lambda: DEFAULT)
            )
        """
        match self:
            case Failure(exception):
                if predicate is not None:
                    try:
                        accepted = predicate(exception)
                    except Exception as e:
                        return Failure(_chain(e, exception))
                    if not accepted:
                        return self
                return _recovered(Try.of(supplier), exception)
        return self

    def recover_with(self, mapper: Callable[[BaseException], Try[T]]) -> Try[T]:
        """
        Replace a Failure with the Try computed from its exception.

            Try.of(fetch).recover_with(lambda e: Try.of(fallback) if retryable(e) else Try.failure(e))
        """
        match self:
            case Failure(exception):
                try:
                    attempt = mapper(exception)
                except Exception as e:
                    return Failure(_chain(e, exception))
                return _recovered(attempt, exception)
        return self

    # ──────────────────────── Projections ────────────────────────

    def optional(self) -> Optional[T]:
        """The success value, or None for a Failure."""
        return self.fold(lambda value: value, lambda _: None)

    def stream(self) -> Iterator[T]:
        """An iterator over zero (Failure) or one (Success) value."""
        match self:
            case Success(value):
                yield value

    def to_either(self) -> Either[BaseException, T]:
        """Project into Either: Right(value) or Left(exception)."""
        from fpcore.either import Either

        return self.fold(Either.right, Either.left)

    def stack_trace(self) -> str:
        """
        Formatted traceback of the captured exception, including its chain.

        Empty string for a Success.
        """
        match self:
            case Failure(exception):
                return "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )
        return ""

    # ──────────────────────── Resources ────────────────────────

    def close(self) -> None:
        """
        Release the success value if it has a close() method.

        The release happens at most once, however many times close() is
        called. Closing a Failure or a non-closeable Success does nothing.
        Exceptions raised by the value's close() propagate.
        """

    def __enter__(self) -> Try[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Try[T]:
        """
        Hand this Try to an execution context.

            Try.of(load).map(transform).within(LoggingExecutionContext(operation="load"))
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Try[T]:
        """Create a successful Try wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(exception: BaseException) -> Try[Any]:
        """Create a failed Try holding the given exception."""
        return Failure(exception)

    @staticmethod
    def of(supplier: Callable[[], T]) -> Try[T]:
        """
        Run a computation now and capture its outcome.

            Try.of(lambda: 10 // 2)   # → Success(5)
            Try.of(lambda: 10 // 0)   # → Failure(ZeroDivisionError('integer division or modulo by zero'))
        """
        try:
            return Success(supplier())
        except Exception as e:
            return Failure(e)

    @staticmethod
    def run_catching(runnable: Callable[[], Any]) -> Try[None]:
        """
        Run an action for its side effect only.

        Success(None) if it completes, Failure otherwise. Its return value is discarded.
        """
        try:
            runnable()
            return Success(None)
        except Exception as e:
            return Failure(e)

    @staticmethod
    def catching(func: Callable[[T], R]) -> Callable[[T], Try[R]]:
        """
        Lift a partial function T → R into a total function T → Try[R].

        Useful with comprehensions and map():

            tries = [Try.catching(int)(s) for s in ["1", "x", "3"]]
            numbers = [n for t in tries for n in t.stream()]   # → [1, 3]
        """

        def lifted(param: T) -> Try[R]:
            try:
                return Success(func(param))
            except Exception as e:
                return Failure(e)

        return lifted

    @staticmethod
    def catching_consumer(consumer: Callable[[T], Any]) -> Callable[[T], Try[T]]:
        """
        Lift a raising consumer into T → Try[T].

        On success the parameter itself is passed through:

            Try.success(path).flat_map(Try.catching_consumer(validate_exists))
        """

        def lifted(param: T) -> Try[T]:
            try:
                consumer(param)
                return Success(param)
            except Exception as e:
                return Failure(e)

        return lifted

    @staticmethod
    def catching_supplier(supplier: Callable[[], R]) -> Callable[[Any], Try[R]]:
        """Lift a supplier into a function that ignores its argument and captures the supplier's outcome."""

        def lifted(_: Any) -> Try[R]:
            try:
                return Success(supplier())
            except Exception as e:
                return Failure(e)

        return lifted

    @staticmethod
    def all_of(tries: Iterable[Try[T]]) -> Try[List[T]]:
        """
        Collect Tries into a Try of list.

        Returns the first Failure encountered, or Success with all values in order.
        """
        values: list[T] = []
        for t in tries:
            match t:
                case Success(value):
                    values.append(value)
                case Failure(_):
                    return t  # type: ignore[return-value]
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True, repr=False)
class Success(Try[T]):
    """The success track — wraps a value of type T (None for runnables)."""

    value: T
    _closed: bool = field(default=False, init=False, compare=False)

    def close(self) -> None:
        if self._closed:
            return
        object.__setattr__(self, "_closed", True)
        release = getattr(self.value, "close", None)
        if callable(release):
            release()

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Failure(Try[T]):
    """The failure track — wraps the captured exception."""

    exception: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.exception, BaseException):
            raise TypeError(
                f"Failure requires an exception instance, got {type(self.exception).__name__}"
            )

    def __repr__(self) -> str:
        return f"Failure({self.exception!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return (
                type(self.exception) is type(other.exception)
                and self.exception.args == other.exception.args
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", type(self.exception), str(self.exception)))


Result = Try
