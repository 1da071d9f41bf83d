"""
Either — a value that is exactly one of two disjoint cases.

An Either[L, R] is either Left(value: L) or Right(value: R). By convention
Right is the primary/success side and Left the alternate/failure side, so
map, flat_map and filter act on Right and pass Left through untouched.
Use .swap() to work on the other side.

    ┌──────────┐   map / flat_map / filter   ┌──────────┐
    │ Right(r) │────────────────────────────→│ Right(…) │
    └──────────┘                             └──────────┘
    ┌──────────┐         (skipped)           ┌──────────┐
    │ Left(l)  │────────────────────────────→│ Left(l)  │
    └──────────┘                             └──────────┘

Either deliberately has no get_left()/get_right(). Collapse it with .fold(),
or project the Right side with .optional() / .stream().

Callbacks passed to the combinators are NOT guarded: an exception they raise
propagates to the caller. Only the catching* factories turn raised
exceptions into Left values.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")


class Either(Generic[L, R]):
    """
    Disjoint union of Left(L) and Right(R).

    >>> Either.right(5).map(lambda x: x + 1)
    Right(value=6)

    >>> Either.left("boom").map(lambda x: x + 1)
    Left(value='boom')
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    # ──────────────────────── Core Transformations ────────────────────────

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        """
        Collapse both sides into a single value. This is the fundamental destructor.

            either.fold(
                on_left=lambda err: f"Error: {err}",
                on_right=lambda value: f"Got {value}",
            )
        """
        match self:
            case Left(value):
                return on_left(value)
            case Right(value):
                return on_right(value)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[R], U]) -> Either[L, U]:
        """
        Transform the Right value. Left passes through unchanged.

            Either.right(5).map(lambda x: x * 2)   # → Right(10)
            Either.left("e").map(lambda x: x * 2)  # → Left("e")
        """
        match self:
            case Right(value):
                return Right(mapper(value))
            case Left(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def map_left(self, mapper: Callable[[L], U]) -> Either[U, R]:
        """Transform the Left value. Right passes through unchanged."""
        match self:
            case Left(value):
                return Left(mapper(value))
            case Right(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """
        Chain an Either-returning function. Left short-circuits.

        The Either returned by the mapper is returned as-is, never nested.

            def parse(s: str) -> Either[str, int]:
                return Either.right(int(s)) if s.isdigit() else Either.left(f"not a number: {s}")

            Either.right("42").flat_map(parse)   # → Right(42)
            Either.right("x").flat_map(parse)    # → Left("not a number: x")
        """
        match self:
            case Right(value):
                return mapper(value)
            case Left(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def filter(
        self,
        predicate: Callable[[R], bool],
        left_mapper: Optional[Callable[[R], L]] = None,
    ) -> Either[L, Any]:
        """
        Test the Right value against a predicate. Left passes through unchanged.

        With left_mapper, a Right that fails the predicate becomes
        Left(left_mapper(value)):

            Either.right(5).filter(lambda v: v > 10, lambda v: "too small")  # → Left("too small")

        Without left_mapper, the Right side becomes optional instead:
        Right(value) when the predicate holds, Right(None) when it does not.
        """
        match self:
            case Left(_):
                return self
            case Right(value):
                if left_mapper is None:
                    return Right(value if predicate(value) else None)
                return self if predicate(value) else Left(left_mapper(value))
        raise TypeError("unreachable")  # pragma: no cover

    def swap(self) -> Either[R, L]:
        """Exchange the Left and Right roles."""
        return self.fold(Right, Left)

    # ──────────────────────── Side Effects ────────────────────────

    def accept(
        self,
        on_left: Callable[[L], Any],
        on_right: Callable[[R], Any],
    ) -> Either[L, R]:
        """Run the side effect matching the present side and return this Either."""
        match self:
            case Left(value):
                on_left(value)
            case Right(value):
                on_right(value)
        return self

    # ──────────────────────── Projections ────────────────────────

    def optional(self) -> Optional[R]:
        """The Right value, or None for a Left."""
        return self.fold(lambda _: None, lambda value: value)

    def stream(self) -> Iterator[R]:
        """An iterator over zero (Left) or one (Right) value."""
        match self:
            case Right(value):
                yield value

    @contextmanager
    def as_closeable(self) -> Iterator[Either[L, R]]:
        """
        Context manager that closes the held value on exit, whichever side it is on.

            socket = Either.catching(lambda: connect(host, port))
            with socket.as_closeable():
                socket.flat_map(Either.catching_consumer(lambda s: s.sendall(b"ping")))

        Values without a close() method are left alone.
        """
        try:
            yield self
        finally:
            held = self.fold(lambda value: value, lambda value: value)
            close = getattr(held, "close", None)
            if callable(close):
                close()

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        """Create a Left."""
        return Left(value)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        """Create a Right."""
        return Right(value)

    # ──────────────────────── Lifting ────────────────────────

    @staticmethod
    def catching(supplier: Callable[[], R]) -> Either[Exception, R]:
        """
        Run a supplier now, capturing a raised exception into the Left side.

            Either.catching(lambda: int("42"))   # → Right(42)
            Either.catching(lambda: int("x"))    # → Left(ValueError(...))
        """
        try:
            return Right(supplier())
        except Exception as e:
            return Left(e)

    @staticmethod
    def catching_function(mapper: Callable[[T], R]) -> Callable[[T], Either[Exception, R]]:
        """
        Lift a raising function T → R into a total function T → Either[Exception, R].

        Handy with flat_map:

            Either.right("42").flat_map(Either.catching_function(int))  # → Right(42)
        """

        def lifted(param: T) -> Either[Exception, R]:
            try:
                return Right(mapper(param))
            except Exception as e:
                return Left(e)

        return lifted

    @staticmethod
    def catching_consumer(consumer: Callable[[T], Any]) -> Callable[[T], Either[Exception, T]]:
        """
        Lift a raising consumer into T → Either[Exception, T].

        On success the original parameter is passed through on the Right side.
        """

        def lifted(param: T) -> Either[Exception, T]:
            try:
                consumer(param)
                return Right(param)
            except Exception as e:
                return Left(e)

        return lifted


@dataclass(frozen=True, slots=True)
class Left(Either[L, R]):
    """The alternate side — conventionally the failure."""

    value: L


@dataclass(frozen=True, slots=True)
class Right(Either[L, R]):
    """The primary side — conventionally the success."""

    value: R
