"""Fixed-arity immutable product types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

F = TypeVar("F")
S = TypeVar("S")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Tuple(Generic[F, S]):
    """
    Pair of (first, second).

    >>> str(Tuple.of(1, "a"))
    'First=1, Second=a'
    >>> first, second = Tuple.of(1, "a")
    """

    first: F
    second: S

    @staticmethod
    def of(first: F, second: S) -> Tuple[F, S]:
        return Tuple(first, second)

    def swap(self) -> Tuple[S, F]:
        return Tuple(self.second, self.first)

    def __iter__(self) -> Iterator[object]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"First={self.first}, Second={self.second}"


@dataclass(frozen=True, slots=True)
class Tuple3(Generic[F, S, T]):
    """Triple of (first, second, third)."""

    first: F
    second: S
    third: T

    @staticmethod
    def of(first: F, second: S, third: T) -> Tuple3[F, S, T]:
        return Tuple3(first, second, third)

    def __iter__(self) -> Iterator[object]:
        yield self.first
        yield self.second
        yield self.third

    def __str__(self) -> str:
        return f"First={self.first}, Second={self.second}, Third={self.third}"
