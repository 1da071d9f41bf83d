"""
Property-based tests for the algebraic laws of Try and Either.

Uses hypothesis to check the laws over arbitrary integers and strings
instead of a handful of hand-picked examples.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis.strategies import builds, integers, one_of, text

from fpcore import Either, Failure, Success, Try, Validation

tries = one_of(
    builds(Success, integers()),
    builds(lambda msg: Failure(ValueError(msg)), text()),
)
eithers = one_of(builds(Either.left, text()), builds(Either.right, integers()))


def double(x: int) -> int:
    return x * 2


def half_or_left(x: int) -> Either[str, int]:
    return Either.right(x // 2) if x % 2 == 0 else Either.left(f"{x} is odd")


@given(integers())
def test_try_map_matches_plain_call(x):
    assert Try.success(x).map(double).or_else_throw() == double(x)


@given(text())
def test_try_failure_short_circuits_map(msg):
    error = ValueError(msg)
    calls: list[int] = []
    result = Try.failure(error).map(lambda v: calls.append(v))
    assert result.error() is error
    assert calls == []


@given(integers())
def test_try_flat_map_left_identity(x):
    f = lambda v: Try.success(v + 1)  # noqa: E731
    assert Try.success(x).flat_map(f) == f(x)


@given(tries)
def test_try_flat_map_right_identity(t):
    assert t.flat_map(Try.success) == t


@given(text())
def test_either_left_short_circuits_flat_map(l):
    assert Either.left(l).flat_map(half_or_left) == Either.left(l)


@given(integers())
def test_either_flat_map_left_identity(r):
    assert Either.right(r).flat_map(half_or_left) == half_or_left(r)


@given(eithers)
def test_either_double_swap_is_identity(e):
    assert e.swap().swap() == e


@given(tries)
def test_fold_is_repeatable(t):
    identity = lambda v: v  # noqa: E731
    assert t.fold(identity, identity) is t.fold(identity, identity)


@given(integers())
def test_validation_reports_exactly_the_failing_rules(n):
    in_range = (
        Validation.builder()
        .add_validation(lambda v: v > 0, "> 0")
        .add_validation(lambda v: v < 100, "< 100")
        .build()
    )
    expected = [err for ok, err in [(n > 0, "> 0"), (n < 100, "< 100")] if not ok]
    assert in_range.validate(n) == expected
