"""
Test assertions for Try and Either values.

Expressive assert helpers that produce clear failure messages:

    from fpcore import TryAssertions, EitherAssertions

    def test_parse():
        value = TryAssertions.assert_success(Try.of(lambda: int("42")))
        assert value == 42

    def test_parse_error():
        TryAssertions.assert_failure(Try.of(lambda: int("x")), ValueError)
        EitherAssertions.assert_left_value(validation.validate_to_either(-1), ["must be positive"])
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from fpcore.either import Either, Left, Right
from fpcore.result import Failure, Success, Try

T = TypeVar("T")


class TryAssertions:
    """Expressive test assertions for Try values."""

    @staticmethod
    def assert_success(result: Try[T], message: str = "") -> T:
        """
        Assert the Try is a Success and return the value.

            value = TryAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        match result:
            case Success(value):
                return value
            case Failure(exception):
                raise AssertionError(f"Expected Success but got Failure({exception!r}){context}")
        raise AssertionError(f"Expected a Try but got {result!r}{context}")

    @staticmethod
    def assert_failure(
        result: Try[T],
        expected_type: Optional[type[BaseException]] = None,
        message: str = "",
    ) -> BaseException:
        """
        Assert the Try is a Failure, optionally checking the exception type.

            error = TryAssertions.assert_failure(result, ZeroDivisionError)
        """
        context = f" — {message}" if message else ""
        match result:
            case Success(value):
                raise AssertionError(f"Expected Failure but got Success({value!r}){context}")
            case Failure(exception):
                if expected_type is not None:
                    assert isinstance(exception, expected_type), (
                        f"Expected exception of type {expected_type.__name__} "
                        f"but got {type(exception).__name__}: {exception}{context}"
                    )
                return exception
        raise AssertionError(f"Expected a Try but got {result!r}{context}")

    @staticmethod
    def assert_failure_message_contains(result: Try[T], substring: str) -> None:
        """Assert that str(exception) contains the given substring (case-insensitive)."""
        error = TryAssertions.assert_failure(result)
        assert substring.lower() in str(error).lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {str(error)!r}"
        )

    @staticmethod
    def assert_success_value(result: Try[T], expected_value: Any) -> None:
        """Assert the Try is a Success with the specific value."""
        value = TryAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )


class EitherAssertions:
    """Expressive test assertions for Either values."""

    @staticmethod
    def assert_right(either: Either[Any, T], message: str = "") -> T:
        context = f" — {message}" if message else ""
        match either:
            case Right(value):
                return value
            case Left(value):
                raise AssertionError(f"Expected Right but got Left({value!r}){context}")
        raise AssertionError(f"Expected an Either but got {either!r}{context}")

    @staticmethod
    def assert_left(either: Either[T, Any], message: str = "") -> T:
        context = f" — {message}" if message else ""
        match either:
            case Left(value):
                return value
            case Right(value):
                raise AssertionError(f"Expected Left but got Right({value!r}){context}")
        raise AssertionError(f"Expected an Either but got {either!r}{context}")

    @staticmethod
    def assert_right_value(either: Either[Any, Any], expected_value: Any) -> None:
        value = EitherAssertions.assert_right(either)
        assert value == expected_value, (
            f"Expected Right value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_left_value(either: Either[Any, Any], expected_value: Any) -> None:
        value = EitherAssertions.assert_left(either)
        assert value == expected_value, (
            f"Expected Left value {expected_value!r} but got {value!r}"
        )
