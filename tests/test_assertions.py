"""Tests for TryAssertions and EitherAssertions."""

from __future__ import annotations

import pytest

from fpcore import Either, EitherAssertions, Try, TryAssertions


class TestAssertSuccess:
    def test_passes_on_success(self):
        assert TryAssertions.assert_success(Try.success(42)) == 42

    def test_fails_on_failure_with_clear_message(self):
        with pytest.raises(AssertionError, match="Expected Success but got Failure"):
            TryAssertions.assert_success(Try.failure(ValueError("bad")))

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="custom context"):
            TryAssertions.assert_success(Try.failure(ValueError()), "custom context")


class TestAssertFailure:
    def test_returns_exception(self):
        error = KeyError("k")
        assert TryAssertions.assert_failure(Try.failure(error)) is error

    def test_checks_exception_type(self):
        TryAssertions.assert_failure(Try.failure(KeyError("k")), LookupError)

    def test_fails_on_wrong_type(self):
        with pytest.raises(AssertionError, match="Expected exception of type ValueError"):
            TryAssertions.assert_failure(Try.failure(KeyError("k")), ValueError)

    def test_fails_on_success(self):
        with pytest.raises(AssertionError, match="Expected Failure but got Success"):
            TryAssertions.assert_failure(Try.success(42))

    def test_message_contains_is_case_insensitive(self):
        TryAssertions.assert_failure_message_contains(Try.failure(ValueError("NAME IS REQUIRED")), "name")

    def test_message_contains_fails(self):
        with pytest.raises(AssertionError, match="Expected failure message to contain"):
            TryAssertions.assert_failure_message_contains(Try.failure(ValueError("age")), "name")


class TestAssertSuccessValue:
    def test_exact_value_match(self):
        TryAssertions.assert_success_value(Try.success(42), 42)

    def test_fails_on_wrong_value(self):
        with pytest.raises(AssertionError, match="Expected success value"):
            TryAssertions.assert_success_value(Try.success(42), 99)


class TestEitherAssertions:
    def test_assert_right(self):
        assert EitherAssertions.assert_right(Either.right(1)) == 1
        with pytest.raises(AssertionError, match="Expected Right but got Left"):
            EitherAssertions.assert_right(Either.left("e"))

    def test_assert_left(self):
        assert EitherAssertions.assert_left(Either.left("e")) == "e"
        with pytest.raises(AssertionError, match="Expected Left but got Right"):
            EitherAssertions.assert_left(Either.right(1))

    def test_value_helpers(self):
        EitherAssertions.assert_right_value(Either.right([1]), [1])
        EitherAssertions.assert_left_value(Either.left("e"), "e")
        with pytest.raises(AssertionError, match="Expected Left value"):
            EitherAssertions.assert_left_value(Either.left("e"), "other")
