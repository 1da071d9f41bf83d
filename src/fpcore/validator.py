"""
Validator — fluent, one-shot validation of a single value.

Where Validation declares rules once and applies them to many inputs,
Validator starts from the value and collects errors as checks are chained:

    errors = (
        Validator.of(person)
        .not_none(lambda p: p.name, "name is required")
        .validate_field(lambda p: p.age, lambda age: age >= 0, lambda age: f"bad age {age}")
        .check(lambda p: None if p.email else "email is required")
        .errors
    )

Not thread-safe: a Validator accumulates errors in place.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from fpcore.either import Either

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


def _produce(error: Any, *args: Any) -> Any:
    return error(*args) if callable(error) else error


class Validator(Generic[T, E]):
    """Accumulates the errors found in one value."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._errors: list[E] = []

    @staticmethod
    def of(value: T) -> Validator[T, Any]:
        return Validator(value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def errors(self) -> List[E]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def validate(
        self,
        predicate: Callable[[T], bool],
        error: Union[E, Callable[[], E]],
    ) -> Validator[T, E]:
        """Record error when predicate(value) is False. error may be a zero-arg supplier."""
        if not predicate(self._value):
            self._errors.append(_produce(error))
        return self

    def validate_field(
        self,
        extractor: Callable[[T], F],
        predicate: Callable[[F], bool],
        error: Union[E, Callable[[Optional[F]], E]],
    ) -> Validator[T, E]:
        """
        Check a field of the value.

        A None field is invalid without consulting the predicate. A callable
        error receives the field value.
        """
        field_value = extractor(self._value)
        if field_value is None or not predicate(field_value):
            self._errors.append(_produce(error, field_value))
        return self

    def not_none(
        self,
        extractor: Callable[[T], Any],
        error: Union[E, Callable[[], E]],
    ) -> Validator[T, E]:
        if extractor(self._value) is None:
            self._errors.append(_produce(error))
        return self

    def check(self, error_checker: Callable[[T], Optional[E]]) -> Validator[T, E]:
        """Record whatever error_checker returns, unless it is None."""
        error = error_checker(self._value)
        if error is not None:
            self._errors.append(error)
        return self

    def to_either(self) -> Either[List[E], T]:
        """Left(errors) if any check failed, otherwise Right(value)."""
        return Either.left(self.errors) if self._errors else Either.right(self._value)
