"""
Validation — a reusable, frozen set of rules that collects every violation.

Rules are declared once through a builder and then applied to any number of
inputs. A rule is either:

  - a predicate rule: predicate(value) must be True for a valid value,
    otherwise the rule's error is reported;
  - a nested rule: a field extracted from the value is checked by another
    Validation, and its errors are reported inline.

    positive_and_small = (
        Validation.builder()
        .add_validation(lambda n: n > 0, "must be positive")
        .add_validation(lambda n: n < 100, lambda n: f"{n} is not below 100")
        .build()
    )

    positive_and_small.validate(150)            # → ["150 is not below 100"]
    positive_and_small.validate_to_either(42)   # → Right(42)

Evaluation never short-circuits: every rule runs, in insertion order, and
all errors are returned. Predicate and error-producer exceptions propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, TypeVar, Union

from fpcore.either import Either

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class PredicateRule(Generic[T, E]):
    """Report error_producer(value) when predicate(value) is False."""

    predicate: Callable[[T], bool]
    error_producer: Callable[[T], E]

    def errors(self, value: T) -> List[E]:
        return [] if self.predicate(value) else [self.error_producer(value)]


@dataclass(frozen=True, slots=True)
class NestedRule(Generic[T, F, E]):
    """Validate extractor(value) with another Validation."""

    extractor: Callable[[T], F]
    validation: Validation[F, E]

    def errors(self, value: T) -> List[E]:
        return self.validation.validate(self.extractor(value))


Rule = Union[PredicateRule[Any, Any], NestedRule[Any, Any, Any]]


class Validation(Generic[T, E]):
    """
    Immutable rule set. Obtain one from Validation.builder().build().

    Safe to share and to call concurrently: validate() keeps no state.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[Rule, ...] = ()) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def validate(self, value: T) -> List[E]:
        """
        Apply every rule in order and return all errors.

        An empty list means the value is valid. None is never validated and
        yields an empty list.
        """
        if value is None:
            return []
        errors: list[E] = []
        for rule in self._rules:
            errors.extend(rule.errors(value))
        return errors

    def validate_to_either(self, value: T) -> Either[List[E], T]:
        """Left(errors) if any rule fails, otherwise Right(value) unchanged."""
        errors = self.validate(value)
        return Either.left(errors) if errors else Either.right(value)

    def is_valid(self, value: T) -> bool:
        return not self.validate(value)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Validation(rules={len(self._rules)})"

    @staticmethod
    def builder() -> ValidationBuilder[Any, Any]:
        """Start declaring a new Validation."""
        return ValidationBuilder()


class ValidationBuilder(Generic[T, E]):
    """
    Mutable rule accumulator.

    Not thread-safe. build() takes a snapshot, so rules added afterwards
    never leak into Validations that were already built.
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def add_validation(
        self,
        check: Callable[[T], Any],
        error: Union[E, Callable[[T], E], Validation[Any, E]],
    ) -> ValidationBuilder[T, E]:
        """
        Append a rule.

        - add_validation(predicate, error): fixed error value.
        - add_validation(predicate, error_fn): error computed from the
          invalid value when the rule fails. Any callable is treated this way.
        - add_validation(extractor, validation): nested rule, same as add_nested().
        """
        if isinstance(error, Validation):
            return self.add_nested(check, error)
        if callable(error):
            self._rules.append(PredicateRule(check, error))
        else:
            self._rules.append(PredicateRule(check, lambda _value, _error=error: _error))
        return self

    def add_nested(
        self,
        extractor: Callable[[T], F],
        validation: Validation[F, E],
    ) -> ValidationBuilder[T, E]:
        """Validate a derived field with another Validation."""
        self._rules.append(NestedRule(extractor, validation))
        return self

    def build(self) -> Validation[T, E]:
        return Validation(tuple(self._rules))
