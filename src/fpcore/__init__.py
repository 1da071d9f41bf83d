"""
fpcore — functional error handling for Python.

Immutable value wrappers and combinators for computations that may succeed,
fail, or branch into two disjoint cases.

    from fpcore import Either, Try, Validation

    Try.of(lambda: 10 // 2).map(lambda v: v * 2).or_else_throw()         # 10
    Try.of(lambda: 10 // 0).recover(lambda: 0)                            # Success(0)
    Either.right(5).filter(lambda v: v > 10, lambda v: "too small")       # Left(value='too small')

    in_range = (
        Validation.builder()
        .add_validation(lambda n: n > 0, "must be positive")
        .add_validation(lambda n: n < 100, "must be below 100")
        .build()
    )
    in_range.validate_to_either(150)                                      # Left(value=['must be below 100'])
"""

from fpcore.either import Either, Left, Right
from fpcore.result import Result, Try, Success, Failure
from fpcore.errors import FunctionalError, IllegalStateError, PredicateFailedError
from fpcore.validation import Validation, ValidationBuilder
from fpcore.validator import Validator
from fpcore.tuples import Tuple, Tuple3
from fpcore.utils import measure, to_either, to_optional, to_optional_supplier, to_try
from fpcore.retry import Retry, RetryBuilder
from fpcore.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
    with_context,
)
from fpcore.assertions import EitherAssertions, TryAssertions

__all__ = [
    "Either",
    "Left",
    "Right",
    "Result",
    "Try",
    "Success",
    "Failure",
    "FunctionalError",
    "IllegalStateError",
    "PredicateFailedError",
    "Validation",
    "ValidationBuilder",
    "Validator",
    "Tuple",
    "Tuple3",
    "measure",
    "to_either",
    "to_optional",
    "to_optional_supplier",
    "to_try",
    "Retry",
    "RetryBuilder",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "EitherAssertions",
    "TryAssertions",
]

__version__ = "1.0.0"
