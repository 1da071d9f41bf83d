"""Tests for the fluent Validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fpcore import Left, Right, Validator


@dataclass
class Book:
    title: Optional[str]
    pages: Optional[int]
    isbn: str = ""


class TestValidator:
    def test_valid_value_has_no_errors(self):
        book = Book(title="Dune", pages=412, isbn="978-0441013593")
        validator = (
            Validator.of(book)
            .not_none(lambda b: b.title, "title is required")
            .validate_field(lambda b: b.pages, lambda p: p > 0, "pages must be positive")
            .validate(lambda b: b.isbn.startswith("978"), "isbn must start with 978")
        )
        assert not validator.has_errors()
        assert validator.errors == []
        assert validator.to_either() == Right(book)

    def test_collects_every_error_in_order(self):
        book = Book(title=None, pages=-3, isbn="123")
        validator = (
            Validator.of(book)
            .not_none(lambda b: b.title, "title is required")
            .validate_field(lambda b: b.pages, lambda p: p > 0, lambda p: f"bad page count {p}")
            .validate(lambda b: b.isbn.startswith("978"), lambda: "isbn must start with 978")
        )
        assert validator.has_errors()
        assert validator.errors == [
            "title is required",
            "bad page count -3",
            "isbn must start with 978",
        ]
        assert validator.to_either() == Left(validator.errors)

    def test_none_field_is_invalid_without_calling_predicate(self):
        calls: list[int] = []
        validator = Validator.of(Book(title="x", pages=None)).validate_field(
            lambda b: b.pages, lambda p: calls.append(p) or True, "pages are required"
        )
        assert validator.errors == ["pages are required"]
        assert calls == []

    def test_check_records_returned_error(self):
        validator = (
            Validator.of(Book(title="x", pages=1))
            .check(lambda b: None if b.isbn else "isbn is required")
            .check(lambda b: None)
        )
        assert validator.errors == ["isbn is required"]

    def test_errors_is_a_copy(self):
        validator = Validator.of(1).validate(lambda n: n > 5, "too small")
        validator.errors.append("tampered")
        assert validator.errors == ["too small"]

    def test_value_is_exposed(self):
        assert Validator.of(42).value == 42
