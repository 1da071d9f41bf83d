"""
Shared test fixtures for the fpcore test suite.

Provides a fake closeable resource for Try.close() tests and keeps the
cached FpcoreSettings isolated between tests.
"""

from __future__ import annotations

import os

import pytest

from fpcore.config import get_settings


class FakeResource:
    """Closeable stand-in that counts close() calls."""

    def __init__(self, name: str = "resource") -> None:
        self.name = name
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture()
def resource() -> FakeResource:
    """Return a fresh, unclosed FakeResource."""
    return FakeResource()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop FPCORE_* variables and the settings cache around every test."""
    for name in list(os.environ):
        if name.startswith("FPCORE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
