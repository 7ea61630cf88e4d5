"""Shared pytest fixtures for arithexpr tests."""

import pytest

from arithexpr.environment import REQUIRE_END_VAR, STRICT_DIVISION_VAR, Settings


@pytest.fixture
def strict_division() -> Settings:
    """Settings that raise on a zero divisor."""
    return Settings(strict_division=True)


@pytest.fixture
def require_end() -> Settings:
    """Settings that reject trailing input."""
    return Settings(require_end=True)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove any ARITHEXPR_* variables inherited from the shell."""
    monkeypatch.delenv(STRICT_DIVISION_VAR, raising=False)
    monkeypatch.delenv(REQUIRE_END_VAR, raising=False)
    return monkeypatch
