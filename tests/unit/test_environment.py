"""Tests for arithexpr settings and their environment loading."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from arithexpr.environment import (
    REQUIRE_END_VAR,
    STRICT_DIVISION_VAR,
    Settings,
    load_settings,
)


class TestSettings:
    def test_defaults_are_permissive(self) -> None:
        settings = Settings()
        assert settings.strict_division is False
        assert settings.require_end is False

    def test_frozen(self) -> None:
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.strict_division = True  # type: ignore[misc]


class TestLoadSettings:
    def test_unset(self, clean_env: pytest.MonkeyPatch) -> None:
        assert load_settings() == Settings()

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, clean_env: pytest.MonkeyPatch, value: str) -> None:
        clean_env.setenv(STRICT_DIVISION_VAR, value)
        assert load_settings().strict_division is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_falsy(self, clean_env: pytest.MonkeyPatch, value: str) -> None:
        clean_env.setenv(REQUIRE_END_VAR, value)
        assert load_settings().require_end is False

    def test_both(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(STRICT_DIVISION_VAR, "1")
        clean_env.setenv(REQUIRE_END_VAR, "true")
        assert load_settings() == Settings(strict_division=True, require_end=True)

    def test_unknown_value_warns(
        self, clean_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        clean_env.setenv(REQUIRE_END_VAR, "maybe")
        with caplog.at_level(logging.WARNING, logger="arithexpr.environment"):
            settings = load_settings()
        assert settings.require_end is False
        assert "Unknown ARITHEXPR_REQUIRE_END value 'maybe'" in caplog.text
