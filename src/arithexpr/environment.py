"""
Behaviour settings for arithexpr.

The defaults reproduce the permissive reference behaviour: trailing input
after a complete expression is ignored and division by zero yields IEEE-754
infinity or NaN. Settings are always passed explicitly; nothing in the core
reads the process environment on its own.

Environment variables (read only by load_settings()):
    - ARITHEXPR_STRICT_DIVISION: raise EvaluatorError on division by zero
    - ARITHEXPR_REQUIRE_END: reject input left over after the expression

Usage:
    from arithexpr import calculate
    from arithexpr.environment import Settings, load_settings

    calculate("1 / 0", Settings(strict_division=True))  # raises
    calculate("1 + 2", load_settings())
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

STRICT_DIVISION_VAR = "ARITHEXPR_STRICT_DIVISION"
REQUIRE_END_VAR = "ARITHEXPR_REQUIRE_END"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class Settings(BaseModel):
    """Options that change how expressions are parsed and evaluated."""

    strict_division: bool = Field(
        default=False, description="Raise EvaluatorError instead of returning inf/nan"
    )
    require_end: bool = Field(
        default=False, description="Reject tokens left over after a complete expression"
    )

    model_config = ConfigDict(frozen=True)


DEFAULT_SETTINGS = Settings()


def _read_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").lower().strip()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return default if raw == "" else False
    logger.warning(
        "Unknown %s value '%s'. Valid values: 1/0, true/false, yes/no, on/off. "
        "Defaulting to %s.",
        name,
        raw,
        default,
    )
    return default


def load_settings() -> Settings:
    """Build Settings from ARITHEXPR_* environment variables.

    Unset variables keep the defaults; unrecognised values are logged and
    ignored.

    Examples:
        >>> import os
        >>> os.environ["ARITHEXPR_STRICT_DIVISION"] = "1"
        >>> load_settings().strict_division
        True
    """
    return Settings(
        strict_division=_read_flag(STRICT_DIVISION_VAR, DEFAULT_SETTINGS.strict_division),
        require_end=_read_flag(REQUIRE_END_VAR, DEFAULT_SETTINGS.require_end),
    )
