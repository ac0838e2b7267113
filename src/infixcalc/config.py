"""
Runtime settings for the infixcalc shell.

Values come from environment variables; CLI options override them.

Usage:
    INFIXCALC_ECHO=0 INFIXCALC_LOG_LEVEL=DEBUG infixcalc repl
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from infixcalc.errors import ConfigError

ENV_PREFIX = "INFIXCALC_"


class CalcSettings(BaseModel):
    """Settings shared by the CLI commands."""

    prompt: str = Field(default="> ", description="REPL prompt")
    echo: bool = Field(default=True, description="Echo each REPL line before its result")
    strict: bool = Field(default=True, description="Reject trailing tokens after an expression")
    log_level: str = Field(default="WARNING", description="Root logging level")

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(environ: Mapping[str, str] | None = None) -> CalcSettings:
    """Build settings from ``INFIXCALC_*`` environment variables.

    Raw strings are handed to pydantic, which also parses the booleans
    (1/0, true/false, yes/no, on/off).

    Raises:
        ConfigError: If a variable holds a value that cannot be used.
    """
    env = os.environ if environ is None else environ
    values = {
        name: env[f"{ENV_PREFIX}{name.upper()}"]
        for name in CalcSettings.model_fields
        if f"{ENV_PREFIX}{name.upper()}" in env
    }

    try:
        return CalcSettings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid settings: {problems}") from e


def configure_logging(settings: CalcSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
