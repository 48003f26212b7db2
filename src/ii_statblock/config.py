"""
Runtime settings for the statblock converter.

Only diagnostics are configurable; nothing here changes the converted output.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

LOG_LEVEL_ENV = "MSTSB_LOG_LEVEL"
LOG_STYLE_ENV = "MSTSB_LOG_STYLE"

# "off" sits above CRITICAL so nothing gets through
LOG_LEVELS: dict[str, int] = {
    "off": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


class Settings(BaseModel):
    """Diagnostic logging settings."""

    log_level: str = Field(
        default="info",
        description="One of off, error, warn, info, debug, trace"
    )
    log_style: Literal["always", "auto", "never"] = Field(
        default="always",
        description="Colour level names: always, only on a terminal (auto), or never"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: object) -> str:
        """Normalize case and reject unknown level names."""
        if not isinstance(v, str):
            raise ValueError("log_level must be a string")
        name = v.strip().lower()
        if name not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{v}'. Choose from: {', '.join(LOG_LEVELS)}"
            )
        return name

    @field_validator("log_style", mode="before")
    @classmethod
    def normalize_log_style(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def level(self) -> int:
        """The stdlib logging level for ``log_level``."""
        return LOG_LEVELS[self.log_level]

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, reading a ``.env`` file first.

        Variables already set in the environment win over the ``.env`` file.

        Raises:
            pydantic.ValidationError: If a variable holds an unknown value.
        """
        load_dotenv(find_dotenv(usecwd=True))
        values: dict[str, str] = {}
        if os.getenv(LOG_LEVEL_ENV):
            values["log_level"] = os.environ[LOG_LEVEL_ENV]
        if os.getenv(LOG_STYLE_ENV):
            values["log_style"] = os.environ[LOG_STYLE_ENV]
        return cls(**values)
