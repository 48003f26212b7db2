"""Logging setup for the command line.

Diagnostics go to stderr only, so stdout carries nothing but the statblock.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .config import Settings

logger = logging.getLogger("ii_statblock")

_COLORS: dict[int, str] = {
    logging.DEBUG: "\033[34m",     # blue
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


class LevelFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] message``, optionally colouring the level."""

    def __init__(self, color: bool = False) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        if self.color:
            level = f"{_COLORS.get(record.levelno, '')}{level}{_RESET}"
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"[{level}] {message}"


def use_color(style: str, stream: TextIO) -> bool:
    """Decide whether to colour output for a log style and stream."""
    if style == "always":
        return True
    if style == "auto":
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())
    return False


def configure_logging(settings: Settings, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler instead of stacking them.
    """
    stream = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(LevelFormatter(color=use_color(settings.log_style, stream)))

    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(settings.level)
    return logger
