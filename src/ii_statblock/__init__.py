"""
Improved Initiative to Fantasy Statblocks converter.

Converts one creature export (JSON) into a ``statblock`` markup block.
"""

from __future__ import annotations

from pathlib import Path

__version__ = "0.1.0"

from .errors import ParseError, ReadError, SchemaError, StatblockError
from .models import CreatureRecord
from .reader import parse_record, read_record
from .renderer import StatblockRenderer


def transcode(text: str) -> str:
    """Convert raw creature JSON text to statblock markup."""
    return StatblockRenderer().render(parse_record(text))


def transcode_file(file_path: str | Path) -> str:
    """Convert a creature JSON file to statblock markup."""
    return StatblockRenderer().render(read_record(file_path))


__all__ = [
    "CreatureRecord",
    "ParseError",
    "ReadError",
    "SchemaError",
    "StatblockError",
    "StatblockRenderer",
    "parse_record",
    "read_record",
    "transcode",
    "transcode_file",
]
