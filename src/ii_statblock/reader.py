"""
Read and validate Improved Initiative creature exports.

Handles the three fatal failure modes of a conversion: the file cannot be
read, the text is not JSON, or the JSON is not a creature.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import ParseError, ReadError, SchemaError
from .models import CreatureRecord

logger = logging.getLogger(__name__)


def parse_record(text: str) -> CreatureRecord:
    """
    Decode JSON text and validate it as a creature record.

    Args:
        text: Raw JSON text

    Returns:
        The validated CreatureRecord

    Raises:
        ParseError: If the text is not valid JSON
        SchemaError: If a required field is missing or has the wrong shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            details={"line": e.lineno, "column": e.colno},
        ) from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: nesting is too deep to decode") from e

    if not isinstance(data, dict):
        raise SchemaError(
            f"Invalid creature format: expected JSON object, got {type(data).__name__}"
        )

    try:
        record = CreatureRecord.model_validate(data)
    except ValidationError as e:
        problems = [_describe(err) for err in e.errors()]
        raise SchemaError(
            f"Creature does not match the expected schema ({len(problems)} problem(s))",
            errors=problems,
        ) from e

    logger.debug("Parsed creature '%s'", record.name)
    return record


def read_record(file_path: str | Path) -> CreatureRecord:
    """
    Read a creature JSON file and validate it.

    Relative paths are resolved against the current working directory.

    Args:
        file_path: Path to the JSON file

    Returns:
        The validated CreatureRecord

    Raises:
        ReadError: If the file is missing, unreadable or not UTF-8
        ParseError: If the file is not valid JSON
        SchemaError: If the JSON is not a creature record
    """
    path = Path(file_path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ReadError(f"Creature file not found: {file_path}") from None
    except IsADirectoryError:
        raise ReadError(f"Creature path is a directory: {file_path}") from None
    except UnicodeDecodeError as e:
        raise ReadError(f"Creature file is not valid UTF-8: {file_path} ({e.reason})") from None
    except OSError as e:
        raise ReadError(f"Failed to read creature file: {e}") from None

    logger.debug("Read %d characters from %s", len(text), path.resolve())
    return parse_record(text)


def _describe(error: dict) -> str:
    """Format one pydantic error as "Key.Path: message"."""
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
