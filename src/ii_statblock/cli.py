"""
Command line entry point.

Usage:
    ii-statblock creature.json > creature.md

Reads one Improved Initiative creature export and prints the matching
Fantasy Statblocks block to stdout. Diagnostics go to stderr; set
MSTSB_LOG_LEVEL and MSTSB_LOG_STYLE to tune them.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from . import __version__
from .config import Settings
from .errors import StatblockError
from .logutils import configure_logging
from .reader import read_record
from .renderer import StatblockRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ii-statblock",
        description="Convert an Improved Initiative creature JSON file to a Fantasy Statblocks block",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the statblock
  ii-statblock goblin.json

  # Append it to a note
  ii-statblock goblin.json >> Goblin.md

  # Show debug diagnostics without colour
  MSTSB_LOG_LEVEL=debug MSTSB_LOG_STYLE=never ii-statblock goblin.json
        """,
    )
    parser.add_argument(
        "file",
        help="The input JSON file, relative to the current directory"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValidationError as e:
        settings = Settings()
        configure_logging(settings)
        logger.warning("Ignoring invalid logging environment, using defaults: %s", e)
        return settings


def main(argv: list[str] | None = None) -> int:
    """Run the converter.

    Returns:
        Process exit status: 0 on success, 1 if the file could not be converted.
    """
    args = build_parser().parse_args(argv)
    configure_logging(_load_settings())

    try:
        record = read_record(args.file)
        markup = StatblockRenderer().render(record)
    except StatblockError as e:
        logger.error("%s", e)
        return 1

    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    sys.stdout.write(markup)
    return 0


if __name__ == "__main__":
    sys.exit(main())
