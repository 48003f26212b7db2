"""Text normalization helpers for statblock output."""

from __future__ import annotations

import re
from typing import NamedTuple

from ii_statblock.schema import TYPE_LINE_PATTERN

_WORD = re.compile(r"\S+")

# Characters that must not appear raw inside a one-line double-quoted scalar:
# backslash, quote, line breaks and anything YAML treats as non-printable.
_NEEDS_ESCAPE = re.compile(
    "[\\\\\"\x00-\x08\x0a-\x1f\x7f-\x9f\u2028\u2029\ufffe\uffff]"
)

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\x85": "\\N",
    "\u2028": "\\L",
    "\u2029": "\\P",
}


class TypeLine(NamedTuple):
    """The four parts of a creature type line, already title-cased."""

    size: str
    type: str
    subtype: str
    alignment: str


def _capitalize(word: str) -> str:
    for i, c in enumerate(word):
        if c.isalpha():
            return word[:i] + c.upper() + word[i + 1:].lower()
    return word


def title_case(text: str) -> str:
    """Capitalize the first letter of every word and lower-case the rest.

    Words are runs of non-whitespace; the whitespace between them is kept
    untouched. Leading punctuation or digits are skipped when looking for the
    letter to capitalize. Applying it twice gives the same result as applying
    it once.

    "chaotic evil" -> "Chaotic Evil"
    "darkvision 60 ft., passive Perception 10" -> "Darkvision 60 Ft., Passive Perception 10"
    "(blind beyond this radius)" -> "(Blind Beyond This Radius)"
    """
    return _WORD.sub(lambda m: _capitalize(m.group(0)), text)


def split_type_line(type_line: str) -> TypeLine | None:
    """Split "<size> <type> (<subtype>), <alignment>" into title-cased parts.

    Returns None when the line does not have that shape.
    """
    match = TYPE_LINE_PATTERN.match(type_line)
    if match is None:
        return None
    return TypeLine(*(title_case(group) for group in match.groups()))


def strip_parens(notes: str) -> str:
    """Strip one leading "(" and one trailing ")", each only if present."""
    return notes.removeprefix("(").removesuffix(")")


def escape_quoted(text: str) -> str:
    """Escape text for a single-line double-quoted YAML scalar.

    Backslashes and double quotes are escaped, each newline becomes the two
    characters backslash-n, and every other line break or non-printable
    character gets a YAML escape, so the result never spans lines. CRLF line
    endings count as one newline.
    """
    text = text.replace("\r\n", "\n")
    return _NEEDS_ESCAPE.sub(_escape_char, text)


def _escape_char(match: re.Match) -> str:
    c = match.group(0)
    if c in _ESCAPES:
        return _ESCAPES[c]
    if ord(c) > 0xFF:
        return f"\\u{ord(c):04x}"
    return f"\\x{ord(c):02x}"
