"""Render a CreatureRecord to a Fantasy Statblocks ``statblock`` block.

The output order is fixed and lives in one place: the ordered list of
``Section`` objects built by ``build_sections``. Each section pairs a
condition with a render function, so every line of the block can be traced
back to exactly one entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ii_statblock.models import CreatureRecord
from ii_statblock.schema import (
    COLUMNS,
    DEFENSE_FIELDS,
    FENCE_CLOSE,
    FENCE_OPEN,
    LIST_SEPARATOR,
)
from ii_statblock.text import escape_quoted, split_type_line, strip_parens, title_case

logger = logging.getLogger(__name__)


def _always(record: CreatureRecord) -> bool:
    return True


@dataclass(frozen=True)
class Section:
    """One slot of the statblock.

    Emitted only when ``applies`` is true; a render function may still return
    no lines to leave the slot out.
    """

    key: str
    render: Callable[[CreatureRecord], list[str]]
    applies: Callable[[CreatureRecord], bool] = _always


# --- Scalar sections ---

def _render_type_line(record: CreatureRecord) -> list[str]:
    parts = split_type_line(record.type)
    if parts is None:
        logger.warning(
            "Type %r is not '<size> <type> (<subtype>), <alignment>'; "
            "omitting size, type, subtype and alignment",
            record.type,
        )
        return []
    return [
        f"size: {parts.size}",
        f"type: {parts.type}",
        f"subtype: {parts.subtype}",
        f"alignment: {parts.alignment}",
    ]


def _render_speed(record: CreatureRecord) -> list[str]:
    first = record.speed[0] if record.speed else ""
    return [f"speed: {first}"]


def _render_stats(record: CreatureRecord) -> list[str]:
    scores = ", ".join(str(score) for score in record.abilities.as_list())
    return [f"stats: [{scores}]"]


# --- List sections ---

def _non_empty(attr: str) -> Callable[[CreatureRecord], bool]:
    return lambda record: bool(getattr(record, attr))


def _modifier_section(key: str, attr: str) -> Section:
    """Header line plus ``  - <name>: <modifier>`` per entry."""

    def render(record: CreatureRecord) -> list[str]:
        lines = [f"{key}:"]
        for entry in getattr(record, attr):
            lines.append(f"  - {entry.name.lower()}: {entry.modifier}")
        return lines

    return Section(key, render, _non_empty(attr))


def _content_section(key: str, attr: str) -> Section:
    """Header line plus a quoted name/desc pair per entry."""

    def render(record: CreatureRecord) -> list[str]:
        lines = [f"{key}:"]
        for entry in getattr(record, attr):
            lines.append(f'  - name: "{escape_quoted(entry.name)}"')
            lines.append(f'    desc: "{escape_quoted(entry.content)}"')
        return lines

    return Section(key, render, _non_empty(attr))


def _joined_section(
    key: str, attr: str, transform: Callable[[str], str] | None = None
) -> Section:
    """One line with the list joined by ", "."""

    def render(record: CreatureRecord) -> list[str]:
        joined = LIST_SEPARATOR.join(getattr(record, attr))
        if transform is not None:
            joined = transform(joined)
        return [f"{key}: {joined}"]

    return Section(key, render, _non_empty(attr))


def build_sections(include_bonus_actions: bool = False) -> list[Section]:
    """Return the statblock sections in output order."""
    sections = [
        Section("name", lambda r: [f"name: {r.name}"]),
        Section("type_line", _render_type_line),
        Section("columns", lambda r: [f"columns: {COLUMNS}"]),
        Section("ac", lambda r: [f"ac: {r.ac.value}"]),
        Section("hp", lambda r: [f"hp: {r.hp.value}"]),
        Section("hit_dice", lambda r: [f"hit_dice: {strip_parens(r.hp.notes)}"]),
        Section("speed", _render_speed),
        Section("stats", _render_stats),
        _modifier_section("saves", "saves"),
        _modifier_section("skillsaves", "skills"),
        *(_joined_section(attr, attr) for attr in DEFENSE_FIELDS),
        _joined_section("senses", "senses", title_case),
        _joined_section("languages", "languages"),
        Section("cr", lambda r: [f'cr: "{escape_quoted(r.challenge)}"']),
        _content_section("traits", "traits"),
        _content_section("actions", "actions"),
    ]
    if include_bonus_actions:
        sections.append(_content_section("bonus_actions", "bonus_actions"))
    sections += [
        _content_section("legendary_actions", "legendary_actions"),
        _content_section("reactions", "reactions"),
        _content_section("mythic_actions", "mythic_actions"),
    ]
    return sections


class StatblockRenderer:
    """Renders CreatureRecord objects to statblock markup."""

    def __init__(self, *, include_bonus_actions: bool = False) -> None:
        self.sections = build_sections(include_bonus_actions)

    def render_lines(self, record: CreatureRecord) -> list[str]:
        """Render a record to the list of markup lines, fences included."""
        lines = [FENCE_OPEN]
        emitted = []
        for section in self.sections:
            if not section.applies(record):
                continue
            rendered = section.render(record)
            if rendered:
                lines.extend(rendered)
                emitted.append(section.key)
        lines.append(FENCE_CLOSE)
        logger.debug("Rendered '%s' with sections: %s", record.name, ", ".join(emitted))
        return lines

    def render(self, record: CreatureRecord) -> str:
        """Render a record to markup text ending with a newline."""
        return "\n".join(self.render_lines(record)) + "\n"
