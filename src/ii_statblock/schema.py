"""
Fantasy Statblocks markup constants.

Key names, fence markers and patterns used when translating an Improved
Initiative creature into a ``statblock`` code block.
"""

import re

# ---------------------------------------------------------------------------
# Fence
# ---------------------------------------------------------------------------

FENCE_OPEN = "```statblock"
FENCE_CLOSE = "```"

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

COLUMNS = 2

# ---------------------------------------------------------------------------
# Type line: "<size> <type> (<subtype>), <alignment>"
# ---------------------------------------------------------------------------

# Matches: "Large beast (any race), chaotic evil"
TYPE_LINE_PATTERN = re.compile(r"^(\w+) (\w+) \(([\w ]+)\), ([\w ]+)\Z")

# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

LIST_SEPARATOR = ", "

# Plain string lists emitted as one joined line, in output order
DEFENSE_FIELDS = (
    "damage_vulnerabilities",
    "damage_resistances",
    "damage_immunities",
    "condition_immunities",
)
