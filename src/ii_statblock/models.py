"""
Data models for Improved Initiative creature exports.

Field aliases carry the exact (case-sensitive) JSON key names; attribute
names are the snake_case equivalents used by the renderer.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Non-negative integer that refuses "15", 15.0 and true.
UInt = Annotated[StrictInt, Field(ge=0)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class ValueEntry(_Record):
    """A number with free-text notes, used for AC and HP."""

    value: UInt = Field(alias="Value", description="Numeric value")
    notes: str = Field(alias="Notes", description="Notes, e.g. '(natural armor)' or '(8d10+24)'")


class ModifierEntry(_Record):
    """A saving throw or skill bonus."""

    name: str = Field(alias="Name")
    modifier: UInt = Field(alias="Modifier")


class ContentEntry(_Record):
    """A trait, action, reaction or similar named block of text."""

    name: str = Field(alias="Name")
    content: str = Field(alias="Content")


class Abilities(_Record):
    """The six ability scores."""

    str_: UInt = Field(alias="Str")
    dex: UInt = Field(alias="Dex")
    con: UInt = Field(alias="Con")
    int_: UInt = Field(alias="Int")
    wis: UInt = Field(alias="Wis")
    cha: UInt = Field(alias="Cha")

    def as_list(self) -> list[int]:
        """Return scores in Str/Dex/Con/Int/Wis/Cha order."""
        return [self.str_, self.dex, self.con, self.int_, self.wis, self.cha]


class CreatureRecord(_Record):
    """One parsed creature export."""

    # Identity and metadata
    source: str = Field(alias="Source")
    description: str = Field(alias="Description")
    player: str = Field(alias="Player")
    version: str = Field(alias="Version")
    image_url: str = Field(alias="ImageURL")
    name: str = Field(alias="Name")
    type: str = Field(alias="Type", description="e.g. 'Large beast (any race), chaotic evil'")

    # Combat
    ac: ValueEntry = Field(alias="AC")
    hp: ValueEntry = Field(alias="HP")
    speed: list[str] = Field(alias="Speed")
    abilities: Abilities = Field(alias="Abilities")

    # Bonuses
    saves: list[ModifierEntry] = Field(default_factory=list, alias="Saves")
    skills: list[ModifierEntry] = Field(default_factory=list, alias="Skills")

    # Defenses and senses
    damage_vulnerabilities: list[str] = Field(alias="DamageVulnerabilities")
    damage_resistances: list[str] = Field(alias="DamageResistances")
    damage_immunities: list[str] = Field(alias="DamageImmunities")
    condition_immunities: list[str] = Field(alias="ConditionImmunities")
    senses: list[str] = Field(alias="Senses")
    languages: list[str] = Field(alias="Languages")
    challenge: str = Field(alias="Challenge")

    # Content entries
    traits: list[ContentEntry] = Field(default_factory=list, alias="Traits")
    actions: list[ContentEntry] = Field(default_factory=list, alias="Actions")
    bonus_actions: list[ContentEntry] = Field(default_factory=list, alias="BonusActions")
    reactions: list[ContentEntry] = Field(default_factory=list, alias="Reactions")
    legendary_actions: list[ContentEntry] = Field(default_factory=list, alias="LegendaryActions")
    mythic_actions: list[ContentEntry] = Field(default_factory=list, alias="MythicActions")
