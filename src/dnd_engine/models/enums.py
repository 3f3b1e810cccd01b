"""Enumeration types for the D&D 5E rules engine.

Abilities, skills, classes, dice and the small state enums the engine
reports back. The skill-to-ability association lives in the explicit
SKILL_ABILITIES table rather than in conditionals so it can be tested
as data.
"""

from __future__ import annotations

import re
from enum import IntEnum, StrEnum

from dnd_engine.core.exceptions import InvalidArgumentError, UnknownClassError


_SEPARATORS = re.compile(r"[\s\-]+")


def normalize_name(name: str) -> str:
    """Normalise a user-entered rules name to its enum value form.

    Example:
        >>> normalize_name("  Sleight of Hand ")
        'sleight_of_hand'
    """
    return _SEPARATORS.sub("_", name.strip().lower())


class Ability(StrEnum):
    """D&D 5E ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability (e.g., 'Strength')."""
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g., 'STR')."""
        return self.name

    @classmethod
    def parse(cls, name: str) -> Ability:
        """Parse a full name or abbreviation, case-insensitively.

        Raises:
            InvalidArgumentError: If the name is not an ability.
        """
        key = normalize_name(name)
        for ability in cls:
            if key in (ability.value, ability.name.lower()):
                return ability
        raise InvalidArgumentError(
            f"Unknown ability: {name!r}",
            argument="ability",
            value=name,
        )


class Skill(StrEnum):
    """D&D 5E skills."""

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def ability(self) -> Ability:
        """Get the ability score this skill is checked with."""
        return SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Get the sheet label (e.g., 'Sleight of Hand')."""
        words = self.value.split("_")
        return " ".join(w if w == "of" else w.capitalize() for w in words)

    @classmethod
    def parse(cls, name: str) -> Skill:
        """Parse a skill name, case-insensitively.

        Raises:
            InvalidArgumentError: If the name is not a skill.
        """
        try:
            return cls(normalize_name(name))
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown skill: {name!r}",
                argument="skill",
                value=name,
            ) from None


SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ACROBATICS: Ability.DEX,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.ARCANA: Ability.INT,
    Skill.ATHLETICS: Ability.STR,
    Skill.DECEPTION: Ability.CHA,
    Skill.HISTORY: Ability.INT,
    Skill.INSIGHT: Ability.WIS,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.INVESTIGATION: Ability.INT,
    Skill.MEDICINE: Ability.WIS,
    Skill.NATURE: Ability.INT,
    Skill.PERCEPTION: Ability.WIS,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
    Skill.RELIGION: Ability.INT,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.SURVIVAL: Ability.WIS,
}
"""Fixed skill -> ability table (PHB p.174)."""


class CasterType(StrEnum):
    """Spell-slot progression curve of a class."""

    FULL = "full"
    HALF = "half"
    PACT = "pact"
    NONE = "none"


class CharacterClass(StrEnum):
    """The 13 character classes the engine knows about."""

    ARTIFICER = "artificer"
    BARBARIAN = "barbarian"
    BARD = "bard"
    CLERIC = "cleric"
    DRUID = "druid"
    FIGHTER = "fighter"
    MONK = "monk"
    PALADIN = "paladin"
    RANGER = "ranger"
    ROGUE = "rogue"
    SORCERER = "sorcerer"
    WARLOCK = "warlock"
    WIZARD = "wizard"

    @property
    def caster_type(self) -> CasterType:
        """Get the spellcasting category of this class."""
        return CLASS_CASTER_TYPES[self]

    @classmethod
    def lookup(cls, name: str) -> CharacterClass | None:
        """Find a class by name, case-insensitively, or None."""
        try:
            return cls(normalize_name(name))
        except ValueError:
            return None

    @classmethod
    def parse(cls, name: str) -> CharacterClass:
        """Parse a class name, case-insensitively.

        Raises:
            UnknownClassError: If the name is not one of the 13 classes.
        """
        character_class = cls.lookup(name)
        if character_class is None:
            raise UnknownClassError(f"Unknown class: {name!r}", class_name=name)
        return character_class


CLASS_CASTER_TYPES: dict[CharacterClass, CasterType] = {
    CharacterClass.ARTIFICER: CasterType.HALF,
    CharacterClass.BARBARIAN: CasterType.NONE,
    CharacterClass.BARD: CasterType.FULL,
    CharacterClass.CLERIC: CasterType.FULL,
    CharacterClass.DRUID: CasterType.FULL,
    CharacterClass.FIGHTER: CasterType.NONE,
    CharacterClass.MONK: CasterType.NONE,
    CharacterClass.PALADIN: CasterType.HALF,
    CharacterClass.RANGER: CasterType.HALF,
    CharacterClass.ROGUE: CasterType.NONE,
    CharacterClass.SORCERER: CasterType.FULL,
    CharacterClass.WARLOCK: CasterType.PACT,
    CharacterClass.WIZARD: CasterType.FULL,
}


class EncumbranceTier(StrEnum):
    """Carrying-capacity tier derived from total carried weight."""

    NORMAL = "normal"
    ENCUMBERED = "encumbered"
    HEAVILY_ENCUMBERED = "heavily_encumbered"

    @property
    def display_name(self) -> str:
        """Get the sheet label (e.g., 'Heavily Encumbered')."""
        return self.value.replace("_", " ").title()


class DieType(IntEnum):
    """The fixed dice denominations, valued by their highest face."""

    D4 = 4
    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12
    D20 = 20
    D100 = 100

    @property
    def label(self) -> str:
        """Get dice notation for a single die (e.g., 'd20')."""
        return f"d{self.value}"

    @classmethod
    def parse(cls, value: int | str) -> DieType:
        """Parse a die from its size or its 'dN' label.

        Raises:
            InvalidArgumentError: If the die is not a fixed denomination.
        """
        raw = value
        if isinstance(value, str):
            digits = value.strip().lower().removeprefix("d")
            value = int(digits) if digits.isdigit() else 0
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                f"Die must be one of {[d.value for d in cls]}, got {raw!r}",
                argument="die",
                value=raw,
            ) from None


class AdvantageMode(StrEnum):
    """How many dice to roll and which one to keep."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"

    @classmethod
    def parse(cls, value: str) -> AdvantageMode:
        """Parse a mode name, case-insensitively.

        Raises:
            InvalidArgumentError: If the name is not a mode.
        """
        try:
            return cls(normalize_name(value))
        except (AttributeError, ValueError):
            raise InvalidArgumentError(
                f"Mode must be one of {[m.value for m in cls]}, got {value!r}",
                argument="mode",
                value=value,
            ) from None


class RollState(StrEnum):
    """Lifecycle of a single roll."""

    IDLE = "idle"
    ROLLING = "rolling"
    RESOLVED = "resolved"


__all__ = [
    "normalize_name",
    "Ability",
    "Skill",
    "SKILL_ABILITIES",
    "CasterType",
    "CharacterClass",
    "CLASS_CASTER_TYPES",
    "EncumbranceTier",
    "DieType",
    "AdvantageMode",
    "RollState",
]
