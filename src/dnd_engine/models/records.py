"""Pydantic V2 value records consumed and produced by the rules engine.

Records are constructed fresh for every call and never retained. Inputs
that the rules reject (negative weights, levels outside 1-20) raise the
engine's own InvalidArgumentError from their validators so callers deal
with a single error taxonomy.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnd_engine.core.constants import (
    DEFAULT_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    MIN_CHARACTER_LEVEL,
)
from dnd_engine.core.exceptions import InvalidArgumentError
from dnd_engine.models.enums import (
    Ability,
    AdvantageMode,
    CharacterClass,
    DieType,
    Skill,
)


def check_level(value: int, argument: str = "level") -> int:
    """Validate a character level is within 1-20.

    Raises:
        InvalidArgumentError: If the level is out of range.
    """
    if not MIN_CHARACTER_LEVEL <= value <= MAX_CHARACTER_LEVEL:
        raise InvalidArgumentError(
            f"Level must be between {MIN_CHARACTER_LEVEL} and {MAX_CHARACTER_LEVEL}, got {value}",
            argument=argument,
            value=value,
        )
    return value


# =============================================================================
# Character Inputs
# =============================================================================


class AbilityScores(BaseModel):
    """The six ability scores of a character.

    Scores are conventionally 1-30 but the engine does not enforce a
    bound; modifiers are defined for any integer.

    Example:
        >>> scores = AbilityScores(strength=16, dexterity=14)
        >>> scores.score(Ability.STR)
        16
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    strength: int = DEFAULT_ABILITY_SCORE
    dexterity: int = DEFAULT_ABILITY_SCORE
    constitution: int = DEFAULT_ABILITY_SCORE
    intelligence: int = DEFAULT_ABILITY_SCORE
    wisdom: int = DEFAULT_ABILITY_SCORE
    charisma: int = DEFAULT_ABILITY_SCORE

    def score(self, ability: Ability) -> int:
        """Get the score for a specific ability."""
        return getattr(self, ability.value)

    def modifier(self, ability: Ability) -> int:
        """Get the modifier for a specific ability."""
        from dnd_engine.engine.abilities import ability_modifier

        return ability_modifier(self.score(ability))


class Proficiencies(BaseModel):
    """Saving throw and skill proficiencies of a character.

    Attributes:
        saves: Abilities whose saving throws the character is proficient in.
        skills: Skills the character is proficient in.
        expertise: Skills that add the proficiency bonus a second time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    saves: frozenset[Ability] = frozenset()
    skills: frozenset[Skill] = frozenset()
    expertise: frozenset[Skill] = frozenset()


class EquipmentItem(BaseModel):
    """A carried item, as far as encumbrance is concerned.

    Example:
        >>> EquipmentItem(name="Rope, hempen (50 feet)", weight=10).weight
        10.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    weight: float = Field(description="Weight of one item in pounds")
    quantity: int = Field(default=1, description="Number of items carried")

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, value: float) -> float:
        if value < 0:
            raise InvalidArgumentError(
                f"Item weight cannot be negative, got {value}",
                argument="weight",
                value=value,
            )
        return value

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, value: int) -> int:
        if value < 1:
            raise InvalidArgumentError(
                f"Item quantity must be positive, got {value}",
                argument="quantity",
                value=value,
            )
        return value


class CharacterProfile(BaseModel):
    """Raw character attributes as stored by the host application.

    Proficiency tags and equipment entries use the free-text forms the
    character sheet collects: ``"Persuasion"``, ``"Save: Dexterity"``,
    ``"Longsword (3 lbs)"``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    class_name: str
    level: int = MIN_CHARACTER_LEVEL
    experience: int = 0
    scores: AbilityScores = Field(default_factory=AbilityScores)
    skills: list[str] = Field(default_factory=list)
    expertise: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: int) -> int:
        return check_level(value)

    @field_validator("experience")
    @classmethod
    def validate_experience(cls, value: int) -> int:
        if value < 0:
            raise InvalidArgumentError(
                f"Experience cannot be negative, got {value}",
                argument="experience",
                value=value,
            )
        return value


# =============================================================================
# Derived Values
# =============================================================================


class CarryingCapacity(BaseModel):
    """Strength-derived weight thresholds in pounds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    encumbered: int
    heavily_encumbered: int
    maximum: int


class LevelProgress(BaseModel):
    """Progress from the current level towards the next.

    ``xp_to_next`` is None at level 20, where percent is always 100.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    xp_to_next: int | None
    percent: int


class XPAward(BaseModel):
    """Outcome of adding experience points to a character."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    previous_xp: int
    new_xp: int
    previous_level: int
    new_level: int

    @property
    def levels_gained(self) -> int:
        return self.new_level - self.previous_level

    @property
    def leveled_up(self) -> bool:
        return self.new_level > self.previous_level


class PactMagic(BaseModel):
    """Warlock pact slots: every slot shares one spell level."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    slot_count: int
    slot_level: int


class LevelUpDelta(BaseModel):
    """What changes when a character goes from one level to another.

    Attributes:
        character_class: The class gaining levels.
        from_level: Level before the change.
        to_level: Level after the change.
        proficiency_bonus_before: Proficiency bonus at from_level.
        proficiency_bonus_after: Proficiency bonus at to_level.
        features_gained: Class features unlocked, keyed by level.
        spell_slots_before: Slots at from_level, None for non-casters.
        spell_slots_after: Slots at to_level, None for non-casters.
        hit_die: Hit die size of the class.
        hit_dice_gained: Number of hit dice gained.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    character_class: CharacterClass
    from_level: int
    to_level: int
    proficiency_bonus_before: int
    proficiency_bonus_after: int
    features_gained: dict[int, list[str]]
    spell_slots_before: dict[int, int] | None
    spell_slots_after: dict[int, int] | None
    hit_die: int
    hit_dice_gained: int

    @property
    def levels_gained(self) -> int:
        return self.to_level - self.from_level


# =============================================================================
# Dice
# =============================================================================


class RollRequest(BaseModel):
    """A request to roll one or more identical dice.

    Example:
        >>> RollRequest(die="d20", modifier=5, mode=AdvantageMode.ADVANTAGE).die
        <DieType.D20: 20>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    die: DieType
    count: int = 1
    modifier: int = 0
    mode: AdvantageMode = AdvantageMode.NORMAL
    purpose: str | None = None

    @field_validator("die", mode="before")
    @classmethod
    def parse_die(cls, value: int | str) -> DieType:
        return DieType.parse(value)

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value: str) -> AdvantageMode:
        return AdvantageMode.parse(value)


__all__ = [
    "check_level",
    "AbilityScores",
    "Proficiencies",
    "EquipmentItem",
    "CharacterProfile",
    "CarryingCapacity",
    "LevelProgress",
    "XPAward",
    "PactMagic",
    "LevelUpDelta",
    "RollRequest",
]
