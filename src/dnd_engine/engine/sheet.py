"""Character sheet derivation.

build_sheet turns the raw attributes a host application stores for a
character into every derived value the sheet displays, in one call, so
views never recompute modifiers or bonuses on their own.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from dnd_engine.core.logging import get_logger
from dnd_engine.engine.abilities import ability_modifiers
from dnd_engine.engine.checks import passive_score, resolve_saves, resolve_skills
from dnd_engine.engine.encumbrance import (
    carrying_capacity,
    classify_encumbrance,
    load_percentage,
    parse_equipment_entry,
    speed_penalty,
    total_weight,
)
from dnd_engine.engine.proficiency import proficiencies_from_tags, proficiency_bonus
from dnd_engine.engine.progression import progress_to_next_level
from dnd_engine.engine.spell_slots import slots_for
from dnd_engine.models.enums import Ability, EncumbranceTier, Skill
from dnd_engine.models.records import (
    CarryingCapacity,
    CharacterProfile,
    EquipmentItem,
    LevelProgress,
    Proficiencies,
)


logger = get_logger(__name__)


class CharacterSheet(BaseModel):
    """Display-ready values derived from a CharacterProfile.

    Attributes:
        modifiers: Ability modifier per ability.
        proficiency_bonus: Level-scaled proficiency bonus.
        proficiencies: Parsed proficiencies the totals were computed with.
        saving_throws: Saving throw total per ability.
        skills: Skill total per skill.
        passive_perception: 10 + Perception total.
        initiative: Initiative bonus (Dexterity modifier).
        carrying_capacity: Strength-derived weight thresholds.
        carried_weight: Total weight of all equipment.
        encumbrance: Encumbrance tier for the carried weight.
        load_percentage: Carried weight as a percentage of maximum.
        speed_penalty: Walking speed reduction in feet.
        spell_slots: Slots per spell level, None for non-casters.
        progress: Progress towards the next level.
        unrecognized_tags: Proficiency tags that named no skill or save.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    modifiers: dict[Ability, int]
    proficiency_bonus: int
    proficiencies: Proficiencies
    saving_throws: dict[Ability, int]
    skills: dict[Skill, int]
    passive_perception: int
    initiative: int
    carrying_capacity: CarryingCapacity
    carried_weight: float
    encumbrance: EncumbranceTier
    load_percentage: int
    speed_penalty: int
    spell_slots: dict[int, int] | None
    progress: LevelProgress
    unrecognized_tags: list[str]


def build_sheet(
    profile: CharacterProfile,
    items: Iterable[EquipmentItem] | None = None,
) -> CharacterSheet:
    """Derive a full character sheet.

    Args:
        profile: The character's stored attributes.
        items: Structured equipment. When omitted, the profile's free-text
            equipment entries are parsed instead.

    Returns:
        The derived sheet.

    Raises:
        InvalidArgumentError: For malformed input (see the individual
            calculators).
        UnknownClassError: For an unrecognised class in strict mode.

    Example:
        >>> profile = CharacterProfile(
        ...     class_name="Fighter", level=5,
        ...     scores=AbilityScores(strength=16), skills=["Athletics"],
        ... )
        >>> build_sheet(profile).skills[Skill.ATHLETICS]
        6
    """
    proficiencies, unrecognized = proficiencies_from_tags(
        profile.skills,
        profile.expertise,
        ignore_unknown=True,
    )

    scores = profile.scores
    modifiers = ability_modifiers(scores)
    skills = resolve_skills(
        scores,
        profile.level,
        proficiencies.skills,
        proficiencies.expertise,
    )

    if items is None:
        equipment = [parse_equipment_entry(entry) for entry in profile.equipment if entry.strip()]
    else:
        equipment = list(items)
    capacity = carrying_capacity(scores.strength)
    weight = total_weight(equipment)
    tier = classify_encumbrance(weight, capacity)

    sheet = CharacterSheet(
        modifiers=modifiers,
        proficiency_bonus=proficiency_bonus(profile.level),
        proficiencies=proficiencies,
        saving_throws=resolve_saves(scores, profile.level, proficiencies.saves),
        skills=skills,
        passive_perception=passive_score(skills[Skill.PERCEPTION]),
        initiative=modifiers[Ability.DEX],
        carrying_capacity=capacity,
        carried_weight=weight,
        encumbrance=tier,
        load_percentage=load_percentage(weight, capacity),
        speed_penalty=speed_penalty(tier),
        spell_slots=slots_for(profile.class_name, profile.level),
        progress=progress_to_next_level(profile.experience, profile.level),
        unrecognized_tags=unrecognized,
    )
    logger.debug("Character sheet built", name=profile.name, level=profile.level)
    return sheet


__all__ = [
    "CharacterSheet",
    "build_sheet",
]
