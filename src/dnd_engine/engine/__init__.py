"""Rules computation layer for the D&D 5E rules engine.

Submodules:
    abilities: Ability modifiers and signed formatting.
    proficiency: Proficiency bonus and proficiency tag parsing.
    checks: Saving throw and skill totals.
    encumbrance: Carrying capacity and encumbrance tiers.
    progression: XP, levels, milestones and level-up deltas.
    spell_slots: Spell slots for full, half and pact casters.
    dice: Dice resolution with advantage and critical detection.
    sheet: One-call character sheet derivation.

Example:
    >>> from dnd_engine import AbilityScores, Skill, resolve_skills
    >>> resolve_skills(AbilityScores(strength=16), 5, ["athletics"])[Skill.ATHLETICS]
    6
"""

from __future__ import annotations

from dnd_engine.engine.abilities import ability_modifier, ability_modifiers, format_signed
from dnd_engine.engine.checks import (
    passive_score,
    resolve_saves,
    resolve_skills,
    save_total,
    skill_total,
)
from dnd_engine.engine.dice import (
    DiceResolver,
    NotationResult,
    RandomSource,
    RollResult,
    roll_notation,
)
from dnd_engine.engine.encumbrance import (
    carrying_capacity,
    classify_encumbrance,
    load_percentage,
    parse_equipment_entry,
    speed_penalty,
    total_weight,
)
from dnd_engine.engine.proficiency import (
    normalize_proficiencies,
    parse_proficiency_tag,
    proficiencies_from_tags,
    proficiency_bonus,
    proficiency_multiplier,
)
from dnd_engine.engine.progression import (
    apply_milestone,
    award_xp,
    class_features,
    encounter_xp,
    level_for_xp,
    level_up_delta,
    progress_to_next_level,
    xp_for_challenge_rating,
    xp_threshold,
)
from dnd_engine.engine.sheet import CharacterSheet, build_sheet
from dnd_engine.engine.spell_slots import (
    caster_type,
    half_caster_level,
    pact_magic,
    remaining_slots,
    slots_for,
)


__all__ = [
    # Abilities
    "ability_modifier",
    "ability_modifiers",
    "format_signed",
    # Proficiency
    "proficiency_bonus",
    "proficiency_multiplier",
    "parse_proficiency_tag",
    "normalize_proficiencies",
    "proficiencies_from_tags",
    # Checks
    "save_total",
    "skill_total",
    "resolve_saves",
    "resolve_skills",
    "passive_score",
    # Encumbrance
    "carrying_capacity",
    "classify_encumbrance",
    "total_weight",
    "load_percentage",
    "speed_penalty",
    "parse_equipment_entry",
    # Progression
    "xp_threshold",
    "level_for_xp",
    "progress_to_next_level",
    "apply_milestone",
    "award_xp",
    "xp_for_challenge_rating",
    "encounter_xp",
    "class_features",
    "level_up_delta",
    # Spell slots
    "caster_type",
    "half_caster_level",
    "pact_magic",
    "slots_for",
    "remaining_slots",
    # Dice
    "RandomSource",
    "RollResult",
    "NotationResult",
    "DiceResolver",
    "roll_notation",
    # Sheet
    "CharacterSheet",
    "build_sheet",
]
