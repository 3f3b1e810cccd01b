"""D&D 5E character progression and resolution engine.

A stateless rules library for character sheets: ability modifiers,
proficiency, saving throw and skill totals, encumbrance, XP and level
progression, spell slots and dice resolution. Every function is a pure
computation over its arguments; only DiceResolver draws on randomness,
and it takes its random source as a dependency.

Example:
    >>> from dnd_engine import AbilityScores, CharacterProfile, build_sheet
    >>> profile = CharacterProfile(
    ...     class_name="Wizard", level=5, experience=7000,
    ...     scores=AbilityScores(intelligence=18), skills=["Arcana", "save:wisdom"],
    ... )
    >>> sheet = build_sheet(profile)
    >>> sheet.spell_slots
    {1: 4, 2: 3, 3: 2}

Modules:
    core: Configuration, logging, and base exceptions.
    models: Enums, pydantic value records and SRD tables.
    engine: The rules computations.
"""

from __future__ import annotations

# Core
from dnd_engine.core.config import Settings, get_settings
from dnd_engine.core.exceptions import (
    DiceRollError,
    DndEngineError,
    InvalidArgumentError,
    InvalidLevelError,
    UnknownClassError,
)
from dnd_engine.core.logging import configure_logging, get_logger

# Models
from dnd_engine.models import (
    Ability,
    AbilityScores,
    AdvantageMode,
    CasterType,
    CharacterClass,
    CharacterProfile,
    DieType,
    EncumbranceTier,
    EquipmentItem,
    RollRequest,
    Skill,
)

# Engine
from dnd_engine.engine import (
    CharacterSheet,
    DiceResolver,
    RollResult,
    ability_modifier,
    apply_milestone,
    award_xp,
    build_sheet,
    carrying_capacity,
    classify_encumbrance,
    format_signed,
    level_for_xp,
    level_up_delta,
    proficiency_bonus,
    progress_to_next_level,
    resolve_saves,
    resolve_skills,
    roll_notation,
    slots_for,
    total_weight,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "DndEngineError",
    "InvalidArgumentError",
    "InvalidLevelError",
    "UnknownClassError",
    "DiceRollError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "Skill",
    "CharacterClass",
    "CasterType",
    "EncumbranceTier",
    "DieType",
    "AdvantageMode",
    "AbilityScores",
    "EquipmentItem",
    "CharacterProfile",
    "RollRequest",
    # Engine
    "ability_modifier",
    "format_signed",
    "proficiency_bonus",
    "resolve_saves",
    "resolve_skills",
    "carrying_capacity",
    "classify_encumbrance",
    "total_weight",
    "level_for_xp",
    "progress_to_next_level",
    "apply_milestone",
    "award_xp",
    "level_up_delta",
    "slots_for",
    "DiceResolver",
    "RollResult",
    "roll_notation",
    "CharacterSheet",
    "build_sheet",
]
