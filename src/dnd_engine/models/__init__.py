"""Data models for the D&D 5E rules engine.

Submodules:
    enums: Abilities, skills, classes, dice and state enums.
    records: Pydantic V2 value records for inputs and derived values.
    tables: Static SRD tables (XP, spell slots, hit dice, class features).
"""

from __future__ import annotations

from dnd_engine.models.enums import (
    CLASS_CASTER_TYPES,
    SKILL_ABILITIES,
    Ability,
    AdvantageMode,
    CasterType,
    CharacterClass,
    DieType,
    EncumbranceTier,
    RollState,
    Skill,
    normalize_name,
)
from dnd_engine.models.records import (
    AbilityScores,
    CarryingCapacity,
    CharacterProfile,
    EquipmentItem,
    LevelProgress,
    LevelUpDelta,
    PactMagic,
    Proficiencies,
    RollRequest,
    XPAward,
)


__all__ = [
    # Enums
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
    "normalize_name",
    # Records
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
