"""Spell slots by class and level.

Three progressions share one lookup:

- Full casters (bard, cleric, druid, sorcerer, wizard) read the
  full-caster table directly.
- Half casters (paladin, ranger, artificer) read the full-caster table at
  ceil(level / 2), never below 1.
- Warlocks use pact magic: a handful of slots that all share one spell
  level.

Classes without spellcasting get None. Unrecognised class names are
treated the same way unless ``rules.strict_class_names`` is set, in which
case they raise UnknownClassError.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from dnd_engine.core.config import get_settings
from dnd_engine.core.exceptions import UnknownClassError
from dnd_engine.core.logging import get_logger
from dnd_engine.models.enums import CasterType, CharacterClass
from dnd_engine.models.records import PactMagic, check_level
from dnd_engine.models.tables import FULL_CASTER_SLOTS, WARLOCK_PACT_SLOTS


logger = get_logger(__name__)


def caster_type(class_name: str) -> CasterType:
    """Get the spellcasting category of a class.

    Unlike slots_for, this always distinguishes a class without magic
    from a name the engine does not recognise.

    Raises:
        UnknownClassError: If class_name is not one of the 13 classes.
    """
    return CharacterClass.parse(class_name).caster_type


def half_caster_level(level: int) -> int:
    """Effective full-caster level for a half caster."""
    return max(1, math.ceil(level / 2))


def pact_magic(level: int) -> PactMagic:
    """Get warlock pact slots for a level.

    Raises:
        InvalidArgumentError: If level is outside 1-20.
    """
    check_level(level)
    slot_count, slot_level = WARLOCK_PACT_SLOTS[level]
    return PactMagic(slot_count=slot_count, slot_level=slot_level)


def slots_for(
    class_name: str,
    level: int,
    *,
    strict_class_names: bool | None = None,
) -> dict[int, int] | None:
    """Get available spell slots, keyed by spell level.

    Args:
        class_name: Class name, case-insensitive.
        level: Character level in that class.
        strict_class_names: Override for the ``rules.strict_class_names``
            setting.

    Returns:
        Mapping of spell level to slot count, or None when the class has
        no spellcasting.

    Raises:
        InvalidArgumentError: If level is outside 1-20.
        UnknownClassError: For an unrecognised class in strict mode.

    Example:
        >>> slots_for("wizard", 5)
        {1: 4, 2: 3, 3: 2}
        >>> slots_for("warlock", 5)
        {3: 2}
    """
    check_level(level)

    character_class = CharacterClass.lookup(class_name)
    if character_class is None:
        if strict_class_names is None:
            strict_class_names = get_settings().rules.strict_class_names
        if strict_class_names:
            raise UnknownClassError(f"Unknown class: {class_name!r}", class_name=class_name)
        logger.warning("Unrecognized class treated as non-caster", class_name=class_name)
        return None

    kind = character_class.caster_type
    if kind is CasterType.NONE:
        return None
    if kind is CasterType.PACT:
        pact = pact_magic(level)
        return {pact.slot_level: pact.slot_count}
    if kind is CasterType.HALF:
        level = half_caster_level(level)
    return dict(FULL_CASTER_SLOTS[level])


def remaining_slots(slots: Mapping[int, int], used: Mapping[int, int]) -> dict[int, int]:
    """Slots still available after some have been spent.

    Used counts are clamped to what is available; spent slots of a level
    the character does not have are ignored.
    """
    return {
        spell_level: available - min(max(used.get(spell_level, 0), 0), available)
        for spell_level, available in slots.items()
    }


__all__ = [
    "caster_type",
    "half_caster_level",
    "pact_magic",
    "slots_for",
    "remaining_slots",
]
