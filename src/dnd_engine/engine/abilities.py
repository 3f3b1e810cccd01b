"""Ability score modifiers and their display form."""

from __future__ import annotations

from dnd_engine.models.enums import Ability
from dnd_engine.models.records import AbilityScores


def ability_modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    The modifier is floor((score - 10) / 2), rounding towards negative
    infinity, so low scores give the penalties the rules expect.

    Example:
        >>> ability_modifier(10)
        0
        >>> ability_modifier(7)
        -2
        >>> ability_modifier(20)
        5
    """
    return (score - 10) // 2


def format_signed(modifier: int) -> str:
    """Render a modifier with an explicit sign.

    Example:
        >>> format_signed(3)
        '+3'
        >>> format_signed(0)
        '+0'
        >>> format_signed(-1)
        '-1'
    """
    return f"+{modifier}" if modifier >= 0 else str(modifier)


def ability_modifiers(scores: AbilityScores) -> dict[Ability, int]:
    """Get the modifier for each of the six abilities."""
    return {ability: ability_modifier(scores.score(ability)) for ability in Ability}


__all__ = [
    "ability_modifier",
    "format_signed",
    "ability_modifiers",
]
