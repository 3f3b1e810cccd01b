"""Rules constants for the D&D 5E rules engine."""

from __future__ import annotations

# =============================================================================
# Levels
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

# =============================================================================
# Ability Scores
# =============================================================================

DEFAULT_ABILITY_SCORE = 10
"""Score with a modifier of +0."""

PASSIVE_CHECK_BASE = 10
"""Base value for passive checks (PHB p.175)."""

# =============================================================================
# Carrying Capacity (PHB p.176, variant encumbrance)
# =============================================================================

ENCUMBERED_MULTIPLIER = 5
"""Strength multiplier at which a character becomes encumbered."""

HEAVILY_ENCUMBERED_MULTIPLIER = 10
"""Strength multiplier at which a character becomes heavily encumbered."""

CARRY_CAPACITY_MULTIPLIER = 15
"""Strength multiplier for maximum carrying capacity."""

DEFAULT_ITEM_WEIGHT = 1.0
"""Weight in pounds assumed for equipment listed without a weight."""

# =============================================================================
# Dice
# =============================================================================

DEFAULT_MAX_DICE_COUNT = 100
"""Default upper bound on dice rolled in a single request."""

NATURAL_CRITICAL_FACE = 20
"""Natural d20 face that is a critical success."""

NATURAL_FUMBLE_FACE = 1
"""Natural d20 face that is a critical failure."""


__all__ = [
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "DEFAULT_ABILITY_SCORE",
    "PASSIVE_CHECK_BASE",
    "ENCUMBERED_MULTIPLIER",
    "HEAVILY_ENCUMBERED_MULTIPLIER",
    "CARRY_CAPACITY_MULTIPLIER",
    "DEFAULT_ITEM_WEIGHT",
    "DEFAULT_MAX_DICE_COUNT",
    "NATURAL_CRITICAL_FACE",
    "NATURAL_FUMBLE_FACE",
]
