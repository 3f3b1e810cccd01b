"""Carrying capacity and encumbrance (PHB p.176, variant encumbrance).

Thresholds scale with the Strength score: encumbered at 5x, heavily
encumbered at 10x, maximum capacity at 15x, all in pounds.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from dnd_engine.core.constants import (
    CARRY_CAPACITY_MULTIPLIER,
    DEFAULT_ITEM_WEIGHT,
    ENCUMBERED_MULTIPLIER,
    HEAVILY_ENCUMBERED_MULTIPLIER,
)
from dnd_engine.core.exceptions import InvalidArgumentError
from dnd_engine.models.enums import EncumbranceTier
from dnd_engine.models.records import CarryingCapacity, EquipmentItem


# "Longsword (3 lbs)", "Backpack (5 lb)", "Torch (1.5 lbs)"
_WEIGHTED_ENTRY = re.compile(r"^(?P<name>.+?)\s*\((?P<weight>\d+(?:\.\d+)?)\s*lbs?\)\s*$", re.IGNORECASE)

SPEED_PENALTIES: dict[EncumbranceTier, int] = {
    EncumbranceTier.NORMAL: 0,
    EncumbranceTier.ENCUMBERED: 10,
    EncumbranceTier.HEAVILY_ENCUMBERED: 20,
}


def carrying_capacity(strength: int) -> CarryingCapacity:
    """Get the weight thresholds for a Strength score.

    Raises:
        InvalidArgumentError: If strength is negative.

    Example:
        >>> carrying_capacity(10)
        CarryingCapacity(encumbered=50, heavily_encumbered=100, maximum=150)
    """
    if strength < 0:
        raise InvalidArgumentError(
            f"Strength cannot be negative, got {strength}",
            argument="strength",
            value=strength,
        )
    return CarryingCapacity(
        encumbered=strength * ENCUMBERED_MULTIPLIER,
        heavily_encumbered=strength * HEAVILY_ENCUMBERED_MULTIPLIER,
        maximum=strength * CARRY_CAPACITY_MULTIPLIER,
    )


def classify_encumbrance(total_weight: float, capacity: CarryingCapacity) -> EncumbranceTier:
    """Get the encumbrance tier for a carried weight.

    Each threshold is inclusive: carrying exactly the encumbered weight
    makes the character encumbered.

    Raises:
        InvalidArgumentError: If total_weight is negative.
    """
    if total_weight < 0:
        raise InvalidArgumentError(
            f"Total weight cannot be negative, got {total_weight}",
            argument="total_weight",
            value=total_weight,
        )
    if total_weight >= capacity.heavily_encumbered:
        return EncumbranceTier.HEAVILY_ENCUMBERED
    if total_weight >= capacity.encumbered:
        return EncumbranceTier.ENCUMBERED
    return EncumbranceTier.NORMAL


def total_weight(items: Iterable[EquipmentItem]) -> float:
    """Sum weight x quantity over all items, without rounding."""
    return sum((item.weight * item.quantity for item in items), 0.0)


def load_percentage(weight: float, capacity: CarryingCapacity) -> int:
    """Carried weight as a percentage of maximum capacity, capped at 100."""
    if capacity.maximum <= 0:
        return 100 if weight > 0 else 0
    return min(round(weight / capacity.maximum * 100), 100)


def speed_penalty(tier: EncumbranceTier) -> int:
    """Walking speed reduction in feet for an encumbrance tier."""
    return SPEED_PENALTIES[tier]


def parse_equipment_entry(entry: str, *, quantity: int = 1) -> EquipmentItem:
    """Parse a free-text equipment entry such as ``"Longsword (3 lbs)"``.

    Entries without a weight are assumed to weigh one pound.

    Raises:
        InvalidArgumentError: If the entry is blank.

    Example:
        >>> parse_equipment_entry("Longsword (3 lbs)")
        EquipmentItem(name='Longsword', weight=3.0, quantity=1)
    """
    text = entry.strip()
    if not text:
        raise InvalidArgumentError("Equipment entry is empty", argument="entry", value=entry)

    match = _WEIGHTED_ENTRY.match(text)
    if match:
        return EquipmentItem(
            name=match.group("name").strip(),
            weight=float(match.group("weight")),
            quantity=quantity,
        )
    return EquipmentItem(name=text, weight=DEFAULT_ITEM_WEIGHT, quantity=quantity)


__all__ = [
    "SPEED_PENALTIES",
    "carrying_capacity",
    "classify_encumbrance",
    "total_weight",
    "load_percentage",
    "speed_penalty",
    "parse_equipment_entry",
]
