"""Tests for carrying capacity and encumbrance."""

from __future__ import annotations

import pytest

from dnd_engine.core.exceptions import InvalidArgumentError
from dnd_engine.engine.encumbrance import (
    carrying_capacity,
    classify_encumbrance,
    load_percentage,
    parse_equipment_entry,
    speed_penalty,
    total_weight,
)
from dnd_engine.models.enums import EncumbranceTier
from dnd_engine.models.records import CarryingCapacity, EquipmentItem


class TestCarryingCapacity:
    """Tests for carrying_capacity."""

    def test_strength_ten(self) -> None:
        """STR 10 gives 50/100/150."""
        assert carrying_capacity(10) == CarryingCapacity(
            encumbered=50, heavily_encumbered=100, maximum=150
        )

    def test_strength_zero(self) -> None:
        """STR 0 is allowed and carries nothing."""
        capacity = carrying_capacity(0)

        assert capacity.maximum == 0

    def test_negative_strength(self) -> None:
        """Negative strength raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            carrying_capacity(-1)

    def test_thresholds_ordered(self) -> None:
        """Thresholds are ordered for every positive strength."""
        for strength in range(1, 31):
            capacity = carrying_capacity(strength)
            assert capacity.encumbered < capacity.heavily_encumbered < capacity.maximum


class TestClassifyEncumbrance:
    """Tests for classify_encumbrance."""

    @pytest.mark.parametrize(
        "weight,tier",
        [
            (0, EncumbranceTier.NORMAL),
            (49, EncumbranceTier.NORMAL),
            (49.9, EncumbranceTier.NORMAL),
            (50, EncumbranceTier.ENCUMBERED),
            (99, EncumbranceTier.ENCUMBERED),
            (100, EncumbranceTier.HEAVILY_ENCUMBERED),
            (400, EncumbranceTier.HEAVILY_ENCUMBERED),
        ],
    )
    def test_thresholds_inclusive(self, weight: float, tier: EncumbranceTier) -> None:
        """Reaching a threshold exactly moves to the next tier."""
        assert classify_encumbrance(weight, carrying_capacity(10)) is tier

    def test_negative_weight(self) -> None:
        """Negative weight raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            classify_encumbrance(-0.5, carrying_capacity(10))

    def test_monotonic_in_weight(self) -> None:
        """More weight never gives a lighter tier."""
        order = list(EncumbranceTier)
        capacity = carrying_capacity(13)
        tiers = [order.index(classify_encumbrance(w, capacity)) for w in range(0, 200)]
        assert tiers == sorted(tiers)


class TestTotalWeight:
    """Tests for total_weight."""

    def test_sums_weight_times_quantity(self) -> None:
        """Each item counts weight x quantity."""
        items = [
            EquipmentItem(name="Arrows", weight=0.05, quantity=20),
            EquipmentItem(name="Rations", weight=2, quantity=5),
            EquipmentItem(name="Shield", weight=6),
        ]

        assert total_weight(items) == pytest.approx(17.0)

    def test_empty(self) -> None:
        """No items weigh nothing."""
        assert total_weight([]) == 0.0


class TestLoadAndSpeed:
    """Tests for load percentage and speed penalty."""

    def test_load_percentage(self) -> None:
        """Load is relative to maximum capacity."""
        capacity = carrying_capacity(10)

        assert load_percentage(75, capacity) == 50
        assert load_percentage(300, capacity) == 100

    def test_load_percentage_zero_capacity(self) -> None:
        """Zero capacity is full as soon as anything is carried."""
        capacity = carrying_capacity(0)

        assert load_percentage(0, capacity) == 0
        assert load_percentage(1, capacity) == 100

    @pytest.mark.parametrize(
        "tier,penalty",
        [
            (EncumbranceTier.NORMAL, 0),
            (EncumbranceTier.ENCUMBERED, 10),
            (EncumbranceTier.HEAVILY_ENCUMBERED, 20),
        ],
    )
    def test_speed_penalty(self, tier: EncumbranceTier, penalty: int) -> None:
        """Speed drops by 10 ft per tier."""
        assert speed_penalty(tier) == penalty


class TestParseEquipmentEntry:
    """Tests for free-text equipment entries."""

    @pytest.mark.parametrize(
        "entry,name,weight",
        [
            ("Longsword (3 lbs)", "Longsword", 3.0),
            ("Chain Mail (55 lbs)", "Chain Mail", 55.0),
            ("Backpack (5 lb)", "Backpack", 5.0),
            ("Flask of Oil (1.5 LBS)", "Flask of Oil", 1.5),
            ("Torch", "Torch", 1.0),
        ],
    )
    def test_parse(self, entry: str, name: str, weight: float) -> None:
        """Weights are read from the trailing parenthesis, else 1 lb."""
        item = parse_equipment_entry(entry)

        assert item.name == name
        assert item.weight == weight

    def test_quantity(self) -> None:
        """Quantity is passed through."""
        assert parse_equipment_entry("Dart (0.25 lbs)", quantity=10).quantity == 10

    def test_blank(self) -> None:
        """Blank entries raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            parse_equipment_entry("   ")
