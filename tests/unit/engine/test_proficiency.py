"""Tests for proficiency bonus and proficiency tags."""

from __future__ import annotations

import pytest

from dnd_engine.core.exceptions import InvalidArgumentError
from dnd_engine.engine.proficiency import (
    normalize_proficiencies,
    parse_proficiency_tag,
    proficiencies_from_tags,
    proficiency_bonus,
    proficiency_multiplier,
)
from dnd_engine.models.enums import Ability, Skill


class TestProficiencyBonus:
    """Tests for proficiency_bonus."""

    @pytest.mark.parametrize(
        "level,bonus",
        [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (12, 4), (13, 5), (16, 5), (17, 6), (20, 6)],
    )
    def test_level_table(self, level: int, bonus: int) -> None:
        """Bonus steps up every four levels."""
        assert proficiency_bonus(level) == bonus

    def test_monotonic(self) -> None:
        """The bonus never decreases with level."""
        bonuses = [proficiency_bonus(level) for level in range(1, 21)]
        assert bonuses == sorted(bonuses)

    @pytest.mark.parametrize("level", [0, -3])
    def test_rejects_levels_below_one(self, level: int) -> None:
        """Levels below 1 raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            proficiency_bonus(level)

        assert exc_info.value.details["argument"] == "level"

    def test_levels_above_twenty_follow_formula(self) -> None:
        """Only the lower bound is enforced."""
        assert proficiency_bonus(21) == 7


class TestProficiencyMultiplier:
    """Tests for proficiency_multiplier."""

    def test_combinations(self) -> None:
        """Expertise stacks on proficiency."""
        assert proficiency_multiplier(proficient=False, expert=False) == 0
        assert proficiency_multiplier(proficient=True, expert=False) == 1
        assert proficiency_multiplier(proficient=True, expert=True) == 2


class TestParseProficiencyTag:
    """Tests for parse_proficiency_tag."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("Athletics", Skill.ATHLETICS),
            ("sleight of hand", Skill.SLEIGHT_OF_HAND),
            ("save:dexterity", Ability.DEX),
            ("Save: Constitution", Ability.CON),
            ("SAVE:wis", Ability.WIS),
        ],
    )
    def test_parse(self, tag: str, expected: Ability | Skill) -> None:
        """Skill names and save tags parse to their enums."""
        assert parse_proficiency_tag(tag) is expected

    @pytest.mark.parametrize("tag", ["Thieves' Tools", "save:luck", ""])
    def test_unknown(self, tag: str) -> None:
        """Anything else raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            parse_proficiency_tag(tag)


class TestNormalizeProficiencies:
    """Tests for expertise reconciliation."""

    def test_expertise_implies_proficiency(self) -> None:
        """Expertise alone is upgraded to proficiency plus expertise."""
        proficiencies = normalize_proficiencies((), (), [Skill.STEALTH])

        assert Skill.STEALTH in proficiencies.skills
        assert Skill.STEALTH in proficiencies.expertise

    def test_strict_argument_rejects_orphaned_expertise(self) -> None:
        """Strict mode refuses expertise without proficiency."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            normalize_proficiencies(
                (), [Skill.ATHLETICS], [Skill.STEALTH], expertise_requires_proficiency=True
            )

        assert exc_info.value.details["value"] == ["stealth"]

    def test_strict_setting(self, strict_rules: None) -> None:
        """The strict mode can come from configuration."""
        with pytest.raises(InvalidArgumentError):
            normalize_proficiencies((), (), [Skill.STEALTH])

    def test_strict_accepts_consistent_input(self, strict_rules: None) -> None:
        """Expertise on a proficient skill is always accepted."""
        proficiencies = normalize_proficiencies(
            [Ability.DEX], [Skill.STEALTH], [Skill.STEALTH]
        )

        assert proficiencies.saves == frozenset({Ability.DEX})
        assert proficiencies.expertise == frozenset({Skill.STEALTH})


class TestProficienciesFromTags:
    """Tests for proficiencies_from_tags."""

    def test_mixed_tags(self) -> None:
        """Skill and save tags are sorted into their sets."""
        proficiencies, unrecognized = proficiencies_from_tags(
            ["Athletics", "Save: Strength", "save:constitution"],
            ["Athletics"],
        )

        assert proficiencies.skills == frozenset({Skill.ATHLETICS})
        assert proficiencies.saves == frozenset({Ability.STR, Ability.CON})
        assert proficiencies.expertise == frozenset({Skill.ATHLETICS})
        assert unrecognized == []

    def test_unknown_tag_raises(self) -> None:
        """Unknown tags raise by default."""
        with pytest.raises(InvalidArgumentError):
            proficiencies_from_tags(["Athletics", "Smith's Tools"])

    def test_unknown_tag_collected(self) -> None:
        """Unknown tags can be collected instead."""
        proficiencies, unrecognized = proficiencies_from_tags(
            ["Athletics", "Smith's Tools", "Common"],
            ignore_unknown=True,
        )

        assert proficiencies.skills == frozenset({Skill.ATHLETICS})
        assert unrecognized == ["Smith's Tools", "Common"]

    def test_expertise_on_save_rejected(self) -> None:
        """Saving throws cannot have expertise."""
        with pytest.raises(InvalidArgumentError):
            proficiencies_from_tags([], ["save:dexterity"])
