"""Saving throw and skill totals.

Each total is the governing ability modifier, plus the proficiency bonus
when proficient, plus the proficiency bonus again with expertise.
Skills are bound to abilities through the fixed SKILL_ABILITIES table.

Example:
    >>> scores = AbilityScores(strength=16)
    >>> resolve_skills(scores, 5, {Skill.ATHLETICS})[Skill.ATHLETICS]
    6
"""

from __future__ import annotations

from collections.abc import Iterable

from dnd_engine.core.constants import PASSIVE_CHECK_BASE
from dnd_engine.engine.abilities import ability_modifier
from dnd_engine.engine.proficiency import (
    normalize_proficiencies,
    proficiency_bonus,
    proficiency_multiplier,
)
from dnd_engine.models.enums import SKILL_ABILITIES, Ability, Skill
from dnd_engine.models.records import AbilityScores


def _as_abilities(values: Iterable[Ability | str]) -> set[Ability]:
    return {value if isinstance(value, Ability) else Ability.parse(value) for value in values}


def _as_skills(values: Iterable[Skill | str]) -> set[Skill]:
    return {value if isinstance(value, Skill) else Skill.parse(value) for value in values}


def save_total(scores: AbilityScores, level: int, ability: Ability, *, proficient: bool) -> int:
    """Get the saving throw total for one ability."""
    bonus = proficiency_bonus(level) * proficiency_multiplier(proficient=proficient, expert=False)
    return ability_modifier(scores.score(ability)) + bonus


def skill_total(
    scores: AbilityScores,
    level: int,
    skill: Skill,
    *,
    proficient: bool,
    expert: bool = False,
) -> int:
    """Get the check total for one skill.

    Expertise adds the proficiency bonus on top of proficiency; callers
    that pass ``expert=True`` without ``proficient`` get a single bonus.
    resolve_skills reconciles the two sets before calling this.
    """
    bonus = proficiency_bonus(level) * proficiency_multiplier(proficient=proficient, expert=expert)
    return ability_modifier(scores.score(SKILL_ABILITIES[skill])) + bonus


def resolve_saves(
    scores: AbilityScores,
    level: int,
    proficient_saves: Iterable[Ability | str] = (),
) -> dict[Ability, int]:
    """Get all six saving throw totals.

    Args:
        scores: The character's ability scores.
        level: Character level.
        proficient_saves: Abilities whose saves the character is proficient in.

    Returns:
        Saving throw total keyed by ability.

    Raises:
        InvalidArgumentError: For a level below 1 or an unknown ability name.
    """
    proficient = _as_abilities(proficient_saves)
    return {
        ability: save_total(scores, level, ability, proficient=ability in proficient)
        for ability in Ability
    }


def resolve_skills(
    scores: AbilityScores,
    level: int,
    proficient_skills: Iterable[Skill | str] = (),
    expertise_skills: Iterable[Skill | str] = (),
    *,
    expertise_requires_proficiency: bool | None = None,
) -> dict[Skill, int]:
    """Get all 18 skill totals.

    A skill with expertise but no proficiency is treated as proficient
    and receives the double bonus, unless strict expertise is configured,
    in which case it is rejected.

    Args:
        scores: The character's ability scores.
        level: Character level.
        proficient_skills: Skills the character is proficient in.
        expertise_skills: Skills with expertise.
        expertise_requires_proficiency: Override for the
            ``rules.expertise_requires_proficiency`` setting.

    Returns:
        Skill total keyed by skill.

    Raises:
        InvalidArgumentError: For a level below 1, an unknown skill name,
            or expertise without proficiency in strict mode.
    """
    proficiencies = normalize_proficiencies(
        (),
        _as_skills(proficient_skills),
        _as_skills(expertise_skills),
        expertise_requires_proficiency=expertise_requires_proficiency,
    )
    return {
        skill: skill_total(
            scores,
            level,
            skill,
            proficient=skill in proficiencies.skills,
            expert=skill in proficiencies.expertise,
        )
        for skill in Skill
    }


def passive_score(check_total: int) -> int:
    """Passive check value, e.g. passive Perception (PHB p.175)."""
    return PASSIVE_CHECK_BASE + check_total


__all__ = [
    "save_total",
    "skill_total",
    "resolve_saves",
    "resolve_skills",
    "passive_score",
]
