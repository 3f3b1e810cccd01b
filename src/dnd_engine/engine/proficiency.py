"""Proficiency bonus scaling and proficiency tag handling.

A character's proficiencies arrive as free-text tags: a skill name
(``"Sleight of Hand"``) or a saving throw (``"save:dexterity"``, also
written ``"Save: Dexterity"``). This module turns those tags into a
Proficiencies record and enforces that expertise never exists without
proficiency.
"""

from __future__ import annotations

from collections.abc import Iterable

from dnd_engine.core.config import get_settings
from dnd_engine.core.constants import MIN_CHARACTER_LEVEL
from dnd_engine.core.exceptions import InvalidArgumentError
from dnd_engine.core.logging import get_logger
from dnd_engine.models.enums import Ability, Skill
from dnd_engine.models.records import Proficiencies


logger = get_logger(__name__)

SAVE_TAG_PREFIX = "save:"


def proficiency_bonus(level: int) -> int:
    """Get the proficiency bonus for a character level (PHB p.15).

    Args:
        level: Character level, at least 1.

    Returns:
        floor((level - 1) / 4) + 2.

    Raises:
        InvalidArgumentError: If level is below 1.

    Example:
        >>> proficiency_bonus(1), proficiency_bonus(5), proficiency_bonus(20)
        (2, 3, 6)
    """
    if level < MIN_CHARACTER_LEVEL:
        raise InvalidArgumentError(
            f"Level must be at least {MIN_CHARACTER_LEVEL}, got {level}",
            argument="level",
            value=level,
        )
    return (level - 1) // 4 + 2


def proficiency_multiplier(*, proficient: bool, expert: bool) -> int:
    """How many times the proficiency bonus applies to a check.

    Expertise adds the bonus a second time on top of proficiency.
    """
    return int(proficient) + int(expert)


def parse_proficiency_tag(tag: str) -> Ability | Skill:
    """Parse one proficiency tag.

    Returns:
        An Ability for saving throw tags, a Skill otherwise.

    Raises:
        InvalidArgumentError: If the tag names neither.

    Example:
        >>> parse_proficiency_tag("Save: Dexterity")
        <Ability.DEX: 'dexterity'>
        >>> parse_proficiency_tag("animal handling")
        <Skill.ANIMAL_HANDLING: 'animal_handling'>
    """
    text = tag.strip()
    if text.lower().startswith(SAVE_TAG_PREFIX):
        return Ability.parse(text[len(SAVE_TAG_PREFIX):])
    return Skill.parse(text)


def normalize_proficiencies(
    saves: Iterable[Ability],
    skills: Iterable[Skill],
    expertise: Iterable[Skill] = (),
    *,
    expertise_requires_proficiency: bool | None = None,
) -> Proficiencies:
    """Build a Proficiencies record, reconciling expertise with proficiency.

    A skill listed with expertise but not proficiency is treated as
    proficient too, so it receives the double bonus. When
    ``expertise_requires_proficiency`` is true such input is rejected.

    Args:
        saves: Proficient saving throws.
        skills: Proficient skills.
        expertise: Skills with expertise.
        expertise_requires_proficiency: Override for the
            ``rules.expertise_requires_proficiency`` setting.

    Raises:
        InvalidArgumentError: In strict mode, for expertise without proficiency.
    """
    if expertise_requires_proficiency is None:
        expertise_requires_proficiency = get_settings().rules.expertise_requires_proficiency

    skill_set = frozenset(skills)
    expertise_set = frozenset(expertise)
    orphaned = expertise_set - skill_set

    if orphaned:
        names = sorted(skill.value for skill in orphaned)
        if expertise_requires_proficiency:
            raise InvalidArgumentError(
                "Expertise requires proficiency in the same skill",
                argument="expertise",
                value=names,
            )
        logger.debug("Expertise implies proficiency", skills=names)
        skill_set |= orphaned

    return Proficiencies(saves=frozenset(saves), skills=skill_set, expertise=expertise_set)


def proficiencies_from_tags(
    tags: Iterable[str],
    expertise_tags: Iterable[str] = (),
    *,
    ignore_unknown: bool = False,
    expertise_requires_proficiency: bool | None = None,
) -> tuple[Proficiencies, list[str]]:
    """Parse free-text proficiency tags into a Proficiencies record.

    Args:
        tags: Skill and ``save:<ability>`` tags.
        expertise_tags: Skill tags with expertise.
        ignore_unknown: Collect unparseable tags instead of raising, e.g.
            for tool or language proficiencies stored alongside skills.
        expertise_requires_proficiency: See normalize_proficiencies.

    Returns:
        The record and the list of tags that were not recognised.

    Raises:
        InvalidArgumentError: For an unknown tag unless ignore_unknown is
            set, or for a saving throw listed under expertise.
    """
    saves: set[Ability] = set()
    skills: set[Skill] = set()
    expertise: set[Skill] = set()
    unrecognized: list[str] = []

    for tag in tags:
        try:
            parsed = parse_proficiency_tag(tag)
        except InvalidArgumentError:
            if not ignore_unknown:
                raise
            unrecognized.append(tag)
            continue
        if isinstance(parsed, Ability):
            saves.add(parsed)
        else:
            skills.add(parsed)

    for tag in expertise_tags:
        try:
            parsed = parse_proficiency_tag(tag)
        except InvalidArgumentError:
            if not ignore_unknown:
                raise
            unrecognized.append(tag)
            continue
        if isinstance(parsed, Ability):
            raise InvalidArgumentError(
                "Expertise only applies to skills",
                argument="expertise",
                value=tag,
            )
        expertise.add(parsed)

    if unrecognized:
        logger.warning("Ignoring unrecognized proficiency tags", tags=unrecognized)

    proficiencies = normalize_proficiencies(
        saves,
        skills,
        expertise,
        expertise_requires_proficiency=expertise_requires_proficiency,
    )
    return proficiencies, unrecognized


__all__ = [
    "SAVE_TAG_PREFIX",
    "proficiency_bonus",
    "proficiency_multiplier",
    "parse_proficiency_tag",
    "normalize_proficiencies",
    "proficiencies_from_tags",
]
