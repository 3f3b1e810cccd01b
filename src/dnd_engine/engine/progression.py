"""Experience, levels and what each level brings.

XP maps to level through the PHB threshold table. Milestone leveling
lets a DM set the level directly; out-of-range requests are rejected
with InvalidLevelError rather than clamped or ignored.
"""

from __future__ import annotations

from collections.abc import Iterable

from dnd_engine.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from dnd_engine.core.exceptions import InvalidArgumentError, InvalidLevelError
from dnd_engine.core.logging import get_logger
from dnd_engine.engine.proficiency import proficiency_bonus
from dnd_engine.engine.spell_slots import slots_for
from dnd_engine.models.enums import CharacterClass
from dnd_engine.models.records import LevelProgress, LevelUpDelta, XPAward, check_level
from dnd_engine.models.tables import (
    CLASS_FEATURES,
    CLASS_HIT_DIE,
    XP_BY_CHALLENGE_RATING,
    XP_THRESHOLDS,
)


logger = get_logger(__name__)


def _check_xp(xp: int, argument: str = "xp") -> None:
    if xp < 0:
        raise InvalidArgumentError(
            f"Experience cannot be negative, got {xp}",
            argument=argument,
            value=xp,
        )


def xp_threshold(level: int) -> int:
    """Total XP needed to reach a level."""
    check_level(level)
    return XP_THRESHOLDS[level]


def level_for_xp(xp: int) -> int:
    """Determine character level from total XP.

    Returns:
        The highest level whose threshold is at most xp, capped at 20.

    Raises:
        InvalidArgumentError: If xp is negative.

    Example:
        >>> level_for_xp(299), level_for_xp(300), level_for_xp(999999)
        (1, 2, 20)
    """
    _check_xp(xp)
    for level in range(MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL - 1, -1):
        if xp >= XP_THRESHOLDS[level]:
            return level
    return MIN_CHARACTER_LEVEL


def progress_to_next_level(xp: int, level: int) -> LevelProgress:
    """Get XP remaining and percent progress towards the next level.

    Percent is floor(100 * (xp - T[level]) / (T[level + 1] - T[level])).
    At level 20 there is no next level: percent is 100 and xp_to_next is
    None.

    Neither value is clamped. When the stored level is out of step with
    the XP, as with milestone leveling or an award not yet applied,
    percent falls below 0 or rises above 100, and xp_to_next goes
    negative once the next threshold has been passed.

    Raises:
        InvalidArgumentError: If level is outside 1-20 or xp is negative.
    """
    check_level(level)
    _check_xp(xp)
    if level == MAX_CHARACTER_LEVEL:
        return LevelProgress(xp_to_next=None, percent=100)

    current_threshold = XP_THRESHOLDS[level]
    next_threshold = XP_THRESHOLDS[level + 1]
    percent = (100 * (xp - current_threshold)) // (next_threshold - current_threshold)
    return LevelProgress(xp_to_next=next_threshold - xp, percent=percent)


def apply_milestone(current_level: int, requested_level: int) -> int:
    """Set a character's level directly (milestone leveling).

    Args:
        current_level: The character's level before the change.
        requested_level: The level the DM grants.

    Returns:
        The new level.

    Raises:
        InvalidArgumentError: If current_level is outside 1-20.
        InvalidLevelError: If requested_level is outside 1-20.
    """
    check_level(current_level, "current_level")
    if not MIN_CHARACTER_LEVEL <= requested_level <= MAX_CHARACTER_LEVEL:
        logger.debug(
            "Milestone level rejected",
            current_level=current_level,
            requested_level=requested_level,
        )
        raise InvalidLevelError(
            f"Level must be between {MIN_CHARACTER_LEVEL} and {MAX_CHARACTER_LEVEL}, "
            f"got {requested_level}",
            requested_level=requested_level,
        )

    if requested_level != current_level:
        logger.info("Milestone level applied", from_level=current_level, to_level=requested_level)
    return requested_level


def award_xp(current_xp: int, amount: int) -> XPAward:
    """Add experience points and report any level change.

    Raises:
        InvalidArgumentError: If current_xp or amount is negative.
    """
    _check_xp(current_xp, "current_xp")
    if amount < 0:
        raise InvalidArgumentError(
            f"XP award cannot be negative, got {amount}",
            argument="amount",
            value=amount,
        )

    new_xp = current_xp + amount
    award = XPAward(
        previous_xp=current_xp,
        new_xp=new_xp,
        previous_level=level_for_xp(current_xp),
        new_level=level_for_xp(new_xp),
    )
    if award.leveled_up:
        logger.info(
            "Character leveled up",
            previous_level=award.previous_level,
            new_level=award.new_level,
        )
    return award


def xp_for_challenge_rating(challenge_rating: str | int | float) -> int:
    """Get the XP award for defeating a creature (DMG p.275).

    Accepts fractional ratings as ``"1/4"`` or ``0.25``.

    Raises:
        InvalidArgumentError: If the rating is not in the table.
    """
    fractions = {0.125: "1/8", 0.25: "1/4", 0.5: "1/2"}
    if isinstance(challenge_rating, str):
        key = challenge_rating.strip()
    elif challenge_rating in fractions:
        key = fractions[challenge_rating]
    elif float(challenge_rating).is_integer():
        key = str(int(challenge_rating))
    else:
        key = str(challenge_rating)

    try:
        return XP_BY_CHALLENGE_RATING[key]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown challenge rating: {challenge_rating!r}",
            argument="challenge_rating",
            value=challenge_rating,
        ) from None


def encounter_xp(challenge_ratings: Iterable[str | int | float]) -> int:
    """Total XP for an encounter's creatures."""
    return sum(xp_for_challenge_rating(cr) for cr in challenge_ratings)


def class_features(class_name: str, level: int) -> list[str]:
    """Class features gained at exactly this level.

    Raises:
        UnknownClassError: If class_name is not one of the 13 classes.
        InvalidArgumentError: If level is outside 1-20.
    """
    check_level(level)
    character_class = CharacterClass.parse(class_name)
    return list(CLASS_FEATURES[character_class].get(level, []))


def level_up_delta(class_name: str, from_level: int, to_level: int) -> LevelUpDelta:
    """Describe what a character gains between two levels.

    Args:
        class_name: Class gaining the levels.
        from_level: Level before the change.
        to_level: Level after the change, not below from_level.

    Raises:
        UnknownClassError: If class_name is not one of the 13 classes.
        InvalidArgumentError: If a level is outside 1-20 or to_level is
            below from_level.
    """
    check_level(from_level, "from_level")
    check_level(to_level, "to_level")
    if to_level < from_level:
        raise InvalidArgumentError(
            f"Cannot level down from {from_level} to {to_level}",
            argument="to_level",
            value=to_level,
        )

    character_class = CharacterClass.parse(class_name)
    features = CLASS_FEATURES[character_class]
    gained = {
        level: list(features[level])
        for level in range(from_level + 1, to_level + 1)
        if features.get(level)
    }

    return LevelUpDelta(
        character_class=character_class,
        from_level=from_level,
        to_level=to_level,
        proficiency_bonus_before=proficiency_bonus(from_level),
        proficiency_bonus_after=proficiency_bonus(to_level),
        features_gained=gained,
        spell_slots_before=slots_for(character_class, from_level),
        spell_slots_after=slots_for(character_class, to_level),
        hit_die=CLASS_HIT_DIE[character_class],
        hit_dice_gained=to_level - from_level,
    )


__all__ = [
    "xp_threshold",
    "level_for_xp",
    "progress_to_next_level",
    "apply_milestone",
    "award_xp",
    "xp_for_challenge_rating",
    "encounter_xp",
    "class_features",
    "level_up_delta",
]
