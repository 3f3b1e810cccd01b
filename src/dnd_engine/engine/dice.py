"""Dice rolling with advantage, disadvantage and critical detection.

DiceResolver takes its randomness as a dependency: anything with a
``randint(a, b)`` method works, so tests can feed fixed sequences and
each worker in a concurrent host can own its own generator. Every roll
is single-shot and moves through IDLE -> ROLLING -> RESOLVED; nothing
is kept between rolls.

Free-form notation (``"2d6+3"``, ``"4d6kh3"``) is rolled through the d20
library by roll_notation.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Protocol

import d20

from dnd_engine.core.config import get_settings
from dnd_engine.core.constants import NATURAL_CRITICAL_FACE, NATURAL_FUMBLE_FACE
from dnd_engine.core.exceptions import DiceRollError, InvalidArgumentError
from dnd_engine.core.logging import get_logger
from dnd_engine.models.enums import AdvantageMode, DieType, RollState
from dnd_engine.models.records import RollRequest


logger = get_logger(__name__)


class RandomSource(Protocol):
    """Source of uniformly distributed integers.

    ``random.Random`` satisfies this protocol.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...


@dataclass(frozen=True)
class RollResult:
    """The outcome of one roll request.

    Attributes:
        die: The die rolled.
        count: Number of dice requested.
        mode: Advantage mode the roll was made with.
        modifier: Static modifier, applied once to the total.
        purpose: Caller's label for the roll (opaque).
        rolls: Every face rolled, including a discarded advantage die.
        kept: Faces that count towards the total.
        total: Sum of kept faces plus modifier.
        is_critical_success: The natural face of a d20 roll is a 20.
        is_critical_failure: The natural face of a d20 roll is a 1.
        state: Lifecycle state; RESOLVED for any returned result.
    """

    die: DieType
    count: int
    mode: AdvantageMode
    modifier: int
    purpose: str | None
    rolls: tuple[int, ...]
    kept: tuple[int, ...]
    total: int
    is_critical_success: bool
    is_critical_failure: bool
    state: RollState = RollState.RESOLVED

    @property
    def natural(self) -> int:
        """The selected face before the modifier (first die for multi-dice rolls)."""
        return self.kept[0]


@dataclass(frozen=True)
class NotationResult:
    """The outcome of a free-form dice notation roll.

    Attributes:
        expression: The notation as given.
        total: The evaluated total.
        dice: Faces of all dice that were kept.
        is_critical: The d20 library flagged a natural 20 on a d20.
        is_fumble: The d20 library flagged a natural 1 on a d20.
        breakdown: Human-readable roll breakdown.
    """

    expression: str
    total: int
    dice: tuple[int, ...]
    is_critical: bool
    is_fumble: bool
    breakdown: str


class DiceResolver:
    """Rolls dice under D&D 5E advantage rules.

    Example:
        >>> resolver = DiceResolver(random.Random(7))
        >>> result = resolver.roll(20, AdvantageMode.ADVANTAGE, modifier=5)
        >>> result.total == result.natural + 5
        True
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        *,
        max_dice: int | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            random_source: Source of randomness. Defaults to a private
                ``random.Random``, seeded from ``seed`` or the
                ``dice.seed`` setting.
            max_dice: Largest dice count accepted per roll. Defaults to
                the ``dice.max_dice_count`` setting.
            seed: Seed for the default random source.
        """
        settings = get_settings().dice
        if random_source is None:
            random_source = random.Random(seed if seed is not None else settings.seed)
        self._random = random_source
        self._max_dice = max_dice if max_dice is not None else settings.max_dice_count

    @property
    def max_dice(self) -> int:
        return self._max_dice

    def roll(
        self,
        die: int | str | DieType,
        mode: AdvantageMode | str = AdvantageMode.NORMAL,
        modifier: int = 0,
        *,
        count: int = 1,
        purpose: str | None = None,
    ) -> RollResult:
        """Roll dice and apply advantage rules.

        Normal rolls keep every die. Advantage and disadvantage roll a
        single die twice and keep the higher or lower face. The modifier
        is added once, after selection. Critical flags follow the
        natural face, so a multi-die d20 roll is judged by its first die.

        Args:
            die: Die size (4, 6, 8, 10, 12, 20, 100) or label ('d20').
            mode: Normal, advantage or disadvantage, by enum or name.
            modifier: Static modifier added to the total.
            count: Number of dice for a normal roll.
            purpose: Opaque label carried into the result.

        Returns:
            The resolved roll.

        Raises:
            InvalidArgumentError: For an unknown die or mode, a count
                outside 1..max_dice, or advantage on more than one die.
        """
        die_type = DieType.parse(die)
        mode = AdvantageMode.parse(mode)
        self._check_count(count, mode)

        state = RollState.IDLE
        logger.debug("Rolling dice", die=die_type.label, count=count, mode=mode, state=state)

        state = RollState.ROLLING
        if mode is AdvantageMode.NORMAL:
            rolls = tuple(self._face(die_type) for _ in range(count))
            kept = rolls
        else:
            rolls = (self._face(die_type), self._face(die_type))
            selected = max(rolls) if mode is AdvantageMode.ADVANTAGE else min(rolls)
            kept = (selected,)

        is_d20 = die_type is DieType.D20
        natural = kept[0]
        result = RollResult(
            die=die_type,
            count=count,
            mode=mode,
            modifier=modifier,
            purpose=purpose,
            rolls=rolls,
            kept=kept,
            total=sum(kept) + modifier,
            is_critical_success=is_d20 and natural == NATURAL_CRITICAL_FACE,
            is_critical_failure=is_d20 and natural == NATURAL_FUMBLE_FACE,
        )
        state = result.state

        logger.info(
            "Dice rolled",
            die=die_type.label,
            mode=mode,
            rolls=list(rolls),
            total=result.total,
            critical=result.is_critical_success,
            purpose=purpose,
            state=state,
        )
        return result

    def resolve(self, request: RollRequest) -> RollResult:
        """Roll a validated RollRequest."""
        return self.roll(
            request.die,
            request.mode,
            request.modifier,
            count=request.count,
            purpose=request.purpose,
        )

    def roll_check(
        self,
        modifier: int,
        *,
        mode: AdvantageMode = AdvantageMode.NORMAL,
        purpose: str | None = None,
    ) -> RollResult:
        """Roll a d20 ability check, saving throw or attack roll."""
        return self.roll(DieType.D20, mode, modifier, purpose=purpose)

    def _check_count(self, count: int, mode: AdvantageMode) -> None:
        if not 1 <= count <= self._max_dice:
            raise InvalidArgumentError(
                f"Dice count must be between 1 and {self._max_dice}, got {count}",
                argument="count",
                value=count,
            )
        if mode is not AdvantageMode.NORMAL and count != 1:
            raise InvalidArgumentError(
                f"{mode.value.capitalize()} applies to a single die, got count={count}",
                argument="count",
                value=count,
            )

    def _face(self, die: DieType) -> int:
        face = self._random.randint(1, int(die))
        if not 1 <= face <= die:
            raise DiceRollError(
                f"Random source returned {face} for a {die.label}",
                details={"face": face, "die": die.label},
            )
        return face


def _kept_dice(node: Any) -> list[int]:
    """Collect kept die faces from a d20 expression tree."""
    values: list[int] = []
    if isinstance(node, d20.Dice):
        for die in node.values:
            if die.kept:
                values.append(die.number)
    else:
        for child in getattr(node, "children", []):
            values.extend(_kept_dice(child))
    return values


def roll_notation(expression: str) -> NotationResult:
    """Roll free-form dice notation through the d20 library.

    These rolls use the d20 library's own randomness, not a DiceResolver
    source.

    Raises:
        DiceRollError: If the expression is empty or invalid.

    Example:
        >>> roll_notation("2d6+3").total in range(5, 16)
        True
    """
    if not expression or not expression.strip():
        raise DiceRollError("Empty dice expression", expression=expression)

    try:
        result = d20.roll(expression)
    except d20.RollError as exc:
        raise DiceRollError(f"Invalid dice expression: {exc}", expression=expression) from exc

    notation = NotationResult(
        expression=expression,
        total=result.total,
        dice=tuple(_kept_dice(result.expr)),
        is_critical=result.crit == d20.CritType.CRIT,
        is_fumble=result.crit == d20.CritType.FAIL,
        breakdown=result.result,
    )
    logger.info("Notation rolled", expression=expression, total=notation.total)
    return notation


__all__ = [
    "RandomSource",
    "RollResult",
    "NotationResult",
    "DiceResolver",
    "roll_notation",
]
