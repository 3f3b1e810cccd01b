"""Pytest configuration and shared fixtures.

This module provides common fixtures for the rules engine test suite:
settings isolation, sample characters and deterministic dice.
"""

from __future__ import annotations

import os
import random
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from dnd_engine.engine.dice import DiceResolver
    from dnd_engine.models.records import AbilityScores, CharacterProfile


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from DND_ENGINE_* variables and cached settings."""
    from dnd_engine.core.config import clear_settings_cache

    for key in list(os.environ):
        if key.startswith("DND_ENGINE_"):
            monkeypatch.delenv(key)

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def strict_rules(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable strict expertise and class-name handling via the environment."""
    from dnd_engine.core.config import clear_settings_cache

    monkeypatch.setenv("DND_ENGINE_RULES_EXPERTISE_REQUIRES_PROFICIENCY", "true")
    monkeypatch.setenv("DND_ENGINE_RULES_STRICT_CLASS_NAMES", "true")
    clear_settings_cache()


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def sample_scores() -> AbilityScores:
    """Ability scores of a typical level-5 fighter."""
    from dnd_engine.models.records import AbilityScores

    return AbilityScores(
        strength=16,
        dexterity=14,
        constitution=15,
        intelligence=10,
        wisdom=12,
        charisma=8,
    )


@pytest.fixture
def sample_fighter(sample_scores: AbilityScores) -> CharacterProfile:
    """A level-5 human fighter proficient in Athletics."""
    from dnd_engine.models.records import CharacterProfile

    return CharacterProfile(
        name="Test Fighter",
        class_name="Fighter",
        level=5,
        experience=7000,
        scores=sample_scores,
        skills=["Athletics", "Perception", "save:strength", "Save: Constitution"],
        equipment=["Longsword (3 lbs)", "Chain Mail (55 lbs)", "Backpack (5 lbs)", "Torch"],
    )


# =============================================================================
# Dice Fixtures
# =============================================================================


class SequenceSource:
    """Random source that replays a fixed sequence of faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = list(faces)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self._faces.pop(0)


@pytest.fixture
def sequence_resolver() -> Callable[..., DiceResolver]:
    """Factory for resolvers that roll the given faces in order."""
    from dnd_engine.engine.dice import DiceResolver

    def factory(*faces: int, max_dice: int | None = None) -> DiceResolver:
        return DiceResolver(SequenceSource(faces), max_dice=max_dice)

    return factory


@pytest.fixture
def dice_resolver() -> DiceResolver:
    """A seeded resolver for statistical tests."""
    from dnd_engine.engine.dice import DiceResolver

    return DiceResolver(random.Random(1234))
