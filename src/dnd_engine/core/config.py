"""Configuration management for the D&D 5E rules engine.

Settings are loaded with pydantic-settings from environment variables and
an optional .env file. The rules engine is pure, so configuration only
covers the few policy knobs the rules leave open (dice bounds, strictness
of expertise and class-name handling) plus logging.

Example:
    >>> from dnd_engine.core.config import get_settings
    >>> get_settings().dice.max_dice_count
    100

Environment Variables:
    DND_ENGINE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_ENGINE_JSON_LOGS: Render logs as JSON
    DND_ENGINE_DICE_MAX_DICE_COUNT: Largest dice count accepted per roll
    DND_ENGINE_DICE_SEED: Seed for reproducible dice resolvers
    DND_ENGINE_RULES_EXPERTISE_REQUIRES_PROFICIENCY: Reject expertise without proficiency
    DND_ENGINE_RULES_STRICT_CLASS_NAMES: Raise on unrecognised class names
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_engine.core.constants import DEFAULT_MAX_DICE_COUNT
from dnd_engine.core.exceptions import ConfigurationError


class DiceSettings(BaseSettings):
    """Configuration for the dice resolver.

    Attributes:
        max_dice_count: Largest number of dice accepted in one roll.
        seed: Optional seed for reproducible resolvers.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_ENGINE_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_dice_count: int = Field(
        default=DEFAULT_MAX_DICE_COUNT,
        ge=1,
        le=1000,
        description="Largest dice count accepted per roll",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for reproducible dice resolvers",
    )


class RulesSettings(BaseSettings):
    """Configuration for rules the source material leaves ambiguous.

    Attributes:
        expertise_requires_proficiency: Reject expertise in a skill the
            character is not proficient in instead of implying proficiency.
        strict_class_names: Raise UnknownClassError for unrecognised class
            names instead of treating them as non-casters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_ENGINE_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    expertise_requires_proficiency: bool = Field(
        default=False,
        description="Reject expertise without proficiency",
    )
    strict_class_names: bool = Field(
        default=False,
        description="Raise on unrecognised class names",
    )


class Settings(BaseSettings):
    """Top-level engine settings.

    Attributes:
        app_name: Application name used in log context.
        debug: Enable debug mode.
        log_level: Engine logging level.
        json_logs: Render logs as JSON.
        dice: Dice resolver settings.
        rules: Rules policy settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E Rules Engine",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    dice: DiceSettings = Field(default_factory=DiceSettings)
    rules: RulesSettings = Field(default_factory=RulesSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the engine settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid values.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DiceSettings",
    "RulesSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
