"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndEngineError: Base exception for all engine errors.
        InvalidArgumentError, InvalidLevelError, UnknownClassError,
        DiceRollError, ConfigurationError.

    Configuration:
        Settings: Engine settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging, get_logger, bind_context, clear_context.
"""

from __future__ import annotations

from dnd_engine.core.config import (
    DiceSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_engine.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    DndEngineError,
    InvalidArgumentError,
    InvalidLevelError,
    UnknownClassError,
)
from dnd_engine.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DndEngineError",
    "InvalidArgumentError",
    "InvalidLevelError",
    "UnknownClassError",
    "DiceRollError",
    "ConfigurationError",
    # Configuration
    "Settings",
    "DiceSettings",
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
