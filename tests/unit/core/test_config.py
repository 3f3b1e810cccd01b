"""Tests for configuration management."""

from __future__ import annotations

import pytest

from dnd_engine.core.config import (
    DiceSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_engine.core.constants import DEFAULT_MAX_DICE_COUNT
from dnd_engine.core.exceptions import ConfigurationError


class TestDiceSettings:
    """Tests for DiceSettings configuration."""

    def test_default_values(self) -> None:
        """Test default dice settings."""
        settings = DiceSettings()

        assert settings.max_dice_count == DEFAULT_MAX_DICE_COUNT == 100
        assert settings.seed is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Dice bound and seed come from the environment."""
        monkeypatch.setenv("DND_ENGINE_DICE_MAX_DICE_COUNT", "20")
        monkeypatch.setenv("DND_ENGINE_DICE_SEED", "42")

        settings = DiceSettings()

        assert settings.max_dice_count == 20
        assert settings.seed == 42


class TestRulesSettings:
    """Tests for RulesSettings configuration."""

    def test_defaults_are_permissive(self) -> None:
        """Expertise and class names are lenient by default."""
        settings = RulesSettings()

        assert settings.expertise_requires_proficiency is False
        assert settings.strict_class_names is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Strict modes can be enabled from the environment."""
        monkeypatch.setenv("DND_ENGINE_RULES_STRICT_CLASS_NAMES", "true")

        assert RulesSettings().strict_class_names is True


class TestSettings:
    """Tests for the main Settings class."""

    def test_default_settings(self) -> None:
        """Test default application settings."""
        settings = Settings()

        assert settings.app_name == "D&D 5E Rules Engine"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_nested_settings(self) -> None:
        """Test that nested settings are initialized."""
        settings = Settings()

        assert isinstance(settings.dice, DiceSettings)
        assert isinstance(settings.rules, RulesSettings)

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Log level is read from the environment."""
        monkeypatch.setenv("DND_ENGINE_LOG_LEVEL", "DEBUG")

        assert Settings().log_level == "DEBUG"


class TestGetSettings:
    """Tests for the get_settings singleton."""

    def test_returns_same_instance(self) -> None:
        """Test that get_settings returns cached instance."""
        assert get_settings() is get_settings()

    def test_clear_cache(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that clearing cache picks up new environment values."""
        first = get_settings()
        monkeypatch.setenv("DND_ENGINE_DICE_MAX_DICE_COUNT", "10")
        clear_settings_cache()

        second = get_settings()

        assert first is not second
        assert second.dice.max_dice_count == 10

    def test_invalid_environment_raises_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Invalid values surface as ConfigurationError."""
        monkeypatch.setenv("DND_ENGINE_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            get_settings()
