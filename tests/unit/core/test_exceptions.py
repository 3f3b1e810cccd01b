"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from dnd_engine.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    DndEngineError,
    InvalidArgumentError,
    InvalidLevelError,
    UnknownClassError,
)


class TestDndEngineError:
    """Tests for the base DndEngineError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = DndEngineError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = DndEngineError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(DndEngineError("Test", details={"x": 1}))
        assert "DndEngineError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestRulesExceptions:
    """Tests for rules domain exceptions."""

    def test_invalid_argument_context(self) -> None:
        """InvalidArgumentError records the argument and rejected value."""
        exc = InvalidArgumentError("Bad die", argument="die", value=7)
        assert exc.details == {"argument": "die", "value": 7}

    def test_invalid_argument_keeps_zero_value(self) -> None:
        """A falsy rejected value is still recorded."""
        exc = InvalidArgumentError("Bad count", argument="count", value=0)
        assert exc.details["value"] == 0

    def test_invalid_level_context(self) -> None:
        """InvalidLevelError records the requested level."""
        exc = InvalidLevelError("Out of range", requested_level=21)
        assert exc.details["requested_level"] == 21

    def test_unknown_class_context(self) -> None:
        """UnknownClassError records the class name."""
        exc = UnknownClassError("Unknown", class_name="Blood Hunter")
        assert exc.details["class_name"] == "Blood Hunter"

    def test_dice_roll_error_context(self) -> None:
        """DiceRollError records the expression."""
        exc = DiceRollError("Invalid", expression="1d")
        assert exc.details["expression"] == "1d"

    @pytest.mark.parametrize(
        "exc_type",
        [InvalidArgumentError, InvalidLevelError, UnknownClassError, DiceRollError, ConfigurationError],
    )
    def test_inheritance(self, exc_type: type[DndEngineError]) -> None:
        """Every engine error can be caught as DndEngineError."""
        with pytest.raises(DndEngineError):
            raise exc_type("boom")

    def test_not_value_error(self) -> None:
        """Engine errors pass through pydantic validators unwrapped."""
        assert not issubclass(InvalidArgumentError, ValueError)
