"""Tests for logging configuration."""

from __future__ import annotations

import structlog

from dnd_engine.core.logging import (
    add_app_context,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestLogging:
    """Tests for the structlog setup."""

    def test_app_context_added(self) -> None:
        """Every event is tagged with the engine name."""
        event = add_app_context(None, "info", {"event": "rolled"})
        assert event["app"] == "dnd_engine"

    def test_configure_and_log_json(self, capsys) -> None:
        """JSON logging renders key/value context."""
        configure_logging(level="DEBUG", json_format=True)
        try:
            get_logger("test").info("Dice rolled", total=17)
            out = capsys.readouterr().out
            assert '"total": 17' in out
            assert '"app": "dnd_engine"' in out
        finally:
            structlog.reset_defaults()

    def test_bound_context(self) -> None:
        """Bound context variables are visible until cleared."""
        bind_context(character_id=7)
        try:
            assert structlog.contextvars.get_contextvars()["character_id"] == 7
        finally:
            clear_context()
        assert "character_id" not in structlog.contextvars.get_contextvars()
