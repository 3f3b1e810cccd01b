"""Custom exception hierarchy for the D&D 5E rules engine.

Every error the engine raises inherits from DndEngineError, so a host
application can catch one type at its boundary while still telling a
malformed argument apart from an out-of-range milestone level or an
unrecognised class name.

Example:
    >>> from dnd_engine.core.exceptions import InvalidLevelError
    >>> raise InvalidLevelError("Level out of range", requested_level=25)
"""

from __future__ import annotations

from typing import Any


class DndEngineError(Exception):
    """Base exception for all rules engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Rules Domain Exceptions
# =============================================================================


class InvalidArgumentError(DndEngineError):
    """Raised when a computation receives malformed input.

    Examples are a die size outside the fixed denominations, a negative
    item weight, or a level below 1. Always recoverable by the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid argument error with argument context.

        Args:
            message: Human-readable error description.
            argument: Name of the offending argument.
            value: The rejected value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if argument:
            combined_details["argument"] = argument
        if value is not None:
            combined_details["value"] = value
        super().__init__(message, details=combined_details)


class InvalidLevelError(DndEngineError):
    """Raised when a milestone level falls outside 1-20.

    The engine never clamps a requested level; callers surface this
    error to the user instead.
    """

    def __init__(
        self,
        message: str,
        *,
        requested_level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if requested_level is not None:
            combined_details["requested_level"] = requested_level
        super().__init__(message, details=combined_details)


class UnknownClassError(DndEngineError):
    """Raised when a class name is not one of the 13 known classes."""

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if class_name is not None:
            combined_details["class_name"] = class_name
        super().__init__(message, details=combined_details)


class DiceRollError(DndEngineError):
    """Raised when dice notation is invalid or a random source misbehaves."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DndEngineError):
    """Raised when engine configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "DndEngineError",
    "InvalidArgumentError",
    "InvalidLevelError",
    "UnknownClassError",
    "DiceRollError",
    "ConfigurationError",
]
