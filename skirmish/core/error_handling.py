"""
Exception hierarchy for the battle engine.

Two families of failure exist. Configuration errors are raised while setting a
battle up (missing templates, malformed data files, bad intervals) and mean
the game content is broken. Precondition errors are raised when the engine is
driven in a way its protocol forbids; they point at a bug in the caller.
Input that matches no command, or names no living monster, is not an error.
"""

from typing import Any

from catchery import log_error


class GameException(Exception):
    """Base class for every error raised by the battle engine."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class BattleConfigurationError(GameException):
    """Raised when a battle cannot be built from the supplied content."""


class BattlePreconditionError(GameException):
    """Raised when the engine is driven outside of its protocol."""


def require_non_empty_string(
    value: Any, param_name: str, context: dict[str, Any] | None = None
) -> str:
    """
    Validates that a value is a non-empty string.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        BattleConfigurationError: If validation fails
    """
    if not value or not isinstance(value, str) or not value.strip():
        context = {
            **(context or {}),
            "param_name": param_name,
            "value": value,
            "type": type(value).__name__,
        }
        log_error(f"{param_name} must be a non-empty string, got: {value!r}", context)
        raise BattleConfigurationError(f"Invalid {param_name}: {value!r}", context)
    return value.strip()
