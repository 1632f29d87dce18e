"""Error types raised by the strict and dispatching entry points."""

from __future__ import annotations

from typing import Any


class GideonTasksError(Exception):
    """
    Base error carrying a machine-readable code.

    The query helpers in task_status, fees and trust never raise; only the
    explicit strict variants and the action dispatcher do.
    """

    def __init__(self, error: str, message: str, details: dict[str, Any] | None = None) -> None:
        self.error = error
        self.message = message
        self.details = details if details is not None else {}
        super().__init__(f"[{error}] {message}")


class InvalidTransitionError(GideonTasksError):
    """Raised when a status change is not in the transition table."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("INVALID_TRANSITION", message, details)


class ActionNotAvailableError(GideonTasksError):
    """Raised when a role asks for an action the current status does not offer."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("ACTION_NOT_AVAILABLE", message, details)


class ConfigurationError(GideonTasksError):
    """Raised when the configuration file is missing or malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("INVALID_CONFIG", message, details)
