"""Exception hierarchy shared by the engine, dashboard and config layers."""

from __future__ import annotations


class HateGuardError(Exception):
    """Base class for all HateGuard errors."""


class EmptyInputError(HateGuardError, ValueError):
    """Raised when the text to analyze is empty or whitespace-only.

    This is a validation failure: callers should prompt the user to retry
    rather than treat it as fatal.
    """

    def __init__(self, message: str = "Please enter some text to analyze") -> None:
        super().__init__(message)


class DashboardError(HateGuardError):
    """Raised when the dashboard content file is missing or malformed."""


class ConfigError(HateGuardError):
    """Raised when an environment setting cannot be parsed."""
