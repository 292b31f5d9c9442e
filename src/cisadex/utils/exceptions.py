"""Custom exceptions for Cisadex."""

from typing import Any


class CisadexError(Exception):
    """Base exception for all Cisadex errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(CisadexError):
    """Error in configuration or settings."""

    pass


class EntityDataError(CisadexError):
    """Entity collection cannot be used as supplied."""

    pass
