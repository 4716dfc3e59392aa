"""Custom exceptions for spin box operations."""

from typing import Any


class SpinBoxError(Exception):
    """Base exception for spin box operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class SpinBoxConfigError(SpinBoxError):
    """Raised when spin box settings are invalid (e.g. min greater than max)."""


class SpinBoxDisposedError(SpinBoxError):
    """Raised when a disposed controller is used."""
