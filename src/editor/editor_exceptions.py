"""Custom exceptions for editor operations."""

from typing import Any


class EditorError(Exception):
    """Base exception for editor operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class EditorClosedError(EditorError):
    """Raised when an editor is used after it has been closed."""


class EditorSettingsError(EditorError):
    """Raised when editor settings contain invalid values."""
