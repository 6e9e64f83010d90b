"""Base exception classes for envfile.

All envfile exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class EnvfileError(Exception):
    """Base exception for all envfile errors.

    Attributes:
        code: Machine-readable error code (e.g., "MALFORMED_ENTRY")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code (e.g., "MISSING_FILE")
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(EnvfileError):
    """Base for all validation errors.

    Used when input data fails validation rules.
    """


class ResourceNotFoundError(EnvfileError):
    """Base for resource not found errors."""


class ConfigurationError(EnvfileError):
    """Base for configuration and setup errors.

    Used when loader configuration is invalid or incomplete.
    """
