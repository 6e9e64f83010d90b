"""Common exceptions for envfile.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from envfile.exceptions import (
        EnvfileError,
        MissingFileError,
        MalformedEntryError,
    )
"""

from envfile.exceptions.base import (
    ConfigurationError,
    EnvfileError,
    ResourceNotFoundError,
    ValidationError,
)
from envfile.exceptions.dotenv import (
    DotenvError,
    MalformedEntryError,
    MissingFileError,
)

__all__ = [
    # Base exceptions
    "EnvfileError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    # Loader exceptions
    "DotenvError",
    "MissingFileError",
    "MalformedEntryError",
]
