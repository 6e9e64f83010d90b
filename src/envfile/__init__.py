"""envfile - load key/value definitions from .env files.

This package provides:
- dotenv: Reader, parser, immutable store and fluent builder
- config: Loader settings read from environment variables
- logger: Structured logging with text or JSON output
- exceptions: Exception classes with structured error info
"""

__version__ = "1.0.0"

from envfile.config import LoaderSettings
from envfile.dotenv import (
    Dotenv,
    DotenvBuilder,
    DotenvEntry,
    DotenvParser,
    DotenvReader,
    configure,
    load,
)
from envfile.exceptions import (
    ConfigurationError,
    DotenvError,
    EnvfileError,
    MalformedEntryError,
    MissingFileError,
)
from envfile.logger import Logger, StructuredLogger, create_logger, get_logger

__all__ = [
    "__version__",
    # Loader
    "Dotenv",
    "DotenvBuilder",
    "DotenvEntry",
    "DotenvParser",
    "DotenvReader",
    "configure",
    "load",
    # Config
    "LoaderSettings",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnvfileError",
    "DotenvError",
    "MissingFileError",
    "MalformedEntryError",
    "ConfigurationError",
]
