"""
envfile Logger Module

Usage:
    from envfile.logger import get_logger, create_logger

    logger = get_logger()
    logger.info("Loaded .env", entries=4)

    logger = create_logger(name="envfile", level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (e.g., ENVFILE for "envfile")
"""

import logging
import os
from typing import Dict, Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

_loggers: Dict[str, Logger] = {}


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "envfile" -> "ENVFILE"
        "envfile.parser" -> "ENVFILE_PARSER"
        "my-app" -> "MY_APP"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = "envfile",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance.

    Parameters that are not provided are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON where PREFIX is derived from
    the name. The level defaults to WARNING so that loading a file stays
    quiet unless asked otherwise.
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "envfile") -> Logger:
    """Get the shared logger for ``name``, creating it from the environment once."""
    logger = _loggers.get(name)
    if logger is None:
        logger = create_logger(name=name)
        _loggers[name] = logger
    return logger


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
]
