"""Dataclass-based settings for the .env loader

Provides typed loader configuration with environment variable support.
The prefix is parameterized so several applications can keep separate
settings in one process.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from envfile.exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    """Interpret an environment flag.

    Raises:
        ConfigurationError: If the value is set but not a recognised boolean
    """
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        "INVALID_BOOLEAN",
        f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}",
        {"variable": name, "value": raw},
    )


@dataclass
class LoaderSettings:
    """Where the .env file lives and how strictly it is loaded

    Attributes:
        directory: Directory containing the file (default: current directory)
        filename: Name of the file (default: .env)
        ignore_if_missing: Treat a missing file as empty instead of failing
        ignore_if_malformed: Skip malformed lines instead of failing
        system_properties: Write loaded entries into the process environment
    """

    directory: Union[str, Path] = "."
    filename: str = ".env"
    ignore_if_missing: bool = False
    ignore_if_malformed: bool = False
    system_properties: bool = False

    def __post_init__(self):
        if not self.filename:
            raise ConfigurationError("INVALID_FILENAME", "filename must not be empty")

    @classmethod
    def from_env(
        cls,
        prefix: str = "ENVFILE",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LoaderSettings":
        """Load loader settings from environment variables

        Args:
            prefix: Environment variable prefix
            environ: Mapping to read from (default: os.environ)

        Environment variables:
            {prefix}_DIRECTORY: Directory containing the file
            {prefix}_FILENAME: File name
            {prefix}_IGNORE_MISSING: Tolerate a missing file
            {prefix}_IGNORE_MALFORMED: Tolerate malformed lines
            {prefix}_SYSTEM_PROPERTIES: Inject entries into the process environment
        """
        env = os.environ if environ is None else environ

        def flag(suffix: str) -> bool:
            name = f"{prefix}_{suffix}"
            return parse_bool(name, env.get(name), False)

        return cls(
            directory=env.get(f"{prefix}_DIRECTORY", "."),
            filename=env.get(f"{prefix}_FILENAME", ".env"),
            ignore_if_missing=flag("IGNORE_MISSING"),
            ignore_if_malformed=flag("IGNORE_MALFORMED"),
            system_properties=flag("SYSTEM_PROPERTIES"),
        )
