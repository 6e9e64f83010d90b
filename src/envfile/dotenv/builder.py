"""Fluent configuration for loading a .env file.

Usage:
    from envfile import configure

    env = (
        configure()
        .directory("./config")
        .filename("app.env")
        .ignore_if_missing()
        .load()
    )
    env.get("DATABASE_URL")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

from envfile.config import LoaderSettings
from envfile.dotenv.parser import DotenvParser
from envfile.dotenv.reader import DotenvReader, Reader
from envfile.dotenv.store import Dotenv
from envfile.logger import Logger, get_logger

PropertySink = Callable[[str, str], None]
ReaderFactory = Callable[[Union[str, Path], str], Reader]


def _set_environ(key: str, value: str) -> None:
    os.environ[key] = value


class DotenvBuilder:
    """Collects loader options and wires Reader, Parser and Store together.

    The environment and the property sink are injectable so tests can run
    against plain dictionaries instead of the process environment.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        property_sink: Optional[PropertySink] = None,
        reader_factory: Optional[ReaderFactory] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._directory: Union[str, Path] = "."
        self._filename = ".env"
        self._throw_if_missing = True
        self._throw_if_malformed = True
        self._system_properties = False
        self._environ = environ
        self._property_sink = property_sink or _set_environ
        self._reader_factory: ReaderFactory = reader_factory or DotenvReader
        self._logger = logger or get_logger()

    @classmethod
    def from_settings(cls, settings: LoaderSettings, **kwargs) -> "DotenvBuilder":
        """Builder preconfigured from LoaderSettings; kwargs go to __init__."""
        builder = cls(**kwargs).directory(settings.directory).filename(settings.filename)
        if settings.ignore_if_missing:
            builder.ignore_if_missing()
        if settings.ignore_if_malformed:
            builder.ignore_if_malformed()
        if settings.system_properties:
            builder.system_properties()
        return builder

    def directory(self, path: Union[str, Path]) -> "DotenvBuilder":
        """Set the directory containing the .env file."""
        self._directory = path
        return self

    def filename(self, name: str) -> "DotenvBuilder":
        """Set the name of the .env file. The default is .env"""
        self._filename = name
        return self

    def ignore_if_missing(self) -> "DotenvBuilder":
        """Do not fail when the file is missing."""
        self._throw_if_missing = False
        return self

    def ignore_if_malformed(self) -> "DotenvBuilder":
        """Skip malformed lines instead of failing."""
        self._throw_if_malformed = False
        return self

    def system_properties(self) -> "DotenvBuilder":
        """Write every loaded entry into the process-wide property table."""
        self._system_properties = True
        return self

    def load(self) -> Dotenv:
        """Read, parse and wrap the configured file.

        Raises:
            MissingFileError: If the file is missing and ignore_if_missing was not set
            MalformedEntryError: If a line is malformed and ignore_if_malformed was not set
        """
        reader = self._reader_factory(self._directory, self._filename)
        parser = DotenvParser(
            reader,
            throw_if_missing=self._throw_if_missing,
            throw_if_malformed=self._throw_if_malformed,
            environ=self._environ,
            logger=self._logger,
        )
        dotenv = Dotenv(parser.parse(), environ=self._environ)

        # After the Store so entries() reflects the environment before injection
        if self._system_properties:
            for entry in dotenv.file_entries():
                self._property_sink(entry.key, entry.value)

        self._logger.info(
            "Loaded .env file",
            directory=str(self._directory),
            filename=self._filename,
            entries=len(dotenv),
            system_properties=self._system_properties,
        )
        return dotenv


def configure() -> DotenvBuilder:
    """Start configuring a loader with default options."""
    return DotenvBuilder()


def load() -> Dotenv:
    """Load ./.env with default options."""
    return DotenvBuilder().load()


__all__ = ["DotenvBuilder", "PropertySink", "ReaderFactory", "configure", "load"]
