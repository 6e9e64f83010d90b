"""Errors raised while reading and parsing .env files."""

from pathlib import Path
from typing import Union

from envfile.exceptions.base import EnvfileError, ResourceNotFoundError, ValidationError


class DotenvError(EnvfileError):
    """Base for every failure raised by the load chain."""


class MissingFileError(ResourceNotFoundError, DotenvError):
    """The configured .env file does not exist or cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str = "file not found"):
        self.path = str(path)
        super().__init__(
            code="MISSING_FILE",
            message=f"Could not read {self.path}: {reason}",
            details={"path": self.path},
        )


class MalformedEntryError(ValidationError, DotenvError):
    """A line of the .env file does not match the grammar.

    Attributes:
        line_number: 1-based number of the offending line
        line: Raw text of the offending line
    """

    def __init__(self, line_number: int, line: str, reason: str = "malformed entry"):
        self.line_number = line_number
        self.line = line
        super().__init__(
            code="MALFORMED_ENTRY",
            message=f"Malformed entry at line {line_number}: {reason}",
            details={"line_number": line_number, "line": line},
        )
