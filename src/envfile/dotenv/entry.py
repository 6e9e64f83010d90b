"""Value types produced and consumed by the parser."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DotenvEntry:
    """A key/value pair parsed from a .env file.

    Attributes:
        key: Variable name
        value: Variable value, possibly empty
    """

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class RawLine:
    """One line of source text and its 1-based line number."""

    number: int
    text: str
