"""Reader interface and the filesystem reader used by the loader."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from envfile.exceptions import MissingFileError


class Reader(ABC):
    """Abstract source of raw .env lines"""

    @abstractmethod
    def read(self) -> List[str]:
        """
        Return the source lines without line terminators

        Raises:
            MissingFileError: If the source does not exist or cannot be read
        """
        pass


class DotenvReader(Reader):
    """Resolve ``directory / filename`` and return the file's lines.

    A directory argument that already names the file (``"config/.env"``
    with filename ``".env"``) is accepted as the file path itself.
    """

    def __init__(self, directory: Union[str, Path] = ".", filename: str = ".env") -> None:
        self.directory = Path(directory).expanduser()
        self.filename = filename

    @property
    def path(self) -> Path:
        if self.directory.name == self.filename and not self.directory.is_dir():
            return self.directory
        return self.directory / self.filename

    def read(self) -> List[str]:
        path = self.path
        try:
            # Universal newlines: \r\n and \r both end a line
            with path.open(encoding="utf-8-sig") as f:
                lines = [line.rstrip("\n") for line in f]
        except FileNotFoundError as e:
            raise MissingFileError(path) from e
        except IsADirectoryError as e:
            raise MissingFileError(path, "is a directory") from e
        except PermissionError as e:
            raise MissingFileError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise MissingFileError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise MissingFileError(path, e.strerror or str(e)) from e
        return lines


__all__ = ["Reader", "DotenvReader"]
