"""Immutable, queryable result of loading a .env file."""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, overload

from envfile.dotenv.entry import DotenvEntry


class Dotenv:
    """Entries loaded from a .env file, layered under the real environment.

    Lookups always prefer the environment: a variable that is set in the
    process wins over the same key in the file. The environment is read on
    every lookup; only ``entries()`` is a snapshot.

    ``in`` and ``[]`` follow ``get`` and so see environment variables too,
    while ``len()`` and iteration cover only the keys defined in the file:
    ``"PATH" in env`` can be true although ``PATH`` is never iterated.

    Example:
        env = Dotenv([DotenvEntry("PORT", "8000")], environ={"PORT": "9000"})
        env.get("PORT")           # "9000"
        env.get("MISSING", "x")   # "x"
    """

    def __init__(
        self,
        entries: Iterable[DotenvEntry],
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._environ = environ
        file_values: Dict[str, str] = {}
        for entry in entries:
            file_values[entry.key] = entry.value
        self._file_values = MappingProxyType(file_values)
        self._file_entries = frozenset(DotenvEntry(k, v) for k, v in file_values.items())
        self._env_entries = frozenset(DotenvEntry(k, v) for k, v in self.environ.items())

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def entries(self) -> FrozenSet[DotenvEntry]:
        """Environment variables as they were when this object was built."""
        return self._env_entries

    def file_entries(self) -> FrozenSet[DotenvEntry]:
        """Entries sourced from the file, one per key (last definition wins)."""
        return self._file_entries

    @overload
    def get(self, key: str) -> Optional[str]: ...

    @overload
    def get(self, key: str, default: str) -> str: ...

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Value from the environment, else from the file, else ``default``."""
        value = self.environ.get(key)
        if value is not None:
            return value
        return self._file_values.get(key, default)

    def as_dict(self) -> Dict[str, str]:
        """Copy of the file-sourced key/value map."""
        return dict(self._file_values)

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._file_values)

    def __len__(self) -> int:
        return len(self._file_values)

    def __repr__(self) -> str:
        return f"Dotenv(keys={sorted(self._file_values)})"


__all__ = ["Dotenv"]
