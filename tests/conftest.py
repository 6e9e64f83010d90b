"""Shared fixtures for envfile tests."""

from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

from envfile.logger import Logger


class RecordingLogger(Logger):
    """Logger that keeps every call in memory."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, message: str, kwargs: Dict[str, Any]) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, kwargs)

    def get_session_id(self) -> str:
        return "recorder"

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def write_env(tmp_path: Path):
    """Write a .env file into tmp_path and return its directory."""

    def _write(content: str, filename: str = ".env") -> Path:
        (tmp_path / filename).write_text(content, encoding="utf-8")
        return tmp_path

    return _write
