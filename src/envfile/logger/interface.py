"""
Logger interface for envfile.

Abstract base class defining the logging contract that the loader,
parser and any caller-supplied logger implement.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for logging interface.

    Keyword arguments are structured context and are rendered next to the
    message by the concrete implementation.

    Example:
        class ListLogger(Logger):
            def info(self, message: str, **kwargs: Any) -> None:
                self.records.append(("INFO", message, kwargs))
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the current session ID.

        Returns:
            The unique session identifier for this logger instance.
        """
