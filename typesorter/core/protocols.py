"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from .models import ProcessingStats


class ProgressReporter(Protocol):
    """Interface for user-facing output.

    Implementations:
    - RichProgressReporter: colored console output on stderr
    - QuietProgressReporter: warnings and errors only
    """

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a fatal error. Always shown, even when quiet."""
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        """Report detail only shown in verbose mode."""
        ...

    @abstractmethod
    def print_header(self, title: str) -> None:
        ...

    @abstractmethod
    def print_config(self, config_items: dict) -> None:
        ...

    @abstractmethod
    def print_stats(self, stats: ProcessingStats) -> None:
        ...
