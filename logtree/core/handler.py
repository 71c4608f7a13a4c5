"""
Handler interface

Handlers take records from a Logger and export them. Concrete console and
file handlers live in ``logtree.handlers``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Optional, TYPE_CHECKING

from logtree.core.level import ALL, Level
from logtree.core.record import Record

if TYPE_CHECKING:
    from logtree.formatters.base_formatter import BaseFormatter


class Handler(ABC):
    """
    Abstract base class for record sinks.

    A handler has its own threshold and an optional filter. The logger asks
    ``is_loggable`` before calling ``publish``; publish failures are raised
    to the caller.
    """

    def __init__(
        self,
        level: Level = ALL,
        formatter: Optional["BaseFormatter"] = None,
        record_filter: Optional[Callable[[Record], bool]] = None,
    ):
        """
        Initialize handler.

        Args:
            level: Minimum level this handler publishes (default: ALL)
            formatter: Record formatter (default: uses record's __str__)
            record_filter: Optional predicate applied after the level check
        """
        self._level = level if isinstance(level, Level) else ALL
        self.formatter = formatter
        self._filter = record_filter if callable(record_filter) else None

    @property
    def level(self) -> Level:
        return self._level

    def set_level(self, level: Level) -> None:
        """Replace the threshold. Non-Level values are ignored."""
        if isinstance(level, Level):
            self._level = level

    @property
    def filter(self) -> Optional[Callable[[Record], bool]]:
        return self._filter

    def set_filter(self, record_filter: Optional[Callable[[Record], bool]]) -> None:
        """Replace the filter; None clears it, non-callables are ignored."""
        if record_filter is None or callable(record_filter):
            self._filter = record_filter

    def is_loggable(self, record: Record) -> bool:
        """
        Check if this handler would publish a given record.

        Args:
            record: Record to check

        Returns:
            True if the record passes both the level and the filter
        """
        if not self._level.admits(record.level):
            return False
        if self._filter is not None and not self._filter(record):
            return False
        return True

    @abstractmethod
    def publish(self, record: Record) -> None:
        """
        Emit a record.

        Args:
            record: Record admitted by the logger and by ``is_loggable``
        """
        pass

    def format(self, record: Record) -> str:
        """Render a record with the configured formatter."""
        if self.formatter is not None:
            return self.formatter.format(record)
        return str(record)

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release handler resources."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self._level})"
