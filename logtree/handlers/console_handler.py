"""Console handler with optional ANSI colors"""

import sys
from typing import Callable, Optional

from logtree.core.errors import HandlerPublishFailure
from logtree.core.handler import Handler
from logtree.core.level import ALL, Level
from logtree.core.record import Record
from logtree.formatters.base_formatter import BaseFormatter
from logtree.formatters.simple_formatter import SimpleFormatter


class ConsoleHandler(Handler):
    """Publish records to a console stream (stderr by default)."""

    def __init__(
        self,
        level: Level = ALL,
        formatter: Optional[BaseFormatter] = None,
        stream=None,
        colored: bool = False,
        record_filter: Optional[Callable[[Record], bool]] = None,
    ):
        """
        Initialize console handler.

        Args:
            level: Minimum level to publish
            formatter: Record formatter (default: SimpleFormatter)
            stream: Output stream (default: sys.stderr at publish time)
            colored: Wrap output in the level's ANSI color
            record_filter: Optional record predicate
        """
        super().__init__(level, formatter or SimpleFormatter(), record_filter)
        self.stream = stream
        self.colored = colored

    def publish(self, record: Record) -> None:
        """Write record to the stream."""
        msg = self.format(record)
        if self.colored:
            msg = f"{record.level.color_code}{msg}{record.level.reset_code}"

        stream = self.stream or sys.stderr
        try:
            stream.write(msg + "\n")
            stream.flush()
        except OSError as e:
            raise HandlerPublishFailure(f"Console write failed: {e}") from e

    def flush(self) -> None:
        """Flush stream."""
        (self.stream or sys.stderr).flush()
