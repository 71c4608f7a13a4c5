"""File handler"""

from pathlib import Path
import threading
from typing import Callable, Optional

from logtree.core.errors import HandlerPublishFailure
from logtree.core.handler import Handler
from logtree.core.level import ALL, Level
from logtree.core.record import Record
from logtree.formatters.base_formatter import BaseFormatter
from logtree.formatters.simple_formatter import SimpleFormatter


class FileHandler(Handler):
    """
    Publish records to a file, one formatted record per line.

    Thread Safety:
        Writes, flush and close are serialized by one lock per handler.
    """

    def __init__(
        self,
        filepath: str,
        level: Level = ALL,
        formatter: Optional[BaseFormatter] = None,
        mode: str = "a",
        encoding: str = "utf-8",
        record_filter: Optional[Callable[[Record], bool]] = None,
    ):
        """
        Initialize file handler.

        The file is opened immediately and stays open until ``close``.

        Args:
            filepath: Path to log file
            level: Minimum level to publish
            formatter: Record formatter (default: SimpleFormatter)
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            record_filter: Optional record predicate
        """
        super().__init__(level, formatter or SimpleFormatter(), record_filter)
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self._file = None
        self._lock = threading.Lock()
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    def publish(self, record: Record) -> None:
        """Write record to file."""
        with self._lock:
            self._write(record)

    def _write(self, record: Record) -> None:
        """
        Write one record.

        Caller must hold lock.
        """
        if self._file is None:
            raise HandlerPublishFailure(f"File handler for {self.filepath} is closed")
        try:
            self._file.write(self.format(record) + "\n")
        except OSError as e:
            raise HandlerPublishFailure(f"Write to {self.filepath} failed: {e}") from e

    def flush(self) -> None:
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self) -> None:
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None
