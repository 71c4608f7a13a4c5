"""Rotating file handler"""

from typing import Callable, Optional

from logtree.core.errors import HandlerPublishFailure
from logtree.core.level import ALL, Level
from logtree.core.record import Record
from logtree.formatters.base_formatter import BaseFormatter
from logtree.handlers.file_handler import FileHandler


class RotatingFileHandler(FileHandler):
    """
    File handler with size-based rotation.

    When the current file reaches ``max_bytes`` it is renamed to ``.1``,
    older backups shift up by one and the oldest beyond ``backup_count``
    is removed. Rotation and the write that follows it run under the
    handler lock.
    """

    def __init__(
        self,
        filepath: str,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        level: Level = ALL,
        formatter: Optional[BaseFormatter] = None,
        encoding: str = "utf-8",
        record_filter: Optional[Callable[[Record], bool]] = None,
    ):
        """
        Initialize rotating file handler.

        Args:
            filepath: Path to log file
            max_bytes: Maximum file size before rotation
            backup_count: Number of backup files to keep
            level: Minimum level to publish
            formatter: Record formatter (default: SimpleFormatter)
            encoding: File encoding (default: 'utf-8')
            record_filter: Optional record predicate
        """
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        super().__init__(
            filepath,
            level=level,
            formatter=formatter,
            mode="a",
            encoding=encoding,
            record_filter=record_filter,
        )

    def _backup_path(self, index: int):
        return self.filepath.with_name(f"{self.filepath.name}.{index}")

    def _should_rotate(self) -> bool:
        """Check if file should be rotated."""
        if not self._file:
            return False
        return self._file.tell() >= self.max_bytes

    def _do_rotate(self):
        """Perform file rotation."""
        if self._file:
            self._file.close()
            self._file = None

        if self.backup_count > 0:
            oldest = self._backup_path(self.backup_count)
            if oldest.exists():
                oldest.unlink()
            for i in range(self.backup_count - 1, 0, -1):
                src = self._backup_path(i)
                if src.exists():
                    src.rename(self._backup_path(i + 1))
            if self.filepath.exists():
                self.filepath.rename(self._backup_path(1))
        elif self.filepath.exists():
            self.filepath.unlink()

        self._open()

    def _write(self, record: Record) -> None:
        """Write record, rotating first if the file is full."""
        try:
            if self._should_rotate():
                self._do_rotate()
        except OSError as e:
            raise HandlerPublishFailure(f"Rotation of {self.filepath} failed: {e}") from e
        super()._write(record)
