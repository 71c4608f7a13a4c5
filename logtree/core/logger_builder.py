"""Logger builder pattern"""

from pathlib import Path
from typing import Callable, Dict, List, Optional

from logtree.core.handler import Handler
from logtree.core.level import Level
from logtree.core.logger import Logger
from logtree.core.logger_config import LoggerConfig
from logtree.core.record import Record
from logtree.core.registry import LoggerName, LoggerRegistry, get_registry
from logtree.formatters.base_formatter import BaseFormatter


class LoggerBuilder:
    """
    Builder that resolves a named logger and configures it in one go.

    Example:
        logger = (LoggerBuilder()
            .with_name("svc.db")
            .with_level(Level.DEBUG)
            .with_console()
            .with_file("logs/db.log", rotating=True)
            .build())
    """

    def __init__(self, registry: Optional[LoggerRegistry] = None):
        self._registry = registry
        self._name: LoggerName = None
        self._level: Optional[Level] = None
        self._levels: Optional[Dict[str, Level]] = None
        self._filter: Optional[Callable[[Record], bool]] = None
        self._propagate: Optional[bool] = None
        self._formatter: Optional[BaseFormatter] = None
        self._console_enabled = False
        self._colored = False
        self._stream = None
        self._file_path: Optional[Path] = None
        self._rotating_file = False
        self._max_file_size = LoggerConfig.max_file_size
        self._max_backup_files = LoggerConfig.max_backup_files
        self._custom_handlers: List[Handler] = []

    def with_name(self, name: LoggerName) -> "LoggerBuilder":
        """Set logger name (None for the root logger)."""
        self._name = name
        return self

    def with_level(self, level: Level) -> "LoggerBuilder":
        """Set logger threshold."""
        self._level = level
        return self

    def with_levels(self, levels: Dict[str, Level]) -> "LoggerBuilder":
        """Set the recognised level set."""
        self._levels = dict(levels)
        return self

    def with_filter(self, record_filter: Callable[[Record], bool]) -> "LoggerBuilder":
        """
        Set the logger filter.

        Example:
            from logtree.filters import PatternFilter

            logger = (LoggerBuilder()
                .with_name("app")
                .with_filter(PatternFilter(r"^heartbeat", exclude=True))
                .build())
        """
        self._filter = record_filter
        return self

    def with_propagate(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable forwarding to the parent logger."""
        self._propagate = enabled
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Set the formatter used by builder-created handlers."""
        self._formatter = formatter
        return self

    def with_console(self, colored: bool = False, stream=None) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._colored = colored
        self._stream = stream
        return self

    def with_file(
        self,
        filepath: str,
        rotating: bool = False,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
    ) -> "LoggerBuilder":
        """Enable file output."""
        self._file_path = Path(filepath)
        self._rotating_file = rotating
        if max_bytes is not None:
            self._max_file_size = max_bytes
        if backup_count is not None:
            self._max_backup_files = backup_count
        return self

    def add_handler(self, handler: Handler) -> "LoggerBuilder":
        """
        Add a custom handler.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def build(self) -> Logger:
        """Resolve the named logger and apply the collected settings."""
        config = LoggerConfig(
            level=self._level,
            levels=self._levels,
            filter=self._filter,
            propagate=self._propagate,
            handlers=list(self._custom_handlers),
            console_output=self._console_enabled,
            colored_output=self._colored,
            stream=self._stream,
            log_file=str(self._file_path) if self._file_path else None,
            rotating_file=self._rotating_file,
            max_file_size=self._max_file_size,
            max_backup_files=self._max_backup_files,
            formatter=self._formatter,
        )

        registry = self._registry if self._registry is not None else get_registry()
        return registry.get(self._name).configure(config)
