"""
Logger configuration management

A LoggerConfig describes settings applied to one logger through
``Logger.configure``. Fields left as None keep the logger's current value.
Console and file settings describe handlers that ``configure`` creates and
appends ahead of the explicit ``handlers``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from logtree.core.errors import InvalidLevel
from logtree.core.handler import Handler
from logtree.core.level import DEBUG, INFO, WARNING, Level
from logtree.core.record import Record

if TYPE_CHECKING:
    from logtree.core.logger import Logger
    from logtree.core.registry import LoggerRegistry
    from logtree.formatters.base_formatter import BaseFormatter


@dataclass
class LoggerConfig:
    """
    Logger configuration.
    """

    # Admission settings
    level: Optional[Level] = None
    levels: Optional[Dict[str, Level]] = None
    filter: Optional[Callable[[Record], bool]] = None
    propagate: Optional[bool] = None

    # Handlers appended to the logger
    handlers: List[Handler] = field(default_factory=list)

    # Console settings
    console_output: bool = False
    colored_output: bool = False
    stream: Any = None

    # File settings
    log_file: Optional[str] = None
    rotating_file: bool = False
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    max_backup_files: int = 5
    encoding: str = "utf-8"

    # Formatter for the console and file handlers (default: SimpleFormatter)
    formatter: Optional["BaseFormatter"] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = Level.from_string(self.level)
        if self.level is not None and not isinstance(self.level, Level):
            raise InvalidLevel(f"level must be a Level: {self.level!r}")
        if self.levels is not None:
            if not all(isinstance(level, Level) for level in self.levels.values()):
                raise InvalidLevel("levels must map names to Level values")
            if self.level is not None and self.levels.get(self.level.name) != self.level:
                raise InvalidLevel(f"level {self.level} is not part of levels")
        if self.filter is not None and not callable(self.filter):
            raise ValueError("filter must be callable")
        if not all(isinstance(handler, Handler) for handler in self.handlers):
            raise ValueError("handlers must be Handler instances")
        if self.max_file_size <= 0:
            raise ValueError("max_file_size must be positive")
        if self.max_backup_files < 0:
            raise ValueError("max_backup_files cannot be negative")
        if self.rotating_file and not self.log_file:
            raise ValueError("rotating_file requires log_file")

    def create_handlers(self) -> List[Handler]:
        """
        Build the handlers this configuration describes.

        Returns:
            Console handler, then file handler, then the explicit handlers,
            each present only when configured
        """
        from logtree.handlers.console_handler import ConsoleHandler
        from logtree.handlers.file_handler import FileHandler
        from logtree.handlers.rotating_file_handler import RotatingFileHandler

        handlers: List[Handler] = []
        if self.console_output:
            handlers.append(ConsoleHandler(
                formatter=self.formatter,
                stream=self.stream,
                colored=self.colored_output,
            ))
        if self.log_file:
            if self.rotating_file:
                handlers.append(RotatingFileHandler(
                    self.log_file,
                    max_bytes=self.max_file_size,
                    backup_count=self.max_backup_files,
                    formatter=self.formatter,
                    encoding=self.encoding,
                ))
            else:
                handlers.append(FileHandler(
                    self.log_file,
                    formatter=self.formatter,
                    encoding=self.encoding,
                ))
        handlers.extend(self.handlers)
        return handlers

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration (changes nothing)."""
        return cls()

    @classmethod
    def basic(cls, stream=None, level: Level = INFO) -> "LoggerConfig":
        """
        Create the basic configuration: one console handler at INFO.

        Args:
            stream: Console stream (default: sys.stderr)
            level: Threshold for logger and handler
        """
        from logtree.handlers.console_handler import ConsoleHandler

        return cls(level=level, handlers=[ConsoleHandler(level=level, stream=stream)])

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging: colored console at DEBUG."""
        return cls(level=DEBUG, console_output=True, colored_output=True)

    @classmethod
    def production_config(cls, log_file: str = "logs/app.log") -> "LoggerConfig":
        """Create configuration for production: rotating file at WARNING."""
        return cls(
            level=WARNING,
            log_file=log_file,
            rotating_file=True,
            max_backup_files=10,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a plain dictionary.

        Level names are resolved against the standard levels.

        Args:
            data: Dictionary with configuration keys

        Returns:
            New LoggerConfig instance

        Raises:
            InvalidLevel: If a level name is unknown
            ValueError: If a value fails validation
        """
        known = {
            "level", "propagate", "console_output", "colored_output",
            "log_file", "rotating_file", "max_file_size", "max_backup_files",
            "encoding",
        }
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)


def basic_config(
    registry: Optional["LoggerRegistry"] = None,
    stream=None,
    level: Level = INFO,
) -> "Logger":
    """
    Give the root logger one console handler at INFO.

    Args:
        registry: Registry to configure (default: process-wide registry)
        stream: Console stream (default: sys.stderr)
        level: Threshold for root logger and handler

    Returns:
        The configured root logger
    """
    from logtree.core.registry import get_registry

    if registry is None:
        registry = get_registry()
    return registry.root().configure(LoggerConfig.basic(stream=stream, level=level))
