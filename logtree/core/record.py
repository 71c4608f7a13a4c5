"""
Log record data structure

A Record is the snapshot of one logging event. It is built once per log
call and handed read-only to every handler the dispatch reaches.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple
import threading

from logtree.core.errors import InvalidLevel
from logtree.core.level import Level


@dataclass(frozen=True, eq=False)
class Record:
    """
    Immutable log record.

    Carries either a message or a thrown exception. The message is kept
    raw; placeholder interpolation with ``args`` is left to formatters so
    each handler can render the same record its own way.
    """

    level: Level
    message: Optional[str]
    args: Tuple[Any, ...] = ()
    logger_name: str = ""
    thrown: Optional[BaseException] = None
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)

    def __post_init__(self):
        """Validate record after initialization."""
        if not isinstance(self.level, Level):
            raise InvalidLevel(f"level must be a Level: {self.level!r}")
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def create(
        cls,
        logger_name: str,
        level: Level,
        message: Any,
        args: Tuple[Any, ...] = (),
    ) -> "Record":
        """
        Build a record for a log call.

        Args:
            logger_name: Name of the originating logger
            level: Severity of the event
            message: Message text, or an exception to attach as ``thrown``
            args: Positional arguments for placeholder interpolation

        Returns:
            New Record instance
        """
        if isinstance(message, BaseException):
            return cls(
                level=level,
                message=None,
                args=tuple(args),
                logger_name=logger_name,
                thrown=message,
            )
        if not isinstance(message, str):
            message = str(message)
        return cls(
            level=level,
            message=message,
            args=tuple(args),
            logger_name=logger_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "args": list(self.args),
            "logger_name": self.logger_name,
            "thrown": repr(self.thrown) if self.thrown is not None else None,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
        }

    def __str__(self) -> str:
        text = self.message if self.thrown is None else repr(self.thrown)
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:8}] "
            f"[{self.logger_name}] "
            f"{text}"
        )
