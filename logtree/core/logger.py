"""
Logger - named node of the logger hierarchy

Loggers are normally obtained from a LoggerRegistry, which owns them and
wires up the parent chain. A logger keeps only a weak reference to its
parent.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, TYPE_CHECKING, Union
import threading
import weakref

from logtree.core.errors import InvalidLevel, UnresolvableParent
from logtree.core.handler import Handler
from logtree.core.level import (
    Level,
    STANDARD_LEVELS,
    INFO,
    TRACE,
    DEBUG,
    CONFIG,
    WARNING,
    SEVERE,
)
from logtree.core.record import Record

if TYPE_CHECKING:
    from logtree.core.logger_config import LoggerConfig

RecordFilter = Callable[[Record], bool]


class Logger:
    """
    Named logger with its own threshold, filter, handlers and propagation.

    Thread Safety:
        Level, level set, filter, handler list and propagate flag are
        guarded by one lock per logger. Handlers are called outside it.
    """

    def __init__(
        self,
        name: str,
        parent: Optional["Logger"] = None,
        level: Level = INFO,
        levels: Optional[Mapping[str, Level]] = None,
        handlers: Optional[Iterable[Handler]] = None,
        propagate: bool = True,
    ):
        """
        Initialize logger.

        Args:
            name: Dot-separated logger name
            parent: Parent logger (None only for the root)
            level: Initial threshold, must belong to the level set
            levels: Recognised level set (default: standard levels)
            handlers: Initial handlers, copied into a new list
            propagate: Forward admitted records to the parent

        Raises:
            InvalidLevel: If level is not a Level of the level set
        """
        self._name = name
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._levels: Dict[str, Level] = dict(levels if levels is not None else STANDARD_LEVELS)
        self._level = level
        self._filter: Optional[RecordFilter] = None
        self._handlers: List[Handler] = []
        self._propagate = bool(propagate)
        self._lock = threading.RLock()
        self._metrics = {"published": 0, "dropped": 0}

        if not self.valid_level(level):
            raise InvalidLevel(f"Level {level!r} is not valid for logger '{name}'")
        for handler in handlers or ():
            self.add_handler(handler)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional["Logger"]:
        """Parent logger, or None for a root."""
        if self._parent_ref is None:
            return None
        parent = self._parent_ref()
        if parent is None:
            raise UnresolvableParent(f"Parent of logger '{self._name}' no longer exists")
        return parent

    @property
    def level(self) -> Level:
        with self._lock:
            return self._level

    @property
    def levels(self) -> Dict[str, Level]:
        """Copy of the recognised level set."""
        with self._lock:
            return dict(self._levels)

    @property
    def filter(self) -> Optional[RecordFilter]:
        with self._lock:
            return self._filter

    @property
    def handlers(self) -> List[Handler]:
        """Snapshot of the handler list in registration order."""
        with self._lock:
            return list(self._handlers)

    @property
    def propagate(self) -> bool:
        with self._lock:
            return self._propagate

    @propagate.setter
    def propagate(self, value: bool) -> None:
        with self._lock:
            self._propagate = bool(value)

    def valid_level(self, level: Any) -> bool:
        """
        Check if a value is a valid Level for this logger.

        Args:
            level: Candidate level

        Returns:
            True if level is a Level registered in this logger's level set
        """
        if not isinstance(level, Level):
            return False
        with self._lock:
            return self._levels.get(level.name) == level

    def set_level(self, level: Level) -> None:
        """Replace the threshold. Invalid levels leave it unchanged."""
        if self.valid_level(level):
            with self._lock:
                self._level = level

    def set_levels(self, levels: Union[Mapping[str, Level], Iterable[Level]]) -> None:
        """
        Replace the recognised level set.

        Args:
            levels: Mapping of name to Level, or an iterable of Levels.
                    Anything else, any non-Level member, or a set that
                    no longer holds the current threshold is ignored.
        """
        self._replace_levels(levels, None)

    def _replace_levels(
        self,
        levels: Union[Mapping[str, Level], Iterable[Level]],
        level: Optional[Level],
    ) -> None:
        if isinstance(levels, Mapping):
            candidates = list(levels.values())
        elif isinstance(levels, Iterable) and not isinstance(levels, (str, bytes)):
            candidates = list(levels)
        else:
            return
        if not candidates or not all(isinstance(item, Level) for item in candidates):
            return
        table = {item.name: item for item in candidates}
        with self._lock:
            threshold = level if isinstance(level, Level) and table.get(level.name) == level else self._level
            # The threshold must stay a member of the level set
            if table.get(threshold.name) != threshold:
                return
            self._levels = table
            self._level = threshold

    def set_filter(self, record_filter: Optional[RecordFilter]) -> None:
        """
        Set a filter to control output on this logger.

        After passing the level check, the logger calls the filter to decide
        whether a record should really be published. None clears it.
        """
        if record_filter is not None and not callable(record_filter):
            return
        with self._lock:
            self._filter = record_filter

    def add_handler(self, handler: Handler) -> None:
        """Add a handler. None and non-Handler values are ignored."""
        if not isinstance(handler, Handler):
            return
        with self._lock:
            self._handlers.append(handler)

    def remove_handler(self, handler: Handler) -> bool:
        """
        Remove a handler.

        Args:
            handler: Handler to remove

        Returns:
            True if the handler was removed, False if it was not attached
        """
        with self._lock:
            try:
                self._handlers.remove(handler)
            except ValueError:
                return False
            return True

    def configure(self, config: "LoggerConfig") -> "Logger":
        """
        Apply a configuration to this logger.

        Handlers built from the configuration are appended to the existing
        ones.

        Args:
            config: Logger configuration

        Returns:
            This logger
        """
        if config.levels is not None:
            self._replace_levels(config.levels, config.level)
        if config.level is not None:
            self.set_level(config.level)
        for handler in config.create_handlers():
            self.add_handler(handler)
        if config.filter is not None:
            self.set_filter(config.filter)
        if config.propagate is not None:
            self.propagate = config.propagate
        return self

    def is_loggable(self, record: Record) -> bool:
        """Check if this logger's threshold admits a record."""
        return self.level.admits(record.level)

    def is_enabled_for(self, level: Level) -> bool:
        """Check if a record at ``level`` would pass this logger's threshold."""
        return isinstance(level, Level) and self.level.admits(level)

    def log(self, level: Level, message: Any, *args: Any) -> None:
        """
        Log a message at the given level.

        Args:
            level: Severity; non-Level values and sentinels are ignored
            message: Message text or an exception
            *args: Positional arguments for formatter interpolation
        """
        if not isinstance(level, Level) or level.is_sentinel:
            return
        self.dispatch(Record.create(self._name, level, message, args))

    def dispatch(self, record: Record) -> None:
        """
        Publish a record to this logger's handlers, then to its ancestors.

        Records rejected by the threshold or the filter are dropped silently.
        The same record instance travels up the hierarchy and each ancestor
        re-applies its own checks. Handler errors propagate to the caller.

        Args:
            record: Record to publish
        """
        self._dispatch(record, set())

    def _dispatch(self, record: Record, published: Set[int]) -> None:
        with self._lock:
            threshold = self._level
            record_filter = self._filter
            handlers = list(self._handlers)
            propagate = self._propagate

        if not threshold.admits(record.level):
            self._count("dropped")
            return
        if record_filter is not None and not record_filter(record):
            self._count("dropped")
            return

        self._count("published")
        for handler in handlers:
            # Inherited copies of an ancestor's handler publish only once
            if id(handler) in published:
                continue
            if handler.is_loggable(record):
                published.add(id(handler))
                handler.publish(record)

        if propagate and self._parent_ref is not None:
            # A collected parent ends propagation instead of failing the log call
            parent = self._parent_ref()
            if parent is not None:
                parent._dispatch(record, published)

    def _count(self, key: str) -> None:
        with self._lock:
            self._metrics[key] += 1

    def get_metrics(self) -> dict:
        """Get dispatch counters for this logger."""
        with self._lock:
            return self._metrics.copy()

    def trace(self, message: Any, *args: Any) -> None:
        """Log trace message."""
        self.log(TRACE, message, *args)

    def debug(self, message: Any, *args: Any) -> None:
        """Log debug message."""
        self.log(DEBUG, message, *args)

    def config(self, message: Any, *args: Any) -> None:
        """Log static configuration message."""
        self.log(CONFIG, message, *args)

    def info(self, message: Any, *args: Any) -> None:
        """Log info message."""
        self.log(INFO, message, *args)

    def warning(self, message: Any, *args: Any) -> None:
        """Log warning message."""
        self.log(WARNING, message, *args)

    def severe(self, message: Any, *args: Any) -> None:
        """Log severe message."""
        self.log(SEVERE, message, *args)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, level={self.level})"
