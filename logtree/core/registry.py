"""
Logger registry - one canonical Logger per name

The registry owns every logger it creates and resolves dot-separated names
into a tree rooted at the root logger. A process-wide default registry
backs ``get_logger`` and ``root``; tests and embedders can build their own.
"""

from __future__ import annotations
from types import ModuleType
from typing import Dict, Iterable, List, Optional, Union
import threading

from logtree.core.errors import InvalidLevel
from logtree.core.level import INFO, Level, STANDARD_LEVELS
from logtree.core.logger import Logger

ROOT_LOGGER_NAME = "root"
SEPARATOR = "."

LoggerName = Union[str, ModuleType, None]


class LoggerRegistry:
    """
    Cache of named loggers.

    Loggers are created on first request together with any missing
    ancestors. A new logger copies its parent's level, level set and
    handlers; later changes on the parent are not carried over.

    Thread Safety:
        Resolution runs under one registry lock, so concurrent first
        requests for a name yield the same instance.

    Example:
        registry = LoggerRegistry()
        db = registry.get("svc.db")
        assert db.parent is registry.get("svc")
        assert registry.get("svc").parent is registry.root()
    """

    def __init__(self, root_level: Level = INFO, levels: Optional[Iterable[Level]] = None):
        """
        Initialize registry.

        Args:
            root_level: Threshold of the root logger (default: INFO)
            levels: Level set given to the root (default: standard levels)

        Raises:
            InvalidLevel: If levels holds a non-Level, or root_level is not
                          a member of the level set
        """
        if levels is None:
            self._levels: Dict[str, Level] = dict(STANDARD_LEVELS)
        else:
            levels = list(levels)
            for level in levels:
                if not isinstance(level, Level):
                    raise InvalidLevel(f"Not a Level: {level!r}")
            self._levels = {level.name: level for level in levels}
        if not isinstance(root_level, Level) or self._levels.get(root_level.name) != root_level:
            raise InvalidLevel(f"Root level {root_level!r} is not in the level set")
        self._root_level = root_level
        self._cache: Dict[str, Logger] = {}
        self._root: Optional[Logger] = None
        self._lock = threading.RLock()

    def root(self) -> Logger:
        """Return the root logger, creating it on first use."""
        with self._lock:
            if self._root is None:
                self._root = Logger(
                    ROOT_LOGGER_NAME,
                    level=self._root_level,
                    levels=self._levels,
                )
            return self._root

    def get(self, name: LoggerName = None) -> Logger:
        """
        Find or create a logger.

        Args:
            name: Dot-separated name, a module (its ``__name__`` is used),
                  or None/""/"root" for the root logger

        Returns:
            The logger registered under that name

        Raises:
            TypeError: If name is not a string, module or None
            ValueError: If name contains an empty segment
        """
        resolved = self._normalize(name)
        if resolved is None:
            return self.root()
        with self._lock:
            return self._resolve(resolved)

    def _resolve(self, name: str) -> Logger:
        if name == ROOT_LOGGER_NAME:
            return self.root()
        logger = self._cache.get(name)
        if logger is not None:
            return logger

        head, sep, _ = name.rpartition(SEPARATOR)
        parent = self._resolve(head) if sep else self.root()
        logger = Logger(
            name,
            parent=parent,
            level=parent.level,
            levels=parent.levels,
            handlers=parent.handlers,
        )
        self._cache[name] = logger
        return logger

    @staticmethod
    def _normalize(name: LoggerName) -> Optional[str]:
        if isinstance(name, ModuleType):
            name = name.__name__
        if name is None or name == "":
            return None
        if not isinstance(name, str):
            raise TypeError(f"Logger name must be a string or module: {name!r}")
        if any(not segment for segment in name.split(SEPARATOR)):
            raise ValueError(f"Logger name has an empty segment: {name!r}")
        return name

    def names(self) -> List[str]:
        """Names of all non-root loggers created so far."""
        with self._lock:
            return list(self._cache.keys())

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __repr__(self) -> str:
        return f"LoggerRegistry(loggers={len(self)})"


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LoggerRegistry()
        return _default_registry


def get_logger(name: LoggerName = None) -> Logger:
    """Find or create a logger in the process-wide registry."""
    return get_registry().get(name)


def root() -> Logger:
    """Return the root logger of the process-wide registry."""
    return get_registry().root()
