"""
Log level value type

Levels are ordered severity values identified by a name and an integer rank.
Two sentinels bound the rank space: ALL admits every record and OFF admits
none. Neither sentinel is ever used as a message severity.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
import sys
from typing import Dict

from logtree.core.errors import InvalidLevel

MIN_RANK = -sys.maxsize - 1
MAX_RANK = sys.maxsize


@total_ordering
@dataclass(frozen=True, eq=False)
class Level:
    """
    Immutable severity value.

    Levels compare and hash by rank only, so two levels with different
    names but the same rank are equal.
    """

    name: str
    rank: int

    def __post_init__(self):
        """Validate name and rank."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidLevel(f"Level name must be a non-empty string: {self.name!r}")
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise InvalidLevel(f"Level rank must be an integer: {self.rank!r}")
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidLevel(f"Level rank out of range: {self.rank}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank == other.rank

    def __lt__(self, other) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __hash__(self) -> int:
        return hash(self.rank)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Level({self.name!r}, {self.rank})"

    @property
    def is_sentinel(self) -> bool:
        """True for the ALL and OFF threshold-only levels."""
        return self.rank in (MIN_RANK, MAX_RANK)

    def admits(self, severity: "Level") -> bool:
        """
        Check whether this level, used as a threshold, admits a severity.

        Args:
            severity: Level of the record being checked

        Returns:
            True if the severity is at or above this threshold
        """
        if self.rank == MAX_RANK or severity.is_sentinel:
            return False
        return severity.rank >= self.rank

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to a standard Level.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            The matching standard Level

        Raises:
            InvalidLevel: If level_str names no standard level
        """
        if isinstance(level_str, str):
            level = STANDARD_LEVELS.get(level_str.upper())
            if level is not None:
                return level
        raise InvalidLevel(f"Invalid log level: {level_str!r}")

    @property
    def color_code(self) -> str:
        """ANSI color code for this level."""
        return _COLORS.get(self.name, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


ALL = Level("ALL", MIN_RANK)
TRACE = Level("TRACE", 5)
DEBUG = Level("DEBUG", 10)
CONFIG = Level("CONFIG", 20)
INFO = Level("INFO", 30)
WARNING = Level("WARNING", 40)
SEVERE = Level("SEVERE", 50)
OFF = Level("OFF", MAX_RANK)

Level.ALL = ALL
Level.TRACE = TRACE
Level.DEBUG = DEBUG
Level.CONFIG = CONFIG
Level.INFO = INFO
Level.WARNING = WARNING
Level.SEVERE = SEVERE
Level.OFF = OFF

# Default level set, ascending by rank
STANDARD_LEVELS: Dict[str, Level] = {
    level.name: level
    for level in (ALL, TRACE, DEBUG, CONFIG, INFO, WARNING, SEVERE, OFF)
}

_COLORS: Dict[str, str] = {
    "TRACE": "\033[37m",    # White
    "DEBUG": "\033[36m",    # Cyan
    "CONFIG": "\033[34m",   # Blue
    "INFO": "\033[32m",     # Green
    "WARNING": "\033[33m",  # Yellow
    "SEVERE": "\033[31m",   # Red
}
