"""Level band filter"""

from typing import Optional, Union

from logtree.core.errors import InvalidLevel
from logtree.core.level import Level
from logtree.core.record import Record
from logtree.filters.base_filter import BaseFilter

LevelSpec = Union[Level, str, None]


def _resolve(level: LevelSpec) -> Optional[Level]:
    if level is None or isinstance(level, Level):
        return level
    if isinstance(level, str):
        return Level.from_string(level)
    raise InvalidLevel(f"Expected a Level or level name: {level!r}")


class LevelFilter(BaseFilter):
    """
    Admit records whose level lies in an inclusive band.

    A logger threshold only sets a lower bound. Attached to a handler this
    filter adds an upper one, e.g. sending TRACE..DEBUG to a debug file
    while a second handler takes INFO and above.

    Bounds are Levels or standard level names (case-insensitive). Custom
    levels must be passed as Level objects. Ranks are compared, so a custom
    level falls into the band by its rank alone.
    """

    def __init__(self, min_level: LevelSpec = None, max_level: LevelSpec = None):
        """
        Args:
            min_level: Lowest admitted level, or None for no lower bound
            max_level: Highest admitted level, or None for no upper bound

        Raises:
            InvalidLevel: If a bound is not a Level or a standard level name
            ValueError: If min_level ranks above max_level
        """
        self.min_level = _resolve(min_level)
        self.max_level = _resolve(max_level)
        if (self.min_level is not None and self.max_level is not None
                and self.min_level > self.max_level):
            raise ValueError(f"Empty level band: {self.min_level} > {self.max_level}")

    def should_log(self, record: Record) -> bool:
        level = record.level
        if self.min_level is not None and level < self.min_level:
            return False
        return self.max_level is None or level <= self.max_level

    def __repr__(self) -> str:
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
