"""
Pattern-based filter using regular expressions

Filters records based on raw message content
"""

import re
from typing import Pattern, Union

from logtree.core.record import Record
from logtree.filters.base_filter import BaseFilter


class PatternFilter(BaseFilter):
    """
    Filter records based on regex pattern matching.

    Matches against the raw message, or the exception text for records
    that carry a thrown exception. Can include or exclude matches.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, drop matching records. If False, keep only matching records.
            case_sensitive: Whether pattern matching is case-sensitive

        Example:
            # Drop heartbeat noise
            record_filter = PatternFilter(r"^heartbeat", exclude=True)
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude

    def should_log(self, record: Record) -> bool:
        text = record.message if record.thrown is None else str(record.thrown)
        matches = self.pattern.search(text or "") is not None
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode})"
