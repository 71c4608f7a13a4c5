"""
Base formatter interface

Formatters render a Record to text. Positional placeholder interpolation
happens here rather than at record construction.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence
import re

from logtree.core.record import Record

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def interpolate(template: str, args: Sequence[Any]) -> str:
    """
    Replace ``{0}``, ``{1}``... with the matching positional argument.

    Placeholders without a matching argument are left as they are.

    Example:
        interpolate("{0} took {1}ms", ("query", 12))  # "query took 12ms"
    """
    if not args:
        return template

    def replace(match: "re.Match") -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(replace, template)


class BaseFormatter(ABC):
    """
    Abstract base class for record formatters.

    Formatters convert Record objects into formatted strings.
    """

    @abstractmethod
    def format(self, record: Record) -> str:
        """
        Format a record into a string.

        Args:
            record: The record to format

        Returns:
            Formatted string representation of the record
        """
        pass

    def format_message(self, record: Record) -> str:
        """
        Render the record's message with its arguments applied.

        For a record carrying a thrown exception the exception text is used.
        """
        if record.thrown is not None:
            return str(record.thrown)
        return interpolate(record.message, record.args)

    def __call__(self, record: Record) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
