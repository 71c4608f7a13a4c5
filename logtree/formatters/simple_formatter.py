"""
Simple formatter

Prints a brief, human readable summary of a record, typically two lines.
"""

from datetime import timezone
import traceback

from logtree.core.record import Record
from logtree.formatters.base_formatter import BaseFormatter


class SimpleFormatter(BaseFormatter):
    """
    Two-line summary formatter.

    Output looks like::

        Mon, 19 Oct 2026 10:15:00 GMT svc.db
        INFO: connection opened

    When the record carries an exception, its traceback follows. The
    traceback header is dropped because the ``LEVEL: message`` line
    already shows it.
    """

    DATE_FORMAT = "%a, %d %b %Y %H:%M:%S GMT"

    def format(self, record: Record) -> str:
        stamp = record.timestamp.astimezone(timezone.utc).strftime(self.DATE_FORMAT)
        text = f"{stamp} {record.logger_name}\n{record.level.name}: {self.format_message(record)}"
        if record.thrown is not None:
            lines = traceback.format_exception(
                type(record.thrown), record.thrown, record.thrown.__traceback__
            )
            # Last line repeats "ExcType: message"
            trace = "".join(lines[:-1]).rstrip("\n")
            if trace:
                text += "\n" + trace
        return text

    def __repr__(self) -> str:
        return "SimpleFormatter()"
