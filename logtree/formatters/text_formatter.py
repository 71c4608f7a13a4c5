"""
Text formatter with customizable template

Formats records using a template string with placeholders
"""

from typing import Optional

from logtree.core.record import Record
from logtree.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format records using a customizable single-line template.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:8}] [{logger}] {message}"

    def __init__(self, template: Optional[str] = None, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Level name
                     - {rank}: Level rank
                     - {message}: Message with arguments applied
                     - {logger}: Logger name
                     - {thread}: Thread name
                     - {thread_id}: Thread ID
            timestamp_format: strftime format for timestamps; a trailing
                     ``%f`` is cut to milliseconds

        Example:
            formatter = TextFormatter("{level} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, record: Record) -> str:
        """
        Format record using the template.

        Args:
            record: Record to format

        Returns:
            Formatted string
        """
        timestamp_str = record.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]

        format_dict = {
            "timestamp": timestamp_str,
            "level": record.level.name,
            "rank": record.level.rank,
            "message": self.format_message(record),
            "logger": record.logger_name,
            "thread": record.thread_name,
            "thread_id": record.thread_id,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {format_dict['message']}"

    def __repr__(self) -> str:
        return f"TextFormatter(template='{self.template}')"
