"""
Formatters module

Provides the formatter interface and text formatter implementations.
"""

from logtree.formatters.base_formatter import BaseFormatter, interpolate
from logtree.formatters.simple_formatter import SimpleFormatter
from logtree.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "SimpleFormatter",
    "TextFormatter",
    "interpolate",
]
