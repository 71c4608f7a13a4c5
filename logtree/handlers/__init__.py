"""Handlers module - concrete record sinks"""

from logtree.handlers.console_handler import ConsoleHandler
from logtree.handlers.file_handler import FileHandler
from logtree.handlers.rotating_file_handler import RotatingFileHandler

__all__ = ["ConsoleHandler", "FileHandler", "RotatingFileHandler"]
