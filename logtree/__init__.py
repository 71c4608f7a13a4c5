"""
logtree - hierarchical, level-filtered logging

Named loggers arranged in a dot-separated tree, each with its own
threshold, filter and handlers, optionally forwarding records to the
parent's handlers.
"""

__version__ = "1.0.0"

from logtree.core.errors import (
    HandlerPublishFailure,
    InvalidLevel,
    LogtreeError,
    UnresolvableParent,
)
from logtree.core.level import Level, STANDARD_LEVELS
from logtree.core.record import Record
from logtree.core.handler import Handler
from logtree.core.logger import Logger
from logtree.core.registry import LoggerRegistry, get_logger, get_registry, root
from logtree.core.logger_config import LoggerConfig, basic_config
from logtree.core.logger_builder import LoggerBuilder

# Import submodules (not all classes by default)
from logtree import filters
from logtree import formatters
from logtree import handlers

__all__ = [
    "Level",
    "STANDARD_LEVELS",
    "Record",
    "Handler",
    "Logger",
    "LoggerRegistry",
    "LoggerConfig",
    "LoggerBuilder",
    "get_logger",
    "get_registry",
    "root",
    "basic_config",
    "LogtreeError",
    "InvalidLevel",
    "UnresolvableParent",
    "HandlerPublishFailure",
    "filters",
    "formatters",
    "handlers",
]
