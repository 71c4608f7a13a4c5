"""
Core module for logtree

This module contains the fundamental classes:
- Level: Ordered severity value and the standard levels
- Record: Snapshot of one logging event
- Handler: Record sink interface
- Logger: Named node of the logger hierarchy
- LoggerRegistry: Name to logger cache owning the root logger
- LoggerConfig / LoggerBuilder: Configuration helpers
"""

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
]
