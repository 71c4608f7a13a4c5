"""
Record filters module

Provides reusable predicates for logger and handler filtering.
"""

from logtree.filters.base_filter import AllOf, AnyOf, BaseFilter, Not
from logtree.filters.level_filter import LevelFilter
from logtree.filters.pattern_filter import PatternFilter

__all__ = [
    "AllOf",
    "AnyOf",
    "BaseFilter",
    "LevelFilter",
    "Not",
    "PatternFilter",
]
