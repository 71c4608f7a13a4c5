"""
Filter predicates

A filter is any callable taking a Record and returning a bool; that is all
``Logger.set_filter`` and ``Handler.set_filter`` require. BaseFilter adds
composition with ``&``, ``|`` and ``~`` so small filters can be combined
without writing a new class.
"""

from abc import ABC, abstractmethod
from typing import Callable, Tuple

from logtree.core.record import Record

RecordPredicate = Callable[[Record], bool]


class BaseFilter(ABC):
    """
    Abstract base class for composable record filters.

    Example:
        quiet = LevelFilter(max_level="DEBUG") & PatternFilter(r"^poll")
        logger.set_filter(~quiet)
    """

    @abstractmethod
    def should_log(self, record: Record) -> bool:
        """
        Determine if a record should be published.

        Args:
            record: The record to filter

        Returns:
            True if the record should be published, False otherwise
        """

    def __call__(self, record: Record) -> bool:
        return self.should_log(record)

    def __and__(self, other: RecordPredicate) -> "BaseFilter":
        return AllOf(self, other)

    def __rand__(self, other: RecordPredicate) -> "BaseFilter":
        return AllOf(other, self)

    def __or__(self, other: RecordPredicate) -> "BaseFilter":
        return AnyOf(self, other)

    def __ror__(self, other: RecordPredicate) -> "BaseFilter":
        return AnyOf(other, self)

    def __invert__(self) -> "BaseFilter":
        return Not(self)


class AllOf(BaseFilter):
    """Admit a record only if every predicate admits it. Stops at the first rejection."""

    def __init__(self, *predicates: RecordPredicate):
        if not all(callable(predicate) for predicate in predicates):
            raise TypeError("AllOf takes record predicates")
        self.predicates: Tuple[RecordPredicate, ...] = predicates

    def should_log(self, record: Record) -> bool:
        return all(predicate(record) for predicate in self.predicates)

    def __repr__(self) -> str:
        return f"AllOf{self.predicates!r}"


class AnyOf(BaseFilter):
    """Admit a record if any predicate admits it. Stops at the first acceptance."""

    def __init__(self, *predicates: RecordPredicate):
        if not all(callable(predicate) for predicate in predicates):
            raise TypeError("AnyOf takes record predicates")
        self.predicates: Tuple[RecordPredicate, ...] = predicates

    def should_log(self, record: Record) -> bool:
        return any(predicate(record) for predicate in self.predicates)

    def __repr__(self) -> str:
        return f"AnyOf{self.predicates!r}"


class Not(BaseFilter):
    """Invert a predicate."""

    def __init__(self, predicate: RecordPredicate):
        if not callable(predicate):
            raise TypeError("Not takes a record predicate")
        self.predicate = predicate

    def should_log(self, record: Record) -> bool:
        return not self.predicate(record)

    def __invert__(self) -> RecordPredicate:
        return self.predicate

    def __repr__(self) -> str:
        return f"Not({self.predicate!r})"
