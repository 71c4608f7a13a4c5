"""
Exception hierarchy for logtree

Admission-control rejections are not errors and never raise; these types
cover invalid values, broken hierarchy invariants and handler failures.
"""


class LogtreeError(Exception):
    """Base class for all logtree errors."""


class InvalidLevel(LogtreeError, ValueError):
    """A value that does not conform to the Level contract was supplied."""


class UnresolvableParent(LogtreeError):
    """A logger's parent reference no longer resolves to a live logger."""


class HandlerPublishFailure(LogtreeError):
    """A handler failed while rendering or writing a record."""
