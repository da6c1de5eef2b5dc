"""Exceptions raised by the ordered search library.

A missing target is never an error: searches report it as ``None``.
"""
from __future__ import annotations


class OrderedSearchError(Exception):
    """Base class for all library errors."""


class UnsortedSequenceError(OrderedSearchError, ValueError):
    """Raised when sortedness checking is enabled and the input is out of order."""

    def __init__(self, index: int) -> None:
        super().__init__(f"sequence is not sorted: element {index} is smaller than element {index - 1}")
        self.index = index


class UnknownAlgorithmError(OrderedSearchError, KeyError):
    """Raised when a search name is not registered."""


class ConfigError(OrderedSearchError, ValueError):
    """Raised when configuration cannot be parsed or validated."""
