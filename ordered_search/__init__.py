"""Binary search over caller-sorted sequences.

Three searches are provided, each as a plain function and as a class:

- :func:`binary_search` returns the index of an equal element or ``None``;
- :func:`binary_search_insertion_point` returns where a value can be inserted
  while keeping the sequence sorted;
- :func:`binary_search_with_comparator` is :func:`binary_search` driven by a
  three-way ``comparator(element, target)``.
"""

from .base import SearchAlgorithm
from .config import LoggingConfig, SearchConfig, load_config
from .errors import ConfigError, OrderedSearchError, UnknownAlgorithmError, UnsortedSequenceError
from .searching import (
    BinarySearch,
    ComparatorSearch,
    InsertionPointSearch,
    binary_search,
    binary_search_insertion_point,
    binary_search_with_comparator,
)
from .search_manager import SearchKind, SearchManager, SearchRegistry, execute_search, get_search_manager
from .utils import Comparator, is_sorted, midpoint, natural_comparator

__all__ = [
    "BinarySearch",
    "Comparator",
    "ComparatorSearch",
    "ConfigError",
    "InsertionPointSearch",
    "LoggingConfig",
    "OrderedSearchError",
    "SearchAlgorithm",
    "SearchConfig",
    "SearchKind",
    "SearchManager",
    "SearchRegistry",
    "UnknownAlgorithmError",
    "UnsortedSequenceError",
    "binary_search",
    "binary_search_insertion_point",
    "binary_search_with_comparator",
    "execute_search",
    "get_search_manager",
    "is_sorted",
    "load_config",
    "midpoint",
    "natural_comparator",
]
