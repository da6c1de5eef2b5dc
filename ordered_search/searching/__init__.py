"""Binary search variants over sorted sequences."""

from .binary_search import BinarySearch, binary_search
from .comparator_search import ComparatorSearch, binary_search_with_comparator
from .insertion_point import InsertionPointSearch, binary_search_insertion_point

__all__ = [
    "BinarySearch",
    "ComparatorSearch",
    "InsertionPointSearch",
    "binary_search",
    "binary_search_insertion_point",
    "binary_search_with_comparator",
]
