"""
Sorting component для algokit

In-place сортировки изменяемых последовательностей с выбором алгоритма.
"""

from algokit.sorting.algorithms import (
    SortAlgorithm,
    SupportsLessThan,
    insertion_sort,
    merge_sort,
    sort_with,
)
from algokit.sorting.sortable import SortableList

__all__ = [
    # Types
    "SortAlgorithm",
    "SupportsLessThan",
    "SortableList",
    # Functions
    "insertion_sort",
    "merge_sort",
    "sort_with",
]
