"""
SortableList: список с методами сортировки на месте.

Тонкая обёртка над list: методы делегируют функциям из
algokit.sorting.algorithms и мутируют сам список.
"""

from algokit.sorting.algorithms import SortAlgorithm, sort_with


class SortableList(list):
    """
    list с методами сортировки выбранным алгоритмом.

    Examples:
        >>> data = SortableList([3, 2, 1])
        >>> data.insertion_sort()
        >>> data
        [1, 2, 3]
    """

    def sort_with(self, algorithm: SortAlgorithm | str) -> None:
        """Сортировка на месте выбранным алгоритмом."""
        sort_with(self, algorithm)

    def insertion_sort(self) -> None:
        self.sort_with(SortAlgorithm.INSERTION_SORT)

    def merge_sort(self) -> None:
        self.sort_with(SortAlgorithm.MERGE_SORT)
