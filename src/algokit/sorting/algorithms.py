"""
Sorting — In-place Comparison Sorts

Модуль реализует сортировки произвольных изменяемых последовательностей
(MutableSequence) с элементами, поддерживающими оператор `<`:
- Insertion sort: стабильная, O(n²), O(n) на уже отсортированном входе
- Merge sort: O(n log n), один временный буфер O(n) на каждый шаг слияния

Выбор алгоритма выполняется через закрытый enum SortAlgorithm и таблицу
диспетчеризации. Новый алгоритм = новый вариант enum + новая запись в таблице.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сортировка выполняется на месте; функции возвращают None
2. Результат: перестановка входа в неубывающем порядке
3. Последовательность вызывающей стороны не копируется целиком
   (merge sort работает по диапазонам индексов, без срезов)
4. Merge sort при равенстве берёт элемент из ПРАВОЙ половины
   (условие `left < right`, иначе right); поведение сохраняется как есть
"""

import logging
from collections.abc import Callable, MutableSequence
from enum import Enum
from typing import Any, Protocol, TypeVar

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================


class SupportsLessThan(Protocol):
    """Контракт элемента сортировки: полный порядок через `<`."""

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


class SortAlgorithm(str, Enum):
    """
    Алгоритм сортировки.

    Тег диспетчеризации, не хранит состояния.
    """

    INSERTION_SORT = "insertion_sort"
    MERGE_SORT = "merge_sort"


# =============================================================================
# INSERTION SORT
# =============================================================================


def insertion_sort(sequence: MutableSequence[T]) -> None:
    """
    Сортировка вставками на месте.

    Для каждой позиции i = 1..n-1 элемент сдвигается влево обменами,
    пока он строго меньше левого соседа.

    Args:
        sequence: Изменяемая последовательность (мутируется)

    Examples:
        >>> data = [3, 2, 1]
        >>> insertion_sort(data)
        >>> data
        [1, 2, 3]
    """
    for i in range(1, len(sequence)):
        j = i
        while j > 0 and sequence[j] < sequence[j - 1]:
            sequence[j], sequence[j - 1] = sequence[j - 1], sequence[j]
            j -= 1


# =============================================================================
# MERGE SORT
# =============================================================================


def merge_sort(sequence: MutableSequence[T]) -> None:
    """
    Сортировка слиянием на месте.

    Разбиение в точке n // 2 (левая половина получает первые ⌊n/2⌋
    элементов), рекурсивная сортировка половин, слияние через временный
    буфер длины диапазона с последующим копированием обратно.

    При равенстве элементов первым берётся элемент правой половины.

    Args:
        sequence: Изменяемая последовательность (мутируется)

    Examples:
        >>> data = ["c", "b", "a"]
        >>> merge_sort(data)
        >>> data
        ['a', 'b', 'c']
    """
    _merge_sort_range(sequence, 0, len(sequence))


def _merge_sort_range(sequence: MutableSequence[T], start: int, end: int) -> None:
    """Сортирует sequence[start:end] на месте."""
    length = end - start
    if length <= 1:
        return

    mid = start + length // 2
    _merge_sort_range(sequence, start, mid)
    _merge_sort_range(sequence, mid, end)
    _merge(sequence, start, mid, end)


def _merge(sequence: MutableSequence[T], start: int, mid: int, end: int) -> None:
    """Слияние отсортированных диапазонов [start, mid) и [mid, end)."""
    merged: list[T] = []

    idx_left = start
    idx_right = mid

    while idx_left < mid and idx_right < end:
        left_val = sequence[idx_left]
        right_val = sequence[idx_right]

        if left_val < right_val:
            merged.append(left_val)
            idx_left += 1
        else:
            # Равенство → правый элемент
            merged.append(right_val)
            idx_right += 1

    merged.extend(sequence[i] for i in range(idx_left, mid))
    merged.extend(sequence[i] for i in range(idx_right, end))

    for offset, value in enumerate(merged):
        sequence[start + offset] = value


# =============================================================================
# ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================


_DISPATCH: dict[SortAlgorithm, Callable[[MutableSequence[Any]], None]] = {
    SortAlgorithm.INSERTION_SORT: insertion_sort,
    SortAlgorithm.MERGE_SORT: merge_sort,
}


def sort_with(sequence: MutableSequence[T], algorithm: SortAlgorithm | str) -> None:
    """
    Сортировка на месте выбранным алгоритмом.

    Args:
        sequence: Изменяемая последовательность (мутируется)
        algorithm: SortAlgorithm или его строковое значение
            (например, "merge_sort")

    Raises:
        ValueError: если algorithm не является известным алгоритмом

    Examples:
        >>> data = [7, 9, 8]
        >>> sort_with(data, SortAlgorithm.MERGE_SORT)
        >>> data
        [7, 8, 9]
    """
    selected = SortAlgorithm(algorithm)
    logger.debug("sort_with: algorithm=%s, length=%d", selected.value, len(sequence))
    _DISPATCH[selected](sequence)
