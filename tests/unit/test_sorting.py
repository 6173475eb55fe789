"""
Тесты для Sorting — In-place Comparison Sorts

Проверяемые инварианты:
1. Результат: неубывающая перестановка входа
2. Сортировка на месте, функции возвращают None
3. Идемпотентность на уже отсортированных данных
4. insertion_sort и merge_sort дают одинаковый порядок ключей
5. Merge sort при равенстве ставит первым элемент правой половины
6. Диспетчеризация по SortAlgorithm и его строковому значению
"""

import logging
import random
from collections import Counter

import pytest

from algokit.sorting import (
    SortAlgorithm,
    insertion_sort,
    merge_sort,
    sort_with,
)


ALL_ALGORITHMS = list(SortAlgorithm)

INT_CASES = [
    pytest.param([3, 2, 1], [1, 2, 3], id="reverse_sorted"),
    pytest.param([4, 5, 6], [4, 5, 6], id="sorted"),
    pytest.param([7, 9, 8], [7, 8, 9], id="unsorted"),
]

STRING_CASES = [
    pytest.param(["c", "b", "a"], ["a", "b", "c"], id="reverse_sorted"),
    pytest.param(["a", "b", "c"], ["a", "b", "c"], id="sorted"),
    pytest.param(["a", "c", "b"], ["a", "b", "c"], id="unsorted"),
]


class Keyed:
    """Элемент, сравниваемый только по key; tag различает равные элементы."""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __repr__(self):
        return f"Keyed({self.key!r}, {self.tag!r})"


def is_non_decreasing(values) -> bool:
    return all(not (values[i + 1] < values[i]) for i in range(len(values) - 1))


@pytest.fixture
def rng():
    """Детерминированный генератор для случайных входов."""
    return random.Random(20240611)


# =============================================================================
# ТЕСТЫ: фиксированные входы
# =============================================================================


class TestFixedInputs:
    """Конкретные входы для обоих алгоритмов."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    @pytest.mark.parametrize("data, expected", INT_CASES)
    def test_int_sequences(self, algorithm, data, expected):
        arr = list(data)
        sort_with(arr, algorithm)
        assert arr == expected

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    @pytest.mark.parametrize("data, expected", STRING_CASES)
    def test_string_sequences(self, algorithm, data, expected):
        arr = list(data)
        sort_with(arr, algorithm)
        assert arr == expected

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_empty_and_single(self, algorithm):
        """Длина ≤ 1: уже отсортировано."""
        empty = []
        sort_with(empty, algorithm)
        assert empty == []

        single = [42]
        sort_with(single, algorithm)
        assert single == [42]

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_duplicates_and_negatives(self, algorithm):
        arr = [0, -3, 5, -3, 2, 5, 0, 1]
        sort_with(arr, algorithm)
        assert arr == [-3, -3, 0, 0, 1, 2, 5, 5]

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_floats(self, algorithm):
        arr = [2.5, -1.0, 0.0, 2.25]
        sort_with(arr, algorithm)
        assert arr == [-1.0, 0.0, 2.25, 2.5]


# =============================================================================
# ТЕСТЫ: контракт in-place
# =============================================================================


class TestInPlace:
    """Сортировка мутирует последовательность вызывающей стороны."""

    @pytest.mark.parametrize("func", [insertion_sort, merge_sort])
    def test_returns_none_and_mutates(self, func):
        arr = [3, 1, 2]
        original_id = id(arr)

        assert func(arr) is None
        assert arr == [1, 2, 3]
        assert id(arr) == original_id

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_sort_with_returns_none(self, algorithm):
        arr = [2, 1]
        assert sort_with(arr, algorithm) is None
        assert arr == [1, 2]

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_other_mutable_sequence(self, algorithm):
        """Работает на любой MutableSequence (не только list)."""
        from collections import UserList

        arr = UserList([5, 3, 4, 1, 2])
        sort_with(arr, algorithm)
        assert list(arr) == [1, 2, 3, 4, 5]


# =============================================================================
# ТЕСТЫ: свойства
# =============================================================================


class TestProperties:
    """Перестановка, порядок, идемпотентность, согласованность алгоритмов."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_random_permutation_non_decreasing(self, algorithm, rng):
        for length in range(0, 40):
            data = [rng.randint(-20, 20) for _ in range(length)]
            arr = list(data)
            sort_with(arr, algorithm)

            assert Counter(arr) == Counter(data)
            assert is_non_decreasing(arr)
            assert arr == sorted(data)

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_idempotent(self, algorithm, rng):
        data = [rng.random() for _ in range(50)]
        sort_with(data, algorithm)
        snapshot = list(data)

        sort_with(data, algorithm)
        assert data == snapshot

    def test_algorithms_agree(self, rng):
        for _ in range(25):
            data = [rng.choice("abcdefg") * rng.randint(1, 3) for _ in range(30)]
            by_insertion = list(data)
            by_merge = list(data)

            insertion_sort(by_insertion)
            merge_sort(by_merge)

            assert by_insertion == by_merge

    def test_algorithms_agree_on_keys_with_ties(self, rng):
        data = [Keyed(rng.randint(0, 4), i) for i in range(40)]
        by_insertion = list(data)
        by_merge = list(data)

        insertion_sort(by_insertion)
        merge_sort(by_merge)

        assert [x.key for x in by_insertion] == [x.key for x in by_merge]


# =============================================================================
# ТЕСТЫ: стабильность и tie-break
# =============================================================================


class TestTieBreak:
    """Insertion sort стабилен; merge sort при равенстве берёт правый элемент."""

    def test_insertion_sort_is_stable(self):
        arr = [Keyed(1, "a"), Keyed(0, "b"), Keyed(1, "c"), Keyed(0, "d")]
        insertion_sort(arr)
        assert [x.tag for x in arr] == ["b", "d", "a", "c"]

    def test_merge_sort_takes_right_on_tie(self):
        """Две равные половины: правый элемент идёт первым."""
        arr = [Keyed(1, "left"), Keyed(1, "right")]
        merge_sort(arr)
        assert [x.tag for x in arr] == ["right", "left"]

    def test_merge_sort_tie_with_larger_input(self):
        # [x1, x2] | [y1, y2]: каждая половина сортируется с перестановкой равных
        arr = [Keyed(0, "x1"), Keyed(0, "x2"), Keyed(0, "y1"), Keyed(0, "y2")]
        merge_sort(arr)
        assert [x.tag for x in arr] == ["y2", "y1", "x2", "x1"]


# =============================================================================
# ТЕСТЫ: диспетчеризация
# =============================================================================


class TestDispatch:
    """SortAlgorithm как тег диспетчеризации."""

    def test_enum_values(self):
        assert SortAlgorithm.INSERTION_SORT.value == "insertion_sort"
        assert SortAlgorithm.MERGE_SORT.value == "merge_sort"
        assert len(SortAlgorithm) == 2

    @pytest.mark.parametrize("name", ["insertion_sort", "merge_sort"])
    def test_string_selector(self, name):
        arr = [3, 2, 1]
        sort_with(arr, name)
        assert arr == [1, 2, 3]

    def test_unknown_algorithm_rejected(self):
        arr = [3, 2, 1]
        with pytest.raises(ValueError):
            sort_with(arr, "bogo_sort")
        assert arr == [3, 2, 1]

    def test_dispatch_logged(self, caplog):
        arr = [3, 2, 1]
        with caplog.at_level(logging.DEBUG, logger="algokit.sorting.algorithms"):
            sort_with(arr, SortAlgorithm.MERGE_SORT)

        records = [r for r in caplog.records if r.name == "algokit.sorting.algorithms"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == "sort_with: algorithm=merge_sort, length=3"
