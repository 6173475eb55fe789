"""
Matrix Multiplication — Naive & Divide and Conquer

Модуль умножает квадратные матрицы n×n двумя независимыми способами:
- multiply: классический тройной цикл, O(n³)
- multiply_conquer: рекурсивное блочное разбиение на квадранты

ФОРМУЛЫ:
    C[i][j] = Σ_k A[i][k] · B[k][j]

    C11 = A11·B11 + A12·B21
    C12 = A11·B12 + A12·B22
    C21 = A21·B11 + A22·B21
    C22 = A21·B12 + A22·B22

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные матрицы не мутируются, результат является новой матрицей
2. Форма проверяется до вычислений (MatrixShapeError)
3. Рекурсивные вызовы повторно валидируют свои операнды
4. Для n != 2^k поведение задаётся ConquerConfig.odd_size_policy:
   PAD дополняет нулями до 2^k и обрезает результат,
   STRICT отвергает такую размерность (UnsupportedDimensionError)
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, TypeVar

from algokit.matrix.shape import (
    MatrixShapeError,
    UnsupportedDimensionError,
    is_power_of_two,
    matrix_shape,
    next_power_of_two,
    validate_both_square,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================


class SupportsArithmetic(Protocol):
    """
    Контракт элемента матрицы: сложение, умножение и нейтральный элемент.

    Нейтральный элемент по сложению передаётся явно через zero= либо
    берётся как type(element)() (0, 0.0, Fraction(0), Decimal(0), 0j).
    Типам без конструктора без аргументов нужен явный zero=.
    """

    def __add__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...


N = TypeVar("N", bound=SupportsArithmetic)


class OddSizePolicy(str, Enum):
    """
    Обработка размерности, не являющейся степенью двойки.

    PAD: дополнение нулями до ближайшей 2^k, обрезка результата
    STRICT: UnsupportedDimensionError до начала вычислений
    """

    PAD = "pad"
    STRICT = "strict"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConquerConfig:
    """Конфигурация multiply_conquer."""

    odd_size_policy: OddSizePolicy = OddSizePolicy.PAD


# =============================================================================
# HELPERS
# =============================================================================


def _additive_identity(matrix: Sequence[Sequence[N]], zero: Optional[N]) -> N:
    """
    Нейтральный элемент по сложению для элементов matrix.

    Raises:
        TypeError: если zero не передан и type(element)() не конструируется
    """
    if zero is not None:
        return zero

    element_type = type(matrix[0][0])
    try:
        return element_type()
    except TypeError as e:
        raise TypeError(
            f"Cannot derive additive identity for {element_type.__name__}: "
            f"{element_type.__name__}() failed ({e}). Pass zero= explicitly."
        ) from e


def split_matrix(
    matrix: Sequence[Sequence[N]],
    start_row: int,
    end_row: int,
    start_col: int,
    end_col: int,
) -> list[list[N]]:
    """
    Копия прямоугольного окна [start_row, end_row) × [start_col, end_col).

    Args:
        matrix: Исходная матрица (не мутируется)
        start_row: Первая строка окна
        end_row: Строка после последней строки окна
        start_col: Первый столбец окна
        end_col: Столбец после последнего столбца окна

    Returns:
        Новая матрица (end_row - start_row) × (end_col - start_col)

    Examples:
        >>> split_matrix([[1, 2], [3, 4]], 0, 1, 1, 2)
        [[2]]
    """
    return [list(matrix[i][start_col:end_col]) for i in range(start_row, end_row)]


def add_matrices(
    a: Sequence[Sequence[N]],
    b: Sequence[Sequence[N]],
) -> list[list[N]]:
    """
    Поэлементная сумма двух матриц одной формы.

    Raises:
        MatrixShapeError: если формы различаются

    Examples:
        >>> add_matrices([[1, 2], [3, 4]], [[10, 20], [30, 40]])
        [[11, 22], [33, 44]]
    """
    shape_a = matrix_shape(a)
    shape_b = matrix_shape(b)
    if shape_a != shape_b or shape_a.ragged:
        raise MatrixShapeError(
            shape_a, shape_b, f"Cannot add matrices of shapes {shape_a} and {shape_b}"
        )

    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def pad_matrix(matrix: Sequence[Sequence[N]], size: int, zero: N) -> list[list[N]]:
    """
    Дополнение квадратной матрицы нулями до size × size.

    Исходные элементы остаются в левом верхнем углу.

    Examples:
        >>> pad_matrix([[1]], 2, 0)
        [[1, 0], [0, 0]]
    """
    n = len(matrix)
    padded = [list(row) + [zero] * (size - n) for row in matrix]
    padded.extend([zero] * size for _ in range(size - n))
    return padded


# =============================================================================
# NAIVE
# =============================================================================


def multiply(
    a: Sequence[Sequence[N]],
    b: Sequence[Sequence[N]],
    zero: Optional[N] = None,
) -> list[list[N]]:
    """
    Произведение квадратных матриц тройным циклом.

    C[i][j] = zero + Σ_k A[i][k] · B[k][j]

    Args:
        a: Левый операнд n×n
        b: Правый операнд n×n
        zero: Нейтральный элемент по сложению
            (default: type(a[0][0])())

    Returns:
        Новая матрица n×n

    Raises:
        MatrixShapeError: если A или B не квадратная, или размерности различаются
        TypeError: если zero не передан и не выводится из типа элементов

    Examples:
        >>> multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        [[19, 22], [43, 50]]
    """
    n = validate_both_square(a, b)
    logger.debug("multiply: n=%d", n)
    if n == 0:
        return []

    additive_zero = _additive_identity(a, zero)
    c: list[list[N]] = [[additive_zero] * n for _ in range(n)]

    for i in range(n):
        row_a = a[i]
        for j in range(n):
            total = additive_zero
            for k, a_val in enumerate(row_a):
                total = total + a_val * b[k][j]
            c[i][j] = total

    return c


# =============================================================================
# DIVIDE AND CONQUER
# =============================================================================


def multiply_conquer(
    a: Sequence[Sequence[N]],
    b: Sequence[Sequence[N]],
    config: Optional[ConquerConfig] = None,
    zero: Optional[N] = None,
) -> list[list[N]]:
    """
    Произведение квадратных матриц рекурсивным разбиением на квадранты.

    Точка разбиения mid = n // 2. Для n != 2^k квадранты получились бы
    разного размера, поэтому такая размерность обрабатывается согласно
    config.odd_size_policy (PAD по умолчанию). Нейтральный элемент нужен
    только для дополнения (PAD); для n = 2^k zero не используется.

    Args:
        a: Левый операнд n×n
        b: Правый операнд n×n
        config: ConquerConfig (default: ConquerConfig())
        zero: Нейтральный элемент по сложению для дополнения
            (default: type(a[0][0])())

    Returns:
        Новая матрица n×n

    Raises:
        MatrixShapeError: если A или B не квадратная, или размерности различаются
        UnsupportedDimensionError: n != 2^k при OddSizePolicy.STRICT
        TypeError: n != 2^k при PAD, если zero не передан и не выводится

    Examples:
        >>> multiply_conquer([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        [[19, 22], [43, 50]]
    """
    if config is None:
        config = ConquerConfig()

    n = validate_both_square(a, b)
    if n == 0:
        return []

    if is_power_of_two(n):
        logger.debug("multiply_conquer: n=%d", n)
        return _multiply_conquer_recursive(a, b)

    if config.odd_size_policy == OddSizePolicy.STRICT:
        logger.debug("multiply_conquer: n=%d rejected, not a power of two", n)
        raise UnsupportedDimensionError(matrix_shape(a), matrix_shape(b))

    additive_zero = _additive_identity(a, zero)
    size = next_power_of_two(n)
    logger.debug("multiply_conquer: n=%d padded to %d", n, size)
    padded = _multiply_conquer_recursive(
        pad_matrix(a, size, additive_zero),
        pad_matrix(b, size, additive_zero),
    )
    return split_matrix(padded, 0, n, 0, n)


def _multiply_conquer_recursive(
    a: Sequence[Sequence[N]],
    b: Sequence[Sequence[N]],
) -> list[list[N]]:
    n = validate_both_square(a, b)

    if n == 1:
        return [[a[0][0] * b[0][0]]]

    mid = n // 2
    a11 = split_matrix(a, 0, mid, 0, mid)
    a12 = split_matrix(a, 0, mid, mid, n)
    a21 = split_matrix(a, mid, n, 0, mid)
    a22 = split_matrix(a, mid, n, mid, n)

    b11 = split_matrix(b, 0, mid, 0, mid)
    b12 = split_matrix(b, 0, mid, mid, n)
    b21 = split_matrix(b, mid, n, 0, mid)
    b22 = split_matrix(b, mid, n, mid, n)

    c11 = add_matrices(
        _multiply_conquer_recursive(a11, b11),
        _multiply_conquer_recursive(a12, b21),
    )
    c12 = add_matrices(
        _multiply_conquer_recursive(a11, b12),
        _multiply_conquer_recursive(a12, b22),
    )
    c21 = add_matrices(
        _multiply_conquer_recursive(a21, b11),
        _multiply_conquer_recursive(a22, b21),
    )
    c22 = add_matrices(
        _multiply_conquer_recursive(a21, b12),
        _multiply_conquer_recursive(a22, b22),
    )

    # Сборка по позициям: верхняя половина из C11|C12, нижняя из C21|C22
    top = [c11[i] + c12[i] for i in range(mid)]
    bottom = [c21[i] + c22[i] for i in range(mid)]
    return top + bottom
