"""
MatrixShape — Shape Validation for Square Matrices

Модуль проверяет форму входных матриц до начала любых вычислений:
- Каждая матрица квадратная (число строк == длине строк)
- Все строки одной длины (рваные матрицы отвергаются)
- Размерности двух операндов совпадают

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация выполняется eagerly, до вычислений
2. При ошибке формы результат не возвращается (MatrixShapeError)
3. Ошибка несёт четыре наблюдённые размерности для диагностики
"""

import logging
from collections.abc import Sequence
from typing import Any, TypeAlias

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# Квадратная матрица n×n, хранится построчно
SquareMatrix: TypeAlias = list[list[Any]]


# =============================================================================
# SHAPE MODEL
# =============================================================================


class MatrixShape(BaseModel):
    """
    Наблюдённая форма матрицы (rows × cols).

    cols: длина первой строки (0 для пустой матрицы).
    ragged=True если длины строк различаются.
    """

    rows: int = Field(..., ge=0, description="Число строк")
    cols: int = Field(..., ge=0, description="Длина первой строки")
    ragged: bool = Field(default=False, description="Строки разной длины")

    model_config = {"frozen": True}

    @property
    def is_square(self) -> bool:
        return not self.ragged and self.rows == self.cols

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"


def matrix_shape(matrix: Sequence[Sequence[Any]]) -> MatrixShape:
    """
    Определение формы матрицы.

    Args:
        matrix: Матрица как последовательность строк

    Returns:
        MatrixShape

    Examples:
        >>> str(matrix_shape([[1, 2], [3, 4]]))
        '2x2'
        >>> matrix_shape([[1, 2, 3], [3, 4]]).ragged
        True
    """
    rows = len(matrix)
    if rows == 0:
        return MatrixShape(rows=0, cols=0)

    cols = len(matrix[0])
    ragged = any(len(row) != cols for row in matrix)
    return MatrixShape(rows=rows, cols=cols, ragged=ragged)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixShapeError(ValueError):
    """
    Несовместимая форма операндов умножения.

    Причины:
    1. Матрица A не квадратная (или рваная)
    2. Матрица B не квадратная (или рваная)
    3. Размерность A != размерности B
    """

    def __init__(self, shape_a: MatrixShape, shape_b: MatrixShape, message: str | None = None):
        self.shape_a = shape_a
        self.shape_b = shape_b
        if message is None:
            message = f"Matrices must be square, got shapes {shape_a} and {shape_b}"
        super().__init__(message)

    @property
    def a_rows(self) -> int:
        return self.shape_a.rows

    @property
    def a_cols(self) -> int:
        return self.shape_a.cols

    @property
    def b_rows(self) -> int:
        return self.shape_b.rows

    @property
    def b_cols(self) -> int:
        return self.shape_b.cols


class UnsupportedDimensionError(MatrixShapeError):
    """
    Размерность не является степенью двойки при OddSizePolicy.STRICT.

    Divide-and-conquer без дополнения нулями корректен только для n = 2^k.
    """

    def __init__(self, shape_a: MatrixShape, shape_b: MatrixShape):
        super().__init__(
            shape_a,
            shape_b,
            f"Divide and conquer requires a power of two dimension, "
            f"got shapes {shape_a} and {shape_b}",
        )


# =============================================================================
# VALIDATION
# =============================================================================


def validate_both_square(
    a: Sequence[Sequence[Any]],
    b: Sequence[Sequence[Any]],
) -> int:
    """
    Проверка, что A и B квадратные матрицы одной размерности.

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        Общая размерность n

    Raises:
        MatrixShapeError: если A или B не квадратная, или размерности различаются

    Examples:
        >>> validate_both_square([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        2
    """
    shape_a = matrix_shape(a)
    shape_b = matrix_shape(b)

    if not shape_a.is_square or not shape_b.is_square or shape_a.rows != shape_b.rows:
        logger.debug("Shape validation failed: %s and %s", shape_a, shape_b)
        raise MatrixShapeError(shape_a, shape_b)

    return shape_a.rows


def is_power_of_two(n: int) -> bool:
    """True если n = 2^k, k >= 0."""
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """
    Наименьшая степень двойки >= n.

    Examples:
        >>> next_power_of_two(3)
        4
        >>> next_power_of_two(4)
        4
        >>> next_power_of_two(1)
        1
    """
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
