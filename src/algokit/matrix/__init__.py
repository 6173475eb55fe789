"""
Matrix component для algokit

Умножение квадратных матриц: naive (тройной цикл) и divide and conquer.
"""

from algokit.matrix.multiply import (
    ConquerConfig,
    OddSizePolicy,
    SupportsArithmetic,
    add_matrices,
    multiply,
    multiply_conquer,
    pad_matrix,
    split_matrix,
)
from algokit.matrix.shape import (
    MatrixShape,
    MatrixShapeError,
    SquareMatrix,
    UnsupportedDimensionError,
    is_power_of_two,
    matrix_shape,
    next_power_of_two,
    validate_both_square,
)

__all__ = [
    # Config
    "ConquerConfig",
    "OddSizePolicy",
    # Types
    "MatrixShape",
    "SquareMatrix",
    "SupportsArithmetic",
    # Exceptions
    "MatrixShapeError",
    "UnsupportedDimensionError",
    # Multiplication
    "multiply",
    "multiply_conquer",
    # Helpers
    "add_matrices",
    "pad_matrix",
    "split_matrix",
    # Validation
    "is_power_of_two",
    "matrix_shape",
    "next_power_of_two",
    "validate_both_square",
]
