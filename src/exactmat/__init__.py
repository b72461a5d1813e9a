from .core.errors import (
    CellOutOfRange,
    IntegerOverflow,
    InvalidDimension,
    MatrixError,
    NotInvertible,
)
from .model.matrix import Matrix
from .solvers.cofactor import adjugate, cofactor, cofactor_matrix, determinant, inverse

__all__ = [
    "Matrix",
    "determinant",
    "cofactor",
    "cofactor_matrix",
    "adjugate",
    "inverse",
    "MatrixError",
    "InvalidDimension",
    "NotInvertible",
    "CellOutOfRange",
    "IntegerOverflow",
]
