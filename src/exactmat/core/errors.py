"""Exception hierarchy raised by the exact matrix library."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for every error raised by :mod:`exactmat`."""


class InvalidDimension(MatrixError, ValueError):
    """An operation's shape precondition is violated."""


class NotInvertible(MatrixError, ArithmeticError):
    """The matrix has a zero determinant."""


class CellOutOfRange(MatrixError, IndexError):
    """A (row, col) coordinate or storage key lies outside the matrix."""


class IntegerOverflow(MatrixError, OverflowError):
    """A value or intermediate result left the int64 range."""


__all__ = [
    "MatrixError",
    "InvalidDimension",
    "NotInvertible",
    "CellOutOfRange",
    "IntegerOverflow",
]
