"""Exact integer matrix with row-major cell storage.

Every structural or arithmetic operation allocates and returns a new
:class:`Matrix`; operands are never modified. Cell arithmetic is checked
against the int64 range, see :mod:`exactmat.core.type_utils`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, cast

import numpy as np
import sympy as sp
from numpy.typing import NDArray

from exactmat.core.errors import CellOutOfRange, InvalidDimension
from exactmat.core.storage import CellStorage
from exactmat.core.type_utils import DTYPE, as_int, checked_add, checked_mul, checked_sub


def _dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidDimension(f"{name} must be non-negative, got {value}")
    return int(value)


class Matrix:
    """A ``rows x cols`` matrix of signed 64-bit integers, zero by default."""

    __slots__ = ("rows", "cols", "_storage")

    # Make numpy scalars defer to our reflected operators (``np.int64(2) * m``).
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = _dimension("rows", rows)
        self.cols = _dimension("cols", cols)
        self._storage = CellStorage(self.rows * self.cols)

    # ---- construction / export ----
    @classmethod
    def from_rows(cls, data: Iterable[Sequence[int]]) -> Matrix:
        """Build a matrix from a sequence of equally long integer rows."""
        rows = [list(row) for row in data]
        width = len(rows[0]) if rows else 0
        for i, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimension(f"row {i} has {len(row)} entries, expected {width}")
        m = cls(len(rows), width)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                m.set(r, c, value)
        return m

    @classmethod
    def identity(cls, n: int) -> Matrix:
        m = cls(n, n)
        for i in range(m.rows):
            m.set(i, i, 1)
        return m

    @classmethod
    def from_numpy(cls, array: NDArray[Any]) -> Matrix:
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise InvalidDimension(f"expected a 2-D array, got {arr.ndim}-D")
        if arr.dtype.kind not in "iu":
            raise TypeError(f"expected an integer array, got dtype {arr.dtype}")
        return cls.from_rows(arr.tolist())

    def to_rows(self) -> list[list[int]]:
        return [[self.get(r, c) for c in range(self.cols)] for r in range(self.rows)]

    def to_numpy(self) -> NDArray[np.int64]:
        return self._storage.as_array().reshape(self.rows, self.cols).copy()

    def to_sympy(self) -> sp.Matrix:
        cells = [sp.Integer(v) for v in self._storage.as_array().tolist()]
        return cast(sp.Matrix, sp.Matrix(self.rows, self.cols, cells))

    def copy(self) -> Matrix:
        clone = Matrix(self.rows, self.cols)
        clone._storage = self._storage.copy()
        return clone

    # ---- shape ----
    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # ---- indexing ----
    def _key(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise CellOutOfRange(f"cell ({row}, {col}) outside {self.rows}x{self.cols} matrix")
        return row * self.cols + col

    def get(self, row: int, col: int) -> int:
        return self._storage.get(self._key(row, col))

    def set(self, row: int, col: int, value: int) -> None:
        self._storage.set(self._key(row, col), value)

    def __getitem__(self, index: tuple[int, int]) -> int:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: tuple[int, int], value: int) -> None:
        row, col = index
        self.set(row, col, value)

    # ---- structural transforms ----
    def transpose(self) -> Matrix:
        result = Matrix(self.cols, self.rows)
        for i in range(self.rows * self.cols):
            row, col = divmod(i, self.cols)
            result.set(col, row, self.get(row, col))
        return result

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def minor(self, exclude_row: int, exclude_col: int) -> Matrix:
        """Return the submatrix with ``exclude_row`` and ``exclude_col`` removed."""
        if self.rows == 0 or self.cols == 0:
            raise InvalidDimension(f"cannot take a minor of a {self.rows}x{self.cols} matrix")
        if not (0 <= exclude_row < self.rows and 0 <= exclude_col < self.cols):
            raise CellOutOfRange(
                f"excluded cell ({exclude_row}, {exclude_col}) outside {self.rows}x{self.cols} matrix"
            )
        result = Matrix(self.rows - 1, self.cols - 1)
        for i in range(self.rows * self.cols):
            row, col = divmod(i, self.cols)
            if row == exclude_row or col == exclude_col:
                continue
            row_offset = -1 if row > exclude_row else 0
            col_offset = -1 if col > exclude_col else 0
            result.set(row + row_offset, col + col_offset, self.get(row, col))
        return result

    # ---- determinant / inversion ----
    def det(self) -> int:
        from exactmat.solvers.cofactor import determinant

        return determinant(self)

    def cofactor_matrix(self) -> Matrix:
        from exactmat.solvers.cofactor import cofactor_matrix

        return cofactor_matrix(self)

    def adjugate(self) -> Matrix:
        from exactmat.solvers.cofactor import adjugate

        return adjugate(self)

    def inv(self) -> Matrix:
        from exactmat.solvers.cofactor import inverse

        return inverse(self)

    # ---- arithmetic ----
    def _require_same_shape(self, other: Matrix, op: str) -> None:
        if self.shape != other.shape:
            raise InvalidDimension(
                f"cannot {op} {self.rows}x{self.cols} and {other.rows}x{other.cols} matrices"
            )

    def add(self, other: Matrix) -> Matrix:
        self._require_same_shape(other, "add")
        result = Matrix(self.rows, self.cols)
        for r in range(self.rows):
            for c in range(self.cols):
                result.set(r, c, checked_add(self.get(r, c), other.get(r, c)))
        return result

    def sub(self, other: Matrix) -> Matrix:
        self._require_same_shape(other, "subtract")
        result = Matrix(self.rows, self.cols)
        for r in range(self.rows):
            for c in range(self.cols):
                result.set(r, c, checked_sub(self.get(r, c), other.get(r, c)))
        return result

    def mul(self, other: Matrix) -> Matrix:
        """Standard matrix product; requires ``self.cols == other.rows``."""
        if self.cols != other.rows:
            raise InvalidDimension(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}: "
                "inner dimensions differ"
            )
        result = Matrix(self.rows, other.cols)
        for r in range(self.rows):
            for c in range(other.cols):
                acc = 0
                for k in range(self.cols):
                    acc = checked_add(acc, checked_mul(self.get(r, k), other.get(k, c)))
                result.set(r, c, acc)
        return result

    def scale(self, factor: int) -> Matrix:
        k = as_int(factor)
        result = Matrix(self.rows, self.cols)
        for r in range(self.rows):
            for c in range(self.cols):
                result.set(r, c, checked_mul(k, self.get(r, c)))
        return result

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.mul(other)
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def __neg__(self) -> Matrix:
        return self.scale(-1)

    # ---- comparison / display ----
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._storage == other._storage

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.to_rows()!r}, shape={self.rows}x{self.cols}, dtype={np.dtype(DTYPE).name})"


__all__ = ["Matrix"]
