"""
Determinant and inverse by cofactor (Laplace) expansion.

Notes
-----
Expansion runs along row 0 and recurses on minors, so the cost grows as
O(n!). It is exact for any order but only practical for small matrices;
orders above ``EXPANSION_WARN_ORDER`` are logged as a warning.

``inverse`` divides each cofactor ``C[row, col]`` by the determinant and
stores it at ``[row, col]``, truncating toward zero. The textbook inverse
places it at ``[col, row]`` (the adjugate is the *transposed* cofactor
matrix); the two agree for symmetric input. ``adjugate`` gives the textbook
form for callers that need it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from exactmat.core.errors import InvalidDimension, NotInvertible
from exactmat.core.type_utils import (
    EXPANSION_WARN_ORDER,
    checked_add,
    checked_mul,
    checked_sub,
    trunc_div,
)

if TYPE_CHECKING:
    from exactmat.model.matrix import Matrix

LOG = logging.getLogger(__name__)


def _require_square(m: Matrix, op: str) -> None:
    if not m.is_square:
        raise InvalidDimension(f"{op} requires a square matrix, got {m.rows}x{m.cols}")


def _warn_if_large(m: Matrix, op: str) -> None:
    if m.rows > EXPANSION_WARN_ORDER:
        LOG.warning("%s of order %d by cofactor expansion is O(n!) and may be very slow", op, m.rows)


def _expand(m: Matrix) -> int:
    n = m.rows
    if n == 0:
        return 1
    if n == 1:
        return m.get(0, 0)
    if n == 2:
        return checked_sub(
            checked_mul(m.get(0, 0), m.get(1, 1)),
            checked_mul(m.get(0, 1), m.get(1, 0)),
        )

    total = 0
    for col in range(n):
        a = m.get(0, col)
        if a == 0:
            continue
        term = checked_mul(a, _expand(m.minor(0, col)))
        total = checked_add(total, term) if col % 2 == 0 else checked_sub(total, term)
    return total


def determinant(m: Matrix) -> int:
    """Exact determinant of a square matrix; the 0x0 determinant is 1."""
    _require_square(m, "determinant")
    _warn_if_large(m, "determinant")
    LOG.debug("determinant of %dx%d matrix", m.rows, m.cols)
    return _expand(m)


def cofactor(m: Matrix, row: int, col: int) -> int:
    """Signed minor ``(-1)**(row+col) * det(minor(row, col))``."""
    _require_square(m, "cofactor")
    minor_det = _expand(m.minor(row, col))
    return minor_det if (row + col) % 2 == 0 else checked_sub(0, minor_det)


def cofactor_matrix(m: Matrix) -> Matrix:
    _require_square(m, "cofactor matrix")
    _warn_if_large(m, "cofactor matrix")
    result = type(m)(m.rows, m.cols)
    for row in range(m.rows):
        for col in range(m.cols):
            result.set(row, col, cofactor(m, row, col))
    return result


def adjugate(m: Matrix) -> Matrix:
    """Transposed cofactor matrix, so that ``m * adjugate(m) == det(m) * I``."""
    return cofactor_matrix(m).transpose()


def inverse(m: Matrix) -> Matrix:
    """Integer inverse: each cofactor truncated-divided by the determinant, untransposed."""
    _require_square(m, "inverse")
    _warn_if_large(m, "inverse")
    determinant_ = _expand(m)
    if determinant_ == 0:
        raise NotInvertible(f"{m.rows}x{m.cols} matrix has determinant 0")
    LOG.debug("inverting %dx%d matrix with determinant %d", m.rows, m.cols, determinant_)

    result = type(m)(m.rows, m.cols)
    for row in range(m.rows):
        for col in range(m.cols):
            result.set(row, col, trunc_div(cofactor(m, row, col), determinant_))
    return result


__all__ = ["determinant", "cofactor", "cofactor_matrix", "adjugate", "inverse"]
