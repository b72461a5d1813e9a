"""Fixed-width integer policy shared by storage, matrix and solver code."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import IntegerOverflow

DTYPE = np.int64

_INFO = np.iinfo(DTYPE)
INT_MIN: int = int(_INFO.min)
INT_MAX: int = int(_INFO.max)

# Cofactor expansion costs O(n!); orders above this are logged as a warning.
EXPANSION_WARN_ORDER = 9


def as_int(value: Any) -> int:
    """Coerce ``value`` to a Python int, rejecting bools, floats and strings."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"expected an integer cell value, got {type(value).__name__}")
    if isinstance(value, (int, np.integer)):
        return checked(int(value))
    raise TypeError(f"expected an integer cell value, got {type(value).__name__}")


def checked(value: int) -> int:
    if value < INT_MIN or value > INT_MAX:
        raise IntegerOverflow(f"{value} does not fit in {np.dtype(DTYPE).name}")
    return value


def checked_add(a: int, b: int) -> int:
    return checked(a + b)


def checked_sub(a: int, b: int) -> int:
    return checked(a - b)


def checked_mul(a: int, b: int) -> int:
    return checked(a * b)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, as fixed-width hardware does."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return checked(q)


__all__ = [
    "DTYPE",
    "INT_MIN",
    "INT_MAX",
    "EXPANSION_WARN_ORDER",
    "as_int",
    "checked",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "trunc_div",
]
