"""Flat cell storage with get-or-zero semantics."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .errors import CellOutOfRange
from .type_utils import DTYPE, as_int

Buffer = NDArray[np.int64]


class CellStorage:
    """Zero-initialised int64 cells addressed by a linear key.

    A key that was never written reads as ``0``, so an all-zero matrix needs
    no explicit initialisation. Unlike a dictionary, the key space is fixed at
    construction and keys outside it are rejected.
    """

    __slots__ = ("_cells",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"storage size must be non-negative, got {size}")
        self._cells: Buffer = np.zeros(size, dtype=DTYPE)

    def __len__(self) -> int:
        return int(self._cells.shape[0])

    def _check(self, key: int) -> int:
        if not 0 <= key < self._cells.shape[0]:
            raise CellOutOfRange(f"key {key} outside storage of {len(self)} cells")
        return key

    def get(self, key: int) -> int:
        return int(self._cells[self._check(key)])

    def set(self, key: int, value: int) -> None:
        self._cells[self._check(key)] = as_int(value)

    def copy(self) -> CellStorage:
        clone = CellStorage(0)
        clone._cells = self._cells.copy()
        return clone

    def nonzero(self) -> int:
        return int(np.count_nonzero(self._cells))

    def as_array(self) -> Buffer:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellStorage):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]


__all__ = ["CellStorage"]
