import random

import pytest

from exactmat import Matrix


@pytest.fixture
def m3() -> Matrix:
    """3x3 matrix with determinant -306."""
    return Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])


@pytest.fixture
def m2() -> Matrix:
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def rect() -> Matrix:
    """2x3 matrix used by the rectangular product checks."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


def random_matrix(rng: random.Random, rows: int, cols: int, lo: int = -9, hi: int = 9) -> Matrix:
    return Matrix.from_rows([[rng.randint(lo, hi) for _ in range(cols)] for _ in range(rows)])
