import numpy as np
import pytest
import sympy as sp

from exactmat import CellOutOfRange, InvalidDimension, Matrix

from conftest import random_matrix


@pytest.mark.parametrize(("rows", "cols"), [(1, 1), (3, 4), (4, 3), (0, 0), (0, 5)])
def test_fresh_matrix_is_zero(rows, cols):
    m = Matrix(rows, cols)
    assert m.shape == (rows, cols)
    assert all(m.get(r, c) == 0 for r in range(rows) for c in range(cols))


def test_get_set_round_trip():
    m = Matrix(3, 4)
    m.set(2, 3, -11)
    m[0, 1] = 5
    assert m.get(2, 3) == -11
    assert m[0, 1] == 5
    assert m.to_rows() == [[0, 5, 0, 0], [0, 0, 0, 0], [0, 0, 0, -11]]


def test_row_major_layout_is_injective():
    m = Matrix(3, 4)
    for r in range(3):
        for c in range(4):
            m.set(r, c, r * 10 + c)
    assert m.to_numpy().tolist() == [[0, 1, 2, 3], [10, 11, 12, 13], [20, 21, 22, 23]]


@pytest.mark.parametrize(("row", "col"), [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_bounds_access(row, col):
    m = Matrix(3, 4)
    with pytest.raises(CellOutOfRange):
        m.get(row, col)
    with pytest.raises(CellOutOfRange):
        m.set(row, col, 1)


@pytest.mark.parametrize("dims", [(-1, 2), (2, -1), (1.5, 2), (True, 2)])
def test_bad_dimensions(dims):
    with pytest.raises(InvalidDimension):
        Matrix(*dims)


def test_from_rows_rejects_ragged():
    with pytest.raises(InvalidDimension):
        Matrix.from_rows([[1, 2], [3]])


def test_transpose(rect):
    t = rect.transpose()
    assert t.shape == (3, 2)
    assert t.to_rows() == [[1, 4], [2, 5], [3, 6]]
    assert rect.to_rows() == [[1, 2, 3], [4, 5, 6]]


def test_transpose_involution(rng):
    for rows, cols in [(1, 1), (2, 5), (4, 3), (3, 1)]:
        m = random_matrix(rng, rows, cols)
        assert m.transpose().transpose() == m
        assert m.T.T == m


def test_minor(m3):
    assert m3.minor(0, 0).to_rows() == [[-2, 5], [8, 7]]
    assert m3.minor(1, 2).to_rows() == [[6, 1], [2, 8]]
    assert m3.minor(2, 1).to_rows() == [[6, 1], [4, 5]]


def test_minor_of_rectangular(rect):
    assert rect.minor(0, 1).to_rows() == [[4, 6]]


def test_minor_of_one_by_one_is_empty():
    assert Matrix.from_rows([[7]]).minor(0, 0).shape == (0, 0)


def test_minor_guards():
    with pytest.raises(InvalidDimension):
        Matrix(0, 3).minor(0, 0)
    with pytest.raises(CellOutOfRange):
        Matrix(2, 2).minor(2, 0)


def test_equality_and_copy(m2):
    clone = m2.copy()
    assert clone == m2
    clone.set(0, 0, 99)
    assert clone != m2
    assert m2.get(0, 0) == 1
    assert Matrix(2, 3) != Matrix(3, 2)


def test_identity():
    assert Matrix.identity(3).to_rows() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_numpy_round_trip():
    arr = np.array([[1, -2], [3, 4], [5, 6]], dtype=np.int32)
    m = Matrix.from_numpy(arr)
    assert m.shape == (3, 2)
    out = m.to_numpy()
    assert out.dtype == np.int64
    assert np.array_equal(out, arr)


def test_from_numpy_rejects_float_arrays():
    with pytest.raises(TypeError):
        Matrix.from_numpy(np.eye(2))
    with pytest.raises(InvalidDimension):
        Matrix.from_numpy(np.arange(3))


def test_to_sympy(m2):
    assert m2.to_sympy() == sp.Matrix([[1, 2], [3, 4]])


def test_repr(m2):
    assert repr(m2) == "Matrix([[1, 2], [3, 4]], shape=2x2, dtype=int64)"
