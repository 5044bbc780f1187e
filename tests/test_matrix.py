"""Tests for vectors, matrices and matrix-vector multiplication."""

import pytest

from freivalds.algebra.field import DEFAULT_FIELD, PrimeField
from freivalds.algebra.matrix import Matrix, ShapeMismatch, Vector, matrix_vector_multiply
from freivalds.config import PRIME


def test_multiply_example():
    m = Matrix.from_rows([[8, 2], [1, 5]])
    v = Vector.from_ints([3, 4])
    # [(8*3 + 2*4) mod 17, (1*3 + 5*4) mod 17] = [32 mod 17, 23 mod 17]
    assert matrix_vector_multiply(m, v) == Vector.from_ints([15, 6])


def test_matmul_operator():
    m = Matrix.from_rows([[8, 2], [1, 5]])
    v = Vector.from_ints([3, 4])
    assert (m @ v).to_list() == [15, 6]


def test_multiply_matches_definition():
    rows = [[3, 16, 0], [7, 7, 9], [1, 2, 11]]
    vals = [5, 13, 4]
    m = Matrix.from_rows(rows)
    v = Vector.from_ints(vals)
    expected = [sum(rows[i][j] * vals[j] for j in range(3)) % PRIME for i in range(3)]
    assert matrix_vector_multiply(m, v).to_list() == expected


def test_identity():
    ident = Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    v = Vector.from_ints([9, 16, 2])
    assert ident @ v == v


def test_multiply_is_pure():
    m = Matrix.from_rows([[8, 2], [1, 5]])
    v = Vector.from_ints([3, 4])
    result = m @ v
    assert result is not v
    assert m.to_lists() == [[8, 2], [1, 5]]
    assert v.to_list() == [3, 4]


def test_multiply_empty():
    m = Matrix.from_rows([])
    v = Vector.from_ints([])
    result = m @ v
    assert len(result) == 0


def test_vector_length_mismatch():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    with pytest.raises(ShapeMismatch):
        matrix_vector_multiply(m, Vector.from_ints([1, 2, 3]))


def test_ragged_rows_rejected():
    m = Matrix.from_rows([[1, 2], [3]])
    assert not m.is_rectangular()
    with pytest.raises(ShapeMismatch):
        m @ Vector.from_ints([1, 1])


def test_non_square_rejected():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert not m.is_square()
    with pytest.raises(ShapeMismatch):
        m @ Vector.from_ints([1, 1, 1])


def test_shape_mismatch_is_value_error():
    assert issubclass(ShapeMismatch, ValueError)


def test_entries_reduced():
    m = Matrix.from_rows([[18, -1], [34, 0]])
    assert m.to_lists() == [[1, 16], [0, 0]]


def test_matrix_equality():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[18, 19], [20, 21]])
    c = Matrix.from_rows([[1, 2], [3, 5]])
    assert a == b
    assert a != c


def test_matrix_equality_requires_same_shape():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    assert a != Matrix.from_rows([[1, 2]])
    assert a != Matrix.from_rows([[1, 2, 0], [3, 4, 0]])


def test_vector_equality():
    assert Vector.from_ints([1, 2]) == Vector.from_ints([18, 2])
    assert Vector.from_ints([1, 2]) != Vector.from_ints([1, 2, 0])


def test_dot():
    a = Vector.from_ints([8, 2])
    b = Vector.from_ints([3, 4])
    assert a.dot(b) == 15


def test_dot_length_mismatch():
    with pytest.raises(ShapeMismatch):
        Vector.from_ints([1]).dot(Vector.from_ints([1, 2]))


def test_shape_properties():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert m.num_rows == 2
    assert m.num_cols == 3
    assert m.is_rectangular()
    assert Matrix.from_rows([]).is_square()


def test_other_field():
    G = PrimeField(101)
    m = Matrix.from_rows([[50, 60], [1, 1]], G)
    v = Vector.from_ints([2, 1], G)
    assert (m @ v).to_list() == [(100 + 60) % 101, 3]


def test_field_mismatch_rejected():
    G = PrimeField(101)
    m = Matrix.from_rows([[1, 0], [0, 1]])
    with pytest.raises(ValueError):
        m @ Vector.from_ints([1, 1], G)


def test_matrix_owns_rows():
    row = Vector.from_ints([1, 2])
    m = Matrix([row, [3, 4]], DEFAULT_FIELD)
    assert m[0] == row
    assert m.to_lists() == [[1, 2], [3, 4]]
