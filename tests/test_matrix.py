from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.matrix import (
    add_matrices,
    diagonal_sum,
    reverse_rows,
    transpose,
    wave_order,
)


@st.composite
def matrices(draw, rows=None, cols=None):
    r = draw(st.integers(1, 5)) if rows is None else rows
    c = draw(st.integers(1, 5)) if cols is None else cols
    return [draw(st.lists(st.integers(-50, 50), min_size=c, max_size=c)) for _ in range(r)]


@given(matrices())
def test_transpose_is_involution(matrix):
    result = transpose(matrix)
    assert len(result) == len(matrix[0])
    assert all(len(row) == len(matrix) for row in result)
    assert transpose(result) == matrix


def test_transpose_empty_and_ragged():
    assert transpose([]) == []
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


@given(st.data())
def test_add_is_commutative_with_zero_identity(data):
    a = data.draw(matrices())
    b = data.draw(matrices(rows=len(a), cols=len(a[0])))
    zeros = [[0] * len(a[0]) for _ in a]
    assert add_matrices(a, zeros) == a
    assert add_matrices(a, b) == add_matrices(b, a)


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1], [2]])


def test_reverse_rows_of_fixed_matrix():
    matrix = [[2, 3, 4], [1, 2, 6], [4, 9, 3]]
    result = reverse_rows(matrix)
    assert [row[0] for row in result] == [row[-1] for row in matrix]
    assert reverse_rows(result) == matrix


@given(matrices())
def test_reverse_rows_keeps_row_contents(matrix):
    result = reverse_rows(matrix)
    assert [sorted(row) for row in result] == [sorted(row) for row in matrix]


@given(st.integers(1, 8))
def test_diagonal_sum_identity(n):
    identity = [[int(i == j) for j in range(n)] for i in range(n)]
    assert diagonal_sum(identity) == n


@given(st.integers(1, 5).flatmap(lambda n: matrices(rows=n, cols=n)))
def test_diagonal_sum_invariant_under_transpose(matrix):
    assert diagonal_sum(transpose(matrix)) == diagonal_sum(matrix)


def test_diagonal_sum_requires_square():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])


def test_wave_order_example():
    assert wave_order([[1, 2], [3, 4]]) == [1, 3, 4, 2]


@given(matrices())
def test_wave_order_invariants(matrix):
    result = wave_order(matrix)
    rows = len(matrix)
    assert Counter(result) == Counter(v for row in matrix for v in row)
    assert result[:rows] == [row[0] for row in matrix]
    if len(matrix[0]) > 1:
        assert result[rows:2 * rows] == [row[1] for row in reversed(matrix)]