"""Operations on rectangular integer matrices given as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    if not matrix:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), cols


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of ``matrix``."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def add_matrices(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def reverse_rows(matrix: Matrix) -> list[list[int]]:
    """Return ``matrix`` with every row reversed."""
    return [list(reversed(row)) for row in matrix]


def diagonal_sum(matrix: Matrix) -> int:
    """Return the sum of the main diagonal of a square matrix."""
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("matrix must be square")
    return sum(row[index] for index, row in enumerate(matrix))


def wave_order(matrix: Matrix) -> list[int]:
    """Return elements column by column, alternating downwards and upwards."""
    _shape(matrix)
    order: list[int] = []
    for index, column in enumerate(zip(*matrix)):
        order.extend(column if index % 2 == 0 else reversed(column))
    return order