"""Operations on two-dimensional integer matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix one row per line, values separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def add_matrices(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(first) != len(second) or any(
        len(row_a) != len(row_b) for row_a, row_b in zip(first, second)
    ):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def diagonal_view(matrix: Matrix) -> str:
    """Show only the principal and secondary diagonals of a square matrix.

    Each diagonal element is written followed by a space; every other
    position is written as a single space.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("diagonal_view() needs a square matrix")
    lines = []
    for i, row in enumerate(matrix):
        cells = (
            f"{value} " if i == j or i + j == size - 1 else " "
            for j, value in enumerate(row)
        )
        lines.append("".join(cells))
    return "\n".join(lines)


def flatten(matrix: Matrix) -> list[int]:
    """Return the matrix elements in row-major order."""
    return [value for row in matrix for value in row]


def sort_matrix(matrix: Matrix) -> list[list[int]]:
    """Return a matrix of the same shape whose elements are sorted row by row."""
    ordered = iter(sorted(flatten(matrix)))
    return [[next(ordered) for _ in row] for row in matrix]


def matrix_contains(matrix: Matrix, value: int) -> bool:
    """Tell whether ``value`` occurs anywhere in the matrix."""
    return any(value in row for row in matrix)