import pytest

from dsabasics.matrix import (
    add_matrices,
    diagonal_view,
    flatten,
    format_matrix,
    matrix_contains,
    sort_matrix,
)

UNSORTED = [[5, 4, 8], [6, 3, 6], [6, 7, 2]]


def test_format_matrix():
    assert format_matrix([[1, 2, 3], [4, 5, 6]]) == "1 2 3\n4 5 6"


def test_format_matrix_round_trip():
    text = format_matrix(UNSORTED)
    parsed = [[int(v) for v in line.split()] for line in text.splitlines()]
    assert parsed == UNSORTED


def test_add_matrices_uniform():
    assert add_matrices([[2, 2], [2, 2]], [[2, 2], [2, 2]]) == [[4, 4], [4, 4]]


def test_add_matrices_zero_identity():
    zero = [[0, 0, 0]] * 3
    assert add_matrices(UNSORTED, zero) == UNSORTED


def test_add_matrices_commutes():
    other = [[1, 0, 9], [2, 2, 2], [7, 1, 3]]
    assert add_matrices(UNSORTED, other) == add_matrices(other, UNSORTED)


def test_add_matrices_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1, 2, 3]])
    with pytest.raises(ValueError):
        add_matrices([[1]], [[1], [2]])


def test_diagonal_view_shows_only_diagonals():
    matrix = [[2, 4, 3], [6, 7, 8], [2, 5, 6]]
    lines = diagonal_view(matrix).split("\n")
    assert len(lines) == 3
    assert lines[1] == " 7  "
    assert lines[0].split() == ["2", "3"]
    assert lines[2].split() == ["2", "6"]


def test_diagonal_view_requires_square():
    with pytest.raises(ValueError):
        diagonal_view([[1, 2, 3], [4, 5, 6]])


def test_flatten_row_major():
    assert flatten([[1, 2], [3], [4, 5]]) == [1, 2, 3, 4, 5]


def test_sort_matrix_keeps_shape_and_elements():
    result = sort_matrix(UNSORTED)
    assert [len(row) for row in result] == [len(row) for row in UNSORTED]
    assert sorted(flatten(result)) == sorted(flatten(UNSORTED))
    values = flatten(result)
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_sort_matrix_does_not_mutate_input():
    original = [row[:] for row in UNSORTED]
    sort_matrix(UNSORTED)
    assert UNSORTED == original


def test_matrix_contains():
    assert matrix_contains(UNSORTED, 7) is True
    assert matrix_contains(UNSORTED, 9) is False


def test_matrix_contains_after_sorting():
    sorted_matrix = sort_matrix(UNSORTED)
    assert all(matrix_contains(sorted_matrix, v) for v in flatten(UNSORTED))