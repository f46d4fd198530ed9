import pytest

from algokit.matrix import format_matrix, upper_triangular


def test_upper_triangular_zeroes_below_diagonal():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    result = upper_triangular(matrix)
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            if i > j:
                assert value == 0
            else:
                assert value == matrix[i][j]


def test_upper_triangular_does_not_mutate():
    matrix = [[1, 2], [3, 4]]
    upper_triangular(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_non_square_raises():
    with pytest.raises(ValueError):
        upper_triangular([[1, 2], [3]])


def test_format_matrix():
    assert format_matrix([[1, 2], [3, -4]]) == "   1   2\n   3  -4"