"""Square matrix helpers."""

from __future__ import annotations

from collections.abc import Sequence


def upper_triangular(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of the square ``matrix`` with entries below the diagonal set to 0."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [
        [value if i <= j else 0 for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render ``matrix`` with each entry in a four-character column."""
    return "\n".join("".join(f"{value: 4d}" for value in row) for row in matrix)