"""Matrix manipulation: rotation, spiral reading, zeroing and Pascal's triangle."""

from __future__ import annotations

from typing import MutableSequence, Sequence


def rotate(matrix: Sequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values read clockwise in a spiral from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    values: list[int] = []
    while left <= right and top <= bottom:
        values.extend(matrix[top][left : right + 1])
        top += 1
        values.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            values.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            values.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return values


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if rows:
            previous = rows[-1]
            rows.append([1] + [a + b for a, b in zip(previous, previous[1:])] + [1])
        else:
            rows.append([1])
    return rows