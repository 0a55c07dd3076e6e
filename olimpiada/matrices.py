"""Problems over square matrices: cross sums and magic squares."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def largest_cross_sum(matrix: Matrix) -> int:
    """Largest sum of a row and a column without their shared cell, starting from 0."""
    column_sums = [sum(column) for column in zip(*matrix)]
    best_row = 0
    best_total = 0
    for row in matrix:
        row_sum = sum(row)
        best_row = max(best_row, row_sum)
        if best_row > row_sum:
            continue
        candidate = max(
            [0]
            + [
                column_sum + best_row - 2 * cell
                for column_sum, cell in zip(column_sums, row)
            ]
        )
        best_total = max(best_total, candidate)
    return best_total


def magic_square_sum(matrix: Matrix) -> int:
    """The magic constant of the square, or -1 if it is not magic."""
    if not matrix:
        raise ValueError("the square must have at least one row")
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    target = sum(matrix[0])
    lines = [sum(row) for row in matrix]
    lines += [sum(column) for column in zip(*matrix)]
    lines.append(sum(matrix[i][i] for i in range(size)))
    lines.append(sum(matrix[size - 1 - i][i] for i in range(size)))
    return target if all(line == target for line in lines) else -1