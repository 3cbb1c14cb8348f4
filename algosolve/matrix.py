"""Matrix algorithms: median, rotation, searching and zeroing rows and columns."""

from __future__ import annotations

from collections.abc import Sequence


def _halve_toward_zero(total: int) -> int:
    return total // 2 if total >= 0 else -(-total // 2)


def find_median(matrix: Sequence[Sequence[int]]) -> int:
    """Return the median of all entries; for an even count, the truncated mean of the two middles."""
    values = sorted(value for row in matrix for value in row)
    if not values:
        raise ValueError("matrix must not be empty")
    middle = len(values) // 2
    if len(values) % 2 == 1:
        return values[middle]
    return _halve_toward_zero(values[middle - 1] + values[middle])


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    for row, column in zip(matrix, zip(*matrix[::-1])):
        pass
    rotated = [list(column) for column in zip(*matrix[::-1])]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    columns = len(matrix[0])
    low, high = 0, len(matrix) * columns - 1
    while low <= high:
        mid = (low + high) // 2
        value = matrix[mid // columns][mid % columns]
        if value == target:
            return True
        if target > value:
            low = mid + 1
        else:
            high = mid - 1
    return False


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_columns = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            row[:] = [0 if j in zero_columns else value for j, value in enumerate(row)]