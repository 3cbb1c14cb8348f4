"""Numeric algorithms: Pascal's triangle, integer powers and grid paths."""

from __future__ import annotations

from math import comb


def generate_row(n: int) -> list[int]:
    """Return row ``n`` of Pascal's triangle, counting the top row as 1."""
    row = [1]
    entry = 1
    for i in range(1, n):
        entry = entry * (n - i) // i
        row.append(entry)
    return row


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [generate_row(i) for i in range(1, num_rows + 1)]


def my_pow(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring."""
    if n == 0:
        return 1.0
    base = float(x)
    exponent = n
    if exponent < 0:
        exponent = -exponent
        base = 1 / base
    result = 1.0
    while exponent > 0:
        if exponent % 2 == 1:
            result *= base
            exponent -= 1
        else:
            base *= base
            exponent //= 2
    return result


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)