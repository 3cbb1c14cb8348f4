"""Finding pairs, triplets and quadruplets with a given sum."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return all unique sorted quadruplets of ``nums`` summing to ``target``."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i in range(count):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, count):
            if j != i + 1 and values[j] == values[j - 1]:
                continue
            low, high = j + 1, count - 1
            while low < high:
                total = values[i] + values[j] + values[low] + values[high]
                if total == target:
                    result.append([values[i], values[j], values[low], values[high]])
                    low += 1
                    high -= 1
                    while low < high and values[low] == values[low - 1]:
                        low += 1
                    while low < high and values[high] == values[high + 1]:
                        high -= 1
                elif total < target:
                    low += 1
                else:
                    high -= 1
    return result


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return all unique sorted triplets of ``nums`` summing to zero."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i in range(count):
        if i > 0 and values[i] == values[i - 1]:
            continue
        low, high = i + 1, count - 1
        while low < high:
            total = values[i] + values[low] + values[high]
            if total == 0:
                result.append([values[i], values[low], values[high]])
                low += 1
                high -= 1
                while low < high and values[low] == values[low - 1]:
                    low += 1
                while low < high and values[high] == values[high + 1]:
                    high -= 1
            elif total < 0:
                low += 1
            else:
                high -= 1
    return result


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``i < j`` of the last pair summing to ``target``.

    Raises ``ValueError`` when no pair sums to ``target``.
    """
    matches = [
        [i, j]
        for i, j in combinations(range(len(nums)), 2)
        if nums[i] + nums[j] == target
    ]
    if not matches:
        raise ValueError(f"no pair sums to {target}")
    return matches[-1]