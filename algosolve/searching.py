"""Searching in arrays: duplicates, k-th element, next greater, rotated and paired data."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def find_duplicate(nums: Sequence[int]) -> int | None:
    """Return the smallest value that occurs more than once, or ``None``."""
    return next(
        (left for left, right in pairwise(sorted(nums)) if left == right), None
    )


def kth_element(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest (1-based) element of ``a`` and ``b`` together."""
    merged = sorted([*a, *b])
    if not 1 <= k <= len(merged):
        raise IndexError(f"k={k} is out of range for {len(merged)} elements")
    return merged[k - 1]


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1`` found in ``nums2``, give the next greater value to its right.

    ``-1`` stands where no greater value follows; values absent from ``nums2`` are skipped.
    """
    result: list[int] = []
    for value in nums1:
        try:
            position = nums2.index(value)
        except ValueError:
            continue
        result.append(next((x for x in nums2[position + 1 :] if x > value), -1))
    return result


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ``nums``, or ``-1`` when it is absent."""
    return next((i for i, value in enumerate(nums) if value == target), -1)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one unpaired value of a sorted list whose other values come in pairs."""
    if not nums:
        raise ValueError("nums must not be empty")
    for first, second in zip(nums[0::2], nums[1::2]):
        if first != second:
            return first
    return nums[-1]