"""Array algorithms: counting, runs, majority, intervals and in-place reordering."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations, groupby, pairwise


def count_inversions(nums: Sequence[int]) -> int:
    """Return the number of pairs ``i < j`` with ``nums[i] > nums[j]``."""
    return sum(1 for left, right in combinations(nums, 2) if left > right)


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    if not nums:
        return 0
    values = sorted(nums)
    best = 0
    run = 1
    for previous, current in pairwise(values):
        if previous + 1 == current:
            run += 1
        elif previous == current:
            continue
        else:
            best = max(best, run)
            run = 1
    return max(best, run)


def majority_element(nums: Sequence[int]) -> int | None:
    """Return the element occurring more than ``len(nums) // 2`` times, or ``None``."""
    threshold = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > threshold:
            return value
    return None


def majority_elements_third(nums: Sequence[int]) -> list[int]:
    """Return every element occurring more than ``len(nums) // 3`` times."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(nums) if key == 1),
        default=0,
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Place the first ``n`` items of ``nums2`` after the first ``m`` of ``nums1`` and sort it in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged elements")
    nums1[m : m + n] = nums2[:n]
    nums1.sort()


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[:pivot:-1]


def remove_duplicates(nums: list[int]) -> int:
    """Drop repeated neighbours from ``nums`` in place and return its new length."""
    nums[:] = [key for key, _ in groupby(nums)]
    return len(nums)


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """Return the repeated values followed by the values missing from ``1..len(nums)``."""
    seen: set[int] = set()
    result: list[int] = []
    for value in nums:
        if value in seen:
            result.append(value)
        else:
            seen.add(value)
    result.extend(k for k in range(1, len(nums) + 1) if k not in seen)
    return result


def sort_colors(nums: list[int]) -> None:
    """Sort a list holding only 0, 1 and 2 in place without a comparison sort."""
    counts = Counter(nums)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"unexpected values: {sorted(unexpected)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]