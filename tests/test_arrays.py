import random
from itertools import permutations

import pytest

from algosolve.arrays import (
    count_inversions,
    find_error_nums,
    longest_consecutive,
    majority_element,
    majority_elements_third,
    max_consecutive_ones,
    max_subarray,
    merge_intervals,
    merge_sorted,
    next_permutation,
    remove_duplicates,
    sort_colors,
)


def test_inversions_sorted_has_none():
    assert not count_inversions([1, 2, 3, 4, 5])


def test_inversions_reversed_counts_every_pair():
    n = 7
    assert count_inversions(list(range(n, 0, -1))) == n * (n - 1) // 2


def test_inversions_equal_values_do_not_count():
    assert not count_inversions([3, 3, 3])


def test_longest_consecutive_example():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4


def test_longest_consecutive_shuffled_range():
    nums = list(range(10))
    random.Random(1).shuffle(nums)
    assert longest_consecutive(nums) == len(nums)


def test_longest_consecutive_with_duplicates():
    nums = list(range(5)) * 2
    assert longest_consecutive(nums) == len(set(nums))


def test_longest_consecutive_empty():
    assert not longest_consecutive([])


def test_majority_element_found():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_absent():
    assert majority_element([1, 2, 3, 4]) is None


def test_majority_third_single():
    assert majority_elements_third([3, 2, 3]) == [3]


def test_majority_third_two():
    assert sorted(majority_elements_third([1, 2])) == [1, 2]


def test_majority_third_none():
    assert majority_elements_third([1, 2, 3]) == []


def test_max_consecutive_ones_example():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


def test_max_consecutive_ones_all_ones():
    nums = [1] * 6
    assert max_consecutive_ones(nums) == len(nums)


def test_max_consecutive_ones_no_ones():
    assert not max_consecutive_ones([0, 0, 0])


def test_max_subarray_all_negative():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_all_positive():
    nums = [2, 3, 1, 4]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


def test_merge_intervals_example():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [
        [1, 6],
        [8, 10],
        [15, 18],
    ]


def test_merge_intervals_touching_and_unsorted():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


def test_merge_sorted_in_place():
    nums1 = [1, 2, 3, 0, 0, 0]
    merge_sorted(nums1, 3, [2, 5, 6], 3)
    assert nums1 == [1, 2, 2, 3, 5, 6]


def test_merge_sorted_too_short_raises():
    with pytest.raises(ValueError):
        merge_sorted([1], 1, [2, 3], 2)


def test_next_permutation_simple():
    nums = [1, 2, 3]
    next_permutation(nums)
    assert nums == [1, 3, 2]


def test_next_permutation_wraps_around():
    nums = [3, 2, 1]
    next_permutation(nums)
    assert nums == [1, 2, 3]


def test_next_permutation_visits_every_permutation():
    start = [1, 2, 3, 4]
    nums = list(start)
    seen = set()
    all_perms = set(permutations(start))
    for _ in range(len(all_perms)):
        seen.add(tuple(nums))
        next_permutation(nums)
    assert seen == all_perms
    assert nums == start


def test_remove_duplicates_example():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    length = remove_duplicates(nums)
    assert nums == [0, 1, 2, 3, 4]
    assert length == len(nums)


def test_remove_duplicates_empty():
    nums = []
    assert not remove_duplicates(nums)
    assert nums == []


def test_find_error_nums_example():
    assert find_error_nums([1, 2, 2, 4]) == [2, 3]


def test_find_error_nums_no_error():
    assert find_error_nums([3, 1, 2]) == []


def test_sort_colors():
    nums = [2, 0, 2, 1, 1, 0]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])