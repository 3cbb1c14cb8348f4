import pytest

from algosolve.searching import (
    find_duplicate,
    kth_element,
    next_greater_element,
    search_rotated,
    single_non_duplicate,
)


def test_find_duplicate_example():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2


def test_find_duplicate_none():
    assert find_duplicate([4, 1, 3, 2]) is None


def test_find_duplicate_does_not_mutate():
    nums = [3, 1, 3, 2]
    assert find_duplicate(nums) == 3
    assert nums == [3, 1, 3, 2]


def test_kth_element_example():
    assert kth_element([2, 3, 6, 7, 9], [1, 4, 8, 10], 5) == 6


def test_kth_element_extremes():
    a = [2, 3, 6, 7, 9]
    b = [1, 4, 8, 10]
    assert kth_element(a, b, 1) == min(a + b)
    assert kth_element(a, b, len(a) + len(b)) == max(a + b)


def test_kth_element_out_of_range():
    with pytest.raises(IndexError):
        kth_element([1, 2], [3], 4)
    with pytest.raises(IndexError):
        kth_element([1, 2], [3], 0)


def test_next_greater_element_example():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]


def test_next_greater_element_second_example():
    assert next_greater_element([2, 4], [1, 2, 3, 4]) == [3, -1]


def test_next_greater_element_skips_missing():
    assert next_greater_element([5], [1, 2]) == []


def test_search_rotated_found():
    nums = [4, 5, 6, 7, 0, 1, 2]
    for target in nums:
        assert nums[search_rotated(nums, target)] == target


def test_search_rotated_missing():
    assert search_rotated([4, 5, 6, 7, 0, 1, 2], 3) == -1


def test_single_non_duplicate_middle():
    assert single_non_duplicate([1, 1, 2, 3, 3, 4, 4, 8, 8]) == 2


def test_single_non_duplicate_near_end():
    assert single_non_duplicate([3, 3, 7, 7, 10, 11, 11]) == 10


def test_single_non_duplicate_last():
    assert single_non_duplicate([1, 1, 5]) == 5


def test_single_non_duplicate_one_element():
    assert single_non_duplicate([9]) == 9


def test_single_non_duplicate_empty_raises():
    with pytest.raises(ValueError):
        single_non_duplicate([])