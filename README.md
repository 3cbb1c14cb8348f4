# algosolve

A small library of classic algorithm routines. It covers array manipulation, k-sum searches, greedy choices, matrix operations, string parsing, combinatorics and singly linked lists. It uses only the standard library.

## Installation

```
pip install .
```

## Modules

- `algosolve.arrays`: `count_inversions`, `longest_consecutive`, `majority_element` (more than n/2 times, or `None`), `majority_elements_third` (more than n/3 times), `max_consecutive_ones`, `max_subarray` (Kadane's method), `merge_intervals`, `merge_sorted`, `next_permutation`, `remove_duplicates`, `find_error_nums` and `sort_colors`.
- `algosolve.sums`: `two_sum` (indices of the last matching pair, `ValueError` if none), `three_sum` (unique triplets summing to zero) and `four_sum` (unique quadruplets summing to a target).
- `algosolve.greedy`: `find_content_children`, `fractional_knapsack`, `minimum_coins` (greedy change, `None` when the amount cannot be paid) and `max_profit` (best single buy and sell).
- `algosolve.searching`: `find_duplicate`, `kth_element` (1-based, `IndexError` when out of range), `next_greater_element`, `search_rotated` and `single_non_duplicate`.
- `algosolve.matrix`: `find_median`, `rotate` (a quarter turn clockwise, square matrices only), `search_matrix` and `set_zeroes`.
- `algosolve.strings`: `roman_to_int`, `length_of_longest_substring`, `reverse_words`, `my_atoi` (clamped to the 32-bit signed range) and `is_valid_parentheses`.
- `algosolve.maths`: `generate_row` and `pascal_triangle`, `my_pow` (exponentiation by squaring) and `unique_paths` (lattice paths across a grid).
- `algosolve.linked_list`: the `ListNode` type with its `values()` method and `build_list`, plus `delete_node`, `get_intersection_node`, `has_cycle`, `detect_cycle`, `is_palindrome`, `merge_two_lists`, `middle_node`, `remove_nth_from_end`, `reverse_list` and `rotate_right`.

## Examples

```python
from algosolve.sums import three_sum
from algosolve.strings import roman_to_int
from algosolve.linked_list import build_list, reverse_list

three_sum([-1, 0, 1, 2, -1, -4])              # [[-1, -1, 2], [-1, 0, 1]]
roman_to_int("MCMXCIV")                       # 1994
reverse_list(build_list([1, 2, 3])).values()  # [3, 2, 1]
```

## In-place functions

These change the list they are given and return `None`: `sort_colors`, `next_permutation`, `merge_sorted`, `rotate` and `set_zeroes`. `remove_duplicates` also changes its list in place and returns the new length. The linked-list functions relink the nodes they are given rather than copying them.

## What it does not do

This is a library only. It has no command-line tool and reads no input files; every routine is called from Python code.

## Running the tests

```
pip install .[test]
pytest
```