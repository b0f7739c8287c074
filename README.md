# algoset

A small library of classic algorithms, written as plain functions that take
and return ordinary Python values (lists, strings, numbers), plus a minimal
singly linked list type.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algoset.linkedlist`

`ListNode(val=0, next=None)` is a dataclass node. Nodes compare by identity,
and iterating over a node yields the values from it to the end of the list.
`build_list(values)` makes a list (or `None` for no values) and
`to_list(head)` reads it back.

- `add_two_numbers(l1, l2)`: sum of two numbers stored as digit lists, least
  significant digit first.
- `remove_nth_from_end(head, n)`: unlinks the n-th node from the end; raises
  `ValueError` if `n` is below 1 or longer than the list.
- `merge_two_lists(l1, l2)`: splices two sorted lists together; on equal
  values the node from `l2` comes first.
- `rotate_right(head, k)`: rotates the list right by `k` places.
- `has_cycle(head)` and `detect_cycle(head)`: cycle test and the node where
  the cycle starts (or `None`).
- `get_intersection_node(head_a, head_b)`: first node shared by two lists.
- `reverse_list(head)`: reverses in place and returns the new head.
- `is_palindrome_list(head)`: compares values both ways; the list is restored
  afterwards.
- `delete_node(node)`: removes a node given only that node; raises
  `ValueError` for the tail.
- `middle_node(head)`: the middle node, the second one when there are two.

### `algoset.strings`

- `longest_palindrome(s)`: longest palindromic substring, leftmost on ties.
- `my_atoi(s)`: parses a leading signed integer after spaces, clamped to the
  32-bit signed range; returns 0 when there are no digits.
- `roman_to_int(s)`: Roman numeral to integer; unknown letters count as zero.
- `longest_common_prefix(strs)`: raises `ValueError` for an empty sequence.
- `is_valid_parentheses(s)`: any character other than an opening bracket is
  treated as a closer, so non-bracket text makes the string invalid.
- `reverse_words(s)`: space-separated words in reverse order, single-spaced.

### `algoset.numeric`

- `my_pow(x, n)`: `x` to an integer power by repeated squaring.
- `unique_paths(m, n)`: right/down paths across an m×n grid.
- `is_happy(n)`: whether repeated digit-square sums reach 1.
- `pascal_triangle(num_rows)`: the first rows of Pascal's triangle.

### `algoset.backtracking`

- `combination_sum(candidates, target)`: combinations with reuse; candidates
  must be positive.
- `combination_sum2(candidates, target)`: distinct combinations, each
  candidate used at most once.
- `permute(nums)`: all orderings.
- `solve_n_queens(n)`: every board as rows of `'Q'` and `'.'`.
- `get_permutation(n, k)`: the k-th (1-based) lexicographic permutation of
  1..n as a string; raises `ValueError` if `k` is out of range.
- `subsets_with_dup(nums)`: all distinct subsets, each sorted.
- `partition_palindromes(s)`: every split of `s` into palindromes.

### `algoset.searching`

- `find_median_sorted_arrays(nums1, nums2)`: median of two sorted sequences.
- `search_rotated(nums, target)`: index in a rotated sorted sequence, or -1.
- `search_matrix(matrix, target)`: rows sorted and continuing one another.
- `search_matrix_sorted(matrix, target)`: rows and columns each sorted.
- `single_non_duplicate(nums)`: the lone value in a sorted list of pairs.
- `find_duplicate(nums)`: the repeated value among n + 1 values from 1..n.

### `algoset.twopointers`

- `two_sum(nums, target)`: two indices whose values add to `target`, ordered
  by their values, or `[]`.
- `max_area(height)`, `trap(height)`: container and rain-water problems.
- `three_sum(nums)`, `four_sum(nums, target)`: distinct sorted tuples.

### `algoset.arrays`

- `remove_duplicates(nums)`: compacts a sorted list at its front and returns
  the count of distinct values.
- `next_permutation(nums)`: in place; the last permutation wraps to the first.
- `max_subarray(nums)`, `max_profit(prices)`, `longest_consecutive(nums)`,
  `find_max_consecutive_ones(nums)`, `missing_number(nums)`,
  `reverse_pairs(nums)`.
- `merge_intervals(intervals)`: merges overlapping or touching intervals.
- `set_zeroes(matrix)`, `sort_colors(nums)`, `merge_sorted(nums1, m, nums2, n)`:
  in place.
- `majority_element(nums)`: the value seen more than half the time, or -1.
- `majority_elements(nums)`: the values seen more than a third of the time.

Where an input cannot have an answer (an empty list where one value is
needed, a bad count), functions raise `ValueError`.

## Examples

```python
from algoset.linkedlist import build_list, reverse_list, to_list
from algoset.strings import roman_to_int
from algoset.twopointers import trap
from algoset.backtracking import solve_n_queens

to_list(reverse_list(build_list([1, 2, 3])))  # [3, 2, 1]
roman_to_int("MCMXCIV")                       # 1994
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])    # 6
len(solve_n_queens(8))                        # 92
```

## What it does not do

algoset is a library only: it has no command-line interface, and it reads
no input files and writes nothing to disk.