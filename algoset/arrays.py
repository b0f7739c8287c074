"""Array algorithms: in-place rearrangements, scans, voting and counting."""

from __future__ import annotations

import heapq
from itertools import groupby
from typing import Iterable, MutableSequence, Sequence

_COLORS = frozenset({0, 1, 2})


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first k items are distinct; return k."""
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    size = len(nums)
    pivot = next((j for j in range(size - 2, -1, -1) if nums[j] < nums[j + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    swap_at = next(i for i in range(size - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap_at] = nums[swap_at], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def max_subarray(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    best: int | None = None
    current = 0
    for value in nums:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column of ``matrix`` that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    if any(value not in _COLORS for value in nums):
        raise ValueError("values must be 0, 1 or 2")
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Place the first ``n`` items of ``nums2`` after the first ``m`` of ``nums1`` and sort ``nums1``."""
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("sequences are too short for the given counts")
    nums1[m:m + n] = nums2[:n]
    nums1.sort()


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    profit = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, or -1 if there is none."""
    count = 0
    candidate: int | None = None
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return -1


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than a third of the time."""
    first: int | None = None
    second: int | None = None
    count1 = count2 = 0
    for value in nums:
        if count1 == 0 and value != second:
            first, count1 = value, 1
        elif count2 == 0 and value != first:
            second, count2 = value, 1
        elif value == first:
            count1 += 1
        elif value == second:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1
    threshold = len(nums) // 3 + 1
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and nums.count(candidate) >= threshold
    ]


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of 0..n absent from the ``n`` distinct values given."""
    size = len(nums)
    return abs(sum(nums) - size * (size + 1) // 2)


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in group) for key, group in groupby(nums) if key == 1),
        default=0,
    )


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = len(values) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return list(heapq.merge(left, right)), count


def reverse_pairs(nums: Iterable[int]) -> int:
    """Count pairs i < j with ``nums[i] > 2 * nums[j]``."""
    return _sort_and_count(list(nums))[1]