"""Binary searches and cycle-based lookups over sorted or structured data."""

from __future__ import annotations

import math
from typing import Sequence


def _median_of_sorted(values: Sequence[int]) -> float:
    size = len(values)
    middle = size // 2
    if size % 2:
        return float(values[middle])
    return (values[middle] + values[middle - 1]) / 2.0


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together."""
    first, second = list(nums1), list(nums2)
    if len(first) > len(second):
        first, second = second, first
    n1, n2 = len(first), len(second)
    total = n1 + n2
    if total == 0:
        raise ValueError("at least one value is required")
    if n1 == 0:
        return _median_of_sorted(second)

    half = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        left1 = first[cut1 - 1] if cut1 > 0 else -math.inf
        left2 = second[cut2 - 1] if cut2 > 0 else -math.inf
        right1 = first[cut1] if cut1 < n1 else math.inf
        right2 = second[cut2] if cut2 < n2 else math.inf
        if left1 <= right2 and left2 <= right1:
            if total % 2:
                return float(max(left1, left2))
            return (max(left1, left2) + min(right1, right2)) / 2.0
        if left1 > right2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = low + (high - low) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value < target:
            low = mid + 1
        elif value > target:
            high = mid - 1
        else:
            return True
    return False


def search_matrix_sorted(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns are each sorted."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value appearing once in a sorted sequence of pairs."""
    size = len(nums)
    if size == 0:
        raise ValueError("nums must not be empty")
    if size == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, size - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        in_left_half = (mid % 2 == 1 and nums[mid] == nums[mid - 1]) or (
            mid % 2 == 0 and nums[mid] == nums[mid + 1]
        )
        if in_left_half:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError("no single element found")


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value among n + 1 values drawn from 1..n."""
    if not nums:
        raise ValueError("nums must not be empty")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    fast = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow