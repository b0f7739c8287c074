"""Two-pointer techniques over sorted or bounded sequences."""

from __future__ import annotations

from typing import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return two indices whose values add up to ``target``, or an empty list.

    The indices come in order of the values they point at.
    """
    pairs = sorted((value, index) for index, value in enumerate(nums))
    start, end = 0, len(pairs) - 1
    while start < end:
        total = pairs[start][0] + pairs[end][0]
        if total == target:
            return [pairs[start][1], pairs[end][1]]
        if total < target:
            start += 1
        else:
            end -= 1
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the lines can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left <= right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] > height[right]:
            right -= 1
        elif height[left] < height[right]:
            left += 1
        else:
            left += 1
            right -= 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return the distinct sorted triplets that sum to zero."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size - 2):
        if i > 0 and values[i] == values[i - 1]:
            continue
        j, k = i + 1, size - 1
        while j < k:
            total = values[i] + values[j] + values[k]
            if total == 0:
                triplet = [values[i], values[j], values[k]]
                result.append(triplet)
                while j < k and values[j] == triplet[1]:
                    j += 1
                while j < k and values[k] == triplet[2]:
                    k -= 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct sorted quadruplets that sum to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    i = 0
    while i < size:
        j = i + 1
        while j < size:
            remain = target - values[i] - values[j]
            left, right = j + 1, size - 1
            while left < right:
                total = values[left] + values[right]
                if total == remain:
                    result.append([values[i], values[j], values[left], values[right]])
                    left += 1
                    right -= 1
                    while left < right and values[left - 1] == values[left]:
                        left += 1
                elif total > remain:
                    right -= 1
                else:
                    left += 1
            while j + 1 < size and values[j] == values[j + 1]:
                j += 1
            j += 1
        while i + 1 < size and values[i] == values[i + 1]:
            i += 1
        i += 1
    return result


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    left, right = 0, len(height) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if height[left] <= height[right]:
            if height[left] >= max_left:
                max_left = height[left]
            else:
                water += max_left - height[left]
            left += 1
        else:
            if height[right] >= max_right:
                max_right = height[right]
            else:
                water += max_right - height[right]
            right -= 1
    return water