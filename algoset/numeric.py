"""Numeric routines: fast powers, grid paths, happy numbers, Pascal's triangle."""

from __future__ import annotations

import math


def my_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    result = 1.0
    base = float(x)
    remaining = abs(n)
    while remaining:
        if remaining % 2 == 0:
            base *= base
            remaining //= 2
        else:
            result *= base
            remaining -= 1
    if n < 0:
        if result == 0.0:
            return math.copysign(math.inf, result)
        result = 1.0 / result
    return result


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m×n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def _digit_square_sum(n: int) -> int:
    return sum(int(d) ** 2 for d in str(abs(n)))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits reaches 1."""
    slow = n
    fast = _digit_square_sum(n)
    while fast != 1 and fast != slow:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
    return fast == 1


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
        else:
            previous = rows[-1]
            rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows