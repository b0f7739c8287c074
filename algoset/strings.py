"""String algorithms: palindromes, parsing and bracket matching."""

from __future__ import annotations

import re
from typing import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ATOI = re.compile(r" *([+-]?)([0-9]*)")

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_CLOSING = {")": "(", "]": "[", "}": "{"}


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one on ties."""
    best_start, best_len = 0, 0
    size = len(s)
    for center in range(2 * size - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < size and s[left] == s[right]:
            left -= 1
            right += 1
        length = right - left - 1
        if length > best_len:
            best_start, best_len = left + 1, length
    return s[best_start:best_start + best_len]


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to 32-bit range."""
    sign, digits = _ATOI.match(s).groups()
    if not digits:
        return 0
    digits = digits.lstrip("0") or "0"
    negative = sign == "-"
    if len(digits) > 10:
        return INT_MIN if negative else INT_MAX
    value = -int(digits) if negative else int(digits)
    return max(INT_MIN, min(INT_MAX, value))


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown letters count as zero."""
    values = [_ROMAN.get(ch, 0) for ch in s]
    return sum(
        -value if value < following else value
        for value, following in zip(values, values[1:] + [0])
    )


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix common to all strings."""
    if not strs:
        raise ValueError("at least one string is required")
    first, last = min(strs), max(strs)
    size = 0
    for a, b in zip(first, last):
        if a != b:
            break
        size += 1
    return first[:size]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so text other than brackets makes the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif not stack or _CLOSING.get(ch) != stack.pop():
            return False
    return not stack


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed([word for word in s.split(" ") if word]))