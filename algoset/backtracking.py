"""Backtracking searches: combinations, permutations, queens, partitions."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of ``candidates`` (reuse allowed) summing to ``target``.

    Combinations list their values in the order of ``candidates``; the
    search takes an element as often as it fits before moving past it.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    path: list[int] = []

    def search(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                result.append(path.copy())
            return
        value = values[index]
        if value <= remaining:
            path.append(value)
            search(index, remaining - value)
            path.pop()
        search(index + 1, remaining)

    search(0, target)
    return result


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations, each candidate used at most once, summing to ``target``."""
    values = sorted(candidates)
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(path.copy())
            return
        for i in range(start, len(values)):
            value = values[i]
            if i > start and value == values[i - 1]:
                continue
            if value > remaining:
                break
            path.append(value)
            search(i + 1, remaining - value)
            path.pop()

    search(0, target)
    return result


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return all orderings of ``nums``, generated by successive swaps."""
    items = list(nums)
    result: list[list[int]] = []

    def recur(index: int) -> None:
        if index == len(items):
            result.append(items.copy())
            return
        for i in range(index, len(items)):
            items[index], items[i] = items[i], items[index]
            recur(index + 1)
            items[index], items[i] = items[i], items[index]

    recur(0)
    return result


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("n must not be negative")
    board = [["."] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or col - row in used_diagonals or row + col in used_anti_diagonals:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_diagonals.add(col - row)
            used_anti_diagonals.add(row + col)
            place(col + 1)
            board[row][col] = "."
            used_rows.discard(row)
            used_diagonals.discard(col - row)
            used_anti_diagonals.discard(row + col)

    place(0)
    return solutions


def get_permutation(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) lexicographic permutation of 1..n as a string."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= math.factorial(n):
        raise ValueError("k is out of range")
    numbers = list(range(1, n + 1))
    block = math.factorial(n - 1)
    k -= 1
    pieces: list[str] = []
    while True:
        index, k = divmod(k, block)
        pieces.append(str(numbers.pop(index)))
        if not numbers:
            break
        block //= len(numbers)
    return "".join(pieces)


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return all distinct subsets of ``nums``, each in sorted order."""
    values = sorted(nums)
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int) -> None:
        result.append(path.copy())
        for i in range(start, len(values)):
            if i != start and values[i] == values[i - 1]:
                continue
            path.append(values[i])
            search(i + 1)
            path.pop()

    search(0)
    return result


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    path: list[str] = []

    def split(start: int) -> None:
        if start == len(s):
            result.append(path.copy())
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                split(end)
                path.pop()

    split(0)
    return result