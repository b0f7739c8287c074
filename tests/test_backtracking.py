import math
from collections import Counter
from itertools import combinations, permutations

import pytest

from algoset.backtracking import (
    combination_sum,
    combination_sum2,
    get_permutation,
    partition_palindromes,
    permute,
    solve_n_queens,
    subsets_with_dup,
)


def _valid_board(board, n):
    if len(board) != n or any(len(row) != n for row in board):
        return False
    queens = [(r, c) for r, row in enumerate(board) for c, ch in enumerate(row) if ch == "Q"]
    if len(queens) != n:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    diag = {c - r for r, c in queens}
    anti = {c + r for r, c in queens}
    return len(rows) == len(cols) == len(diag) == len(anti) == n


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@pytest.mark.parametrize("candidates,target", [([2, 3, 5], 8), ([3, 4, 5], 12), ([2], 1)])
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    assert all(sum(combo) == target for combo in result)
    assert all(set(combo) <= set(candidates) for combo in result)
    keys = [tuple(sorted(combo)) for combo in result]
    assert len(keys) == len(set(keys))


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_combination_sum2_invariants():
    candidates = [10, 1, 2, 7, 6, 1, 5]
    result = combination_sum2(candidates, 8)
    available = Counter(candidates)
    assert result
    for combo in result:
        assert sum(combo) == 8
        assert combo == sorted(combo)
        assert not Counter(combo) - available
    keys = [tuple(combo) for combo in result]
    assert len(keys) == len(set(keys))
    expected = {c for r in range(len(candidates) + 1)
                for c in combinations(sorted(candidates), r) if sum(c) == 8}
    assert set(keys) == expected


def test_permute_covers_all_orderings():
    nums = [1, 2, 3, 4]
    result = permute(nums)
    assert result[0] == nums
    assert sorted(result) == sorted(list(p) for p in permutations(nums))
    assert len(result) == math.factorial(len(nums))


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_solve_n_queens_boards_are_valid(n):
    boards = solve_n_queens(n)
    assert boards
    assert all(_valid_board(board, n) for board in boards)
    assert len({tuple(b) for b in boards}) == len(boards)


def test_solve_n_queens_counts():
    assert len(solve_n_queens(4)) == 2
    assert len(solve_n_queens(8)) == 92
    assert solve_n_queens(3) == []


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_get_permutation_matches_lexicographic_order(n):
    ordered = list(permutations(range(1, n + 1)))
    for k in range(1, math.factorial(n) + 1):
        assert get_permutation(n, k) == "".join(map(str, ordered[k - 1]))


@pytest.mark.parametrize("n,k", [(3, 0), (3, 7), (0, 1)])
def test_get_permutation_rejects_bad_arguments(n, k):
    with pytest.raises(ValueError):
        get_permutation(n, k)


def test_subsets_with_dup_distinct_and_complete():
    nums = [2, 1, 2, 2]
    result = subsets_with_dup(nums)
    assert result[0] == []
    keys = [tuple(s) for s in result]
    assert len(keys) == len(set(keys))
    expected = {c for r in range(len(nums) + 1) for c in combinations(sorted(nums), r)}
    assert set(keys) == expected


@pytest.mark.parametrize("text", ["aab", "racecar", "abba"])
def test_partition_palindromes_invariants(text):
    result = partition_palindromes(text)
    assert result[0] == list(text)
    for parts in result:
        assert "".join(parts) == text
        assert all(p == p[::-1] for p in parts)
    assert len({tuple(p) for p in result}) == len(result)
    assert [text] in result or text != text[::-1]