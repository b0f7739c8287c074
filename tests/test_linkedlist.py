import pytest

from algoset.linkedlist import (
    ListNode,
    add_two_numbers,
    build_list,
    delete_node,
    detect_cycle,
    get_intersection_node,
    has_cycle,
    is_palindrome_list,
    merge_two_lists,
    middle_node,
    remove_nth_from_end,
    reverse_list,
    rotate_right,
    to_list,
)


def _digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits)))


def _with_cycle(values, entry_index):
    head = build_list(values)
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    nodes[-1].next = nodes[entry_index]
    return head, nodes[entry_index]


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3]])
def test_build_and_to_list_round_trip(values):
    assert to_list(build_list(values)) == values


def test_build_empty_is_none():
    assert build_list([]) is None


def test_iter_yields_values():
    assert list(build_list([4, 5, 6])) == [4, 5, 6]


@pytest.mark.parametrize(
    "a, b",
    [([2, 4, 3], [5, 6, 4]), ([0], [0]), ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9])],
)
def test_add_two_numbers(a, b):
    result = to_list(add_two_numbers(build_list(a), build_list(b)))
    assert _digits_to_int(result) == _digits_to_int(a) + _digits_to_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_add_two_numbers_zero_plus_zero_single_digit():
    assert to_list(add_two_numbers(build_list([0]), build_list([0]))) == [0]


def test_remove_nth_from_end():
    values = [1, 2, 3, 4, 5]
    assert to_list(remove_nth_from_end(build_list(values), 2)) == values[:3] + values[4:]


def test_remove_only_node():
    assert remove_nth_from_end(build_list([1]), 1) is None


def test_remove_head():
    assert to_list(remove_nth_from_end(build_list([1, 2]), 2)) == [2]


@pytest.mark.parametrize("n", [0, 6])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3, 4, 5]), n)


@pytest.mark.parametrize(
    "a, b", [([1, 2, 4], [1, 3, 4]), ([], [0]), ([5], []), ([1, 1], [1, 2, 3])]
)
def test_merge_two_lists(a, b):
    assert to_list(merge_two_lists(build_list(a), build_list(b))) == sorted(a + b)


def test_merge_tie_takes_second_list_first():
    l1 = build_list([1])
    l2 = build_list([1])
    assert merge_two_lists(l1, l2) is l2


@pytest.mark.parametrize("k", [0, 1, 2, 5, 7])
def test_rotate_right(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[len(values) - shift:] + values[: len(values) - shift]
    assert to_list(rotate_right(build_list(values), k)) == expected


def test_rotate_empty_and_single():
    assert rotate_right(None, 3) is None
    assert to_list(rotate_right(build_list([1]), 3)) == [1]


def test_has_cycle():
    head, _ = _with_cycle([3, 2, 0, -4], 1)
    assert has_cycle(head) is True
    assert has_cycle(build_list([1, 2, 3])) is False
    assert has_cycle(None) is False


@pytest.mark.parametrize("entry", [0, 1, 3])
def test_detect_cycle(entry):
    head, expected = _with_cycle([3, 2, 0, -4], entry)
    assert detect_cycle(head) is expected


def test_detect_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert detect_cycle(node) is node


def test_detect_no_cycle():
    assert detect_cycle(build_list([1, 2, 3])) is None
    assert detect_cycle(None) is None


def test_intersection():
    common = build_list([8, 4, 5])
    head_a = ListNode(4, ListNode(1, common))
    head_b = ListNode(5, ListNode(6, ListNode(1, common)))
    assert get_intersection_node(head_a, head_b) is common


def test_no_intersection():
    assert get_intersection_node(build_list([2, 6, 4]), build_list([1, 5])) is None
    assert get_intersection_node(None, build_list([1])) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_list(reverse_list(build_list(values))) == values[::-1]


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2], False), ([], True), ([1], True), ([1, 2, 1], True), ([1, 2, 3], False)],
)
def test_is_palindrome_list(values, expected):
    head = build_list(values)
    assert is_palindrome_list(head) is expected
    assert to_list(head) == values


def test_delete_node():
    head = build_list([4, 5, 1, 9])
    delete_node(head.next)
    assert to_list(head) == [4, 1, 9]


def test_delete_tail_raises():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6], [1]])
def test_middle_node(values):
    assert to_list(middle_node(build_list(values))) == values[len(values) // 2:]


def test_middle_of_empty():
    assert middle_node(None) is None