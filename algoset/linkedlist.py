"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list.

    Nodes compare by identity, so that cycle and intersection checks
    look at the nodes themselves rather than at their values.
    """

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as lists of decimal digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(next=head)
    fast = dummy
    for _ in range(n):
        if fast.next is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    slow = dummy
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; on ties the node of ``l2`` comes first."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    for _ in range(length - k % length):
        tail = tail.next
    new_head = tail.next
    tail.next = None
    return new_head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if there is no cycle."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            entry = head
            while slow is not entry:
                slow = slow.next
                entry = entry.next
            return slow
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    p: Optional[ListNode] = head_a
    q: Optional[ListNode] = head_b
    while p is not q:
        p = head_b if p is None else p.next
        q = head_a if q is None else q.next
    return p


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; the list is left as it was."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    result = all(a == b for a, b in zip(head, second))
    slow.next = reverse_list(second)
    return result


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only that node; it must not be the tail."""
    if node.next is None:
        raise ValueError("cannot delete the tail node this way")
    node.val = node.next.val
    node.next = node.next.next


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow