"""Singly linked list nodes and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: Any, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def create_list(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding ``values`` in order; None when there are none."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list:
    """Values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def list_length(head: ListNode | None) -> int:
    """Number of nodes in an acyclic list."""
    return sum(1 for _ in _nodes(head))


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    reversed_head = None
    current = head
    while current is not None:
        following = current.next
        current.next = reversed_head
        reversed_head = current
        current = following
    return reversed_head


def kth_from_end(head: ListNode | None, k: int) -> ListNode | None:
    """The k-th node counting from the tail (1 is the tail), or None."""
    if k <= 0 or head is None:
        return None
    ahead = head
    for _ in range(k - 1):
        ahead = ahead.next
        if ahead is None:
            return None
    behind = head
    while ahead.next is not None:
        ahead = ahead.next
        behind = behind.next
    return behind


def middle_node(head: ListNode | None) -> ListNode | None:
    """Middle node (the later one for even lengths); None for fewer than two nodes."""
    if head is None or head.next is None:
        return None
    ahead = behind = head
    while ahead.next is not None:
        behind = behind.next
        ahead = ahead.next
        if ahead.next is not None:
            ahead = ahead.next
    return behind


def reversed_values(head: ListNode | None) -> list:
    """Values of an acyclic list, tail first."""
    return to_values(head)[::-1]


def merge_sorted(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one; on equal values the node of ``head2`` comes first."""
    dummy = ListNode(None)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next = head1
            head1 = head1.next
        else:
            tail.next = head2
            head2 = head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def has_cycle(head: ListNode | None) -> bool:
    """True if following ``next`` from ``head`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _tail_and_length(head: ListNode) -> tuple[ListNode, int]:
    length = 1
    while head.next is not None:
        head = head.next
        length += 1
    return head, length


def is_intersected(head1: ListNode | None, head2: ListNode | None) -> bool:
    """True if two acyclic lists share their tail node."""
    if head1 is None or head2 is None:
        return False
    return _tail_and_length(head1)[0] is _tail_and_length(head2)[0]


def first_common_node(
    head1: ListNode | None, head2: ListNode | None
) -> ListNode | None:
    """First node shared by two acyclic lists, or None."""
    if head1 is None or head2 is None:
        return None
    tail1, len1 = _tail_and_length(head1)
    tail2, len2 = _tail_and_length(head2)
    if tail1 is not tail2:
        return None
    node1, node2 = head1, head2
    for _ in range(len1 - len2):
        node1 = node1.next
    for _ in range(len2 - len1):
        node2 = node2.next
    while node1 is not node2:
        node1 = node1.next
        node2 = node2.next
    return node1


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """The node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while True:
        if fast is None or fast.next is None:
            return None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def delete_node(head: ListNode | None, node: ListNode | None) -> ListNode | None:
    """Remove ``node`` and return the list's head.

    A node with a successor is removed in O(1) by taking over the successor's
    value and link; the tail is unlinked from its predecessor.
    """
    if node is None:
        return head
    if node.next is not None:
        successor = node.next
        node.val = successor.val
        node.next = successor.next
        return head
    if head is node:
        return None
    previous = head
    while previous is not None and previous.next is not node:
        previous = previous.next
    if previous is None:
        raise ValueError("node is not in the list")
    previous.next = None
    return head