"""Singly linked lists: building, intersection, middle element and palindrome check."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or ``None`` if they never meet."""
    if head_a is None or head_b is None:
        return None
    a: ListNode | None = head_a
    b: ListNode | None = head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def middle_value(head: ListNode | None) -> Any:
    """Return the middle value; for an even length, the second of the two middles."""
    if head is None:
        raise ValueError("an empty list has no middle")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow.val


def _reverse(node: ListNode | None) -> ListNode | None:
    previous = None
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same both ways; the list is left unchanged."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    reversed_head = _reverse(slow)
    result = True
    left, right = head, reversed_head
    while right is not None:
        if left.val != right.val:
            result = False
            break
        left, right = left.next, right.next
    _reverse(reversed_head)
    return result