"""Singly linked lists: construction, cycle detection, palindromes, rotation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link ``values`` into a list and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Values of an acyclic list, in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """The node where the list's cycle begins, or ``None`` if it has none."""
    if head is None:
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
            return entry
    return None


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def is_palindrome(head: Optional[ListNode]) -> bool:
    """True if the list reads the same both ways; the list is left unchanged."""
    if head is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next

    second = _reverse(slow.next)
    result = True
    left, right = head, second
    while right is not None:
        if left.val != right.val:
            result = False
            break
        left = left.next
        right = right.next
    slow.next = _reverse(second)
    return result


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1

    tail.next = head
    for _ in range(length - k % length):
        tail = tail.next
    new_head = tail.next
    tail.next = None
    return new_head