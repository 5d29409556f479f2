"""Singly linked list algorithms."""

from __future__ import annotations

from typing import Optional

from algopractice.nodes import ListNode


def _length(head: Optional[ListNode]) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    len_a, len_b = _length(head_a), _length(head_b)
    node_a, node_b = head_a, head_b
    for _ in range(len_a - len_b):
        node_a = node_a.next
    for _ in range(len_b - len_a):
        node_b = node_b.next
    while node_a is not None and node_b is not None and node_a is not node_b:
        node_a = node_a.next
        node_b = node_b.next
    return node_a if node_a is node_b else None


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end; a list shorter than n is left as is."""
    if n <= 0 or head is None:
        return head
    lead: Optional[ListNode] = head
    for _ in range(n):
        if lead is None:
            return head
        lead = lead.next
    dummy = ListNode(0, head)
    trail = dummy
    while lead is not None:
        lead = lead.next
        trail = trail.next
    removed = trail.next
    trail.next = removed.next
    removed.next = None
    return dummy.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val``; return the new head."""
    dummy = ListNode(0, head)
    tail = dummy
    while tail.next is not None:
        if tail.next.val == val:
            tail.next = tail.next.next
        else:
            tail = tail.next
    return dummy.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Whether the list reads the same forwards and backwards."""
    values = [] if head is None else list(head)
    return values == values[::-1]


def delete_node(node: Optional[ListNode]) -> None:
    """Remove ``node`` from its list by taking over its successor.

    A missing node or the tail node is left untouched.
    """
    if node is None or node.next is None:
        return
    node.val = node.next.val
    node.next = node.next.next