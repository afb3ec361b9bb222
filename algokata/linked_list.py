"""Singly linked lists that may end in a loop, and removing that loop."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A singly linked list node."""

    data: int
    next: Node | None = None


def build_list(values: Iterable[int], loop_position: int = 0) -> Node | None:
    """Link ``values`` in order; a non-zero 1-based ``loop_position`` joins the tail to that node."""
    nodes = [Node(value) for value in values]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    if loop_position:
        if not 1 <= loop_position <= len(nodes):
            raise ValueError(f"loop position {loop_position} is outside 1..{len(nodes)}")
        nodes[-1].next = nodes[loop_position - 1]
    return nodes[0] if nodes else None


def has_loop(head: Node | None) -> bool:
    """True if following ``next`` from ``head`` never reaches the end."""
    if head is None:
        return False
    slow, fast = head, head.next
    while fast is not slow:
        if fast is None or fast.next is None:
            return False
        fast = fast.next.next
        slow = slow.next
    return True


def length(head: Node | None) -> int:
    """Number of nodes in a loop-free list."""
    seen: set[int] = set()
    count = 0
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the list contains a loop")
        seen.add(id(node))
        count += 1
        node = node.next
    return count


def remove_loop(head: Node | None) -> None:
    """Break the loop, if any, by ending the list at the node that closes it."""
    if head is None or head.next is None:
        return
    slow = fast = head
    previous: Node | None = None
    while fast is not None and fast.next is not None:
        previous = slow
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    if fast is None or fast.next is None:
        return
    node = head
    while node is not slow:
        node = node.next
        previous = slow
        slow = slow.next
    previous.next = None