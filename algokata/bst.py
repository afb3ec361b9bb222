"""Building a height-balanced binary search tree from a sorted sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Height-balanced BST holding ``nums``, rooted at the middle element (lower middle on ties)."""

    def build(left: int, right: int) -> TreeNode | None:
        if left > right:
            return None
        mid = (left + right) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def in_order(root: TreeNode | None) -> Iterator[int]:
    """Yield the values of the tree in in-order sequence."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right