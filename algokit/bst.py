"""Binary search trees: insertion, range counts, dead ends and merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` into the tree and return its root; duplicates are ignored."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            return root


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the tree's values in in-order sequence."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values


def count_in_range(root: TreeNode | None, low: Any, high: Any) -> int:
    """Count the nodes whose values lie in the inclusive range ``low..high``."""
    if root is None:
        return 0
    if low <= root.value <= high:
        return (
            1
            + count_in_range(root.left, low, high)
            + count_in_range(root.right, low, high)
        )
    if root.value < low:
        return count_in_range(root.right, low, high)
    return count_in_range(root.left, low, high)


def _collect(
    root: TreeNode | None, leaves: list[int], nodes: set[int]
) -> None:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        nodes.add(node.value)
        if node.left is None and node.right is None:
            leaves.append(node.value)
        stack.extend(child for child in (node.left, node.right) if child is not None)


def has_dead_end(root: TreeNode | None) -> bool:
    """Report whether a leaf exists below which no positive integer can be inserted.

    A leaf is a dead end when both its predecessor and successor integers are
    already in the tree; zero counts as present.
    """
    leaves: list[int] = []
    nodes: set[int] = {0}
    _collect(root, leaves, nodes)
    return any(leaf - 1 in nodes and leaf + 1 in nodes for leaf in leaves)


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two sorted iterables into one sorted list."""
    return list(heapq.merge(first, second))


def sorted_to_bst(values: Sequence[Any]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted ``values``."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        middle = (start + end) // 2
        return TreeNode(values[middle], build(start, middle - 1), build(middle + 1, end))

    return build(0, len(values) - 1)


def merge_trees(root1: TreeNode | None, root2: TreeNode | None) -> TreeNode | None:
    """Merge two search trees into one new balanced search tree."""
    return sorted_to_bst(merge_sorted(inorder(root1), inorder(root2)))