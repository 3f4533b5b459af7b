"""Binary trees: construction from value streams, traversal, height and diameter."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

NULL_MARKER = -1


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


@dataclass
class HDPair:
    """Height and diameter of a subtree, computed together."""

    height: int = 0
    diameter: int = 0


def _next_value(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_tree(values: Iterable[int]) -> Node | None:
    """Build a tree from pre-order values where -1 marks a missing child."""
    stream = iter(values)

    def build() -> Node | None:
        value = _next_value(stream)
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order_build(values: Iterable[int]) -> Node:
    """Build a tree from a root value followed by child pairs in level order.

    A child value of -1 means the child is absent.
    """
    stream = iter(values)
    root = Node(_next_value(stream))
    pending = deque([root])
    while pending:
        current = pending.popleft()
        left_value = _next_value(stream)
        right_value = _next_value(stream)
        if left_value != NULL_MARKER:
            current.left = Node(left_value)
            pending.append(current.left)
        if right_value != NULL_MARKER:
            current.right = Node(right_value)
            pending.append(current.right)
    return root


def level_order_levels(root: Node | None) -> list[list[int]]:
    """Return the node values grouped by level, top to bottom."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def level_order_print(root: Node | None, out: TextIO | None = None) -> None:
    """Write each level on its own line, every value followed by a space."""
    stream = sys.stdout if out is None else out
    for level in level_order_levels(root):
        stream.write("".join(f"{value} " for value in level))
        stream.write("\n")


def height(root: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Node | None) -> int:
    """Longest path between two nodes, measured as in the height-based definition."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right)
    return max(through_root, diameter(root.left), diameter(root.right))


def opt_diameter(root: Node | None) -> HDPair:
    """Compute height and diameter in a single post-order pass."""
    if root is None:
        return HDPair(0, 0)
    left = opt_diameter(root.left)
    right = opt_diameter(root.right)
    return HDPair(
        height=max(left.height, right.height) + 1,
        diameter=max(left.height + right.height, left.diameter, right.diameter),
    )


def replace_with_sum(root: Node | None) -> int:
    """Replace each internal node's value with the sum of its descendants.

    Leaves keep their values. Returns the sum of the original subtree.
    """
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return root.data
    left_sum = replace_with_sum(root.left)
    right_sum = replace_with_sum(root.right)
    original = root.data
    root.data = left_sum + right_sum
    return root.data + original