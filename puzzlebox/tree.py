"""Binary tree nodes and construction from level-order value lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

NULL = -1
"""Value that marks a missing child in a level-order list."""


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from a level-order list in which ``-1`` marks a missing child.

    The first value always becomes the root. Values are consumed in pairs,
    as the left and right child of the next node waiting in the queue.
    Raises ValueError when values remain but no node is left to take them.
    """
    values = list(values)
    if not values:
        return None

    root = TreeNode(values[0])
    pending: deque[TreeNode] = deque([root])
    children = iter(values[1:])

    for left_value in children:
        right_value = next(children, NULL)
        if not pending:
            raise ValueError("level-order list has values with no parent node")
        node = pending.popleft()
        if left_value != NULL:
            node.left = TreeNode(left_value)
            pending.append(node.left)
        if right_value != NULL:
            node.right = TreeNode(right_value)
            pending.append(node.right)

    return root