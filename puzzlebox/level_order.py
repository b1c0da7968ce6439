"""Bottom-up level-order traversal of a binary tree."""

from __future__ import annotations

from collections import deque

from puzzlebox.tree import TreeNode


def level_order_bottom(root: TreeNode | None) -> list[list[int]]:
    """Return the values of each level, from the deepest level up to the root."""
    if root is None:
        return []

    levels: list[list[int]] = []
    current: deque[TreeNode] = deque([root])
    while current:
        levels.append([node.val for node in current])
        current = deque(
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        )
    levels.reverse()
    return levels