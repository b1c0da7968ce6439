"""Rendering a binary tree as a parenthesised preorder string."""

from __future__ import annotations

from puzzlebox.tree import TreeNode


def tree_to_string(root: TreeNode | None) -> str:
    """Return the preorder string with children in parentheses.

    An empty left child is written as ``()`` only when a right child follows.
    """
    if root is None:
        return ""
    parts = [str(root.val)]
    if root.left is not None or root.right is not None:
        parts.append(f"({tree_to_string(root.left)})")
    if root.right is not None:
        parts.append(f"({tree_to_string(root.right)})")
    return "".join(parts)