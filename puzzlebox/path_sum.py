"""Counting downward paths of a binary tree that add up to a target."""

from __future__ import annotations

from puzzlebox.tree import TreeNode


def path_sum(root: TreeNode | None, target: int) -> int:
    """Count the paths going downward from any node whose values sum to ``target``."""
    count = 0

    def sums_from(node: TreeNode | None) -> list[int]:
        nonlocal count
        if node is None:
            return []
        sums = [node.val]
        sums.extend(s + node.val for s in sums_from(node.right))
        sums.extend(s + node.val for s in sums_from(node.left))
        count += sums.count(target)
        return sums

    sums_from(root)
    return count