"""Fewest groups with a bounded spread between their smallest and largest values."""

from __future__ import annotations

from collections.abc import Iterable


def partition_array(nums: Iterable[int], k: int) -> int:
    """Return the minimum number of groups whose max minus min is at most ``k``."""
    ordered = sorted(nums)
    if not ordered:
        return 0
    groups = 1
    group_min = ordered[0]
    for value in ordered:
        if value - group_min > k:
            groups += 1
            group_min = value
    return groups