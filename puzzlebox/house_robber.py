"""Maximum loot from a row of houses without robbing two neighbours."""

from __future__ import annotations

from collections.abc import Sequence


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of non-adjacent values in ``nums``."""
    with_next = 0  # best from the house after the current one onwards
    with_after_next = 0  # best from two houses ahead onwards
    for value in reversed(nums):
        with_next, with_after_next = max(value + with_after_next, with_next), with_next
    return with_next