"""Largest difference between a later, strictly larger element and an earlier one."""

from __future__ import annotations

from collections.abc import Sequence


def maximum_difference(nums: Sequence[int]) -> int:
    """Return max ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``, or -1."""
    if not nums:
        raise ValueError("maximum_difference needs at least one number")
    best = -1
    lowest = nums[0]
    for value in nums[1:]:
        if value > lowest:
            best = max(best, value - lowest)
        else:
            lowest = value
    return best