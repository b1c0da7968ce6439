"""Score of a string: summed distance between neighbouring characters."""

from __future__ import annotations


def score_of_string(s: str) -> int:
    """Return the sum of absolute code-point differences of adjacent characters."""
    return sum(abs(ord(b) - ord(a)) for a, b in zip(s, s[1:]))