"""Splitting values into sorted triples with a bounded spread."""

from __future__ import annotations

from collections.abc import Iterable


def divide_array(values: Iterable[int], k: int) -> list[list[int]]:
    """Split sorted ``values`` into consecutive triples whose spread is at most ``k``.

    Returns an empty list when some triple spreads wider than ``k``.
    Raises ValueError when the number of values is not a multiple of three.
    """
    ordered = sorted(values)
    if len(ordered) % 3:
        raise ValueError("number of values must be a multiple of three")
    triples = [ordered[start:start + 3] for start in range(0, len(ordered), 3)]
    if any(triple[2] - triple[0] > k for triple in triples):
        return []
    return triples