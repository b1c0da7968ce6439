"""Times a binary watch can show with a given number of lit LEDs."""

from __future__ import annotations

from itertools import combinations

HOUR_BITS = 4
MINUTE_BITS = 7
MAX_HOUR = 12
MAX_MINUTE = 59


def _values_with_ones(ones: int, bits: int) -> list[int]:
    """Return every ``bits``-wide value with exactly ``ones`` set bits.

    Values come in the order that sets the most significant positions first.
    """
    return [
        sum(1 << (bits - 1 - position) for position in positions)
        for positions in combinations(range(bits), ones)
    ]


def read_binary_watch(turned_on: int) -> list[str]:
    """Return every ``HH:MM`` time shown with ``turned_on`` LEDs lit.

    Hours run from 0 to 12 and minutes from 0 to 59, both zero padded.
    Times with more LEDs on the hour side come first.
    """
    times: list[str] = []
    for minute_ones in range(turned_on + 1):
        hour_ones = turned_on - minute_ones
        hours = [
            h for h in _values_with_ones(hour_ones, HOUR_BITS) if h <= MAX_HOUR
        ]
        minutes = [
            m for m in _values_with_ones(minute_ones, MINUTE_BITS) if m <= MAX_MINUTE
        ]
        times.extend(f"{hour:02d}:{minute:02d}" for hour in hours for minute in minutes)
    return times