"""Restoring dotted IPv4 addresses from a string of digits."""

from __future__ import annotations

from enum import Enum


class SolvingMethod(Enum):
    """How the addresses are searched for."""

    ITERATIVELY = "iteratively"
    RECURSIVELY = "recursively"


def is_valid_ip_element(s: str) -> bool:
    """Tell whether ``s`` is one octet: 1-3 digits, no leading zero, at most 255.

    Raises ValueError when ``s`` is empty or does not start with a digit.
    """
    if not s or not ("0" <= s[0] <= "9"):
        raise ValueError(f"not a number: {s!r}")
    if len(s) > 3:
        return False
    if s[0] == "0" and len(s) > 1:
        return False
    digits = len(s) - len(s.lstrip("0123456789")) if False else None  # noqa: F841
    leading = ""
    for char in s:
        if not "0" <= char <= "9":
            break
        leading += char
    return int(leading) <= 255


def restore_ip_addresses_iterative(s: str) -> list[str]:
    """Find every address by trying each placement of the three dots."""
    size = len(s)
    addresses: list[str] = []
    for j in range(1, size):
        for k in range(j + 1, size):
            for dot in range(k + 1, size):
                parts = (s[:j], s[j:k], s[k:dot], s[dot:])
                if all(is_valid_ip_element(part) for part in parts):
                    addresses.append(".".join(parts))
    return addresses


def restore_ip_addresses_recursive(s: str) -> list[str]:
    """Find every address by extending a prefix of octets one at a time."""
    addresses: list[str] = []

    def extend(parts: list[str], start: int) -> None:
        if start > len(s):
            return
        if len(parts) == 3:
            candidate = [*parts, s[start:]]
            if all(is_valid_ip_element(part) for part in candidate):
                addresses.append(".".join(candidate))
            return
        remaining = len(s) - start
        for length in range(1, min(remaining, 4)):
            extend([*parts, s[start:start + length]], start + length)

    extend([], 0)
    return addresses


def restore_ip_addresses(s: str, method: SolvingMethod) -> list[str]:
    """Return every valid address made by inserting three dots into ``s``."""
    if method is SolvingMethod.ITERATIVELY:
        return restore_ip_addresses_iterative(s)
    if method is SolvingMethod.RECURSIVELY:
        return restore_ip_addresses_recursive(s)
    raise ValueError(f"unknown solving method: {method!r}")