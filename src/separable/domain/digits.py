"""Predefined digit-character sets.

A digit set decides which characters belong to the run that gets grouped.
Anything outside the set (signs, decimal points, units, separators) is left
in the prefix or suffix.
"""

from __future__ import annotations

ASCII_DECIMAL: frozenset[str] = frozenset("0123456789")

ASCII_HEX: frozenset[str] = frozenset("0123456789abcdefABCDEF")

DIGIT_SETS: dict[str, frozenset[str]] = {
    "decimal": ASCII_DECIMAL,
    "hex": ASCII_HEX,
}


def get_digit_set(name: str) -> frozenset[str]:
    """Look up a predefined digit set by name (``decimal`` or ``hex``)."""
    try:
        return DIGIT_SETS[name]
    except KeyError:
        known = ", ".join(sorted(DIGIT_SETS))
        raise KeyError(f"unknown digit set {name!r} (known: {known})") from None
