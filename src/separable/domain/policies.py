"""Predefined separator policies and the name registry used by config and CLI."""

from __future__ import annotations

from separable.domain.digits import ASCII_DECIMAL, ASCII_HEX
from separable.domain.policy import SeparatorPolicy

COMMA_SEPARATOR = SeparatorPolicy(separator=",", groups=(3,), digits=ASCII_DECIMAL)
"""A comma every three decimal digits."""

SPACE_SEPARATOR = SeparatorPolicy(separator=" ", groups=(3,), digits=ASCII_DECIMAL)
"""A space every three decimal digits."""

DOT_SEPARATOR = SeparatorPolicy(separator=".", groups=(3,), digits=ASCII_DECIMAL)
"""A period every three decimal digits."""

HEX_FOUR = SeparatorPolicy(separator=" ", groups=(4,), digits=ASCII_HEX)
"""A space every four hexadecimal digits."""

POLICIES: dict[str, SeparatorPolicy] = {
    "comma": COMMA_SEPARATOR,
    "space": SPACE_SEPARATOR,
    "dot": DOT_SEPARATOR,
    "hex-four": HEX_FOUR,
}


def get_policy(name: str) -> SeparatorPolicy:
    """Look up a predefined policy by registry name."""
    try:
        return POLICIES[name]
    except KeyError:
        known = ", ".join(sorted(POLICIES))
        raise KeyError(f"unknown policy {name!r} (known: {known})") from None
