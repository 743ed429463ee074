"""Assembly of the grouped string from a located span and its flags."""

from __future__ import annotations

from collections.abc import Iterable


def capacity_hint(
    prefix: str,
    digits: str,
    separator_count: int,
    separator: str,
    suffix: str,
) -> int:
    """UTF-8 byte length of the rendered result.

    Measured in encoded bytes rather than characters so a multi-byte
    separator or digit set is not under-counted.
    """
    return (
        len(prefix.encode("utf-8"))
        + len(digits.encode("utf-8"))
        + separator_count * len(separator.encode("utf-8"))
        + len(suffix.encode("utf-8"))
    )


def render(
    prefix: str,
    digits: str,
    flags: Iterable[bool],
    separator: str,
    suffix: str,
) -> str:
    """Interleave *separator* into *digits* and reattach prefix and suffix.

    *flags* are least significant first: flag ``k`` belongs to digit ``k``
    counted from the right, and ``True`` places the separator between that
    digit and the next more significant one.

    Examples:
        >>> render("-", "1234", [False, False, True, False], ",", ".5")
        '-1,234.5'
    """
    ordered = list(flags)
    if len(ordered) != len(digits):
        raise ValueError(f"expected {len(digits)} flags, got {len(ordered)}")
    ordered.reverse()

    parts: list[str] = [prefix]
    for digit, separated in zip(digits, ordered):
        if separated:
            parts.append(separator)
        parts.append(digit)
    parts.append(suffix)
    return "".join(parts)
