"""Digit span location.

Splits a string around its first maximal run of digit characters. Python
strings are indexed by code point, so the slices never split a multi-byte
character and ``count`` always equals ``len(digits)``.

INVARIANT: ``prefix + digits + suffix`` reconstitutes the input exactly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple


class Span(NamedTuple):
    """The three slices of a string around its first digit run."""

    prefix: str
    digits: str
    suffix: str
    count: int


def locate(text: str, is_digit: Callable[[str], bool]) -> Span:
    """Find the first maximal run of characters satisfying *is_digit*.

    Examples:
        >>> locate("-1234.5", str.isdigit)
        Span(prefix='-', digits='1234', suffix='.5', count=4)
        >>> locate("abc", str.isdigit)
        Span(prefix='abc', digits='', suffix='', count=0)
    """
    start = next((i for i, ch in enumerate(text) if is_digit(ch)), None)
    if start is None:
        return Span(text, "", "", 0)

    end = start + 1
    while end < len(text) and is_digit(text[end]):
        end += 1

    return Span(text[:start], text[start:end], text[end:], end - start)
