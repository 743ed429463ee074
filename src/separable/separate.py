"""Formatting entry points: insert separators into the text form of a value.

Every call is pure: the value is converted to text, the first digit run is
located, the grouping engine is driven by its digit count, and the result is
assembled. Values with no digit run come back unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from separable.domain.grouping import make_plan
from separable.domain.policies import COMMA_SEPARATOR, DOT_SEPARATOR, SPACE_SEPARATOR
from separable.domain.policy import SeparatorPolicy
from separable.domain.render import render
from separable.domain.span import locate


def separate_text(text: str, policy: SeparatorPolicy) -> str:
    """Group the first digit run of pre-rendered *text* according to *policy*.

    Examples:
        >>> separate_text("-1234.5", COMMA_SEPARATOR)
        '-1,234.5'
    """
    span = locate(text, policy.is_digit)
    if span.count == 0:
        return text
    flags = make_plan(policy.groups, span.count)
    return render(span.prefix, span.digits, flags, policy.separator, span.suffix)


def separate_by_policy(
    value: Any,
    policy: SeparatorPolicy,
    *,
    to_text: Callable[[Any], str] = str,
) -> str:
    """Convert *value* with *to_text* and group it according to *policy*."""
    return separate_text(to_text(value), policy)


def separate_with_commas(value: Any) -> str:
    """Insert a comma every three digits from the right.

    Examples:
        >>> separate_with_commas(12345)
        '12,345'
    """
    return separate_by_policy(value, COMMA_SEPARATOR)


def separate_with_spaces(value: Any) -> str:
    """Insert a space every three digits from the right."""
    return separate_by_policy(value, SPACE_SEPARATOR)


def separate_with_dots(value: Any) -> str:
    """Insert a period every three digits from the right."""
    return separate_by_policy(value, DOT_SEPARATOR)


class Separator:
    """A policy bound to a text conversion, reusable as a plain callable.

    Usage::

        money = Separator(COMMA_SEPARATOR, to_text="{:.2f}".format)
        money(1234567.891)  # '1,234,567.89'
    """

    def __init__(
        self,
        policy: SeparatorPolicy,
        to_text: Callable[[Any], str] = str,
    ) -> None:
        self.policy = policy
        self.to_text = to_text

    def __call__(self, value: Any) -> str:
        return separate_by_policy(value, self.policy, to_text=self.to_text)

    def __repr__(self) -> str:
        return f"Separator(policy={self.policy!r})"
