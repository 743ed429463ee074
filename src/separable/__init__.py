"""separable — insert grouping separators into the digits of formatted values."""

from __future__ import annotations

from separable.domain.digits import ASCII_DECIMAL, ASCII_HEX
from separable.domain.grouping import GroupCursor, SeparatorFlags, ceil_div_mod, make_plan
from separable.domain.policies import (
    COMMA_SEPARATOR,
    DOT_SEPARATOR,
    HEX_FOUR,
    POLICIES,
    SPACE_SEPARATOR,
    get_policy,
)
from separable.domain.policy import SeparatorPolicy
from separable.domain.render import capacity_hint, render
from separable.domain.span import Span, locate
from separable.separate import (
    Separator,
    separate_by_policy,
    separate_text,
    separate_with_commas,
    separate_with_dots,
    separate_with_spaces,
)

__version__ = "0.3.0"

__all__ = [
    "ASCII_DECIMAL",
    "ASCII_HEX",
    "COMMA_SEPARATOR",
    "DOT_SEPARATOR",
    "HEX_FOUR",
    "POLICIES",
    "SPACE_SEPARATOR",
    "GroupCursor",
    "Separator",
    "SeparatorFlags",
    "SeparatorPolicy",
    "Span",
    "capacity_hint",
    "ceil_div_mod",
    "get_policy",
    "locate",
    "make_plan",
    "render",
    "separate_by_policy",
    "separate_text",
    "separate_with_commas",
    "separate_with_dots",
    "separate_with_spaces",
    "__version__",
]
