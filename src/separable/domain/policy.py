"""SeparatorPolicy: what to insert, where, and between which characters.

Policies are frozen after construction and safe to share between any
number of concurrent formatting calls.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from separable.domain.grouping import validate_groups


class SeparatorPolicy(BaseModel):
    """A policy for inserting separators into digit runs.

    Attributes:
        separator: Text inserted between groups. Usually one character,
            but any non-empty string is accepted.
        groups: Group sizes from right to left; the last size repeats for
            every further group. ``(3,)`` groups by thousands, ``(3, 2)``
            gives ``1,23,45,678``.
        digits: Characters that count as digits. Only the first run of
            them is grouped, so ``-12345.67`` separates ``12345`` only.
    """

    model_config = {"frozen": True}

    separator: str = Field(min_length=1)
    groups: tuple[int, ...]
    digits: frozenset[str] = Field(min_length=1)

    @field_validator("groups", mode="before")
    @classmethod
    def validate_group_sizes(cls, v: object) -> tuple[int, ...]:
        """Reject empty group lists and sizes outside ``1..255``."""
        if isinstance(v, (str, bytes)) or not isinstance(v, (list, tuple)):
            raise ValueError(f"groups must be a sequence of integers, got {v!r}")
        return validate_groups(v)

    @field_validator("digits")
    @classmethod
    def validate_digit_characters(cls, v: frozenset[str]) -> frozenset[str]:
        """Every digit must be exactly one character."""
        for ch in v:
            if len(ch) != 1:
                raise ValueError(f"digits must be single characters, got {ch!r}")
        return v

    def is_digit(self, ch: str) -> bool:
        """Whether *ch* belongs to this policy's digit set."""
        return ch in self.digits
