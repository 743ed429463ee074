"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, separable.toml only contains
overrides. An empty file (or no file at all) groups by thousands with commas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from separable.domain.digits import get_digit_set
from separable.domain.policies import get_policy
from separable.domain.policy import SeparatorPolicy


class PolicyConfig(BaseModel):
    """[policy] section.

    ``name`` picks a predefined policy; the remaining fields, when set,
    override the matching part of it.
    """

    model_config = {"frozen": True}

    name: str = "comma"
    separator: str | None = None
    groups: tuple[int, ...] | None = None
    digits: str | None = None

    def resolve(self) -> SeparatorPolicy:
        """Build the effective policy.

        Raises:
            KeyError: ``name`` or ``digits`` is not a known registry entry.
            pydantic.ValidationError: an override makes the policy malformed.
        """
        base = get_policy(self.name)
        if self.separator is None and self.groups is None and self.digits is None:
            return base
        return SeparatorPolicy(
            separator=base.separator if self.separator is None else self.separator,
            groups=base.groups if self.groups is None else self.groups,
            digits=base.digits if self.digits is None else get_digit_set(self.digits),
        )


class SeparableConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    policy: PolicyConfig = Field(default_factory=PolicyConfig)
