"""FormatService — policy resolution, formatting and plan inspection for the CLI.

Library callers use :mod:`separable.separate` directly. This layer merges
config with per-command overrides and turns bad user input into a failed
:class:`ServiceResult` instead of an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from separable.domain.grouping import make_plan
from separable.domain.policies import POLICIES
from separable.domain.render import render
from separable.separate import separate_text
from separable.services.result import ServiceResult

if TYPE_CHECKING:
    from separable.config.models import PolicyConfig
    from separable.domain.policy import SeparatorPolicy

logger = logging.getLogger(__name__)

# Placeholder digit used when drawing a plan's layout.
_LAYOUT_DIGIT = "#"


def describe_policy(policy: SeparatorPolicy) -> dict[str, Any]:
    """JSON-friendly view of a policy."""
    return {
        "separator": policy.separator,
        "groups": list(policy.groups),
        "digits": "".join(sorted(policy.digits)),
    }


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(err["msg"] for err in exc.errors())


class FormatService:
    """Formatting operations driven by a ``[policy]`` configuration section."""

    def __init__(self, config: PolicyConfig) -> None:
        self._config = config

    def _resolve(self, overrides: dict[str, Any]) -> SeparatorPolicy:
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self._config.model_copy(update=updates).resolve()

    def _resolve_or_fail(
        self, op: str, overrides: dict[str, Any]
    ) -> SeparatorPolicy | ServiceResult:
        try:
            return self._resolve(overrides)
        except KeyError as exc:
            logger.warning("Rejected policy lookup: %s", exc.args[0])
            return ServiceResult.failure(op, "UNKNOWN_POLICY", str(exc.args[0]))
        except ValidationError as exc:
            message = _validation_message(exc)
            logger.warning("Rejected malformed policy: %s", message)
            return ServiceResult.failure(op, "INVALID_POLICY", message)

    def resolve_policy(self, **overrides: Any) -> ServiceResult:
        """Report the effective policy after applying *overrides*."""
        policy = self._resolve_or_fail("resolve_policy", overrides)
        if isinstance(policy, ServiceResult):
            return policy
        return ServiceResult(ok=True, op="resolve_policy", data=describe_policy(policy))

    def format_values(self, values: Iterable[str], **overrides: Any) -> ServiceResult:
        """Group the digits of each pre-rendered value.

        Args:
            values: Text to format, one value per entry.
            **overrides: ``name``, ``separator``, ``groups`` or ``digits``
                replacing the configured policy fields; ``None`` keeps the
                configured value.
        """
        op = "format_values"
        policy = self._resolve_or_fail(op, overrides)
        if isinstance(policy, ServiceResult):
            return policy

        values = list(values)
        items = [{"input": value, "output": separate_text(value, policy)} for value in values]
        logger.debug("Formatted %d value(s) with groups=%s", len(items), policy.groups)

        warnings = [
            f"No digits found in {value!r}"
            for value in values
            if not any(map(policy.is_digit, value))
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"policy": describe_policy(policy), "items": items, "count": len(items)},
            warnings=warnings,
        )

    def plan(self, digit_count: int, **overrides: Any) -> ServiceResult:
        """Show where separators fall for *digit_count* digits."""
        op = "plan"
        policy = self._resolve_or_fail(op, overrides)
        if isinstance(policy, ServiceResult):
            return policy

        try:
            flags = make_plan(policy.groups, digit_count)
        except ValueError as exc:
            return ServiceResult.failure(
                op, "INVALID_DIGIT_COUNT", str(exc), digit_count=digit_count
            )

        layout = render("", _LAYOUT_DIGIT * digit_count, flags, policy.separator, "")
        sizes = flags.group_sizes()
        logger.debug("Planned %d digit(s) into %d group(s)", digit_count, len(sizes))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "digit_count": digit_count,
                "groups": list(policy.groups),
                "flags": list(flags),
                "group_sizes": sizes,
                "separators": flags.separator_count,
                "layout": layout,
            },
        )

    def list_policies(self) -> ServiceResult:
        """List the predefined policies by registry name."""
        items = [{"name": name, **describe_policy(policy)} for name, policy in POLICIES.items()]
        return ServiceResult(
            ok=True,
            op="list_policies",
            data={"items": items, "count": len(items)},
        )
