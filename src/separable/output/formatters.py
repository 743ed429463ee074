"""Output mode dispatch for ServiceResult.

``--json`` gives the serialized result, ``--quiet`` the bare values, and
the default is Rich-rendered human output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from separable.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from separable.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be presented."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display; JSON wins over quiet, quiet over verbose."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
