"""Command: list predefined policies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from separable.commands._base import SepCommand

if TYPE_CHECKING:
    from separable.commands._context import AppContext


@click.command(
    cls=SepCommand,
    examples="""\
  separable policies
  separable --json policies""",
)
@click.pass_obj
def policies(app: AppContext) -> None:
    """List the predefined separator policies."""
    app.emit(app.service.list_policies())
