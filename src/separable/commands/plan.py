"""Command: show where separators fall for a digit count."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from separable.commands._base import SepCommand, policy_options

if TYPE_CHECKING:
    from separable.commands._context import AppContext


@click.command(
    cls=SepCommand,
    examples="""\
  separable plan 10 --groups 3,2
  separable -v plan 20 --groups 1,2,3,4,5
  separable --json plan 8 --policy hex-four""",
)
@click.argument("digit_count", type=click.IntRange(min=0))
@policy_options
@click.pass_obj
def plan(
    app: AppContext,
    digit_count: int,
    name: str | None,
    separator: str | None,
    groups: tuple[int, ...] | None,
    digits: str | None,
) -> None:
    """Show the group layout for DIGIT_COUNT digits."""
    app.emit(
        app.service.plan(
            digit_count, name=name, separator=separator, groups=groups, digits=digits
        )
    )
