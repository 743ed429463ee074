"""Command: insert separators into the digits of each value."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from separable.commands._base import SepCommand, policy_options

if TYPE_CHECKING:
    from separable.commands._context import AppContext


@click.command(
    "format",
    cls=SepCommand,
    examples="""\
  separable format 1234567 -- -1234.5
  separable format deadbeef --policy hex-four
  separable format 1234567890 --groups 3,2
  printf '1000\\n25000\\n' | separable -q format --separator ' '""",
)
@click.argument("values", nargs=-1)
@policy_options
@click.pass_obj
def format_cmd(
    app: AppContext,
    values: tuple[str, ...],
    name: str | None,
    separator: str | None,
    groups: tuple[int, ...] | None,
    digits: str | None,
) -> None:
    """Group the digits of VALUES (or of each stdin line when none are given)."""
    if not values:
        values = tuple(line.rstrip("\r\n") for line in sys.stdin)

    app.emit(
        app.service.format_values(
            values, name=name, separator=separator, groups=groups, digits=digits
        )
    )
