"""Subcommand modules for separable.

register_commands() imports lazily so ``separable --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from separable.commands.format_cmd import format_cmd
    from separable.commands.plan import plan
    from separable.commands.policies import policies

    cli.add_command(format_cmd)
    cli.add_command(plan)
    cli.add_command(policies)
