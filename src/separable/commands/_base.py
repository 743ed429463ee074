"""Custom Click base classes and parameter types shared by all commands.

SepCommand and SepGroup accept an ``examples`` string; passing
``--examples`` prints it and exits, keeping ``--help`` short.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class SepCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class GroupSizes(click.ParamType):
    """Comma-separated group sizes, rightmost group first (``3,2``).

    Only the syntax is checked here; sizes outside ``1..255`` are rejected
    when the policy is built.
    """

    name = "GROUPS"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[int, ...]:
        if isinstance(value, tuple):
            return value
        try:
            return tuple(int(part) for part in str(value).split(","))
        except ValueError:
            self.fail(f"{value!r} is not a comma-separated list of integers", param, ctx)


GROUP_SIZES = GroupSizes()


def policy_options(func: Any) -> Any:
    """Decorate a command with the policy override options."""
    options = [
        click.option("-p", "--policy", "name", default=None, help="Predefined policy name."),
        click.option("-s", "--separator", default=None, help="Separator to insert."),
        click.option(
            "-g", "--groups", type=GROUP_SIZES, default=None, help="Group sizes, e.g. 3,2."
        ),
        click.option(
            "-d",
            "--digits",
            type=click.Choice(["decimal", "hex"]),
            default=None,
            help="Digit set to group.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
