"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`; unknown
ops fall through to a generic key-value renderer. User-supplied text is
always wrapped in :class:`~rich.text.Text` so brackets in a value are never
read as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from separable.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from separable.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Plain ``format_values`` output skips the console: Rich would expand tabs
    and strip control sequences from the values.
    """
    if result.ok and result.op == "format_values" and not verbose:
        return _plain_values(result)

    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "format_values":
        return _plain_values(result)
    if result.op == "plan":
        return str(result.data.get("layout", ""))
    if result.op == "list_policies":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _plain_values(result: ServiceResult) -> str:
    return "\n".join(item["output"] for item in result.data.get("items", []))


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sep.ok"), Text(f"  {result.op}", style="sep.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="sep.key"), Text(str(value)), sep="", soft_wrap=True)


def _policy_fields(console: Console, policy: dict[str, Any]) -> None:
    _field(console, "separator", repr(policy["separator"]))
    _field(console, "groups", ",".join(str(g) for g in policy["groups"]))
    _field(console, "digits", policy["digits"])


# ── Operation renderers ───────────────────────────────────────────────


def _render_format(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    _status_line(console, result)
    _policy_fields(console, result.data["policy"])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", style="sep.key")
    table.add_column("Output", style="sep.value")
    for item in items:
        table.add_row(Text(item["input"]), Text(item["output"]))
    console.print()
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} values")


def _render_plan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "digit_count", data["digit_count"])
    _field(console, "groups", ",".join(str(g) for g in data["groups"]))
    _field(console, "separators", data["separators"])
    # Group sizes read left to right, most significant group first.
    _field(console, "group_sizes", ",".join(str(s) for s in reversed(data["group_sizes"])))
    _field(console, "layout", data["layout"])
    if verbose:
        flags = "".join("1" if flag else "0" for flag in data["flags"])
        _field(console, "flags", flags or "(none)")


def _render_policies(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="sep.op", no_wrap=True)
    table.add_column("Separator", style="sep.separator")
    table.add_column("Groups", justify="right")
    table.add_column("Digits", style="sep.key")
    for item in items:
        table.add_row(
            item["name"],
            Text(repr(item["separator"])),
            ",".join(str(g) for g in item["groups"]),
            Text(item["digits"]),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} policies")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="sep.error"),
        Text(f"  {result.op}", style="sep.op"),
        Text(" — "),
        Text(msg),
        sep="",
        soft_wrap=True,
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


_OP_RENDERERS = {
    "format_values": _render_format,
    "plan": _render_plan,
    "list_policies": _render_policies,
}
