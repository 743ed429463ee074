"""Rich Console factory and theme for separable output.

Consoles render into a StringIO buffer so formatters can keep returning
plain strings. Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SEP_THEME = Theme(
    {
        "sep.ok": "bold green",
        "sep.error": "bold red",
        "sep.op": "bold cyan",
        "sep.key": "dim",
        "sep.value": "bold",
        "sep.separator": "magenta",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=SEP_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
