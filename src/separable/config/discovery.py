"""Locating and reading separable.toml.

The finder walks up from the working directory the way git looks for
``.git/``. ``SEPARABLE_CONFIG`` pins an explicit file and disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from separable.config.models import SeparableConfig

CONFIG_FILENAME = "separable.toml"
CONFIG_ENV_VAR = "SEPARABLE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest separable.toml at or above *start*, or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        pinned = Path(override)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, reporting syntax errors as a CLI-level failure."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> SeparableConfig:
    """Load and validate config, falling back to defaults when no file exists."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return SeparableConfig()
    return SeparableConfig.model_validate(read_toml(path))
