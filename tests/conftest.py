"""Shared pytest fixtures and test helpers for separable tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config discovery."""
    monkeypatch.delenv("SEPARABLE_CONFIG", raising=False)
    monkeypatch.delenv("SEPARABLE_POLICY__NAME", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the CLI under test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sep = logging.getLogger("separable")
    sep_level = sep.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sep.setLevel(sep_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no separable.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
