"""Shared pytest fixtures for designdemos tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from designdemos.config.settings import DemoSettings
from designdemos.domain import gauges
from designdemos.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no designdemos env vars.

    Keeps a ``designdemos.toml`` outside the temp dir from leaking into
    settings discovery.
    """
    for name in list(os.environ):
        if name.startswith("DESIGNDEMOS_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo registry, telemetry, and logging changes made by a test."""
    registry = dict(gauges.GAUGE_REGISTRY)
    yield
    gauges.GAUGE_REGISTRY.clear()
    gauges.GAUGE_REGISTRY.update(registry)
    disable_telemetry()
    logging.getLogger().handlers.clear()


@pytest.fixture
def settings(tmp_path: Path) -> DemoSettings:
    """Default settings with no config file."""
    return DemoSettings.from_cli(start=tmp_path)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a ``designdemos.toml`` into the temp dir and return its path."""

    def _write(body: str) -> Path:
        path = tmp_path / "designdemos.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
