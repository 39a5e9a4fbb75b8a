"""Tests for the root CLI group and its global flags."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from designdemos import __version__
from designdemos.cli import cli


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"designdemos, version {__version__}" in result.output


def test_no_subcommand_shows_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    for name in ("purr", "gauge", "emotions"):
        assert name in result.output


def test_short_help_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "--examples" in result.output


def test_missing_config_file(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "nowhere.toml", "emotions"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_invalid_config(cli_runner: CliRunner, write_config: Callable[[str], Path]) -> None:
    write_config("[gauge]\nsweep_steps = 0\n")
    result = cli_runner.invoke(cli, ["emotions"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_verbose_includes_telemetry(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--json", "purr", "pairs"])
    assert result.exit_code == 0
    meta = json.loads(result.stdout)["meta"]
    assert meta["telemetry"]["name"] == "DispatchService.pairs"


def test_log_json_writes_structured_stderr(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "-q", "gauge", "render"])
    assert result.exit_code == 0
    events = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
    assert any(event["event"] == "gauge.render" for event in events)
