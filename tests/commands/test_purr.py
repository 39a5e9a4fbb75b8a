"""Tests for the ``purr`` command group."""

from __future__ import annotations

import json

from click.testing import CliRunner

from designdemos.cli import cli


class TestRuntime:
    def test_runtime(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["purr", "runtime"])
        assert result.exit_code == 0
        assert "Spoiled purr with Human" in result.output
        assert "Feral hiss with no owner" in result.output

    def test_runtime_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["purr", "runtime"])
        assert "WARNING: 3 of 4 pairings did not purr" in result.stderr
        assert "WARNING" not in result.stdout

    def test_runtime_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "purr", "runtime"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["op"] == "purr_runtime"
        assert payload["data"]["failures"] == 3
        assert payload["warnings"] == ["3 of 4 pairings did not purr"]

    def test_runtime_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "purr", "runtime"])
        assert result.stdout.split() == ["purr", "hisspu", "hiss", "hiss"]
        assert result.stderr == ""


class TestCompileTime:
    def test_default_pair(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["purr", "compile-time"])
        assert result.exit_code == 0
        assert "There is no hissing in production" in result.output

    def test_unrepresentable_pair_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["purr", "compile-time", "--cat", "feral"])
        assert result.exit_code == 1
        assert "UNREPRESENTABLE_PAIRING" in result.stderr
        assert result.stdout == ""

    def test_invalid_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["purr", "compile-time", "--owner", "dog"])
        assert result.exit_code == 2


def test_pairs_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "purr", "pairs"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)["data"]
    assert data["items"] == [{"cat": "spoiled", "owner": "human"}]
