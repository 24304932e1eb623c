"""Tests for the suggest command group."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from bunnygraph.cli import cli


class TestNeighbors:
    def test_rich(self, cli_runner: CliRunner, kite_file: Path) -> None:
        result = cli_runner.invoke(cli, ["suggest", "neighbors", str(kite_file)])
        assert result.exit_code == 0, result.output
        assert "1. D x A (which is similar to B" in result.output
        assert "4 suggestions" in result.output

    def test_top(self, cli_runner: CliRunner, kite_file: Path) -> None:
        args = ["-q", "suggest", "neighbors", str(kite_file), "--top", "1"]
        result = cli_runner.invoke(cli, args)
        assert result.output == (
            "D x A (which is similar to B - Common neighbors: 1, Unique extras: 1)\n"
        )

    def test_config_top(self, cli_runner: CliRunner, kite_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text("[suggest]\ntop = 2\n", encoding="utf-8")
        args = ["--json", "-c", str(config), "suggest", "neighbors", str(kite_file)]
        result = cli_runner.invoke(cli, args)
        assert json.loads(result.output)["data"]["count"] == 2


class TestNonneighbors:
    def test_quiet(self, cli_runner: CliRunner, kite_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "suggest", "nonneighbors", str(kite_file)])
        assert result.output == (
            "A x D (Common: 1, Non-Common: 1)\nC x D (Common: 1, Non-Common: 1)\n"
        )

    def test_nothing_to_suggest(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["suggest", "nonneighbors"], input="A x B\n")
        assert result.exit_code == 0
        assert "No suggestions." in result.output

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["suggest", "nonneighbors", str(tmp_path / "x.txt")])
        assert result.exit_code == 1
