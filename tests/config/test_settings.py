"""Tests for BunnySettings — TOML, env vars, and CLI flags."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from bunnygraph.config.settings import BunnySettings


def _write_config(directory: Path, body: str) -> Path:
    path = directory / "bunnygraph.toml"
    path.write_text(body, encoding="utf-8")
    return path


class TestDefaults:
    def test_no_config(self, tmp_path: Path) -> None:
        settings = BunnySettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.parse.separator == " x "
        assert settings.parse.strict is False
        assert settings.summary.enabled is False
        assert settings.suggest.top == 10
        assert settings.suggest.weight == 42
        assert settings.filter.base_group == "Base game"
        assert settings.style.merged_color == "#ADD8E6"


class TestToml:
    def test_discovered_and_sparse(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "[summary]\nenabled = true\n\n[suggest]\ntop = 3\n")
        settings = BunnySettings.from_cli(start=tmp_path)
        assert settings.config_path == path
        assert settings.summary.enabled is True
        assert settings.suggest.top == 3
        assert settings.suggest.weight == 42

    def test_walks_up(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[parse]\nseparator = " + "\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = BunnySettings.from_cli(start=nested)
        assert settings.parse.separator == " + "

    def test_explicit_path(self, tmp_path: Path) -> None:
        other = tmp_path / "elsewhere"
        other.mkdir()
        path = _write_config(other, "[parse]\nstrict = true\n")
        settings = BunnySettings.from_cli(config_path=str(path), start=tmp_path)
        assert settings.parse.strict is True

    def test_explicit_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = BunnySettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[summary\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BunnySettings.from_cli(start=tmp_path)

    def test_custom_prefixes(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[filter]\nstandard_prefixes = ["Core"]\nbase_group = "Core set"\n')
        settings = BunnySettings.from_cli(start=tmp_path)
        assert settings.filter.standard_prefixes == ["Core"]
        assert settings.filter.base_group == "Core set"


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = BunnySettings.from_cli(start=tmp_path, quiet=True, json_output=True)
        assert settings.quiet is True
        assert settings.json_output is True

    def test_env_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUNNYGRAPH_VERBOSE", "true")
        monkeypatch.setenv("BUNNYGRAPH_SUGGEST__TOP", "5")
        settings = BunnySettings.from_cli(start=tmp_path)
        assert settings.verbose is True
        assert settings.suggest.top == 5

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BunnySettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]
