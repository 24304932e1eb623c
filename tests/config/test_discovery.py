"""Tests for config file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from bunnygraph.config.discovery import CONFIG_ENV_VAR, find_config


class TestFindConfig:
    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_in_start_dir(self, tmp_path: Path) -> None:
        path = tmp_path / "bunnygraph.toml"
        path.write_text("", encoding="utf-8")
        assert find_config(tmp_path) == path.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "bunnygraph.toml").write_text("", encoding="utf-8")
        assert find_config() == (tmp_path / "bunnygraph.toml").resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "bunnygraph.toml").write_text("", encoding="utf-8")
        other = tmp_path / "other.toml"
        other.write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "bunnygraph.toml").write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "gone.toml"))
        assert find_config(tmp_path) is None
