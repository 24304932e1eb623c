"""Shared pytest fixtures and test helpers for bunnygraph tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bunnygraph.config.settings import BunnySettings
from bunnygraph.infrastructure.source import RelationSource
from bunnygraph.services.telemetry import disable_telemetry

# A hub H with twin spokes T1/T2 (adjacent to each other) and leaf spokes S1/S2.
HUB_TEXT = "H x T1\nH x T2\nT1 x T2\nH x S1\nH x S2\n"

# A-B-C triangle plus a pendant D on B.
KITE_TEXT = "A x B\nA x C\nB x C\nB x D\n"

PREFIXED_TEXT = "N-fox x N-owl\nN-owl x Promo-bat\nPromo-bat x Fan-elk\nE-ant x N-fox\n"


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo telemetry and logging changes made by AppContext."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config override."""
    monkeypatch.delenv("BUNNYGRAPH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> BunnySettings:
    return BunnySettings.from_cli(start=tmp_path)


@pytest.fixture
def hub_file(tmp_path: Path) -> Path:
    path = tmp_path / "hub.txt"
    path.write_text(HUB_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def kite_file(tmp_path: Path) -> Path:
    path = tmp_path / "kite.txt"
    path.write_text(KITE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def prefixed_file(tmp_path: Path) -> Path:
    path = tmp_path / "prefixed.txt"
    path.write_text(PREFIXED_TEXT, encoding="utf-8")
    return path


def text_source(text: str) -> RelationSource:
    return RelationSource.from_text(text)
