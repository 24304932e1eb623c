"""BunnySettings — one frozen object per invocation.

Later sources lose to earlier ones:

1. keyword arguments (the CLI flags Click collected)
2. ``BUNNYGRAPH_*`` environment variables, ``__`` for nesting
   (``BUNNYGRAPH_SUGGEST__TOP=5``)
3. ``bunnygraph.toml``, found by walking up from the working directory
4. defaults on the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from bunnygraph.config.discovery import find_config
from bunnygraph.config.models import (
    FilterConfig,
    ParseConfig,
    StyleConfig,
    SuggestConfig,
    SummaryConfig,
)

# pydantic-settings builds sources inside __init__, so the chosen file is
# handed over through a context variable for the duration of from_cli().
_toml_path: ContextVar[Path | None] = ContextVar("bunnygraph_toml_path", default=None)


def load_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; broken TOML is a usage error, not a traceback."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = load_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


class BunnySettings(BaseSettings):
    """Resolved configuration; ``config_path`` is the TOML file used, if any."""

    model_config = {
        "frozen": True,
        "env_prefix": "BUNNYGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    parse: ParseConfig = Field(default_factory=ParseConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    suggest: SuggestConfig = Field(default_factory=SuggestConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, TomlSettingsSource(settings_cls, _toml_path.get())

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> BunnySettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist means "no file";
        discovery only runs when no path was given.
        """
        if config_path:
            candidate = Path(config_path)
            path = candidate if candidate.is_file() else None
        else:
            path = find_config(start)

        token = _toml_path.set(path)
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _toml_path.reset(token)
