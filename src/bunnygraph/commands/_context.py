"""AppContext — the object every command receives via ``@click.pass_obj``.

Built once by the root group. It owns the resolved settings, turns on
logging and telemetry, and is the only place that writes results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bunnygraph.config.logging import configure_logging
from bunnygraph.infrastructure.source import RelationSource
from bunnygraph.output.formatters import OutputSettings, format_result
from bunnygraph.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from bunnygraph.config.settings import BunnySettings
    from bunnygraph.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by all subcommands."""

    def __init__(self, settings: BunnySettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def source(self, location: str) -> RelationSource:
        """Relation source for a path, or stdin for ``-``."""
        return RelationSource(location)

    def warn(self, warnings: list[str]) -> None:
        for warning in warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits 1.

        Warnings go to stderr unless ``--json`` already carries them.
        """
        output = self.output
        text = format_result(result, settings=output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not output.json_output:
            self.warn(result.warnings)
