"""Command: export the rendered graph as DOT or vis-network JSON."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bunnygraph.commands._base import BunnyCommand
from bunnygraph.commands._options import source_options
from bunnygraph.services.export import EXPORT_FORMATS, ExportService
from bunnygraph.services.result import ServiceResult

if TYPE_CHECKING:
    from bunnygraph.commands._context import AppContext


@click.command(
    cls=BunnyCommand,
    examples="""\
  bunnygraph export pairs.txt --format dot
  bunnygraph export pairs.txt --summary --format json --output graph.json
  bunnygraph export pairs.txt --summary --format dot | dot -Tpng -o graph.png""",
)
@source_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(list(EXPORT_FORMATS)),
    default="dot",
    help="Output format.",
)
@click.option("--output", "output_file", default=None, help="Write to file instead of stdout.")
@click.pass_obj
def export(
    app: AppContext,
    source: str,
    merge: bool | None,
    prefixes: tuple[str, ...],
    strict: bool | None,
    fmt: str,
    output_file: str | None,
) -> None:
    """Export the rendered graph in DOT or JSON format."""
    svc = ExportService(app.source(source), app.settings)
    result = svc.export_graph(fmt=fmt, merge=merge, prefixes=prefixes, strict=strict)

    if not result.ok:
        app.emit(result)
        return

    if output_file:
        Path(output_file).write_text(result.data["content"], encoding="utf-8")
        app.emit(
            ServiceResult(
                ok=True,
                op="export_graph",
                data={
                    "format": fmt,
                    "output_file": output_file,
                    "node_count": result.data["node_count"],
                    "edge_count": result.data["edge_count"],
                },
                warnings=result.warnings,
            )
        )
    else:
        # Pipe-friendly: raw content to stdout
        app.warn(result.warnings)
        click.echo(result.data["content"], nl=False)
