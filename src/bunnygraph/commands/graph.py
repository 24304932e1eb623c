"""Command group: render and inspect relation graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bunnygraph.commands._base import BunnyGroup
from bunnygraph.commands._options import source_options
from bunnygraph.services.graph import GraphService

if TYPE_CHECKING:
    from bunnygraph.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  bunnygraph graph show pairs.txt
  bunnygraph graph show pairs.txt --summary
  bunnygraph graph show pairs.txt --summary -p "Base game" -p Promo
  bunnygraph graph stats pairs.txt --summary
  bunnygraph graph prefixes pairs.txt
  pbpaste | bunnygraph --json graph show - --summary"""


@click.group(cls=BunnyGroup, examples=_GRAPH_EXAMPLES)
@click.pass_obj
def graph(app: AppContext) -> None:
    """Render and inspect the relation graph."""


@graph.command(
    examples="""\
  bunnygraph graph show pairs.txt
  bunnygraph graph show pairs.txt --summary
  bunnygraph -v graph show pairs.txt --summary
  bunnygraph --json graph show pairs.txt --summary -p N -p E"""
)
@source_options
@click.pass_obj
def show(
    app: AppContext,
    source: str,
    merge: bool | None,
    prefixes: tuple[str, ...],
    strict: bool | None,
) -> None:
    """Render the graph, optionally merged into metanodes."""
    svc = GraphService(app.source(source), app.settings)
    app.emit(svc.render(merge=merge, prefixes=prefixes, strict=strict))


@graph.command(
    examples="""\
  bunnygraph graph stats pairs.txt
  bunnygraph graph stats pairs.txt --summary"""
)
@source_options
@click.pass_obj
def stats(
    app: AppContext,
    source: str,
    merge: bool | None,
    prefixes: tuple[str, ...],
    strict: bool | None,
) -> None:
    """Count nodes, edges, components and merged groups."""
    svc = GraphService(app.source(source), app.settings)
    app.emit(svc.stats(merge=merge, prefixes=prefixes, strict=strict))


@graph.command(
    examples="""\
  bunnygraph graph prefixes pairs.txt
  bunnygraph -q graph prefixes pairs.txt"""
)
@click.argument("source", default="-")
@click.option("--strict/--lenient", default=None, help="Fail on malformed lines.")
@click.pass_obj
def prefixes(app: AppContext, source: str, strict: bool | None) -> None:
    """List id prefixes available for filtering."""
    app.emit(GraphService(app.source(source), app.settings).prefixes(strict=strict))
