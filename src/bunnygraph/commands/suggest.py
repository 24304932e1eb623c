"""Command group: suggest relations to add."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bunnygraph.commands._base import BunnyGroup
from bunnygraph.commands._options import source_options
from bunnygraph.services.suggest import SuggestService

if TYPE_CHECKING:
    from bunnygraph.commands._context import AppContext

_SUGGEST_EXAMPLES = """\
  bunnygraph suggest neighbors pairs.txt
  bunnygraph suggest nonneighbors pairs.txt --summary --top 5
  bunnygraph -q suggest nonneighbors pairs.txt"""


@click.group(cls=BunnyGroup, examples=_SUGGEST_EXAMPLES)
@click.pass_obj
def suggest(app: AppContext) -> None:
    """Suggest new pairs from the current graph."""


@suggest.command(
    examples="""\
  bunnygraph suggest neighbors pairs.txt
  bunnygraph suggest neighbors pairs.txt --summary --top 20"""
)
@source_options
@click.option("--top", default=None, type=int, help="Max suggestions (default: [suggest] top).")
@click.pass_obj
def neighbors(
    app: AppContext,
    source: str,
    merge: bool | None,
    prefixes: tuple[str, ...],
    strict: bool | None,
    top: int | None,
) -> None:
    """Similar-neighbor method: link A to what its look-alike neighbor links to."""
    svc = SuggestService(app.source(source), app.settings)
    app.emit(svc.similar_neighbors(merge=merge, prefixes=prefixes, top=top, strict=strict))


@suggest.command(
    examples="""\
  bunnygraph suggest nonneighbors pairs.txt
  bunnygraph --json suggest nonneighbors pairs.txt --top 3"""
)
@source_options
@click.option("--top", default=None, type=int, help="Max suggestions (default: [suggest] top).")
@click.pass_obj
def nonneighbors(
    app: AppContext,
    source: str,
    merge: bool | None,
    prefixes: tuple[str, ...],
    strict: bool | None,
    top: int | None,
) -> None:
    """Similar non-neighbor method: pair unconnected nodes sharing neighbors."""
    svc = SuggestService(app.source(source), app.settings)
    app.emit(svc.similar_nonneighbors(merge=merge, prefixes=prefixes, top=top, strict=strict))
