"""``bunnygraph`` entry point: output-mode flags shared by every subcommand."""

from __future__ import annotations

import click

from bunnygraph import __version__
from bunnygraph.commands import register_commands
from bunnygraph.commands._context import AppContext
from bunnygraph.config.settings import BunnySettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, "-V", "--version", prog_name="bunnygraph")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Print the full result (nodes, edges, suggestions, warnings) as JSON.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="One value per line: suggestion texts, node ids or prefix choices.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show group members, suggestion scores and parse/reduce timings.",
)
@click.option("--log-json", is_flag=True, help="Write debug logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="FILE",
    help="Read settings from FILE instead of the nearest bunnygraph.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Summarize "A x B" relation lists and suggest pairs that are missing.

    Read relations from a file, or from stdin with "-", then render them
    (merged into metanodes with --summary), rank candidate pairs, or export
    the graph as Graphviz DOT or vis-network JSON.
    """
    ctx.obj = AppContext(BunnySettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
