"""Subcommand modules for bunnygraph.

Provides register_commands(), which imports command modules lazily so
``bunnygraph --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root group."""
    from bunnygraph.commands.export import export
    from bunnygraph.commands.graph import graph
    from bunnygraph.commands.suggest import suggest

    cli.add_command(graph)
    cli.add_command(suggest)
    cli.add_command(export)
