"""Options shared by every command that reads a relation source."""

from __future__ import annotations

from collections.abc import Callable

import click


def source_options[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Apply the SOURCE argument and the summary/prefix/strict flags."""
    func = click.option(
        "--strict/--lenient",
        default=None,
        help="Fail on lines that are not 'A x B' (default: [parse] strict).",
    )(func)
    func = click.option(
        "-p",
        "--prefix",
        "prefixes",
        multiple=True,
        help="Only keep ids with this prefix (repeatable; 'Base game' for the standard set).",
    )(func)
    func = click.option(
        "--summary/--no-summary",
        "merge",
        default=None,
        help="Merge equivalent nodes into metanodes (default: [summary] enabled).",
    )(func)
    func = click.argument("source", default="-")(func)
    return func
