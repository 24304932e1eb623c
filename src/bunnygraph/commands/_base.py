"""Click classes that take an ``examples=`` keyword.

``bunnygraph graph show --examples`` prints the examples and exits, so
``--help`` can stay short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def _print(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=_print,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    examples: str | None

    def _init_examples(self, params: list[click.Parameter], examples: str | None) -> None:
        self.examples = examples
        if examples:
            params.append(_examples_option(examples))


class BunnyCommand(_ExamplesMixin, click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(self.params, examples)


class BunnyGroup(_ExamplesMixin, click.Group):
    """Group with an ``--examples`` flag; its subcommands are BunnyCommands."""

    command_class = BunnyCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(self.params, examples)
