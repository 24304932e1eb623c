"""Rich Console factory and theme for bunnygraph output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BUNNY_THEME = Theme(
    {
        "bg.ok": "bold green",
        "bg.error": "bold red",
        "bg.warning": "bold yellow",
        "bg.op": "bold cyan",
        "bg.key": "dim",
        "bg.id": "bold blue",
        "bg.score": "magenta",
        "bg.merged": "cyan",
        "bg.unmerged": "bright_magenta",
    }
)

_COLOR_CLASS_STYLES: dict[str, str] = {
    "merged": "bg.merged",
    "unmerged": "bg.unmerged",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BUNNY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_class(color_class: str) -> str:
    """Return the Rich style name for a metanode color class."""
    return _COLOR_CLASS_STYLES.get(color_class, "")
