"""Rich renderers, one per service op.

``render_result`` looks the op up in ``_OP_RENDERERS``; ops without an
entry get the key/value fallback. Output is built on a StringIO console,
so CliRunner and pipes see plain text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from bunnygraph.output.console import create_console, get_output, style_for_class

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from bunnygraph.services.result import ServiceResult

    type _Renderer = Callable[..., None]


# ── Entry points ──────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Styled text for *result*; ``verbose`` adds detail and the span tree."""
    console = create_console()
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    else:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console, verbose=verbose)
        if verbose and result.meta:
            _render_meta(console, result.meta)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One value per line for ``--quiet``, meant for piping.

    The first non-empty of: suggestion texts, node ids, prefix choices.
    """
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"

    data = result.data
    for key, pick in (("items", "text"), ("nodes", "id"), ("choices", None)):
        values = data.get(key)
        if isinstance(values, list) and values:
            return "\n".join(str(v) if pick is None else str(v.get(pick, "")) for v in values)
    return f"OK: {result.op}"


# ── Shared pieces ─────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bg.ok"), Text(f"  {result.op}", style="bg.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """``  key: value``, with lists and dicts as compact JSON."""
    if isinstance(value, (dict, list)):
        shown = Text(json.dumps(value, separators=(",", ":")))
    else:
        shown = Text(str(value), style="bg.id" if key == "id" or key.endswith("_id") else "")
    console.print(Text(f"  {key}: ", style="bg.key"), shown, sep="")


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            _render_span(console, value, depth=1)
        else:
            console.print(Text(f"    {key}: {value}"))


def _span_style(duration_ms: float) -> str:
    if duration_ms > 1000:
        return "bold red"
    return "yellow" if duration_ms > 100 else "dim"


def _render_span(console: Console, span: dict[str, Any], depth: int) -> None:
    """One line per span, children indented under their parent."""
    duration = span.get("duration_ms", 0.0)
    line = Text(" " * (4 * depth))
    line.append(f"{duration:>8.2f}ms", style=_span_style(duration))
    line.append(f"  {span.get('name', '?')}")
    notes = span.get("annotations") or {}
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, depth + 1)


def _one_line(label: str) -> str:
    """Sibling-group labels span several lines; table cells want one."""
    return label.replace(",\n", ", ")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    line = Text("ERROR", style="bg.error")
    line.append(f"  {result.op}", style="bg.op")
    line.append(f" — {error.message if error else 'Unknown error'}")
    console.print(line)
    if verbose and error and error.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            console.print(Text(f"    {key}: {value}"))


# ── Graph renderers ───────────────────────────────────────────────────


def _render_graph(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the metanode table and edge list."""
    d = result.data
    nodes = d.get("nodes", [])
    edges = d.get("edges", [])
    mode = "summary" if d.get("summary") else "plain"
    console.print(
        f"[bold]{len(nodes)} nodes, {len(edges)} edges[/bold] "
        f"({mode}, {d.get('total_pairs', 0)} pairs in source)"
    )
    if not nodes:
        return

    labels = {n["id"]: _one_line(n["label"]) for n in nodes}
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="bg.id", no_wrap=True)
    table.add_column("Label")
    table.add_column("Class")
    table.add_column("Degree", justify="right")
    if verbose:
        table.add_column("Members", style="dim")

    degree: dict[str, int] = dict.fromkeys(labels, 0)
    for e in edges:
        degree[e["from"]] = degree.get(e["from"], 0) + 1
        degree[e["to"]] = degree.get(e["to"], 0) + 1

    for node in nodes:
        cls = str(node.get("color_class", ""))
        row: list[Any] = [
            escape(node["id"]),
            escape(labels[node["id"]]),
            Text(cls, style=style_for_class(cls)),
            str(degree.get(node["id"], 0)),
        ]
        if verbose:
            members = [m for cluster in node.get("members", []) for m in cluster]
            row.append(escape(", ".join(members)))
        table.add_row(*row)
    console.print(table)

    if edges:
        console.print()
        console.print("[bold]Edges[/bold]")
        for e in edges:
            left = escape(labels.get(e["from"], e["from"]))
            right = escape(labels.get(e["to"], e["to"]))
            console.print(f"  {left} — {right}")


def _render_prefixes(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "found", ", ".join(d.get("found", [])) or "-")
    _field(console, "choices", ", ".join(d.get("choices", [])) or "-")
    _field(console, "offers_filter", d.get("offers_filter", False))


def _render_suggestions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ranked suggestions, one numbered line each."""
    items = result.data.get("items", [])
    if not items:
        console.print("No suggestions.")
        return

    for rank, item in enumerate(items, start=1):
        line = Text(f"{rank:>3}. ")
        line.append(str(item.get("text", "")))
        if verbose:
            line.append(f"  score={item.get('score')}", style="bg.score")
        console.print(line)
    console.print(f"\n{result.data.get('count', len(items))} suggestions")


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render export summary (content itself goes to stdout or a file)."""
    _status_line(console, result)
    for key in ("output_file", "format", "node_count", "edge_count"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line, then every data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "render": _render_graph,
    "prefixes": _render_prefixes,
    "stats": _render_generic,
    "suggest_neighbors": _render_suggestions,
    "suggest_nonneighbors": _render_suggestions,
    "export_graph": _render_export,
}
