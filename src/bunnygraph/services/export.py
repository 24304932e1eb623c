"""ExportService — serialize the rendered graph for external viewers.

Formats:
- ``dot`` — Graphviz DOT (undirected, filled by color class)
- ``json`` — vis-network ``{"nodes": [...], "edges": [...]}``
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from bunnygraph.domain.types import RenderedGraph
from bunnygraph.services.base import BaseService
from bunnygraph.services.result import ServiceResult
from bunnygraph.services.telemetry import traced

EXPORT_FORMATS = ("dot", "json")


class ExportService(BaseService):
    """Exports the rendered graph."""

    @traced
    def export_graph(
        self,
        *,
        fmt: str = "dot",
        merge: bool | None = None,
        prefixes: Iterable[str] = (),
        strict: bool | None = None,
    ) -> ServiceResult:
        """Export the rendered graph. Content is returned in ``data["content"]``."""
        if fmt not in EXPORT_FORMATS:
            return ServiceResult.failure(
                "export_graph",
                "INVALID_FORMAT",
                f"Unknown graph format: {fmt}",
                format=fmt,
                valid=list(EXPORT_FORMATS),
            )

        warnings: list[str] = []
        try:
            relations = self._load(prefixes, warnings, strict=strict)
        except self.INPUT_ERRORS as exc:
            return self._input_failure("export_graph", exc)

        graph = self._render(relations, merge=merge)
        content = self._to_dot(graph) if fmt == "dot" else self._to_vis_json(graph)
        return ServiceResult(
            ok=True,
            op="export_graph",
            data={
                "format": fmt,
                "content": content,
                "node_count": len(graph.nodes),
                "edge_count": len(graph.edges),
            },
            warnings=warnings,
        )

    def _to_dot(self, graph: RenderedGraph) -> str:
        """Generate Graphviz DOT notation."""
        style = self._settings.style
        lines = ["graph relations {", "  node [shape=box, style=filled];"]
        for node in graph.nodes:
            label = _dot_escape(node.label)
            color = style.color_for(node.color_class)
            lines.append(f'  "{_dot_escape(node.id)}" [label="{label}", fillcolor="{color}"];')
        for edge in graph.edges:
            lines.append(f'  "{_dot_escape(edge.from_)}" -- "{_dot_escape(edge.to)}";')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _to_vis_json(self, graph: RenderedGraph) -> str:
        """Generate vis-network compatible JSON."""
        style = self._settings.style
        nodes = [
            {"id": n.id, "label": n.label, "color": style.color_for(n.color_class)}
            for n in graph.nodes
        ]
        edges = [e.to_dict() for e in graph.edges]
        return json.dumps({"nodes": nodes, "edges": edges}, indent=2) + "\n"


def _dot_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
