"""GraphService — render, inspect, and measure a relation graph.

``render`` produces the graph a viewer would draw: either every node as
given, or (summary mode) the reduced graph of metanodes. ``stats`` runs
NetworkX over the same snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bunnygraph.domain.filtering import summarize_prefixes
from bunnygraph.domain.types import ColorClass, RenderedGraph
from bunnygraph.infrastructure.graph.engine import GraphEngine
from bunnygraph.services.base import BaseService
from bunnygraph.services.result import ServiceResult
from bunnygraph.services.telemetry import trace_span, traced


class GraphService(BaseService):
    """Handles rendering and inspection of the relation graph."""

    def _node_payload(self, graph: RenderedGraph) -> list[dict[str, Any]]:
        style = self._settings.style
        items: list[dict[str, Any]] = []
        for node in graph.nodes:
            entry = node.to_dict()
            entry["color"] = style.color_for(node.color_class)
            entry["members"] = [list(c) for c in graph.groups.get(node.id, ((node.id,),))]
            items.append(entry)
        return items

    @traced
    def render(
        self,
        *,
        merge: bool | None = None,
        prefixes: Iterable[str] = (),
        strict: bool | None = None,
    ) -> ServiceResult:
        """Render the graph, reduced to metanodes when *merge* is on.

        Args:
            merge: Summary mode. ``None`` uses the ``[summary]`` config.
            prefixes: Restrict to these id prefixes (empty: everything).
            strict: Fail on malformed lines. ``None`` uses ``[parse]``.
        """
        warnings: list[str] = []
        try:
            relations = self._load(prefixes, warnings, strict=strict)
        except self.INPUT_ERRORS as exc:
            return self._input_failure("render", exc)

        use_merge = self._settings.summary.enabled if merge is None else merge
        graph = self._render(relations, merge=use_merge)
        return ServiceResult(
            ok=True,
            op="render",
            data={
                "summary": use_merge,
                "total_pairs": relations.total_pairs,
                "node_count": len(graph.nodes),
                "edge_count": len(graph.edges),
                "nodes": self._node_payload(graph),
                "edges": [e.to_dict() for e in graph.edges],
            },
            warnings=warnings,
        )

    @traced
    def prefixes(self, *, strict: bool | None = None) -> ServiceResult:
        """List id prefixes found in the source and whether filtering applies."""
        try:
            relations = self._parse(strict=strict)
        except self.INPUT_ERRORS as exc:
            return self._input_failure("prefixes", exc)

        cfg = self._settings.filter
        summary = summarize_prefixes(
            relations.nodes, standard=cfg.standard_prefixes, delimiter=cfg.delimiter
        )
        choices = ([cfg.base_group] if summary.has_base_group else []) + list(summary.non_standard)
        return ServiceResult(
            ok=True,
            op="prefixes",
            data={
                "found": list(summary.found),
                "has_base_group": summary.has_base_group,
                "non_standard": list(summary.non_standard),
                "offers_filter": summary.offers_filter,
                "choices": choices,
                "count": len(summary.found),
            },
        )

    @traced
    def stats(
        self,
        *,
        merge: bool | None = None,
        prefixes: Iterable[str] = (),
        strict: bool | None = None,
    ) -> ServiceResult:
        """Summarize size and connectivity of the rendered graph."""
        warnings: list[str] = []
        try:
            relations = self._load(prefixes, warnings, strict=strict)
        except self.INPUT_ERRORS as exc:
            return self._input_failure("stats", exc)

        use_merge = self._settings.summary.enabled if merge is None else merge
        graph = self._render(relations, merge=use_merge)

        with trace_span("networkx"):
            engine = GraphEngine(
                (n.to_dict() for n in graph.nodes),
                ((e.from_, e.to) for e in graph.edges),
            )
            components = engine.components()
            isolated = engine.isolated()
            density = engine.density()

        unmerged = sum(1 for n in graph.nodes if n.color_class is ColorClass.UNMERGED)
        twin_groups = sum(
            1 for clusters in graph.groups.values() if any(len(c) > 1 for c in clusters)
        )
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "summary": use_merge,
                "total_pairs": relations.total_pairs,
                "original_nodes": len(relations.nodes),
                "node_count": len(graph.nodes),
                "edge_count": len(graph.edges),
                "components": len(components),
                "largest_component": len(components[0]) if components else 0,
                "isolated": len(isolated),
                "density": round(density, 4),
                "twin_groups": twin_groups,
                "sibling_groups": unmerged,
            },
            warnings=warnings,
        )
