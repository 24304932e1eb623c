"""GraphEngine — lazy-built NetworkX view of a node/edge list.

Rebuilt per invocation, no cross-invocation cache. Used for graph
statistics and exports; the reduction itself runs on plain dicts.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import networkx as nx

type _Graph = nx.Graph


class GraphEngine:
    """Undirected graph built on first access from node and edge records."""

    def __init__(
        self,
        nodes: Iterable[Mapping[str, Any]],
        edges: Iterable[tuple[str, str]],
    ) -> None:
        self._nodes = list(nodes)
        self._edges = list(edges)
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def _build(self) -> _Graph:
        """Add all nodes first so isolated nodes are counted, then edges."""
        g: _Graph = nx.Graph()
        for record in self._nodes:
            attrs = {k: v for k, v in record.items() if k != "id"}
            g.add_node(record["id"], **attrs)
        g.add_edges_from(self._edges)
        return g

    def components(self) -> list[list[str]]:
        """Connected components, largest first."""
        comps = [sorted(c) for c in nx.connected_components(self.graph)]
        return sorted(comps, key=len, reverse=True)

    def isolated(self) -> list[str]:
        return list(nx.isolates(self.graph))

    def density(self) -> float:
        return float(nx.density(self.graph))
