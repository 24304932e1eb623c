"""Neighborhood indexes — node to adjacent-node maps.

Three index policies live here and are deliberately kept apart:

* :func:`build_neighborhoods` — over raw node ids and edges, optionally
  closed (each node counts as its own neighbor). Feeds the reducer.
* :func:`label_neighborhoods` — over a rendered graph, keyed by display
  label. Ids that render identically collapse into one key.
* :func:`id_neighborhoods` — over a rendered graph, keyed by node id.
"""

from __future__ import annotations

from collections.abc import Iterable

from bunnygraph.domain.types import Edge, NodeSet, RenderedGraph


def build_neighborhoods(
    nodes: Iterable[str],
    edges: Iterable[Edge],
    *,
    closed: bool = False,
) -> dict[str, NodeSet]:
    """Map each node to its insertion-ordered set of neighbors.

    Edges naming a node outside *nodes* are ignored.
    """
    adj: dict[str, NodeSet] = {}
    for node in nodes:
        adj[node] = {node: None} if closed else {}
    for edge in edges:
        if edge.from_ not in adj or edge.to not in adj:
            continue
        adj[edge.from_][edge.to] = None
        adj[edge.to][edge.from_] = None
    return adj


def label_neighborhoods(graph: RenderedGraph) -> dict[str, NodeSet]:
    """Neighbor index keyed by what the user sees (display labels)."""
    labels = {node.id: node.label for node in graph.nodes}
    index: dict[str, NodeSet] = {node.label: {} for node in graph.nodes}
    for edge in graph.edges:
        from_label = labels[edge.from_]
        to_label = labels[edge.to]
        index[from_label][to_label] = None
        index[to_label][from_label] = None
    return index


def id_neighborhoods(graph: RenderedGraph) -> dict[str, NodeSet]:
    """Neighbor index keyed by node id."""
    index: dict[str, NodeSet] = {node.id: {} for node in graph.nodes}
    for edge in graph.edges:
        index[edge.from_][edge.to] = None
        index[edge.to][edge.from_] = None
    return index
