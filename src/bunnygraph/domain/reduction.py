"""Graph reduction — collapse structurally equivalent nodes into metanodes.

Two fixed-point passes over an owned adjacency map:

1. **Twins.** Adjacent nodes whose closed neighborhoods (self included) are
   equal are interchangeable, so their ids are unioned into one cluster.
2. **Siblings.** After self-references are stripped, nodes whose open
   neighborhoods are equal are grouped, but each keeps its own cluster.

Each pass restarts its pair scan after every merge and always takes the
first mergeable pair in input order. The result is deterministic for a given
input order but not invariant under reordering the same nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from bunnygraph.domain.labels import LabelGroup
from bunnygraph.domain.neighborhoods import build_neighborhoods
from bunnygraph.domain.sets import combinations, set_equals
from bunnygraph.domain.types import ColorClass, Edge, MetaNode, NodeSet, RenderedGraph

logger = logging.getLogger(__name__)

type _Merge = Callable[[str, str], None]
type _Mergeable = Callable[[str, str], bool]


def _drop_key(adj: dict[str, NodeSet], key: str) -> None:
    """Remove *key*'s own entry, then scrub it from every remaining set."""
    del adj[key]
    for neighbors in adj.values():
        neighbors.pop(key, None)


def _merge_to_fixed_point(
    adj: dict[str, NodeSet],
    mergeable: _Mergeable,
    merge: _Merge,
) -> int:
    """Merge the first qualifying pair, rescan, repeat until a scan finds none.

    Returns the number of merges performed.
    """
    merges = 0
    changed = True
    while changed:
        changed = False
        for b0, b1 in combinations(list(adj), 2):
            if mergeable(b0, b1):
                merge(b0, b1)
                _drop_key(adj, b1)
                merges += 1
                changed = True
                break
    return merges


def reduce_graph(nodes: Iterable[str], edges: Iterable[Edge]) -> RenderedGraph:
    """Reduce a relation graph to metanodes and metaedges.

    Args:
        nodes: Node ids in input order (duplicates collapse to the first).
        edges: Undirected edges. Duplicates and self-loops are tolerated.

    Returns:
        The reduced graph. Every original node appears in exactly one
        metanode's label group; metaedges are emitted once per pair with
        ``from < to``.
    """
    order = list(dict.fromkeys(nodes))
    adj = build_neighborhoods(order, edges, closed=True)
    labels: dict[str, list[list[str]]] = {node: [[node]] for node in order}

    def union_twin(b0: str, b1: str) -> None:
        cluster = labels[b0][0]
        cluster.extend(n for n in labels[b1][0] if n not in cluster)

    twins = _merge_to_fixed_point(
        adj,
        lambda b0, b1: b1 in adj[b0] and set_equals(adj[b0], adj[b1]),
        union_twin,
    )

    for key, neighbors in adj.items():
        neighbors.pop(key, None)

    def append_sibling(b0: str, b1: str) -> None:
        labels[b0].extend(labels[b1])

    siblings = _merge_to_fixed_point(
        adj,
        lambda b0, b1: set_equals(adj[b0], adj[b1]),
        append_sibling,
    )
    logger.debug(
        "Reduced %d nodes to %d metanodes (%d twin merges, %d sibling merges)",
        len(order),
        len(adj),
        twins,
        siblings,
    )
    return _build_rendered(adj, labels)


def _build_rendered(adj: dict[str, NodeSet], labels: dict[str, list[list[str]]]) -> RenderedGraph:
    meta_nodes: list[MetaNode] = []
    groups: dict[str, tuple[tuple[str, ...], ...]] = {}
    for key in adj:
        group = LabelGroup.from_lists(labels[key])
        groups[key] = group.clusters
        meta_nodes.append(MetaNode(id=key, label=group.label, color_class=group.color_class))

    meta_edges = [Edge(b, n) for b, neighbors in adj.items() for n in neighbors if b < n]
    return RenderedGraph(nodes=tuple(meta_nodes), edges=tuple(meta_edges), groups=groups)


def plain_graph(nodes: Iterable[str], edges: Sequence[Edge]) -> RenderedGraph:
    """Render without merging: every node is its own single-id metanode.

    Edges are kept as given (duplicates included) unless an endpoint is not
    a known node.
    """
    order = list(dict.fromkeys(nodes))
    known = set(order)
    return RenderedGraph(
        nodes=tuple(MetaNode(id=n, label=n, color_class=ColorClass.MERGED) for n in order),
        edges=tuple(e for e in edges if e.from_ in known and e.to in known),
        groups={n: ((n,),) for n in order},
    )
