"""Relation suggestion heuristics over a rendered graph snapshot.

Both engines are pure: they read a :class:`RenderedGraph` and return ranked
:class:`Suggestion` records. Ranking uses a stable sort, so equal scores keep
their enumeration order.
"""

from __future__ import annotations

from dataclasses import dataclass

from bunnygraph.domain.neighborhoods import id_neighborhoods, label_neighborhoods
from bunnygraph.domain.types import RenderedGraph

# Ranking weight: one shared neighbor outweighs any realistic count of unshared ones.
DEFAULT_WEIGHT = 42
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class NeighborSuggestion:
    """Propose ``candidate x target`` because *target* resembles *pivot*."""

    candidate: str
    target: str
    pivot: str
    common: int
    unique_extras: int
    score: int

    @property
    def text(self) -> str:
        return (
            f"{self.candidate} x {self.target} (which is similar to {self.pivot} - "
            f"Common neighbors: {self.common}, Unique extras: {self.unique_extras})"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "candidate": self.candidate,
            "target": self.target,
            "pivot": self.pivot,
            "common": self.common,
            "unique_extras": self.unique_extras,
            "score": self.score,
            "text": self.text,
        }


@dataclass(frozen=True)
class PairSuggestion:
    """Propose relating two unconnected nodes that share neighbors."""

    first: str
    second: str
    common: int
    non_common: int
    score: int

    @property
    def text(self) -> str:
        return f"{self.first} x {self.second} (Common: {self.common}, Non-Common: {self.non_common})"

    def to_dict(self) -> dict[str, object]:
        return {
            "first": self.first,
            "second": self.second,
            "common": self.common,
            "non_common": self.non_common,
            "score": self.score,
            "text": self.text,
        }


type Suggestion = NeighborSuggestion | PairSuggestion


def suggest_similar_neighbors(
    graph: RenderedGraph,
    *,
    limit: int = DEFAULT_LIMIT,
    weight: int = DEFAULT_WEIGHT,
) -> list[NeighborSuggestion]:
    """Suggest linking A to the neighbors of its neighbor B.

    For node A, neighbor B and every C adjacent to B but not to A, propose
    ``C x A``. Pairs where B has few neighbors beyond A's rank first; shared
    neighbors break the remaining ties::

        score = common - weight * unique_extras

    where ``unique_extras`` counts B's neighbors outside N(A), A excluded.
    Operates on display labels.
    """
    index = label_neighborhoods(graph)
    found: list[NeighborSuggestion] = []

    for node_a in graph.nodes:
        a = node_a.label
        neighbors_a = index[a]
        for b in neighbors_a:
            neighbors_b = index[b]
            common = sum(1 for x in neighbors_a if x in neighbors_b)
            unique_b = [x for x in neighbors_b if x not in neighbors_a]
            unique_extras = len(unique_b) - 1
            for c in unique_b:
                if c in (a, b):
                    continue
                found.append(
                    NeighborSuggestion(
                        candidate=c,
                        target=a,
                        pivot=b,
                        common=common,
                        unique_extras=unique_extras,
                        score=common - weight * unique_extras,
                    )
                )

    found.sort(key=lambda s: s.score, reverse=True)
    return found[:limit]


def suggest_similar_nonneighbors(
    graph: RenderedGraph,
    *,
    limit: int = DEFAULT_LIMIT,
    weight: int = DEFAULT_WEIGHT,
) -> list[PairSuggestion]:
    """Suggest pairs of unconnected nodes with overlapping neighborhoods.

    ``score = weight * |N1 & N2| - |N1 ^ N2|``. Each unordered pair is
    considered once (``id1 < id2``). Operates on node ids, reports labels.
    """
    index = id_neighborhoods(graph)
    found: list[PairSuggestion] = []

    for node1 in graph.nodes:
        n1 = index[node1.id]
        for node2 in graph.nodes:
            if not node1.id < node2.id or node2.id in n1:
                continue
            n2 = index[node2.id]
            common = sum(1 for x in n1 if x in n2)
            non_common = len(n1.keys() | n2.keys()) - common
            found.append(
                PairSuggestion(
                    first=node1.label,
                    second=node2.label,
                    common=common,
                    non_common=non_common,
                    score=weight * common - non_common,
                )
            )

    found.sort(key=lambda s: s.score, reverse=True)
    return found[:limit]
