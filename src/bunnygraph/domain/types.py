"""Value types for relation graphs and their rendered (reduced) form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# Insertion-ordered set of node ids. Plain ``set`` iteration order depends on
# string hashing, which would make edge emission and tie-breaks unstable.
type NodeSet = dict[str, None]


class ColorClass(StrEnum):
    """Display category of a metanode."""

    MERGED = "merged"
    UNMERGED = "unmerged"


@dataclass(frozen=True)
class Edge:
    """An undirected relation between two nodes. Direction carries no meaning."""

    from_: str
    to: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.from_, "to": self.to}


@dataclass(frozen=True)
class MetaNode:
    """A node of the rendered graph, named after its surviving original id."""

    id: str
    label: str
    color_class: ColorClass = ColorClass.MERGED

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "color_class": str(self.color_class)}


@dataclass(frozen=True)
class RenderedGraph:
    """Nodes and edges as handed to the output layer and suggestion engines."""

    nodes: tuple[MetaNode, ...] = ()
    edges: tuple[Edge, ...] = ()
    groups: dict[str, tuple[tuple[str, ...], ...]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
