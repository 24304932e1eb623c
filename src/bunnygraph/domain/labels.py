"""Label groups — how merged node clusters are named and classified."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bunnygraph.domain.types import ColorClass


def render_cluster(cluster: Sequence[str]) -> str:
    """``A`` for a single id, ``{A, B}`` for interchangeable ids."""
    if len(cluster) == 1:
        return cluster[0]
    return "{" + ", ".join(cluster) + "}"


@dataclass(frozen=True)
class LabelGroup:
    """Ordered clusters of original node ids represented by one metanode.

    Ids inside a cluster are interchangeable twins. Separate clusters only
    share a neighbor set and are shown as a bracketed list.
    """

    clusters: tuple[tuple[str, ...], ...]

    @classmethod
    def from_lists(cls, clusters: Sequence[Sequence[str]]) -> LabelGroup:
        return cls(tuple(tuple(c) for c in clusters))

    @property
    def members(self) -> list[str]:
        return [node for cluster in self.clusters for node in cluster]

    @property
    def label(self) -> str:
        if len(self.clusters) == 1:
            return render_cluster(self.clusters[0])
        return "[" + ",\n".join(render_cluster(c) for c in self.clusters) + "]"

    @property
    def color_class(self) -> ColorClass:
        if len(self.clusters) > 1:
            return ColorClass.UNMERGED
        return ColorClass.MERGED
