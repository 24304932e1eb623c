"""Prefix filtering — restrict a relation set to selected id prefixes.

Node ids may carry a ``-``-delimited prefix (``N-fox``, ``Promo-owl``).
The standard prefixes together form the base group, offered as a single
``"Base game"`` choice.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from bunnygraph.domain.relations import RelationSet

STANDARD_PREFIXES: tuple[str, ...] = ("N", "W", "E", "S", "C", "NW?", "NE?", "SW?", "SE?")
BASE_GROUP = "Base game"
DEFAULT_DELIMITER = "-"


def prefix_of(node: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Text before the first *delimiter*, or the whole id if there is none."""
    return node.split(delimiter, 1)[0]


@dataclass(frozen=True)
class PrefixSummary:
    """Prefixes present in a relation set and whether filtering is worth offering."""

    found: tuple[str, ...]
    has_base_group: bool
    non_standard: tuple[str, ...]

    @property
    def offers_filter(self) -> bool:
        return (self.has_base_group and bool(self.non_standard)) or len(self.non_standard) > 1


def summarize_prefixes(
    nodes: Iterable[str],
    *,
    standard: Collection[str] = STANDARD_PREFIXES,
    delimiter: str = DEFAULT_DELIMITER,
) -> PrefixSummary:
    found = tuple(dict.fromkeys(prefix_of(n, delimiter) for n in nodes))
    return PrefixSummary(
        found=found,
        has_base_group=any(p in standard for p in found),
        non_standard=tuple(sorted(p for p in found if p not in standard)),
    )


def expand_selection(
    selected: Iterable[str],
    *,
    standard: Collection[str] = STANDARD_PREFIXES,
    base_group: str = BASE_GROUP,
) -> set[str]:
    """Replace the base-group name with the standard prefixes it stands for."""
    prefixes = set(selected)
    if base_group in prefixes:
        prefixes.discard(base_group)
        prefixes.update(standard)
    return prefixes


def filter_by_prefixes(
    relations: RelationSet,
    selected: Iterable[str],
    *,
    standard: Collection[str] = STANDARD_PREFIXES,
    base_group: str = BASE_GROUP,
    delimiter: str = DEFAULT_DELIMITER,
) -> RelationSet:
    """Keep nodes whose prefix is selected and edges between kept nodes.

    An empty selection keeps everything.
    """
    prefixes = expand_selection(selected, standard=standard, base_group=base_group)
    if not prefixes:
        return relations

    kept = tuple(n for n in relations.nodes if prefix_of(n, delimiter) in prefixes)
    kept_set = set(kept)
    return RelationSet(
        nodes=kept,
        edges=tuple(e for e in relations.edges if e.from_ in kept_set and e.to in kept_set),
        skipped=relations.skipped,
        skipped_lines=relations.skipped_lines,
    )
