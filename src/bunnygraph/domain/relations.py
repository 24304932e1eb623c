"""Relation text parsing — ``"A x B"`` lines into nodes and edges.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bunnygraph.domain.types import Edge

DEFAULT_SEPARATOR = " x "


class MalformedRelationError(ValueError):
    """A non-blank line that is not exactly two identifiers."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"Line {line_number} is not a relation: {line!r}")
        self.line_number = line_number
        self.line = line


@dataclass(frozen=True)
class RelationSet:
    """Parsed relations.

    Attributes:
        nodes: Node ids in order of first appearance.
        edges: One edge per accepted line, duplicates included.
        skipped: Non-blank lines rejected in lenient mode.
    """

    nodes: tuple[str, ...] = ()
    edges: tuple[Edge, ...] = ()
    skipped: int = 0
    skipped_lines: tuple[int, ...] = field(default=(), repr=False)

    @property
    def total_pairs(self) -> int:
        return len(self.edges)


def parse_relations(
    text: str,
    *,
    separator: str = DEFAULT_SEPARATOR,
    strict: bool = False,
) -> RelationSet:
    """Parse one relation per line.

    Each line is stripped and split on *separator*; lines yielding exactly
    two parts are accepted. Other non-blank lines raise
    :class:`MalformedRelationError` when *strict*, and are otherwise skipped
    and counted.
    """
    nodes: dict[str, None] = {}
    edges: list[Edge] = []
    skipped: list[int] = []

    for number, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        parts = line.split(separator)
        if len(parts) != 2:
            if not line:
                continue
            if strict:
                raise MalformedRelationError(number, line)
            skipped.append(number)
            continue
        first, second = parts
        nodes[first] = None
        nodes[second] = None
        edges.append(Edge(first, second))

    return RelationSet(
        nodes=tuple(nodes),
        edges=tuple(edges),
        skipped=len(skipped),
        skipped_lines=tuple(skipped),
    )
