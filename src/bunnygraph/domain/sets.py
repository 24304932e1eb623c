"""Set algebra helpers shared by the reducer and the suggestion engines."""

from __future__ import annotations

import itertools
from collections.abc import Collection, Sequence


def set_equals(a: Collection[object], b: Collection[object]) -> bool:
    """Return True iff *a* and *b* hold exactly the same elements.

    Compares sizes first, then scans *a* and stops at the first element
    missing from *b*. Accepts anything sized with ``in`` support, so the
    insertion-ordered ``dict`` sets used by the reducer work unchanged.
    """
    if len(a) != len(b):
        return False
    return all(item in b for item in a)


def combinations[T](items: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """All *k*-element selections of *items*, in lexicographic index order.

    Relative order of *items* is preserved inside each selection.
    Returns ``[]`` when *k* is outside ``[1, len(items)]``.
    """
    if k <= 0 or k > len(items):
        return []
    return list(itertools.combinations(items, k))
