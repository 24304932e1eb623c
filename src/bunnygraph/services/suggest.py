"""SuggestService — rank candidate relations on the rendered graph.

Both methods render the graph exactly as ``GraphService.render`` would
(same summary mode, same prefix filter) and run a suggestion engine on that
snapshot, so suggestions refer to what the user is looking at.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from bunnygraph.domain.suggestions import (
    NeighborSuggestion,
    PairSuggestion,
    suggest_similar_neighbors,
    suggest_similar_nonneighbors,
)
from bunnygraph.domain.types import RenderedGraph
from bunnygraph.services.base import BaseService
from bunnygraph.services.result import ServiceResult
from bunnygraph.services.telemetry import trace_span, traced

type _Engine = Callable[..., Sequence[NeighborSuggestion | PairSuggestion]]


class SuggestService(BaseService):
    """Suggests new relations to add."""

    def _suggest(
        self,
        op: str,
        engine: _Engine,
        *,
        merge: bool | None,
        prefixes: Iterable[str],
        top: int | None,
        strict: bool | None,
    ) -> ServiceResult:
        warnings: list[str] = []
        try:
            relations = self._load(prefixes, warnings, strict=strict)
        except self.INPUT_ERRORS as exc:
            return self._input_failure(op, exc)

        graph: RenderedGraph = self._render(relations, merge=merge)
        cfg = self._settings.suggest
        limit = cfg.top if top is None else max(1, top)
        with trace_span(op) as span:
            suggestions = engine(graph, limit=limit, weight=cfg.weight)
            if span:
                span.annotate("returned", len(suggestions))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "summary": self._settings.summary.enabled if merge is None else merge,
                "count": len(suggestions),
                "items": [s.to_dict() for s in suggestions],
            },
            warnings=warnings,
        )

    @traced
    def similar_neighbors(
        self,
        *,
        merge: bool | None = None,
        prefixes: Iterable[str] = (),
        top: int | None = None,
        strict: bool | None = None,
    ) -> ServiceResult:
        """Suggest ``C x A`` where A's neighbor B is otherwise similar to A."""
        return self._suggest(
            "suggest_neighbors",
            suggest_similar_neighbors,
            merge=merge,
            prefixes=prefixes,
            top=top,
            strict=strict,
        )

    @traced
    def similar_nonneighbors(
        self,
        *,
        merge: bool | None = None,
        prefixes: Iterable[str] = (),
        top: int | None = None,
        strict: bool | None = None,
    ) -> ServiceResult:
        """Suggest unconnected pairs that share many neighbors."""
        return self._suggest(
            "suggest_nonneighbors",
            suggest_similar_nonneighbors,
            merge=merge,
            prefixes=prefixes,
            top=top,
            strict=strict,
        )
