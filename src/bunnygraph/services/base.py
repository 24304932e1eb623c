"""BaseService — shared loading pipeline for all bunnygraph services.

Every service receives a :class:`RelationSource` and the invocation's
settings. The pipeline is read → parse → prefix filter → render, and each
stage is rebuilt from scratch per call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bunnygraph.config.settings import BunnySettings
from bunnygraph.domain.filtering import filter_by_prefixes, summarize_prefixes
from bunnygraph.domain.reduction import plain_graph, reduce_graph
from bunnygraph.domain.relations import MalformedRelationError, RelationSet, parse_relations
from bunnygraph.domain.types import RenderedGraph
from bunnygraph.infrastructure.source import RelationSource, SourceNotFoundError
from bunnygraph.services.result import ServiceResult
from bunnygraph.services.telemetry import trace_span

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes operating on one relation source.

    Usage::

        class GraphService(BaseService):
            def render(self, ...) -> ServiceResult:
                try:
                    relations = self._load(prefixes, warnings)
                except INPUT_ERRORS as exc:
                    return self._input_failure("render", exc)
                ...
    """

    INPUT_ERRORS = (SourceNotFoundError, MalformedRelationError)

    def __init__(self, source: RelationSource, settings: BunnySettings | None = None) -> None:
        self._source = source
        self._settings = settings or BunnySettings()

    @property
    def settings(self) -> BunnySettings:
        return self._settings

    def _parse(self, *, strict: bool | None = None) -> RelationSet:
        """Read and parse the source. Raises one of :attr:`INPUT_ERRORS`."""
        cfg = self._settings.parse
        with trace_span("parse") as span:
            relations = parse_relations(
                self._source.read_text(),
                separator=cfg.separator,
                strict=cfg.strict if strict is None else strict,
            )
            if span:
                span.annotate("nodes", len(relations.nodes))
                span.annotate("pairs", relations.total_pairs)
        return relations

    def _load(
        self,
        prefixes: Iterable[str],
        warnings: list[str],
        *,
        strict: bool | None = None,
    ) -> RelationSet:
        """Parse, then restrict to *prefixes*. Appends non-fatal issues to *warnings*."""
        relations = self._parse(strict=strict)
        if relations.skipped:
            warnings.append(f"Skipped {relations.skipped} malformed line(s)")

        selected = list(prefixes)
        if not selected:
            return relations

        cfg = self._settings.filter
        summary = summarize_prefixes(
            relations.nodes, standard=cfg.standard_prefixes, delimiter=cfg.delimiter
        )
        missing = [
            p
            for p in selected
            if (not summary.has_base_group if p == cfg.base_group else p not in summary.found)
        ]
        if missing:
            warnings.append(f"Prefixes not present in data: {', '.join(missing)}")

        with trace_span("filter") as span:
            filtered = filter_by_prefixes(
                relations,
                selected,
                standard=cfg.standard_prefixes,
                base_group=cfg.base_group,
                delimiter=cfg.delimiter,
            )
            if span:
                span.annotate("nodes", len(filtered.nodes))
        return filtered

    def _render(self, relations: RelationSet, *, merge: bool | None = None) -> RenderedGraph:
        """Render *relations*, reduced when summary mode is on."""
        use_merge = self._settings.summary.enabled if merge is None else merge
        with trace_span("reduce" if use_merge else "render") as span:
            if use_merge:
                graph = reduce_graph(relations.nodes, relations.edges)
            else:
                graph = plain_graph(relations.nodes, relations.edges)
            if span:
                span.annotate("nodes", len(graph.nodes))
                span.annotate("edges", len(graph.edges))
        return graph

    @staticmethod
    def _input_failure(op: str, exc: Exception) -> ServiceResult:
        """Translate a source or parse error into a failed result."""
        logger.debug("Input failure in %s", op, exc_info=True)
        if isinstance(exc, MalformedRelationError):
            return ServiceResult.failure(
                op,
                "MALFORMED_RELATION",
                str(exc),
                line_number=exc.line_number,
                line=exc.line,
            )
        return ServiceResult.failure(op, "SOURCE_NOT_FOUND", str(exc))
