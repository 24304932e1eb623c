"""Timing spans for service calls — Span, @traced, trace_span.

Off unless ``--verbose``; a disabled call costs one ContextVar lookup.
When on, each ``@traced`` service method becomes the root of a span tree
(parse, filter, reduce, ...) that ends up in ``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

import structlog

from bunnygraph.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("bunnygraph_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("bunnygraph_span", default=None)


@dataclass
class Span:
    """One timed step. ``children`` are the steps opened while it was active."""

    name: str
    started: float = field(default_factory=perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        return 0.0 if self.finished is None else (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        for key, value in (
            ("annotations", self.annotations),
            ("children", [child.to_dict() for child in self.children]),
        ):
            if value:
                payload[key] = value
        return payload


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a step inside the current traced call.

    Yields None outside a traced call or while telemetry is off, so callers
    guard annotations with ``if span:``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    span = Span(name)
    parent.children.append(span)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


def traced[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Make *func* the root span of its call and attach the tree to its result."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        token = _active.set(root)
        completed = False
        try:
            result = func(*args, **kwargs)
            completed = True
        finally:
            root.end()
            _active.reset(token)
            structlog.get_logger("bunnygraph.telemetry").debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 2),
                ok=completed,
            )

        if not isinstance(result, ServiceResult):
            return result
        meta = dict(result.meta or {})
        meta["telemetry"] = root.to_dict()
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn span collection on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
