"""Timing spans for service calls.

Under ``--verbose`` every ``@traced`` service method records a span tree:
one span for the call and one per ``trace_span`` block inside it (manifest
loading, scanning, readme rendering). The tree is logged through structlog
and returned in ``ServiceResult.meta["telemetry"]``. Otherwise tracing
costs a single ContextVar lookup per call.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from pkgdoc.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("pkgdoc_telemetry", default=False)
_current_span: ContextVar[Span | None] = ContextVar("pkgdoc_current_span", default=None)


@dataclass
class Span:
    """A timed step; ``children`` are the steps opened while it was current."""

    name: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        """Elapsed milliseconds, or 0.0 while the span is open."""
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a step of the current traced call.

    Yields None when telemetry is off or no traced call is running.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name)
    parent.children.append(child)
    with _activate(child):
        yield child


def _log_span(span: Span, *, ok: bool) -> None:
    structlog.get_logger("pkgdoc.telemetry").debug(
        "span.complete",
        span_name=span.name,
        duration_ms=round(span.duration_ms, 2),
        steps=[child.name for child in span.children],
        ok=ok,
    )


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Record a span tree for a service method and attach it to the result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(func.__qualname__)
        try:
            with _activate(span):
                result = func(*args, **kwargs)
        except Exception:
            _log_span(span, ok=False)
            raise

        if not isinstance(result, ServiceResult):
            _log_span(span, ok=True)
            return result
        _log_span(span, ok=result.ok)
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn tracing on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
