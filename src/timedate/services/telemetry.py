"""Per-call timing spans for ``--verbose``.

Disabled by default: ``@traced`` then costs one ContextVar lookup. When
enabled, each facade call opens a root span, the stages inside it
(zone resolution, parsing, arithmetic, formatting) open child spans via
``trace_span``, and the finished tree lands in
``ServiceResult.meta["telemetry"]``.
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

from timedate.services.result import ServiceResult

_log = structlog.get_logger("timedate.telemetry")

_enabled: ContextVar[bool] = ContextVar("timedate_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("timedate_active_span", default=None)


@dataclass
class Span:
    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds between open and close; 0.0 while still open."""
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def close(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def as_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.elapsed_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.as_dict() for child in self.children]
        return tree


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.close()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Open a child of the active span.

    Yields None when telemetry is off or no traced call is in progress,
    so callers guard annotations with ``if span:``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Record a root span around *func* and attach it to the returned ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        with _activate(root):
            result = func(*args, **kwargs)

        if not isinstance(result, ServiceResult):
            return result
        _log.debug(
            "span.complete",
            span_name=root.name,
            duration_ms=round(root.elapsed_ms, 3),
            ok=result.ok,
            children=len(root.children),
        )
        meta = {**(result.meta or {}), "telemetry": root.as_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    """Switch telemetry off and drop any span left active."""
    _enabled.set(False)
    _active.set(None)
