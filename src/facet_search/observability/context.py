"""Trace ids shared between search spans and log records."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


_current_ids: ContextVar[dict[str, str] | None] = ContextVar("facet_search_trace_ids", default=None)


def get_trace_context() -> dict[str, str]:
    """Return ``trace_id``/``span_id`` for this context, minting ids on first use."""
    ids = _current_ids.get()
    if not ids or not ids.get("trace_id"):
        fresh = uuid4().hex
        ids = {"trace_id": fresh, "span_id": fresh[:16]}
        _current_ids.set(ids)
    return ids


def update_span_id(span_id: str) -> None:
    """Point log records at a new span without changing the trace."""
    _current_ids.set({**get_trace_context(), "span_id": span_id})
