"""OpenTelemetry spans around engine operations."""

from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

from facet_search.observability.context import update_span_id


if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

_tracer_holder: dict[str, Tracer | None] = {"tracer": None}


def init_tracing(service_name: str = "facet-search") -> TracerProvider:
    """Install an SDK tracer provider for ``service_name``.

    Exporters are left to the embedding application; add span processors to
    the returned provider to ship spans anywhere.
    """
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    _tracer_holder["tracer"] = trace.get_tracer("facet_search")
    logger.info("Tracing initialized for service: %s", service_name)
    return provider


def get_tracer() -> Tracer:
    tracer = _tracer_holder["tracer"]
    if tracer is None:
        init_tracing()
        tracer = _tracer_holder["tracer"]
    return tracer  # type: ignore[return-value]


@contextmanager
def create_span(name: str, attributes: Mapping[str, Any] | None = None) -> Iterator[Span]:
    """Run the block inside span ``name`` and tag log records with its id.

    ``None`` attribute values are skipped. An exception escaping the block is
    recorded on the span, which is marked as failed, and re-raised.
    """
    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            if value is not None:
                span.set_attribute(key, value)
        update_span_id(format(span.get_span_context().span_id, "016x"))
        yield span
