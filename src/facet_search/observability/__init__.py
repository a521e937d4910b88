"""Structured logging and OpenTelemetry tracing for the search engine."""

from facet_search.observability.context import get_trace_context
from facet_search.observability.logging import JsonFormatter, configure_logging, configure_logging_from_settings
from facet_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_span",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
]
