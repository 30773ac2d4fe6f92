"""Observability module for tracing, metrics, and logging."""

from smart_search.observability.context import RequestContext, bind_operation, current_context, start_request
from smart_search.observability.logging import JsonFormatter, configure_logging
from smart_search.observability.metrics import (
    INDEX_DOC_COUNT,
    INDEX_TOKEN_COUNT,
    SEARCH_LATENCY,
    SEARCH_REQUESTS,
    SEARCH_RESULTS,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from smart_search.observability.tracing import (
    TraceContextMiddleware,
    create_span,
    get_tracer,
    init_tracing,
    search_span,
)


__all__ = [
    "INDEX_DOC_COUNT",
    "INDEX_TOKEN_COUNT",
    "SEARCH_LATENCY",
    "SEARCH_REQUESTS",
    "SEARCH_RESULTS",
    "JsonFormatter",
    "RequestContext",
    "TraceContextMiddleware",
    "bind_operation",
    "configure_logging",
    "create_span",
    "current_context",
    "get_metrics",
    "get_metrics_content_type",
    "get_tracer",
    "init_tracing",
    "search_span",
    "start_request",
    "track_latency",
]
