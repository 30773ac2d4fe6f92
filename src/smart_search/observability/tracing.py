"""OpenTelemetry spans for HTTP requests and search operations.

Spans are recorded by the SDK tracer provider; no exporter is attached, so
they serve in-process correlation (span ids in log lines) unless the host
application adds a span processor of its own.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
import logging
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

from smart_search.observability.context import bind_operation, bind_span, start_request


logger = logging.getLogger(__name__)

TRACE_HEADER = b"x-trace-id"

_tracer_holder: dict[str, Tracer | None] = {"tracer": None}


def init_tracing(
    service_name: str = "smart-search",
    resource_attributes: dict[str, str] | None = None,
) -> TracerProvider:
    """Install an SDK tracer provider tagged with ``service_name``."""
    resource = Resource.create({"service.name": service_name, **(resource_attributes or {})})
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)
    _tracer_holder["tracer"] = trace.get_tracer(__name__)
    logger.info("Tracing initialized for service: %s", service_name)
    return provider


def get_tracer() -> Tracer:
    """Return the module tracer, falling back to the global provider."""
    if _tracer_holder["tracer"] is None:
        _tracer_holder["tracer"] = trace.get_tracer(__name__)
    return _tracer_holder["tracer"]  # type: ignore[return-value]


@contextmanager
def create_span(
    name: str,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: dict[str, Any] | None = None,
) -> Generator[Span, None, None]:
    """Open a span, make it the logging span and mark it failed on error."""
    with get_tracer().start_as_current_span(name, kind=kind, attributes=attributes) as span:
        span_context = span.get_span_context()
        if span_context.is_valid:
            bind_span(format(span_context.span_id, "016x"))
        try:
            yield span
        except Exception as exc:
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            span.record_exception(exc)
            raise


@contextmanager
def search_span(operation: str, query: str) -> Generator[Span, None, None]:
    """Span for one engine call; log records inside it carry the operation and query."""
    bind_operation(operation, query)
    with create_span(f"search.{operation}", attributes={"search.operation": operation, "search.query": query}) as span:
        yield span


class TraceContextMiddleware:
    """ASGI middleware giving every HTTP request its own trace context and server span.

    An incoming ``x-trace-id`` header is continued; otherwise a new trace id
    is generated. The trace id is echoed back on the response.
    """

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict, receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers", [])).get(TRACE_HEADER, b"").decode("latin-1")
        ctx = start_request(incoming or None)
        trace_id = ctx.trace_id.encode("latin-1")

        async def send_with_trace_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), (TRACE_HEADER, trace_id)]
                span.set_attribute("http.status_code", message["status"])
            await send(message)

        attributes = {"http.method": scope.get("method", ""), "http.route": scope.get("path", "")}
        with create_span("http.request", kind=SpanKind.SERVER, attributes=attributes) as span:
            await self.app(scope, receive, send_with_trace_id)
