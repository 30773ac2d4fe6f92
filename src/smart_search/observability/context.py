"""Request-scoped correlation data shared by logging and tracing.

Every HTTP request gets a ``RequestContext`` holding its trace id, the id of
the innermost span and, once a search operation starts, the operation name
and the query being served. Log records pick these up automatically.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import asdict, dataclass, replace
from uuid import uuid4


@dataclass(frozen=True)
class RequestContext:
    trace_id: str
    span_id: str
    operation: str | None = None
    query: str | None = None

    def as_log_fields(self) -> dict[str, str]:
        """Non-empty fields, ready to merge into a log entry."""
        return {key: value for key, value in asdict(self).items() if value is not None}


_current: ContextVar[RequestContext | None] = ContextVar("smart_search_request_context", default=None)


def new_trace_id() -> str:
    """32 hex characters, the W3C trace-id width."""
    return uuid4().hex


def new_span_id() -> str:
    """16 hex characters, the W3C span-id width."""
    return uuid4().hex[:16]


def current_context() -> RequestContext:
    """Return the active context.

    Outside a request each call returns a fresh context that is not stored.
    """
    ctx = _current.get()
    if ctx is None:
        return RequestContext(trace_id=new_trace_id(), span_id=new_span_id())
    return ctx


def start_request(trace_id: str | None = None) -> RequestContext:
    """Begin a new request context, continuing ``trace_id`` when the caller sent one."""
    ctx = RequestContext(trace_id=trace_id or new_trace_id(), span_id=new_span_id())
    _current.set(ctx)
    return ctx


def bind_operation(operation: str, query: str) -> RequestContext:
    """Attach the search operation being served to the current context."""
    ctx = replace(current_context(), operation=operation, query=query)
    _current.set(ctx)
    return ctx


def bind_span(span_id: str) -> None:
    """Record the innermost span while keeping the trace id."""
    _current.set(replace(current_context(), span_id=span_id))
