"""Prometheus metrics for search golden signals."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
import time

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


SEARCH_REQUESTS = Counter(
    "smart_search_requests_total",
    "Total search engine requests",
    ["operation", "status"],
)

SEARCH_LATENCY = Histogram(
    "smart_search_latency_seconds",
    "Search engine operation latency",
    ["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5),
)

SEARCH_RESULTS = Histogram(
    "smart_search_results",
    "Number of results returned per operation",
    ["operation"],
    buckets=(0, 1, 2, 5, 10, 20, 50),
)

INDEX_DOC_COUNT = Gauge(
    "smart_search_index_documents",
    "Products in the search index",
)

INDEX_TOKEN_COUNT = Gauge(
    "smart_search_index_tokens",
    "Distinct tokens in the inverted index",
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for metrics endpoint."""
    return CONTENT_TYPE_LATEST
