"""HTTP entry point for the smart search engine.

Routes:
    GET /api/search?q=...        ranked products
    GET /api/autocomplete?q=...  prefix suggestions
    GET /api/analytics?q=...     strategy diagnostics for a query
    GET /health                  index size and status
    GET /metrics                 Prometheus exposition

Usage:
    SMART_SEARCH_CATALOG_PATH=products.json python -m smart_search.app
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging
import sys
from typing import Any, TypeVar

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from smart_search.catalog import CatalogLoadError, load_products_from_json
from smart_search.config import Settings
from smart_search.observability.logging import configure_logging
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
from smart_search.observability.tracing import TraceContextMiddleware, init_tracing, search_span
from smart_search.search.engine import SmartSearchEngine, build_search_engine


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _query_param(request: Request) -> str:
    return request.query_params.get("q", "")


def _run_operation(operation: str, query: str, func: Callable[[str], T]) -> T:
    """Run an engine call inside a span, recording latency and outcome.

    Called through ``asyncio.to_thread``; the worker thread runs in a copy of
    the request context, so trace ids still reach its log lines.
    """
    with search_span(operation, query):
        try:
            with track_latency(SEARCH_LATENCY, operation=operation):
                result = func(query)
        except Exception:
            SEARCH_REQUESTS.labels(operation=operation, status="error").inc()
            logger.exception("Search operation %s failed for query %r", operation, query)
            raise
    SEARCH_REQUESTS.labels(operation=operation, status="ok").inc()
    return result


def create_app(engine: SmartSearchEngine, settings: Settings | None = None) -> Starlette:
    """Build the Starlette application around an indexed engine."""

    async def search_endpoint(request: Request) -> JSONResponse:
        query = _query_param(request)
        results = await asyncio.to_thread(_run_operation, "search", query, engine.smart_search)
        SEARCH_RESULTS.labels(operation="search").observe(len(results))
        return JSONResponse([result.to_dict() for result in results])

    async def autocomplete_endpoint(request: Request) -> JSONResponse:
        query = _query_param(request)
        suggestions = await asyncio.to_thread(_run_operation, "autocomplete", query, engine.get_search_suggestions)
        SEARCH_RESULTS.labels(operation="autocomplete").observe(len(suggestions))
        return JSONResponse(suggestions)

    async def analytics_endpoint(request: Request) -> JSONResponse:
        query = _query_param(request)
        analytics = await asyncio.to_thread(_run_operation, "analytics", query, engine.get_search_analytics)
        return JSONResponse(analytics.to_dict())

    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "healthy",
                "documents": len(engine.catalog),
                "tokens": len(engine.inverted_index),
            }
        )

    def metrics_endpoint(request: Request) -> Response:
        return Response(get_metrics(), media_type=get_metrics_content_type())

    routes = [
        Route("/api/search", endpoint=search_endpoint, methods=["GET"]),
        Route("/api/autocomplete", endpoint=autocomplete_endpoint, methods=["GET"]),
        Route("/api/analytics", endpoint=analytics_endpoint, methods=["GET"]),
        Route("/health", endpoint=health_check, methods=["GET"]),
        Route("/metrics", endpoint=metrics_endpoint, methods=["GET"]),
    ]
    middleware = [
        Middleware(TraceContextMiddleware),
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type"],
        ),
    ]

    app = Starlette(routes=routes, middleware=middleware)
    app.state.engine = engine
    app.state.settings = settings

    INDEX_DOC_COUNT.set(len(engine.catalog))
    INDEX_TOKEN_COUNT.set(len(engine.inverted_index))
    return app


def build_app_from_settings(settings: Settings) -> Starlette:
    """Load the configured catalog, index it and wrap it in the HTTP app."""
    products = load_products_from_json(settings.catalog_path)
    engine = build_search_engine(products, settings.ranking_config())
    return create_app(engine, settings)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings, index the catalog, and serve."""
    import uvicorn

    settings_kwargs: dict[str, Any] = {}
    args = sys.argv[1:] if argv is None else argv
    if args:
        try:
            settings_kwargs["port"] = int(args[0])
        except ValueError:
            print(f"Invalid port number: {args[0]}. Using configured port.", file=sys.stderr)

    settings = Settings(**settings_kwargs)
    configure_logging(settings.log_level, settings.json_logs)
    init_tracing()

    logger.info("Initializing search engine from %s", settings.catalog_path)
    try:
        app = build_app_from_settings(settings)
    except CatalogLoadError as exc:
        logger.error("Failed to load catalog: %s", exc)
        return 1

    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,  # Don't let uvicorn override our logging config
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
