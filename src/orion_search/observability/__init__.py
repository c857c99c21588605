"""Observability module: structured logging, tracing and metrics."""

from orion_search.observability.bootstrap import setup_observability
from orion_search.observability.logging import JsonFormatter, configure_logging
from orion_search.observability.metrics import (
    RECORDS_INDEXED,
    SEARCH_COUNT,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from orion_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "RECORDS_INDEXED",
    "SEARCH_COUNT",
    "SEARCH_LATENCY",
    "SEARCH_RESULTS",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_tracer",
    "init_tracing",
    "setup_observability",
    "track_latency",
]
