"""Prometheus metrics for search and indexing."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


SEARCH_COUNT = Counter(
    "orion_searches_total",
    "Total searches performed",
    ["search_type", "status"],
)

SEARCH_LATENCY = Histogram(
    "orion_search_latency_seconds",
    "Search latency in seconds",
    ["search_type"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

SEARCH_RESULTS = Counter(
    "orion_search_results_total",
    "Records delivered to search callbacks",
    ["search_type"],
)

RECORDS_INDEXED = Counter(
    "orion_records_indexed_total",
    "Records whose keyword set was computed",
    ["operation"],
)


@contextmanager
def track_latency(search_type: str) -> Generator[None, None, None]:
    """Observe latency and outcome of the wrapped search."""
    start = time.perf_counter()
    status = "success"
    try:
        yield
    except Exception:
        status = "error"
        raise
    finally:
        SEARCH_LATENCY.labels(search_type=search_type).observe(time.perf_counter() - start)
        SEARCH_COUNT.labels(search_type=search_type, status=status).inc()


def get_metrics() -> bytes:
    """Return metrics in Prometheus text exposition format."""
    return generate_latest()


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
