"""Prometheus metrics for Cisadex observability.

This module provides Prometheus metrics for monitoring:
- Search operations (duration, result counts)
- Index and graph builds (duration, size)
- Relationship queries (per-operation counts)
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from cisadex.config.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = [
    "BUILD_DURATION",
    "ENTITY_COUNT",
    "GRAPH_EDGE_COUNT",
    "RELATIONSHIP_QUERY_COUNT",
    "SEARCH_DURATION",
    "SEARCH_RESULT_COUNT",
    "get_metrics",
    "observe_build_duration",
    "record_relationship_query",
    "record_search",
    "set_entity_count",
    "set_graph_edge_count",
]

PREFIX = "cisadex"

# ============================================================================
# Search Metrics
# ============================================================================

SEARCH_DURATION = Histogram(
    f"{PREFIX}_search_duration_seconds",
    "Time to run the filter pipeline and clustering for one search",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

SEARCH_RESULT_COUNT = Histogram(
    f"{PREFIX}_search_result_count",
    "Number of entities returned per search",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000, 5000),
)

# ============================================================================
# Build Metrics
# ============================================================================

BUILD_DURATION = Histogram(
    f"{PREFIX}_build_duration_seconds",
    "Time to build an in-memory structure from the entity collection",
    ["component"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0),
)

ENTITY_COUNT = Gauge(
    f"{PREFIX}_entities",
    "Entities in the most recently built engine snapshot",
)

GRAPH_EDGE_COUNT = Gauge(
    f"{PREFIX}_graph_edges",
    "Undirected edge count of the most recently built relationship graph",
)

# ============================================================================
# Relationship Metrics
# ============================================================================

RELATIONSHIP_QUERY_COUNT = Counter(
    f"{PREFIX}_relationship_queries_total",
    "Relationship graph queries served",
    ["operation"],
)


def _enabled() -> bool:
    return get_settings().metrics_enabled


def get_metrics(registry: CollectorRegistry | None = None) -> bytes:
    """Get current metrics in Prometheus format.

    Args:
        registry: Optional custom registry (defaults to the global one).

    Returns:
        Prometheus metrics as bytes.
    """
    return generate_latest(registry or REGISTRY)


@contextmanager
def observe_build_duration(component: str) -> Generator[None, None, None]:
    """Context manager for observing a build phase.

    Args:
        component: Structure being built (text_index, relationship_graph).
    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        if _enabled():
            BUILD_DURATION.labels(component=component).observe(time.perf_counter() - start_time)


def record_search(duration_seconds: float, result_count: int) -> None:
    """Record a completed search."""
    if not _enabled():
        return
    SEARCH_DURATION.observe(duration_seconds)
    SEARCH_RESULT_COUNT.observe(result_count)


def record_relationship_query(operation: str) -> None:
    """Record a relationship graph query."""
    if not _enabled():
        return
    RELATIONSHIP_QUERY_COUNT.labels(operation=operation).inc()


def set_entity_count(count: int) -> None:
    """Set the entity count gauge."""
    if _enabled():
        ENTITY_COUNT.set(count)


def set_graph_edge_count(count: int) -> None:
    """Set the graph edge gauge."""
    if _enabled():
        GRAPH_EDGE_COUNT.set(count)
