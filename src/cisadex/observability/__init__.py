"""Observability module for Cisadex.

Provides Prometheus metrics for search latency, build time and
relationship query volume.
"""

from cisadex.observability.metrics import (
    BUILD_DURATION,
    ENTITY_COUNT,
    GRAPH_EDGE_COUNT,
    RELATIONSHIP_QUERY_COUNT,
    SEARCH_DURATION,
    SEARCH_RESULT_COUNT,
    get_metrics,
    observe_build_duration,
    record_relationship_query,
    record_search,
    set_entity_count,
    set_graph_edge_count,
)

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
