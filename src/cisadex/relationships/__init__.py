"""Coordination relationship graph module.

Combines declared relationships with agency-structure, geographic and
functional inference, and answers neighbor, network-reachability and
coordination-opportunity queries.

Usage:
    from cisadex.relationships import RelationshipGraph

    graph = RelationshipGraph(entities)
    strength = graph.get_coordination_strength("cisa-region-1", "fbi-boston")
"""

from .graph import MOST_CONNECTED_LIMIT, RelationshipGraph
from .types import (
    ConnectedEntity,
    CoordinationOpportunity,
    GraphConfig,
    RelationshipStatistics,
)

__all__ = [
    "MOST_CONNECTED_LIMIT",
    "ConnectedEntity",
    "CoordinationOpportunity",
    "GraphConfig",
    "RelationshipGraph",
    "RelationshipStatistics",
]
