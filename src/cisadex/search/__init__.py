"""Entity search module.

Provides the inverted text index, the faceted filter pipeline and map
clustering.

Usage:
    from cisadex.search import FederalEntitySearchEngine, SearchCriteria, GeographicFilter

    engine = FederalEntitySearchEngine(entities)
    response = engine.search(
        SearchCriteria(text="forensics", geographic=GeographicFilter(by_region=["Region I"]))
    )
    print(response.total_count, len(response.clusters))
"""

from .clustering import CLUSTER_RADIUS_MILES, cluster_radius, generate_clusters
from .engine import FederalEntitySearchEngine
from .index import TextIndex, searchable_text, tokenize
from .types import (
    AdvancedSearch,
    EntitySearchResponse,
    GeographicFilter,
    MapCluster,
    OperationalFilter,
    OrganizationalFilter,
    RadiusFilter,
    SearchCriteria,
    SearchStatistics,
)

__all__ = [
    # Engine
    "FederalEntitySearchEngine",
    # Index
    "TextIndex",
    "searchable_text",
    "tokenize",
    # Clustering
    "CLUSTER_RADIUS_MILES",
    "cluster_radius",
    "generate_clusters",
    # Types
    "AdvancedSearch",
    "EntitySearchResponse",
    "GeographicFilter",
    "MapCluster",
    "OperationalFilter",
    "OrganizationalFilter",
    "RadiusFilter",
    "SearchCriteria",
    "SearchStatistics",
]
