"""Federal entity intelligence facade.

This module provides FederalEntityIntelligence, which builds the text index,
the relationship graph and the icon resolver for one entity snapshot and
exposes every query through a single object. Refreshing data means building
a new instance from a new collection.
"""

from collections.abc import Sequence
from pathlib import Path

from cisadex.config.settings import Settings, get_settings
from cisadex.core.logging import get_logger
from cisadex.entity.loader import load_entities
from cisadex.entity.types import FederalEntity, RelationshipType
from cisadex.entity.validation import EntityValidator, ValidationResult
from cisadex.icons import (
    IconConfig,
    IconInfo,
    IconSize,
    determine_entity_icon,
    get_cluster_icon,
    get_icon_info,
    get_icon_size,
)
from cisadex.observability.metrics import set_entity_count
from cisadex.relationships import (
    CoordinationOpportunity,
    GraphConfig,
    RelationshipGraph,
    RelationshipStatistics,
)
from cisadex.search import (
    EntitySearchResponse,
    FederalEntitySearchEngine,
    MapCluster,
    SearchCriteria,
    SearchStatistics,
)

logger = get_logger(__name__)


class FederalEntityIntelligence:
    """Search, relationship and icon queries over one entity snapshot.

    All derived structures are built at construction. Every method after
    that is a read-only query, so one instance can serve any number of
    readers.

    Usage:
        intel = FederalEntityIntelligence(load_entities("entities.json"))
        response = intel.search(SearchCriteria(text="cyber", zoom_level=3))
        for cluster in response.clusters:
            members = [intel.get_entity(i) for i in cluster.entity_ids]
            print(intel.get_icon_info(intel.get_cluster_icon(members)).label)
    """

    def __init__(
        self,
        entities: Sequence[FederalEntity],
        settings: Settings | None = None,
        graph_config: GraphConfig | None = None,
    ) -> None:
        """Build the search engine and relationship graph.

        Args:
            entities: Complete entity collection.
            settings: Optional settings (defaults to get_settings()).
            graph_config: Optional inference rule selection.

        Raises:
            DuplicateEntityIdError: If two entities share an id.
        """
        self._settings = settings or get_settings()
        self._entities: tuple[FederalEntity, ...] = tuple(entities)
        self._search = FederalEntitySearchEngine(self._entities, settings=self._settings)
        self._graph = RelationshipGraph(
            self._entities, config=graph_config, settings=self._settings
        )

        set_entity_count(len(self._entities))
        logger.info("intelligence_engine_ready", entity_count=len(self._entities))

    @property
    def entities(self) -> tuple[FederalEntity, ...]:
        """The entity collection in input order."""
        return self._entities

    @property
    def search_engine(self) -> FederalEntitySearchEngine:
        return self._search

    @property
    def graph(self) -> RelationshipGraph:
        return self._graph

    def get_entity(self, entity_id: str) -> FederalEntity | None:
        """Look up an entity by id."""
        return self._search.get_entity(entity_id)

    # Search

    def search(self, criteria: SearchCriteria | None = None) -> EntitySearchResponse:
        """Run a faceted search and cluster the result."""
        return self._search.search(criteria)

    def generate_clusters(
        self, entities: Sequence[FederalEntity], zoom_level: int | None = None
    ) -> list[MapCluster]:
        return self._search.generate_clusters(entities, zoom_level)

    def get_search_suggestions(self, query: str, limit: int | None = None) -> list[str]:
        return self._search.get_search_suggestions(query, limit)

    def get_entities_by_proximity(
        self, lat: float, lng: float, radius: float | None = None
    ) -> list[FederalEntity]:
        return self._search.get_entities_by_proximity(lat, lng, radius)

    def get_search_statistics(self) -> SearchStatistics:
        return self._search.get_search_statistics()

    # Relationships

    def get_related_entities(self, entity_id: str) -> list[FederalEntity]:
        return self._graph.get_related_entities(entity_id)

    def get_coordination_network(
        self, entity_id: str, max_depth: int | None = None
    ) -> list[FederalEntity]:
        return self._graph.get_coordination_network(entity_id, max_depth)

    def get_coordination_strength(self, entity_id_a: str, entity_id_b: str) -> float:
        return self._graph.get_coordination_strength(entity_id_a, entity_id_b)

    def find_coordination_opportunities(self, entity_id: str) -> list[CoordinationOpportunity]:
        return self._graph.find_coordination_opportunities(entity_id)

    def get_entities_by_relationship_type(
        self, entity_id: str, relationship_type: RelationshipType | str
    ) -> list[FederalEntity]:
        return self._graph.get_entities_by_relationship_type(entity_id, relationship_type)

    def get_relationship_statistics(self) -> RelationshipStatistics:
        return self._graph.get_relationship_statistics()

    # Icons

    def determine_entity_icon(self, entity: FederalEntity) -> IconConfig:
        return determine_entity_icon(entity)

    def get_cluster_icon(self, entities: Sequence[FederalEntity]) -> IconConfig:
        """Cluster icon using the configured dominance thresholds."""
        return get_cluster_icon(entities, self._settings.coordination)

    def get_icon_info(self, config: IconConfig) -> IconInfo:
        return get_icon_info(config)

    def get_icon_size(self, zoom_level: int, priority: int) -> IconSize:
        return get_icon_size(zoom_level, priority)

    # Data quality

    def validate(self) -> ValidationResult:
        """Validate the whole collection without rejecting anything."""
        result = EntityValidator().validate_collection(self._entities)
        if result.has_errors or result.has_warnings:
            logger.warning(
                "entity_validation_issues",
                error_count=len(result.errors),
                warning_count=len(result.warnings),
            )
        return result


def create_engine(
    entities: Sequence[FederalEntity],
    settings: Settings | None = None,
    graph_config: GraphConfig | None = None,
) -> FederalEntityIntelligence:
    """Factory function to create a FederalEntityIntelligence.

    Args:
        entities: Complete entity collection.
        settings: Optional settings.
        graph_config: Optional inference rule selection.

    Returns:
        Ready FederalEntityIntelligence instance.
    """
    return FederalEntityIntelligence(entities, settings=settings, graph_config=graph_config)


def load_engine(
    path: str | Path,
    settings: Settings | None = None,
    graph_config: GraphConfig | None = None,
) -> FederalEntityIntelligence:
    """Load a JSON entity file and build an engine over it.

    Raises:
        EntityLoadError: If the file cannot be loaded.
        DuplicateEntityIdError: If two entities share an id.
    """
    return create_engine(load_entities(path), settings=settings, graph_config=graph_config)
