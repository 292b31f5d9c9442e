"""Federal entity search engine.

This module provides the FederalEntitySearchEngine class, which answers
structured searches over one immutable entity snapshot.
"""

import time
from collections.abc import Sequence

from cisadex.config.settings import Settings, get_settings
from cisadex.core.logging import get_logger, log_engine_operation
from cisadex.entity.loader import index_entities
from cisadex.entity.types import FederalEntity, OperatingHours
from cisadex.geo.distance import entity_distance
from cisadex.observability.metrics import observe_build_duration, record_search

from .clustering import generate_clusters
from .filters import (
    apply_advanced_search,
    apply_geographic_filters,
    apply_operational_filters,
    apply_organizational_filters,
)
from .index import TextIndex
from .types import (
    AdvancedSearch,
    EntitySearchResponse,
    GeographicFilter,
    MapCluster,
    OperationalFilter,
    OrganizationalFilter,
    SearchCriteria,
    SearchStatistics,
)

logger = get_logger(__name__)


class FederalEntitySearchEngine:
    """Search, clustering and suggestion queries over an entity collection.

    The text index is built eagerly at construction; every public method is
    a read-only query afterwards.

    Usage:
        engine = FederalEntitySearchEngine(entities)
        response = engine.search(
            SearchCriteria(
                text="cyber",
                operational=OperationalFilter(by_function=["incident_response"]),
                zoom_level=4,
            )
        )
        for cluster in response.clusters:
            print(cluster.count, cluster.primary_sector)
    """

    def __init__(
        self,
        entities: Sequence[FederalEntity],
        settings: Settings | None = None,
    ) -> None:
        """Initialize the search engine.

        Args:
            entities: Complete entity collection.
            settings: Optional settings (defaults to get_settings()).

        Raises:
            DuplicateEntityIdError: If two entities share an id.
        """
        self._settings = settings or get_settings()
        self._entities: tuple[FederalEntity, ...] = tuple(entities)
        self._by_id = index_entities(self._entities)

        with observe_build_duration("text_index"):
            self._text_index = TextIndex(
                self._entities,
                max_substring_candidates=self._settings.max_substring_candidates,
            )

    @property
    def entities(self) -> tuple[FederalEntity, ...]:
        """The entity collection in input order."""
        return self._entities

    @property
    def text_index(self) -> TextIndex:
        """The inverted token index."""
        return self._text_index

    def get_entity(self, entity_id: str) -> FederalEntity | None:
        """Look up an entity by id."""
        return self._by_id.get(entity_id)

    def search(self, criteria: SearchCriteria | None = None) -> EntitySearchResponse:
        """Run the filter pipeline and cluster the result.

        Facets run in a fixed order: text, geographic, operational,
        organizational, advanced. Absent facets do not filter.

        Args:
            criteria: Search criteria (empty criteria returns everything).

        Returns:
            EntitySearchResponse with matches and clusters.
        """
        criteria = criteria or SearchCriteria()
        start = time.perf_counter()

        results: list[FederalEntity] = list(self._entities)

        if criteria.text:
            results = self.apply_text_search(results, criteria.text)

        if criteria.geographic is not None:
            results = self.apply_geographic_filters(results, criteria.geographic)

        if criteria.operational is not None:
            results = self.apply_operational_filters(results, criteria.operational)

        if criteria.organizational is not None:
            results = self.apply_organizational_filters(results, criteria.organizational)

        if criteria.advanced is not None:
            results = self.apply_advanced_search(results, criteria.advanced)

        zoom_level = (
            criteria.zoom_level
            if criteria.zoom_level is not None
            else self._settings.default_zoom_level
        )
        clusters = self.generate_clusters(results, zoom_level)

        elapsed = time.perf_counter() - start
        record_search(elapsed, len(results))
        log_engine_operation(
            logger,
            "search",
            elapsed * 1000,
            len(results),
            cluster_count=len(clusters),
            zoom_level=zoom_level,
        )

        return EntitySearchResponse(
            entities=results,
            total_count=len(results),
            search_time=elapsed * 1000,
            applied_filters=criteria,
            clusters=clusters,
        )

    def apply_text_search(
        self, entities: Sequence[FederalEntity], query: str
    ) -> list[FederalEntity]:
        """Keep entities matching any query token through the text index."""
        return self._text_index.search(entities, query)

    def apply_geographic_filters(
        self, entities: Sequence[FederalEntity], filters: GeographicFilter
    ) -> list[FederalEntity]:
        """Apply the geographic facet."""
        return apply_geographic_filters(entities, filters)

    def apply_operational_filters(
        self, entities: Sequence[FederalEntity], filters: OperationalFilter
    ) -> list[FederalEntity]:
        """Apply the operational facet."""
        return apply_operational_filters(entities, filters)

    def apply_organizational_filters(
        self, entities: Sequence[FederalEntity], filters: OrganizationalFilter
    ) -> list[FederalEntity]:
        """Apply the organizational facet."""
        return apply_organizational_filters(entities, filters)

    def apply_advanced_search(
        self, entities: Sequence[FederalEntity], filters: AdvancedSearch
    ) -> list[FederalEntity]:
        """Apply the advanced free-text facet."""
        return apply_advanced_search(entities, filters)

    def generate_clusters(
        self, entities: Sequence[FederalEntity], zoom_level: int | None = None
    ) -> list[MapCluster]:
        """Cluster entities for a zoom level (settings default when None)."""
        if zoom_level is None:
            zoom_level = self._settings.default_zoom_level
        return generate_clusters(entities, zoom_level)

    def get_entities_by_proximity(
        self, lat: float, lng: float, radius: float | None = None
    ) -> list[FederalEntity]:
        """Entities within radius miles of a point, nearest first.

        Args:
            lat: Latitude of the point.
            lng: Longitude of the point.
            radius: Radius in miles (settings default when None).

        Returns:
            Entities sorted by ascending distance; ties keep collection order.
        """
        if radius is None:
            radius = self._settings.default_proximity_radius_miles

        in_range: list[tuple[float, FederalEntity]] = []
        for entity in self._entities:
            distance = entity_distance(entity, lat, lng)
            if distance is not None and distance <= radius:
                in_range.append((distance, entity))

        in_range.sort(key=lambda item: item[0])
        return [entity for _, entity in in_range]

    def get_search_suggestions(self, query: str, limit: int | None = None) -> list[str]:
        """Autocomplete strings containing the query.

        Candidates are entity names, "city, state" pairs and agency names, in
        collection order without duplicates.

        Args:
            query: Partial input.
            limit: Maximum suggestions (settings default when None).

        Returns:
            Up to limit suggestion strings.
        """
        if limit is None:
            limit = self._settings.suggestion_limit
        if not query or len(query) < self._settings.suggestion_min_query_length:
            return []

        needle = query.lower()
        suggestions: dict[str, None] = {}

        for entity in self._entities:
            if needle in entity.name.lower():
                suggestions[entity.name] = None
            if needle in entity.location.city.lower():
                suggestions[f"{entity.location.city}, {entity.location.state}"] = None
            if needle in entity.parent_agency.lower():
                suggestions[entity.parent_agency] = None

        return list(suggestions)[:limit]

    def get_search_statistics(self) -> SearchStatistics:
        """Aggregate counts over the whole collection."""
        stats = SearchStatistics(total_entities=len(self._entities))
        capability_total = 0

        for entity in self._entities:
            agency = entity.parent_agency
            stats.by_agency[agency] = stats.by_agency.get(agency, 0) + 1
            for sector in entity.sectors:
                stats.by_sector[sector] = stats.by_sector.get(sector, 0) + 1
            for function in entity.functions:
                stats.by_function[function] = stats.by_function.get(function, 0) + 1
            state = entity.location.state
            stats.by_state[state] = stats.by_state.get(state, 0) + 1
            stats.by_type[entity.type] = stats.by_type.get(entity.type, 0) + 1

            if entity.status.hours == OperatingHours.ALWAYS.value:
                stats.operational_24_7 += 1
            if entity.status.public_access:
                stats.public_access += 1
            capability_total += len(entity.capabilities)

        if self._entities:
            stats.average_capabilities = capability_total / len(self._entities)
        return stats
