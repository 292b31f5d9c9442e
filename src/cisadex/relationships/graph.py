"""Coordination relationship graph.

This module provides the RelationshipGraph class, which combines declared
relationships with inferred coordination into an adjacency structure and a
symmetric coordination-strength matrix, then answers graph queries.
"""

from collections import deque
from collections.abc import Sequence

from cisadex.config.settings import Settings, get_settings
from cisadex.core.logging import get_logger
from cisadex.entity.loader import index_entities
from cisadex.entity.types import (
    FederalEntity,
    RelationshipType,
    get_relationship_descriptor,
)
from cisadex.observability.metrics import (
    observe_build_duration,
    record_relationship_query,
    set_graph_edge_count,
)

from .inference import (
    has_complementary_functions,
    has_critical_infrastructure_coordination,
    has_cyber_coordination,
    has_overlapping_sectors,
    infers_agency_coordination,
    infers_functional_coordination,
    infers_geographic_coordination,
    is_same_state,
    shares_jurisdiction_state,
)
from .types import (
    ConnectedEntity,
    CoordinationOpportunity,
    GraphConfig,
    RelationshipStatistics,
)

logger = get_logger(__name__)

MOST_CONNECTED_LIMIT = 10


class RelationshipGraph:
    """Coordination graph over one entity snapshot.

    Edges are keyed by entity id. Bidirectional relationship types add the
    reverse edge; parent and child do not. Strength is stored for both
    orderings of a pair and only ever rises to the strongest relation
    discovered, so get_coordination_strength is symmetric even when the
    adjacency edge is one-way.

    Usage:
        graph = RelationshipGraph(entities)
        partners = graph.get_related_entities("fbi-boston")
        network = graph.get_coordination_network("fbi-boston", max_depth=2)
        for opportunity in graph.find_coordination_opportunities("fbi-boston"):
            print(opportunity.entity.name, opportunity.reason, opportunity.strength)
    """

    def __init__(
        self,
        entities: Sequence[FederalEntity],
        config: GraphConfig | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Build the graph.

        Args:
            entities: Complete entity collection.
            config: Optional inference rule selection.
            settings: Optional settings (defaults to get_settings()).

        Raises:
            DuplicateEntityIdError: If two entities share an id.
        """
        self._config = config or GraphConfig()
        self._settings = settings or get_settings()
        self._entities: tuple[FederalEntity, ...] = tuple(entities)
        self._by_id = index_entities(self._entities)

        # entity id -> neighbor ids (dict keys keep discovery order)
        self._adjacency: dict[str, dict[str, None]] = {}
        # entity id -> neighbor id -> strongest relation strength
        self._strength: dict[str, dict[str, float]] = {}

        with observe_build_duration("relationship_graph"):
            self._build()

        edge_count = self._edge_count()
        set_graph_edge_count(edge_count)
        logger.info(
            "relationship_graph_built",
            entity_count=len(self._entities),
            node_count=len(self._adjacency),
            edge_count=edge_count,
            config=self._config.model_dump(),
        )

    @property
    def config(self) -> GraphConfig:
        """Get the graph configuration."""
        return self._config

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------

    def _build(self) -> None:
        for entity in self._entities:
            self._adjacency.setdefault(entity.id, {})

            for relationship in entity.relationships:
                if not relationship.active:
                    continue
                self._add_relationship(
                    entity.id, relationship.related_entity_id, relationship.relationship_type
                )

            for other in self._entities:
                if other.id == entity.id:
                    continue
                if self._config.infer_agency_structure and infers_agency_coordination(
                    entity, other
                ):
                    self._add_relationship(entity.id, other.id, RelationshipType.COORDINATION)
                if self._config.infer_geographic and infers_geographic_coordination(entity, other):
                    self._add_relationship(entity.id, other.id, RelationshipType.COORDINATION)
                if self._config.infer_functional and infers_functional_coordination(entity, other):
                    self._add_relationship(entity.id, other.id, RelationshipType.COORDINATION)

    def _add_relationship(self, from_id: str, to_id: str, relationship_type: str) -> None:
        descriptor = get_relationship_descriptor(relationship_type)
        if descriptor is None:
            logger.warning(
                "unknown_relationship_type_skipped",
                from_entity_id=from_id,
                to_entity_id=to_id,
                relationship_type=str(relationship_type),
            )
            return

        self._adjacency.setdefault(from_id, {})[to_id] = None
        reverse = self._adjacency.setdefault(to_id, {})
        if descriptor.bidirectional:
            reverse[from_id] = None

        forward_strength = self._strength.setdefault(from_id, {})
        reverse_strength = self._strength.setdefault(to_id, {})
        forward_strength[to_id] = max(forward_strength.get(to_id, 0.0), descriptor.strength)
        reverse_strength[from_id] = max(reverse_strength.get(from_id, 0.0), descriptor.strength)

    def _edge_count(self) -> int:
        return sum(len(self._adjacency.get(e.id, ())) for e in self._entities) // 2

    def _resolve(self, entity_ids: Sequence[str]) -> list[FederalEntity]:
        return [self._by_id[i] for i in entity_ids if i in self._by_id]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def neighbor_ids(self, entity_id: str) -> list[str]:
        """Ids adjacent to an entity, including ids with no record."""
        return list(self._adjacency.get(entity_id, ()))

    def get_related_entities(self, entity_id: str) -> list[FederalEntity]:
        """Entities one hop from entity_id; unresolvable ids are dropped."""
        record_relationship_query("related_entities")
        return self._resolve(self.neighbor_ids(entity_id))

    def get_coordination_network(
        self, entity_id: str, max_depth: int | None = None
    ) -> list[FederalEntity]:
        """Entities reachable within max_depth hops, excluding the origin.

        Depth counts edges from the origin: max_depth 0 returns nothing and
        max_depth 1 returns the direct neighbors.

        Args:
            entity_id: Origin entity.
            max_depth: Hop limit (settings default when None).

        Returns:
            Reachable entities in breadth-first order.
        """
        record_relationship_query("coordination_network")
        if max_depth is None:
            max_depth = self._settings.network_max_depth

        visited: set[str] = set()
        network: list[str] = []
        queue: deque[tuple[str, int]] = deque([(entity_id, 0)])

        while queue:
            current_id, depth = queue.popleft()
            if current_id in visited or depth > max_depth:
                continue

            visited.add(current_id)
            if depth > 0:
                network.append(current_id)

            for neighbor_id in self._adjacency.get(current_id, ()):
                if neighbor_id not in visited:
                    queue.append((neighbor_id, depth + 1))

        return self._resolve(network)

    def get_coordination_strength(self, entity_id_a: str, entity_id_b: str) -> float:
        """Strongest recorded relation between two entities, 0.0 if none."""
        return self._strength.get(entity_id_a, {}).get(entity_id_b, 0.0)

    def get_entities_by_relationship_type(
        self, entity_id: str, relationship_type: RelationshipType | str
    ) -> list[FederalEntity]:
        """Entities named by an entity's active declared relationships of one type.

        Raises:
            ValueError: If relationship_type is not a RelationshipType name.
        """
        record_relationship_query("relationship_type")
        entity = self._by_id.get(entity_id)
        if entity is None:
            return []

        wanted = RelationshipType(relationship_type).value
        related_ids = [
            rel.related_entity_id
            for rel in entity.relationships
            if rel.active and rel.relationship_type == wanted
        ]
        return self._resolve(related_ids)

    def find_coordination_opportunities(self, entity_id: str) -> list[CoordinationOpportunity]:
        """Unconnected entities worth coordinating with, strongest first.

        Same-state entities of a different agency score for complementary law
        enforcement functions or overlapping sectors; entities with an
        overlapping jurisdiction score for cyber or critical infrastructure
        roles. Each candidate keeps its highest score, with the jurisdiction
        reason reported when both rules score the same. Only scores above the
        configured threshold are returned.

        Args:
            entity_id: Entity to find partners for.

        Returns:
            Opportunities sorted by descending strength.
        """
        record_relationship_query("coordination_opportunities")
        entity = self._by_id.get(entity_id)
        if entity is None:
            return []

        tuning = self._settings.coordination
        connected = set(self._adjacency.get(entity_id, ()))
        connected.add(entity_id)

        opportunities: list[CoordinationOpportunity] = []
        for other in self._entities:
            if other.id in connected:
                continue

            # (score, reason) per rule that fired, in rule order
            scored: list[tuple[float, str]] = []

            if is_same_state(entity, other) and entity.parent_agency != other.parent_agency:
                if has_complementary_functions(entity, other):
                    scored.append(
                        (
                            tuning.same_state_complementary_score,
                            "Same state with complementary law enforcement functions",
                        )
                    )
                elif has_overlapping_sectors(entity, other):
                    scored.append(
                        (tuning.same_state_sector_score, "Same state with overlapping sectors")
                    )

            if shares_jurisdiction_state(entity, other):
                if has_cyber_coordination(entity, other):
                    scored.append(
                        (
                            tuning.jurisdiction_cyber_score,
                            "Overlapping jurisdiction with cyber capabilities",
                        )
                    )
                elif has_critical_infrastructure_coordination(entity, other):
                    scored.append(
                        (
                            tuning.jurisdiction_ci_score,
                            "Overlapping jurisdiction with CI protection roles",
                        )
                    )

            if not scored:
                continue
            strength, reason = scored[0]
            for score, why in scored[1:]:
                # jurisdiction rules take the reason on equal scores
                if score >= strength:
                    strength, reason = score, why
            if strength > tuning.opportunity_threshold:
                opportunities.append(
                    CoordinationOpportunity(entity=other, reason=reason, strength=strength)
                )

        opportunities.sort(key=lambda o: o.strength, reverse=True)
        return opportunities

    def get_relationship_statistics(self) -> RelationshipStatistics:
        """Edge totals, declared types and the most connected entities."""
        record_relationship_query("statistics")
        by_type: dict[str, int] = {}
        degrees: list[tuple[FederalEntity, int]] = []
        degree_total = 0

        for entity in self._entities:
            degree = len(self._adjacency.get(entity.id, ()))
            degrees.append((entity, degree))
            degree_total += degree
            for rel in entity.relationships:
                if rel.active:
                    by_type[rel.relationship_type] = by_type.get(rel.relationship_type, 0) + 1

        degrees.sort(key=lambda item: item[1], reverse=True)
        return RelationshipStatistics(
            total_relationships=degree_total // 2,
            by_type=by_type,
            average_connections=degree_total / len(self._entities) if self._entities else 0.0,
            most_connected_entities=[
                ConnectedEntity(entity=entity, connections=degree)
                for entity, degree in degrees[:MOST_CONNECTED_LIMIT]
            ],
        )
