"""Type definitions for the coordination relationship graph."""

from pydantic import BaseModel, Field

from cisadex.entity.types import FederalEntity


class GraphConfig(BaseModel):
    """Which inference rules run when the graph is built.

    Declared relationships are always applied. Turning every rule off yields
    a graph of declared relationships only.

    Attributes:
        infer_agency_structure: Regional/field office coordination within an agency.
        infer_geographic: Same-area law enforcement and emergency coordination.
        infer_functional: Shared-tag cyber and critical infrastructure coordination.
    """

    infer_agency_structure: bool = True
    infer_geographic: bool = True
    infer_functional: bool = True


class CoordinationOpportunity(BaseModel):
    """Suggested coordination partner that is not yet connected.

    Attributes:
        entity: The candidate partner.
        reason: Human-readable rationale for the highest-scoring rule.
        strength: Heuristic score in (threshold, 1].
    """

    entity: FederalEntity
    reason: str
    strength: float = Field(ge=0.0, le=1.0)


class ConnectedEntity(BaseModel):
    """An entity with its graph degree."""

    entity: FederalEntity
    connections: int = 0


class RelationshipStatistics(BaseModel):
    """Aggregate counts over the relationship graph.

    Attributes:
        total_relationships: Sum of out-degrees halved to undo mirrored edges.
        by_type: Active declared relationships grouped by type.
        average_connections: Mean out-degree per entity.
        most_connected_entities: Top ten entities by out-degree.
    """

    total_relationships: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)
    average_connections: float = 0.0
    most_connected_entities: list[ConnectedEntity] = Field(default_factory=list)
