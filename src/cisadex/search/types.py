"""Type definitions for entity search.

Search criteria are grouped into optional facets; a facet that is None,
or a list filter that is empty, does not filter.
"""

from pydantic import BaseModel, Field

from cisadex.entity.types import Coordinates, FederalEntity, OperationalState


class RadiusFilter(BaseModel):
    """Keep entities within radius miles of center."""

    center: Coordinates
    radius: float = Field(ge=0.0)


class GeographicFilter(BaseModel):
    """Geographic facet.

    Attributes:
        by_state: State codes matched against location or jurisdiction states.
        by_region: FEMA region names (e.g. "Region IV").
        by_radius: Great-circle distance limit around a point.
    """

    by_state: list[str] | None = None
    by_region: list[str] | None = None
    by_radius: RadiusFilter | None = None


class OperationalFilter(BaseModel):
    """Operational facet. Tag filters pass an entity sharing any tag."""

    by_sector: list[str] | None = None
    by_function: list[str] | None = None
    by_capability: list[str] | None = None
    by_status: list[OperationalState] | None = None
    by_hours: list[str] | None = None


class OrganizationalFilter(BaseModel):
    """Organizational facet."""

    by_agency: list[str] | None = None
    by_office_type: list[str] | None = None
    by_operational_status: bool | None = None
    by_public_access: bool | None = None


class AdvancedSearch(BaseModel):
    """Free-text facet; each field passes entities where any token is a substring."""

    capabilities: str | None = None
    specialties: str | None = None
    keywords: str | None = None


class SearchCriteria(BaseModel):
    """Structured search request.

    Attributes:
        text: Free text matched through the inverted index.
        geographic: Geographic facet.
        operational: Operational facet.
        organizational: Organizational facet.
        advanced: Free-text facet over capabilities, specialties and keywords.
        zoom_level: Map zoom used for clustering (settings default when None).
    """

    text: str | None = None
    geographic: GeographicFilter | None = None
    operational: OperationalFilter | None = None
    organizational: OrganizationalFilter | None = None
    advanced: AdvancedSearch | None = None
    zoom_level: int | None = None


class MapCluster(BaseModel):
    """Spatial group of entities for one zoom level."""

    coordinates: Coordinates
    count: int
    entity_ids: list[str] = Field(default_factory=list)
    primary_sector: str | None = None
    primary_function: str | None = None
    zoom_level: int


class EntitySearchResponse(BaseModel):
    """Result of a search call.

    Attributes:
        entities: Matching entities in collection order.
        total_count: Number of matching entities.
        search_time: Wall time of the call in milliseconds.
        applied_filters: The criteria that produced this result.
        clusters: Clusters of the matching entities at the requested zoom.
    """

    entities: list[FederalEntity] = Field(default_factory=list)
    total_count: int = 0
    search_time: float = 0.0
    applied_filters: SearchCriteria = Field(default_factory=SearchCriteria)
    clusters: list[MapCluster] = Field(default_factory=list)


class SearchStatistics(BaseModel):
    """Aggregate counts over the whole collection."""

    total_entities: int = 0
    by_agency: dict[str, int] = Field(default_factory=dict)
    by_sector: dict[str, int] = Field(default_factory=dict)
    by_function: dict[str, int] = Field(default_factory=dict)
    by_state: dict[str, int] = Field(default_factory=dict)
    by_type: dict[str, int] = Field(default_factory=dict)
    operational_24_7: int = 0
    public_access: int = 0
    average_capabilities: float = 0.0
