"""Filter stages of the search pipeline.

Each stage keeps input order and only removes entities, so stages compose
by intersection and applying a stage twice equals applying it once.
"""

from collections.abc import Sequence

from cisadex.entity.types import FederalEntity
from cisadex.geo.distance import entity_distance
from cisadex.geo.regions import entity_states, states_for_region

from .index import tokenize
from .types import AdvancedSearch, GeographicFilter, OperationalFilter, OrganizationalFilter


def _shares_any(values: Sequence[str], wanted: Sequence[str]) -> bool:
    return not set(values).isdisjoint(wanted)


def apply_geographic_filters(
    entities: Sequence[FederalEntity],
    filters: GeographicFilter,
) -> list[FederalEntity]:
    """Filter by state, region and radius.

    The radius filter drops entities without valid coordinates.
    """
    filtered = list(entities)

    if filters.by_state:
        wanted_states = set(filters.by_state)
        filtered = [e for e in filtered if not entity_states(e).isdisjoint(wanted_states)]

    if filters.by_region:
        region_states: set[str] = set()
        for region in filters.by_region:
            region_states.update(states_for_region(region))
        filtered = [e for e in filtered if not entity_states(e).isdisjoint(region_states)]

    if filters.by_radius is not None:
        center = filters.by_radius.center
        radius = filters.by_radius.radius
        kept = []
        for entity in filtered:
            distance = entity_distance(entity, center.lat, center.lng)
            if distance is not None and distance <= radius:
                kept.append(entity)
        filtered = kept

    return filtered


def apply_operational_filters(
    entities: Sequence[FederalEntity],
    filters: OperationalFilter,
) -> list[FederalEntity]:
    """Filter by sector, function, capability, status and hours."""
    filtered = list(entities)

    if filters.by_sector:
        filtered = [e for e in filtered if _shares_any(e.sectors, filters.by_sector)]

    if filters.by_function:
        filtered = [e for e in filtered if _shares_any(e.functions, filters.by_function)]

    if filters.by_capability:
        filtered = [e for e in filtered if _shares_any(e.capabilities, filters.by_capability)]

    if filters.by_status:
        wanted = set(filters.by_status)
        filtered = [e for e in filtered if e.status.state in wanted]

    if filters.by_hours:
        filtered = [e for e in filtered if e.status.hours in filters.by_hours]

    return filtered


def apply_organizational_filters(
    entities: Sequence[FederalEntity],
    filters: OrganizationalFilter,
) -> list[FederalEntity]:
    """Filter by agency, office type, operational flag and public access."""
    filtered = list(entities)

    if filters.by_agency:
        filtered = [e for e in filtered if e.parent_agency in filters.by_agency]

    if filters.by_office_type:
        filtered = [e for e in filtered if e.type in filters.by_office_type]

    if filters.by_operational_status is not None:
        filtered = [
            e for e in filtered if e.status.operational == filters.by_operational_status
        ]

    if filters.by_public_access is not None:
        filtered = [e for e in filtered if e.status.public_access == filters.by_public_access]

    return filtered


def _keyword_text(entity: FederalEntity) -> str:
    parts = [entity.name, entity.jurisdiction.coverage, *entity.special_programs]
    if entity.notes:
        parts.append(entity.notes)
    return " ".join(parts).lower()


def apply_advanced_search(
    entities: Sequence[FederalEntity],
    filters: AdvancedSearch,
) -> list[FederalEntity]:
    """Substring match of query tokens against capabilities, specialties and keywords.

    Blank fields do not filter.
    """
    filtered = list(entities)

    if filters.capabilities and filters.capabilities.strip():
        tokens = tokenize(filters.capabilities)
        filtered = [
            e
            for e in filtered
            if any(token in cap.lower() for token in tokens for cap in e.capabilities)
        ]

    if filters.specialties and filters.specialties.strip():
        tokens = tokenize(filters.specialties)
        filtered = [
            e
            for e in filtered
            if any(
                token in spec.lower() for token in tokens for spec in e.jurisdiction.specialties
            )
        ]

    if filters.keywords and filters.keywords.strip():
        tokens = tokenize(filters.keywords)
        filtered = [e for e in filtered if any(token in _keyword_text(e) for token in tokens)]

    return filtered
