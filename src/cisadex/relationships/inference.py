"""Pairwise predicates used to infer coordination between entities."""

from cisadex.entity.types import (
    CriticalInfrastructureSector,
    EntityType,
    FederalEntity,
    OperationalFunction,
)

LAW_ENFORCEMENT_FUNCTIONS = frozenset(
    {
        OperationalFunction.LAW_ENFORCEMENT.value,
        OperationalFunction.INTELLIGENCE.value,
        OperationalFunction.INCIDENT_RESPONSE.value,
        OperationalFunction.CYBER_FORENSICS.value,
    }
)

EMERGENCY_FUNCTIONS = frozenset(
    {
        OperationalFunction.EMERGENCY_MANAGEMENT.value,
        OperationalFunction.INCIDENT_RESPONSE.value,
    }
)

CYBER_FUNCTIONS = frozenset(
    {
        OperationalFunction.CYBER_FORENSICS.value,
        OperationalFunction.THREAT_HUNTING.value,
        OperationalFunction.VULNERABILITY_ASSESSMENT.value,
        OperationalFunction.OT_ICS_SECURITY.value,
    }
)

CRITICAL_INFRASTRUCTURE_SECTORS = frozenset(
    {
        CriticalInfrastructureSector.ENERGY.value,
        CriticalInfrastructureSector.TRANSPORTATION_SYSTEMS.value,
        CriticalInfrastructureSector.COMMUNICATIONS.value,
        CriticalInfrastructureSector.WATER_WASTEWATER.value,
    }
)


def _has_any(tags: list[str], family: frozenset[str]) -> bool:
    return not family.isdisjoint(tags)


def shares_jurisdiction_state(a: FederalEntity, b: FederalEntity) -> bool:
    """Both jurisdictions cover at least one common state."""
    return not set(a.jurisdiction.states).isdisjoint(b.jurisdiction.states)


def is_geographically_overlapping(a: FederalEntity, b: FederalEntity) -> bool:
    """Same location state, or either jurisdiction covers the other's location state."""
    state_a = a.location.state
    state_b = b.location.state
    return bool(
        (state_a and state_a == state_b)
        or (state_a and state_a in b.jurisdiction.states)
        or (state_b and state_b in a.jurisdiction.states)
    )


def is_same_state(a: FederalEntity, b: FederalEntity) -> bool:
    """Both located in the same (non-empty) state."""
    return bool(a.location.state) and a.location.state == b.location.state


def has_complementary_functions(a: FederalEntity, b: FederalEntity) -> bool:
    """Both carry a law-enforcement-family function."""
    return _has_any(a.functions, LAW_ENFORCEMENT_FUNCTIONS) and _has_any(
        b.functions, LAW_ENFORCEMENT_FUNCTIONS
    )


def has_emergency_coordination(a: FederalEntity, b: FederalEntity) -> bool:
    """Both carry an emergency-management-family function."""
    return _has_any(a.functions, EMERGENCY_FUNCTIONS) and _has_any(b.functions, EMERGENCY_FUNCTIONS)


def has_overlapping_sectors(a: FederalEntity, b: FederalEntity) -> bool:
    """At least one sector in common."""
    return not set(a.sectors).isdisjoint(b.sectors)


def has_overlapping_functions(a: FederalEntity, b: FederalEntity) -> bool:
    """At least one function in common."""
    return not set(a.functions).isdisjoint(b.functions)


def _is_cyber(entity: FederalEntity) -> bool:
    return (
        _has_any(entity.functions, CYBER_FUNCTIONS)
        or CriticalInfrastructureSector.INFORMATION_TECHNOLOGY.value in entity.sectors
    )


def has_cyber_coordination(a: FederalEntity, b: FederalEntity) -> bool:
    """Both show cyber signals (cyber functions or the IT sector)."""
    return _is_cyber(a) and _is_cyber(b)


def has_critical_infrastructure_coordination(a: FederalEntity, b: FederalEntity) -> bool:
    """Both protect a lifeline critical infrastructure sector."""
    return _has_any(a.sectors, CRITICAL_INFRASTRUCTURE_SECTORS) and _has_any(
        b.sectors, CRITICAL_INFRASTRUCTURE_SECTORS
    )


def infers_agency_coordination(entity: FederalEntity, other: FederalEntity) -> bool:
    """Agency-structure rule, evaluated from entity's side.

    Regional offices of one agency coordinate with each other; a field office
    coordinates with a regional office of its agency whose jurisdiction
    shares a state with its own.
    """
    if entity.parent_agency != other.parent_agency:
        return False
    regional = EntityType.REGIONAL_OFFICE.value
    if entity.type == regional and other.type == regional:
        return True
    return (
        entity.type == EntityType.FIELD_OFFICE.value
        and other.type == regional
        and shares_jurisdiction_state(entity, other)
    )


def infers_geographic_coordination(entity: FederalEntity, other: FederalEntity) -> bool:
    """Geographic rule: overlapping area and law-enforcement or emergency roles."""
    return is_geographically_overlapping(entity, other) and (
        has_complementary_functions(entity, other) or has_emergency_coordination(entity, other)
    )


def infers_functional_coordination(entity: FederalEntity, other: FederalEntity) -> bool:
    """Functional rule: shared tags and both cyber or both critical infrastructure."""
    if not (has_overlapping_sectors(entity, other) or has_overlapping_functions(entity, other)):
        return False
    return has_cyber_coordination(entity, other) or has_critical_infrastructure_coordination(
        entity, other
    )
