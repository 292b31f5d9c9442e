"""Pytest fixtures for Cisadex tests."""

from collections.abc import Callable
from typing import Any

import pytest
import structlog

from cisadex.config.settings import Settings
from cisadex.entity.types import (
    Coordinates,
    EntityMetadata,
    EntityRelationship,
    FederalEntity,
    JurisdictionData,
    LocationData,
    OperationalStatus,
)


# =============================================================================
# Structlog Configuration Fixture
# =============================================================================


@pytest.fixture(scope="function", autouse=True)
def reset_structlog_after_test():
    """Reset structlog configuration after each test.

    This ensures tests that modify structlog global state
    don't affect other tests.
    """
    yield
    structlog.reset_defaults()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults, isolated from the environment."""
    return Settings(_env_file=None, environment="test", metrics_enabled=False)


# =============================================================================
# Entity Factories
# =============================================================================


def make_entity(
    entity_id: str,
    *,
    name: str | None = None,
    agency: str = "CISA",
    entity_type: str = "field_office",
    city: str = "",
    state: str = "",
    lat: float | None = None,
    lng: float | None = None,
    sectors: list[str] | None = None,
    functions: list[str] | None = None,
    capabilities: list[str] | None = None,
    jurisdiction_states: list[str] | None = None,
    specialties: list[str] | None = None,
    coverage: str = "",
    relationships: list[tuple[str, str]] | None = None,
    hours: str = "Business Hours",
    operational: bool = True,
    public_access: bool = False,
    special_programs: list[str] | None = None,
    notes: str | None = None,
) -> FederalEntity:
    """Build a FederalEntity with only the fields a test cares about."""
    coordinates = Coordinates(lat=lat, lng=lng) if lat is not None and lng is not None else None
    metadata = None
    if special_programs or notes:
        metadata = EntityMetadata(special_programs=special_programs or [], notes=notes)

    return FederalEntity(
        id=entity_id,
        name=name or entity_id.replace("-", " ").title(),
        parent_agency=agency,
        type=entity_type,
        location=LocationData(city=city, state=state, coordinates=coordinates),
        jurisdiction=JurisdictionData(
            coverage=coverage,
            states=jurisdiction_states or [],
            specialties=specialties or [],
        ),
        sectors=sectors or [],
        functions=functions or [],
        capabilities=capabilities or [],
        status=OperationalStatus(
            operational=operational, hours=hours, public_access=public_access
        ),
        relationships=[
            EntityRelationship(related_entity_id=related_id, relationship_type=rel_type)
            for related_id, rel_type in relationships or []
        ],
        metadata=metadata,
    )


@pytest.fixture
def entity_factory() -> Callable[..., FederalEntity]:
    """Expose make_entity as a fixture."""
    return make_entity


@pytest.fixture
def sample_entities() -> list[FederalEntity]:
    """Small directory spanning New England, the Mid-Atlantic and Ohio."""
    return [
        make_entity(
            "cisa-region-1",
            name="CISA Region 1",
            agency="CISA",
            entity_type="regional_office",
            city="Boston",
            state="MA",
            lat=42.3601,
            lng=-71.0589,
            sectors=["information_technology", "communications"],
            functions=["incident_response", "vulnerability_assessment"],
            capabilities=["cyber_assessment", "tabletop_exercises"],
            jurisdiction_states=["CT", "MA", "ME", "NH", "RI", "VT"],
            specialties=["election security"],
            coverage="New England",
            hours="24/7",
            public_access=True,
        ),
        make_entity(
            "fbi-boston",
            name="FBI Boston Field Office",
            agency="FBI",
            entity_type="field_office",
            city="Chelsea",
            state="MA",
            lat=42.3918,
            lng=-71.0328,
            sectors=["government_facilities"],
            functions=["law_enforcement", "intelligence", "cyber_forensics"],
            capabilities=["cyber_forensics", "evidence_recovery"],
            jurisdiction_states=["MA", "ME", "NH", "RI"],
            specialties=["counterterrorism"],
            relationships=[("cisa-region-1", "partner"), ("jttf-boston", "task_force")],
            hours="24/7",
        ),
        make_entity(
            "cisa-region-3",
            name="CISA Region 3",
            agency="CISA",
            entity_type="regional_office",
            city="Philadelphia",
            state="PA",
            lat=39.9526,
            lng=-75.1652,
            sectors=["energy"],
            functions=["information_sharing"],
            capabilities=["protective_security_advisors"],
            jurisdiction_states=["DC", "DE", "MD", "PA", "VA", "WV"],
        ),
        make_entity(
            "fema-hq",
            name="FEMA Headquarters",
            agency="FEMA",
            entity_type="headquarters",
            city="Washington",
            state="DC",
            lat=38.9,
            lng=-77.0,
            sectors=["emergency_services"],
            functions=["emergency_management", "incident_response"],
            capabilities=["disaster_response"],
            coverage="National",
            hours="24/7",
            public_access=True,
            special_programs=["National Flood Insurance Program"],
        ),
        make_entity(
            "epa-cincinnati-lab",
            name="EPA Cincinnati Laboratory",
            agency="EPA",
            entity_type="laboratory",
            city="Cincinnati",
            state="OH",
            sectors=["water_wastewater"],
            functions=["research"],
            capabilities=["water_testing"],
            operational=False,
            notes="Coordinates pending survey",
        ),
    ]


def entity_ids(entities: list[Any]) -> list[str]:
    """Ids of a list of entities in order."""
    return [e.id for e in entities]
