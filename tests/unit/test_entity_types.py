"""Unit tests for the entity model."""

import math

import pytest

from cisadex.entity import (
    RELATIONSHIP_TYPES,
    Coordinates,
    DuplicateEntityIdError,
    EntityLoadError,
    FederalEntity,
    OperationalState,
    OperationalStatus,
    RelationshipType,
    get_relationship_descriptor,
)
from cisadex.utils.exceptions import CisadexError, EntityDataError


class TestCoordinates:
    """Tests for Coordinates validity."""

    def test_valid_point(self):
        """Test an ordinary point is valid."""
        assert Coordinates(lat=38.9, lng=-77.0).is_valid

    def test_bounds_inclusive(self):
        """Test the WGS84 edges are valid."""
        assert Coordinates(lat=90.0, lng=180.0).is_valid
        assert Coordinates(lat=-90.0, lng=-180.0).is_valid

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(91.0, 0.0), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
    )
    def test_invalid_points(self, lat, lng):
        """Test out-of-range and non-finite points are flagged, not rejected."""
        coords = Coordinates(lat=lat, lng=lng)
        assert coords.is_valid is False


class TestFederalEntity:
    """Tests for FederalEntity."""

    def test_minimal_entity_defaults(self):
        """Test only id, name, agency and type are required."""
        entity = FederalEntity(id="x", name="X", parent_agency="DHS", type="facility")
        assert entity.sectors == []
        assert entity.relationships == []
        assert entity.location.coordinates is None
        assert entity.has_valid_coordinates is False
        assert entity.special_programs == []
        assert entity.notes is None

    def test_has_valid_coordinates(self, entity_factory):
        """Test has_valid_coordinates follows the coordinate check."""
        assert entity_factory("a", lat=42.0, lng=-71.0).has_valid_coordinates
        assert not entity_factory("b", lat=142.0, lng=-71.0).has_valid_coordinates

    def test_metadata_accessors(self, entity_factory):
        """Test special programs and notes come from metadata."""
        entity = entity_factory("a", special_programs=["InfraGard"], notes="Annex")
        assert entity.special_programs == ["InfraGard"]
        assert entity.notes == "Annex"

    def test_operational_state(self):
        """Test the two-value state view of status.operational."""
        assert OperationalStatus(operational=True).state is OperationalState.OPERATIONAL
        assert OperationalStatus(operational=False).state is OperationalState.NON_OPERATIONAL


class TestRelationshipTypes:
    """Tests for the relationship type table."""

    def test_table_is_exhaustive(self):
        """Test every relationship type has a descriptor."""
        assert set(RELATIONSHIP_TYPES) == set(RelationshipType)

    @pytest.mark.parametrize(
        ("name", "strength", "bidirectional"),
        [
            ("parent", 1.0, False),
            ("child", 1.0, False),
            ("partner", 0.8, True),
            ("coordination", 0.6, True),
            ("task_force", 0.9, True),
            ("fusion_center", 0.7, True),
        ],
    )
    def test_descriptor_values(self, name, strength, bidirectional):
        """Test strengths and directionality per type."""
        descriptor = get_relationship_descriptor(name)
        assert descriptor is not None
        assert descriptor.strength == strength
        assert descriptor.bidirectional is bidirectional

    def test_unknown_type(self):
        """Test unknown names have no descriptor."""
        assert get_relationship_descriptor("rivalry") is None


class TestEntityExceptions:
    """Tests for entity data exceptions."""

    def test_duplicate_id_error(self):
        """Test DuplicateEntityIdError carries the id."""
        error = DuplicateEntityIdError("fbi-boston")
        assert isinstance(error, EntityDataError)
        assert isinstance(error, CisadexError)
        assert error.entity_id == "fbi-boston"
        assert error.details == {"entity_id": "fbi-boston"}
        assert "fbi-boston" in str(error)

    def test_load_error(self):
        """Test EntityLoadError merges extra details."""
        error = EntityLoadError("data.json", "not JSON", details={"line": 3})
        assert error.source == "data.json"
        assert error.reason == "not JSON"
        assert error.details == {"source": "data.json", "reason": "not JSON", "line": 3}
