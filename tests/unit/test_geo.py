"""Unit tests for geographic utilities."""

import math

import pytest

from cisadex.entity import Coordinates
from cisadex.geo import (
    EARTH_RADIUS_MILES,
    FEMA_REGIONS,
    BoundingBox,
    bounding_box,
    distance_between,
    entity_distance,
    entity_states,
    haversine_miles,
    is_within_bounds,
    region_for_state,
    states_for_region,
)

BOSTON = (42.3601, -71.0589)
NEW_YORK = (40.7128, -74.0060)
WASHINGTON = (38.9, -77.0)


class TestHaversine:
    """Tests for great-circle distance."""

    def test_known_distance(self):
        """Test Boston to New York is about 190 miles."""
        assert haversine_miles(*BOSTON, *NEW_YORK) == pytest.approx(190, abs=3)

    @pytest.mark.parametrize(
        ("a", "b"),
        [(BOSTON, NEW_YORK), (NEW_YORK, WASHINGTON), ((0.0, 179.5), (0.0, -179.5))],
    )
    def test_symmetric(self, a, b):
        """Test distance does not depend on argument order."""
        assert haversine_miles(*a, *b) == haversine_miles(*b, *a)

    def test_identity(self):
        """Test a point is zero miles from itself."""
        assert haversine_miles(*WASHINGTON, *WASHINGTON) == 0.0

    def test_antimeridian(self):
        """Test points either side of the antimeridian are close."""
        assert haversine_miles(0.0, 179.5, 0.0, -179.5) == pytest.approx(69.1, abs=0.5)

    def test_half_circumference(self):
        """Test antipodal points are half the circumference apart."""
        assert haversine_miles(0.0, 0.0, 0.0, 180.0) == pytest.approx(
            EARTH_RADIUS_MILES * math.pi
        )

    @pytest.mark.parametrize(
        ("lat1", "lng1", "lat2", "lng2"),
        [
            (39.87720582134085, -97.64560034263705, -39.87720582045031, 82.35439965736295),
            (45.0, 10.0, -45.000000001, -170.000000001),
            (-12.3456789012, 33.3, 12.3456789011, -146.7000000001),
            (89.9999999, 0.0, -89.9999999, 180.0),
        ],
    )
    def test_near_antipodal(self, lat1, lng1, lat2, lng2):
        """Test nearly antipodal points stay within half the circumference."""
        distance = haversine_miles(lat1, lng1, lat2, lng2)
        assert distance <= EARTH_RADIUS_MILES * math.pi
        assert distance == pytest.approx(EARTH_RADIUS_MILES * math.pi, abs=1.0)

    def test_distance_between(self):
        """Test the Coordinates overload matches the scalar form."""
        a = Coordinates(lat=BOSTON[0], lng=BOSTON[1])
        b = Coordinates(lat=NEW_YORK[0], lng=NEW_YORK[1])
        assert distance_between(a, b) == haversine_miles(*BOSTON, *NEW_YORK)


class TestEntityDistance:
    """Tests for entity_distance."""

    def test_located_entity(self, entity_factory):
        """Test the distance to a located entity."""
        entity = entity_factory("a", lat=WASHINGTON[0], lng=WASHINGTON[1])
        assert entity_distance(entity, *WASHINGTON) == 0.0

    def test_unlocated_entity(self, entity_factory):
        """Test entities without valid coordinates have no distance."""
        assert entity_distance(entity_factory("a"), *WASHINGTON) is None
        assert entity_distance(entity_factory("b", lat=99.0, lng=0.0), *WASHINGTON) is None


class TestRegions:
    """Tests for FEMA region helpers."""

    def test_ten_regions_without_overlap(self):
        """Test each state belongs to one region."""
        assert len(FEMA_REGIONS) == 10
        all_states = [s for states in FEMA_REGIONS.values() for s in states]
        assert len(all_states) == len(set(all_states))

    def test_lookup(self):
        """Test region and state lookups."""
        assert "MA" in states_for_region("Region I")
        assert states_for_region("Region XI") == ()
        assert region_for_state("TX") == "Region VI"
        assert region_for_state("ZZ") is None

    def test_entity_states(self, entity_factory):
        """Test location and jurisdiction states are combined."""
        entity = entity_factory("a", state="MA", jurisdiction_states=["NH", "ME"])
        assert entity_states(entity) == {"MA", "NH", "ME"}
        assert entity_states(entity_factory("b")) == set()


class TestBoundingBox:
    """Tests for bounding boxes."""

    def test_bounding_box_skips_invalid(self):
        """Test the box covers only valid points."""
        box = bounding_box(
            [
                Coordinates(lat=BOSTON[0], lng=BOSTON[1]),
                Coordinates(lat=WASHINGTON[0], lng=WASHINGTON[1]),
                Coordinates(lat=200.0, lng=0.0),
            ]
        )
        assert box == BoundingBox(
            south=WASHINGTON[0], west=WASHINGTON[1], north=BOSTON[0], east=BOSTON[1]
        )
        assert bounding_box([]) is None

    def test_is_within_bounds(self, entity_factory):
        """Test entity containment, edges included."""
        box = BoundingBox(south=38.0, west=-78.0, north=43.0, east=-70.0)
        assert is_within_bounds(entity_factory("a", lat=38.0, lng=-70.0), box)
        assert not is_within_bounds(entity_factory("b", lat=37.9, lng=-75.0), box)
        assert not is_within_bounds(entity_factory("c"), box)
