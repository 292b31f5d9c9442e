"""Named regions and bounding helpers."""

from collections.abc import Iterable

from pydantic import BaseModel

from cisadex.entity.types import Coordinates, FederalEntity

# The ten FEMA regions, covering every state and territory
FEMA_REGIONS: dict[str, tuple[str, ...]] = {
    "Region I": ("CT", "ME", "MA", "NH", "RI", "VT"),
    "Region II": ("NJ", "NY", "PR", "VI"),
    "Region III": ("DE", "DC", "MD", "PA", "VA", "WV"),
    "Region IV": ("AL", "FL", "GA", "KY", "MS", "NC", "SC", "TN"),
    "Region V": ("IL", "IN", "MI", "MN", "OH", "WI"),
    "Region VI": ("AR", "LA", "NM", "OK", "TX"),
    "Region VII": ("IA", "KS", "MO", "NE"),
    "Region VIII": ("CO", "MT", "ND", "SD", "UT", "WY"),
    "Region IX": ("AZ", "CA", "HI", "NV", "AS", "GU", "MP"),
    "Region X": ("AK", "ID", "OR", "WA"),
}


def states_for_region(region: str) -> tuple[str, ...]:
    """Member state codes of a named region, empty for unknown names."""
    return FEMA_REGIONS.get(region, ())


def region_for_state(state: str) -> str | None:
    """Region containing a state code."""
    for region, states in FEMA_REGIONS.items():
        if state in states:
            return region
    return None


def entity_states(entity: FederalEntity) -> set[str]:
    """Location state plus every jurisdiction state of an entity."""
    states = set(entity.jurisdiction.states)
    if entity.location.state:
        states.add(entity.location.state)
    return states


class BoundingBox(BaseModel):
    """Axis-aligned latitude/longitude box."""

    south: float
    west: float
    north: float
    east: float

    def contains(self, point: Coordinates) -> bool:
        """Check a point lies inside the box, edges included."""
        return self.south <= point.lat <= self.north and self.west <= point.lng <= self.east


def bounding_box(points: Iterable[Coordinates]) -> BoundingBox | None:
    """Smallest box holding every valid point, None if there are none."""
    valid = [p for p in points if p.is_valid]
    if not valid:
        return None
    return BoundingBox(
        south=min(p.lat for p in valid),
        west=min(p.lng for p in valid),
        north=max(p.lat for p in valid),
        east=max(p.lng for p in valid),
    )


def is_within_bounds(entity: FederalEntity, box: BoundingBox) -> bool:
    """Check an entity with valid coordinates lies inside a box."""
    if not entity.has_valid_coordinates:
        return False
    return box.contains(entity.location.coordinates)
