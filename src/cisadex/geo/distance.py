"""Great-circle distance over WGS84 coordinates."""

import math

from cisadex.entity.types import Coordinates, FederalEntity

# Mean Earth radius in statute miles
EARTH_RADIUS_MILES = 3959.0


def haversine_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in statute miles.

    Symmetric in its two points and exactly zero for identical points.
    Never exceeds half the circumference. Callers must check coordinate
    validity first; non-finite input yields NaN.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # rounding can push a past 1.0 for near-antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_between(a: Coordinates, b: Coordinates) -> float:
    """Distance in miles between two coordinate pairs."""
    return haversine_miles(a.lat, a.lng, b.lat, b.lng)


def entity_distance(entity: FederalEntity, lat: float, lng: float) -> float | None:
    """Distance in miles from a point to an entity.

    Returns None when the entity has no valid coordinates, so that callers
    never compare against NaN.
    """
    if not entity.has_valid_coordinates:
        return None
    coords = entity.location.coordinates
    return haversine_miles(lat, lng, coords.lat, coords.lng)
