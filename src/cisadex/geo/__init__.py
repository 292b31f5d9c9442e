"""Geographic utilities: distance, regions and bounding boxes."""

from .distance import EARTH_RADIUS_MILES, distance_between, entity_distance, haversine_miles
from .regions import (
    FEMA_REGIONS,
    BoundingBox,
    bounding_box,
    entity_states,
    is_within_bounds,
    region_for_state,
    states_for_region,
)

__all__ = [
    "EARTH_RADIUS_MILES",
    "FEMA_REGIONS",
    "BoundingBox",
    "bounding_box",
    "distance_between",
    "entity_distance",
    "entity_states",
    "haversine_miles",
    "is_within_bounds",
    "region_for_state",
    "states_for_region",
]
