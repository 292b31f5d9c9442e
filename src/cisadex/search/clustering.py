"""Greedy radius clustering of entities for map display.

Entities are visited in input order. Each unclaimed entity seeds a cluster
that absorbs every other unclaimed entity within the zoom level's radius of
the seed. An entity within range of two seeds joins whichever seed comes
first, so reordering the input can change cluster membership. The pass is
quadratic in the number of entities; at directory scale (hundreds to low
thousands) that is acceptable, beyond it clustering should move off any
interactive thread.
"""

from collections.abc import Sequence

from cisadex.entity.types import Coordinates, FederalEntity
from cisadex.geo.distance import distance_between
from cisadex.utils.tags import count_tags, dominant_tag

from .types import MapCluster

# Clustering radius in miles for zoom levels 0-9; higher levels use the last entry
CLUSTER_RADIUS_MILES: tuple[float, ...] = (1000, 500, 200, 100, 50, 25, 12, 6, 3, 1.5)


def cluster_radius(zoom_level: int) -> float:
    """Clustering radius for a zoom level, clamped to the table."""
    index = min(max(zoom_level, 0), len(CLUSTER_RADIUS_MILES) - 1)
    return CLUSTER_RADIUS_MILES[index]


def _centroid(members: Sequence[FederalEntity]) -> Coordinates:
    lat = sum(m.location.coordinates.lat for m in members) / len(members)
    lng = sum(m.location.coordinates.lng for m in members) / len(members)
    return Coordinates(lat=lat, lng=lng)


def generate_clusters(entities: Sequence[FederalEntity], zoom_level: int) -> list[MapCluster]:
    """Cluster the entities with valid coordinates.

    Every located entity lands in exactly one cluster; entities without
    valid coordinates are skipped.

    Args:
        entities: Already-filtered entities.
        zoom_level: Map zoom level selecting the clustering radius.

    Returns:
        Clusters in seed order.
    """
    radius = cluster_radius(zoom_level)
    located = [e for e in entities if e.has_valid_coordinates]
    claimed: set[str] = set()
    clusters: list[MapCluster] = []

    for seed in located:
        if seed.id in claimed:
            continue

        seed_coords = seed.location.coordinates
        members = [seed]
        claimed.add(seed.id)
        for other in located:
            if other.id in claimed:
                continue
            if distance_between(seed_coords, other.location.coordinates) <= radius:
                members.append(other)
                claimed.add(other.id)

        clusters.append(
            MapCluster(
                coordinates=_centroid(members),
                count=len(members),
                entity_ids=[m.id for m in members],
                primary_sector=dominant_tag(count_tags(m.sectors for m in members)),
                primary_function=dominant_tag(count_tags(m.functions for m in members)),
                zoom_level=zoom_level,
            )
        )

    return clusters
