"""
Marker clustering utilities for provider maps.

Groups geolocated items into proximity clusters for display and lays out
overlapping markers on a small circle ("spiderfy") when a cluster is opened.

Usage:
    from phlebo.maps.clustering import ClusterableItem, cluster_items, get_cluster_distance

    items = [
        ClusterableItem("p1", 51.5007, -0.1246),
        ClusterableItem("p2", 51.5009, -0.1249),
        ClusterableItem("p3", 51.5200, -0.1000),
    ]
    clusters = cluster_items(items, get_cluster_distance(zoom=13))
    # [Cluster(id="cluster-p1", 2 items), Cluster(id="p3", 1 item)]

Clustering is a single greedy pass in input order: each unassigned item
seeds a cluster and pulls in every other unassigned item within the
threshold of the seed. It is not a transitive closure, so the result can
depend on the order of `items`.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from phlebo.core.config import settings
from phlebo.core.errors import InvalidArgumentError
from phlebo.core.utils.geo import haversine_distance, is_valid_coordinate, km_to_degrees

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ClusterableItem:
    """Minimal located record: any object with these attributes can be clustered."""

    id: str
    latitude: float
    longitude: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ClusterableItem":
        """Build from a data-layer row with id/latitude/longitude keys."""
        return cls(
            id=str(record["id"]),
            latitude=float(record["latitude"]),
            longitude=float(record["longitude"]),
        )


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair."""

    lat: float
    lng: float

    @property
    def as_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


CenterInput = Union[Coordinates, Tuple[float, float], Mapping[str, float]]


@dataclass
class Cluster(Generic[T]):
    """One map marker: a single item or a group of nearby items."""

    id: str
    items: List[T]
    center: Coordinates
    is_cluster: bool = field(init=False)

    def __post_init__(self):
        self.is_cluster = len(self.items) > 1

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization (item ids only)."""
        return {
            "id": self.id,
            "item_ids": [item.id for item in self.items],
            "center": self.center.as_dict,
            "is_cluster": self.is_cluster,
        }


@dataclass
class SpiderLeg(Generic[T]):
    """An item of an opened cluster and the position its marker moves to."""

    item: T
    position: Coordinates


def _to_coordinates(center: CenterInput) -> Coordinates:
    if isinstance(center, Coordinates):
        return center
    if isinstance(center, Mapping):
        return Coordinates(float(center["lat"]), float(center["lng"]))
    lat, lng = center
    return Coordinates(float(lat), float(lng))


def _distance_km(a, b) -> float:
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def cluster_items(items: Sequence[T], threshold_km: Optional[float] = None) -> List[Cluster[T]]:
    """
    Group items into clusters based on proximity.

    Args:
        items: Objects with id, latitude and longitude attributes
        threshold_km: Distance from a cluster's seed item within which other
            items join it (default: settings.CLUSTER_DISTANCE_KM)

    Returns:
        Clusters in seed order; every item appears in exactly one

    Raises:
        InvalidArgumentError: If threshold_km is negative or not finite
    """
    if threshold_km is None:
        threshold_km = settings.CLUSTER_DISTANCE_KM
    if not math.isfinite(threshold_km) or threshold_km < 0:
        raise InvalidArgumentError(f"threshold_km must be a non-negative number, got {threshold_km}")

    if not items:
        return []

    clusters = []
    processed = set()

    for item in items:
        if item.id in processed:
            continue

        # The seed plus every unprocessed item within range of it
        nearby = [
            other for other in items
            if other.id not in processed and (
                other.id == item.id or _distance_km(item, other) <= threshold_km
            )
        ]

        processed.update(n.id for n in nearby)

        center = Coordinates(
            lat=sum(n.latitude for n in nearby) / len(nearby),
            lng=sum(n.longitude for n in nearby) / len(nearby),
        )

        clusters.append(Cluster(
            id=item.id if len(nearby) == 1 else f"cluster-{item.id}",
            items=nearby,
            center=center,
        ))

    logger.debug(f"Clustered {len(items)} items into {len(clusters)} markers at {threshold_km}km")
    return clusters


def get_cluster_distance(zoom: float) -> float:
    """
    Determine cluster distance in km based on map zoom level.

    Higher zoom = smaller cluster distance.
    """
    if zoom >= 16:
        return 0.05  # 50m - very close
    if zoom >= 14:
        return 0.1  # 100m
    if zoom >= 12:
        return 0.3  # 300m
    if zoom >= 10:
        return 0.5  # 500m
    return 1.0  # 1km for zoomed out


def get_spiderfy_radius(zoom: float) -> float:
    """Radius in km for spreading an opened cluster at a zoom level."""
    if zoom >= 16:
        return 0.03
    if zoom >= 14:
        return 0.05
    if zoom >= 12:
        return 0.1
    return 0.2


def is_same_location(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    threshold_km: Optional[float] = None
) -> bool:
    """Check if two points are at the same location (within a very small threshold)."""
    if threshold_km is None:
        threshold_km = settings.SAME_LOCATION_THRESHOLD_KM
    return haversine_distance(lat1, lng1, lat2, lng2) <= threshold_km


def spiderfy_positions(
    center: CenterInput,
    count: int,
    radius_km: Optional[float] = None
) -> List[Coordinates]:
    """
    Calculate positions for spiderfied markers arranged in a circle.

    The first position is due north of the center; the rest follow
    clockwise (north, east, south, west) at equal angles.

    Args:
        center: Center position
        count: Number of markers, at least 1
        radius_km: Radius of the circle (default: settings.SPIDERFY_RADIUS_KM)

    Returns:
        List of `count` positions

    Raises:
        InvalidArgumentError: If count is less than 1, or the center is at a pole
    """
    if count < 1:
        raise InvalidArgumentError(f"count must be at least 1, got {count}")
    if radius_km is None:
        radius_km = settings.SPIDERFY_RADIUS_KM

    origin = _to_coordinates(center)
    radius_lat, radius_lng = km_to_degrees(radius_km, origin.lat)
    angle_step = (2 * math.pi) / count

    positions = []
    for i in range(count):
        # Bearing from north, clockwise
        angle = i * angle_step
        positions.append(Coordinates(
            lat=origin.lat + radius_lat * math.cos(angle),
            lng=origin.lng + radius_lng * math.sin(angle),
        ))

    return positions


def spiderfy_cluster(
    cluster: Cluster[T],
    zoom: Optional[float] = None,
    radius_km: Optional[float] = None
) -> List[SpiderLeg[T]]:
    """
    Pair each item of a cluster with its spiderfied marker position.

    The radius is `radius_km` if given, else derived from `zoom`, else the
    configured default.
    """
    if radius_km is None and zoom is not None:
        radius_km = get_spiderfy_radius(zoom)

    positions = spiderfy_positions(cluster.center, len(cluster.items), radius_km)
    return [SpiderLeg(item, position) for item, position in zip(cluster.items, positions)]


def cluster_for_zoom(
    items: Sequence[T],
    zoom: float,
    exclude_id: Optional[str] = None
) -> List[Cluster[T]]:
    """
    Cluster the locatable items for a map at the given zoom.

    Items without usable coordinates are skipped, as is the item whose id is
    `exclude_id` (the currently selected provider, drawn separately).
    """
    visible = [
        item for item in items
        if item.id != exclude_id and is_valid_coordinate(
            getattr(item, "latitude", None),
            getattr(item, "longitude", None),
        )
    ]

    skipped = len(items) - len(visible)
    if skipped:
        logger.debug(f"Skipped {skipped} items without coordinates or selected")

    return cluster_items(visible, get_cluster_distance(zoom))
