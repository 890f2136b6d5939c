"""
Geographic utility functions for coordinate calculations.

This module consolidates the geographic calculations used by the map code:
- Haversine distance calculation (kilometers, meters, miles)
- Kilometre to degree offsets for small map layouts
- Coordinate validation

Usage:
    from phlebo.core.utils.geo import haversine_distance, km_to_degrees

    # Calculate distance in kilometers
    distance_km = haversine_distance(51.5074, -0.1278, 51.5080, -0.1290)

    # Calculate distance in meters
    distance_m = haversine_distance(51.5074, -0.1278, 51.5080, -0.1290, unit='meters')

    # Degree offsets for a 50m radius at London's latitude
    lat_delta, lng_delta = km_to_degrees(0.05, 51.5074)
"""

import math
from typing import Tuple, Optional, Literal

from phlebo.core.errors import InvalidArgumentError

# Earth radius constants
EARTH_RADIUS_KM = 6_371
EARTH_RADIUS_METERS = 6_371_000
EARTH_RADIUS_MILES = 3_958.8

# Approximate length of one degree of latitude
KM_PER_DEGREE = 111.32

# Unit type for type hints
DistanceUnit = Literal['kilometers', 'meters', 'miles']


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit = 'kilometers'
) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula which gives accurate results for most distances.

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees
        unit: Unit for the result ('kilometers', 'meters', 'miles')

    Returns:
        Distance between the two points in the specified unit

    Example:
        >>> haversine_distance(51.5007, -0.1246, 51.5014, -0.1419)
        1.2  # kilometers (approximately)
    """
    # Select earth radius based on unit
    earth_radius = {
        'kilometers': EARTH_RADIUS_KM,
        'meters': EARTH_RADIUS_METERS,
        'miles': EARTH_RADIUS_MILES,
    }.get(unit, EARTH_RADIUS_KM)

    # Convert to radians
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return earth_radius * c


def km_to_degrees(distance_km: float, latitude: float) -> Tuple[float, float]:
    """
    Convert a ground distance into latitude/longitude degree offsets.

    The longitude offset is widened by 1/cos(latitude) because meridians
    converge away from the equator.

    Args:
        distance_km: Distance in kilometers
        latitude: Latitude the offset is applied at, in decimal degrees

    Returns:
        Tuple of (latitude_delta, longitude_delta) in degrees

    Raises:
        InvalidArgumentError: At or beyond a pole, where longitude has no extent
    """
    if not abs(latitude) < 90:
        raise InvalidArgumentError(f"latitude must be strictly between -90 and 90, got {latitude}")

    lat_delta = distance_km / KM_PER_DEGREE
    lng_delta = distance_km / (KM_PER_DEGREE * math.cos(math.radians(latitude)))
    return lat_delta, lng_delta


def is_valid_coordinate(lat: Optional[float], lng: Optional[float]) -> bool:
    """
    Check that a latitude/longitude pair is present, finite and in range.

    Only None counts as missing; 0.0 is a real
    coordinate (the Greenwich meridian runs through London).

    Example:
        >>> is_valid_coordinate(51.5, -0.12)
        True
        >>> is_valid_coordinate(None, -0.12)
        False
    """
    if lat is None or lng is None:
        return False

    try:
        lat = float(lat)
        lng = float(lng)
    except (ValueError, TypeError):
        return False

    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False

    return -90 <= lat <= 90 and -180 <= lng <= 180
