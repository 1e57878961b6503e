"""
Shared calculations module.

Geodesy and unit conversion used by the shot pipeline. Distances are
great-circle on a spherical earth; the target bearing is a planar
approximation that only holds over single-hole ranges.
"""

import math
import logging

from geopy.distance import great_circle

from core.constants import (
    EARTH_RADIUS_KILOMETERS, METERS_TO_YARDS, YARDS_TO_METERS,
    ZERO_DISTANCE_BEARING_RADIANS,
)
from core.models.geo import PointLike, as_geopoint

logger = logging.getLogger(__name__)


# =============================================================================
# ROUNDING AND UNIT CONVERSIONS
# =============================================================================

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going toward +infinity.

    Python's built-in round() uses banker's rounding (2.5 -> 2), which would
    shift half-yard values relative to the reference behaviour.
    """
    return int(math.floor(value + 0.5))


def meters_to_yards(distance_m: float) -> float:
    """Convert meters to yards."""
    return distance_m * METERS_TO_YARDS


def yards_to_meters(distance_yd: float) -> float:
    """Convert yards to meters."""
    return distance_yd * YARDS_TO_METERS


# =============================================================================
# DISTANCE
# =============================================================================

def calculate_distance_meters(a: PointLike, b: PointLike) -> float:
    """Great-circle distance between two points in meters (spherical earth)."""
    p1 = as_geopoint(a)
    p2 = as_geopoint(b)
    return great_circle(p1.as_tuple(), p2.as_tuple(), radius=EARTH_RADIUS_KILOMETERS).meters


def calculate_distance_yards(a: PointLike, b: PointLike) -> int:
    """
    Great-circle distance between two points in whole yards.

    Symmetric, and zero for identical points.

    Raises:
        InvalidCoordinate: If either point is out of range or non-finite
    """
    meters = calculate_distance_meters(a, b)
    return round_half_up(meters_to_yards(meters))


# =============================================================================
# BEARINGS
# =============================================================================

def calculate_target_bearing(a: PointLike, b: PointLike) -> float:
    """
    Planar bearing from ``a`` to ``b`` in radians, clockwise from north.

    Uses atan2(delta_lon, delta_lat) without cos(latitude) scaling of the
    longitude delta. Good enough across a single hole; use
    calculate_initial_bearing for longer ranges.

    Returns ZERO_DISTANCE_BEARING_RADIANS when the points coincide.
    """
    p1 = as_geopoint(a)
    p2 = as_geopoint(b)

    d_lat = p2.latitude - p1.latitude
    d_lon = p2.longitude - p1.longitude

    if d_lat == 0 and d_lon == 0:
        logger.debug(f"Zero-distance bearing requested at {p1.as_tuple()}, using fallback")
        return ZERO_DISTANCE_BEARING_RADIANS

    return math.atan2(d_lon, d_lat)


def calculate_initial_bearing(a: PointLike, b: PointLike) -> float:
    """Great-circle initial bearing from ``a`` to ``b`` in radians, in (-pi, pi]."""
    p1 = as_geopoint(a)
    p2 = as_geopoint(b)

    if p1 == p2:
        return ZERO_DISTANCE_BEARING_RADIANS

    lat1 = math.radians(p1.latitude)
    lat2 = math.radians(p2.latitude)
    d_lon = math.radians(p2.longitude - p1.longitude)

    x = math.sin(d_lon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    return math.atan2(x, y)


def bearing_to_compass_degrees(bearing_radians: float) -> float:
    """Convert a bearing in radians to compass degrees in [0, 360)."""
    return math.degrees(bearing_radians) % 360
