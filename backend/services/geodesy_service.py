"""
Geodesy service.

Distance to target and target bearing for the shot pipeline.
"""

import logging
from typing import Optional

from core.bearing import BearingCalculatorFactory
from core.calculations import calculate_distance_yards
from core.models.geo import PointLike, as_geopoint
from config.settings import DEFAULT_BEARING_METHOD

logger = logging.getLogger(__name__)


class GeodesyService:
    """
    Service for distances and bearings between two points on the course.

    Stateless apart from the chosen bearing method; safe to share between
    callers.
    """

    def __init__(self, bearing_method: str = DEFAULT_BEARING_METHOD):
        self.bearing_method = bearing_method
        self._bearing_calculator = BearingCalculatorFactory.create(bearing_method)

    @staticmethod
    def distance(a: PointLike, b: PointLike) -> int:
        """
        Great-circle distance in whole yards.

        Raises:
            InvalidCoordinate: If either point is invalid
        """
        return calculate_distance_yards(a, b)

    def target_bearing(self, origin: PointLike, target: PointLike) -> float:
        """
        Bearing from origin to target in radians, clockwise from north.

        Returns 0.0 when origin and target coincide.
        """
        p1 = as_geopoint(origin)
        p2 = as_geopoint(target)
        if p1 == p2:
            logger.warning(f"Player is on the target {p1.as_tuple()}; bearing defaults to 0")
        return self._bearing_calculator.bearing(p1, p2)


def get_geodesy_service(bearing_method: Optional[str] = None) -> GeodesyService:
    """
    Get a GeodesyService instance.

    Args:
        bearing_method: 'planar' or 'great_circle', or None for the configured default

    Returns:
        GeodesyService instance
    """
    return GeodesyService(bearing_method or DEFAULT_BEARING_METHOD)
