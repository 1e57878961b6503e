"""
Geographic point model.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from core.validation import InvalidCoordinate, validate_coordinate


@dataclass(frozen=True)
class GeoPoint:
    """Immutable (latitude, longitude) pair in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        lat, lon = validate_coordinate(self.latitude, self.longitude, context="GeoPoint")
        # Store normalized floats on the frozen instance
        object.__setattr__(self, 'latitude', lat)
        object.__setattr__(self, 'longitude', lon)

    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as a (lat, lon) tuple."""
        return (self.latitude, self.longitude)

    @classmethod
    def from_tuple(cls, coords: Sequence[float]) -> 'GeoPoint':
        """Build a point from a (lat, lon) pair."""
        if not isinstance(coords, (tuple, list)) or len(coords) != 2:
            raise InvalidCoordinate(f"Expected a (lat, lon) pair, got {coords!r}")
        return cls(coords[0], coords[1])


PointLike = Union[GeoPoint, Sequence[float]]


def as_geopoint(value: PointLike) -> GeoPoint:
    """Accept a GeoPoint or a (lat, lon) pair."""
    if isinstance(value, GeoPoint):
        return value
    return GeoPoint.from_tuple(value)
