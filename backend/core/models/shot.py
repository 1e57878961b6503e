"""
Shot data models.

This module defines the wind input, the atomic input snapshot that the shot
pipeline reads, and the derived result it produces. Results are never
persisted; a fresh one is computed for every snapshot.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from core.models.equipment import (
    Club, ClubId, ShapeId, ShapeProfile, TrajectoryId, TrajectoryProfile,
    get_club, get_shape, get_trajectory,
)
from core.models.geo import GeoPoint, PointLike, as_geopoint
from core.validation import InvalidInput, validate_wind_bearing, validate_wind_speed


@dataclass(frozen=True)
class WindVector:
    """
    Ambient wind.

    ``bearing_degrees`` is measured clockwise from north and names where the
    wind blows from (0 = wind out of the north).
    """
    speed_mph: float
    bearing_degrees: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'speed_mph', validate_wind_speed(self.speed_mph))
        object.__setattr__(self, 'bearing_degrees', validate_wind_bearing(self.bearing_degrees))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'WindVector':
        """Build a wind from a ``{"speed_mph", "bearing_degrees"}`` mapping."""
        if not isinstance(data, Mapping):
            raise InvalidInput(f"Wind: Expected a mapping, got {type(data).__name__}")

        unknown = set(data) - {'speed_mph', 'bearing_degrees'}
        if unknown:
            raise InvalidInput(f"Wind: Unknown fields {sorted(map(str, unknown))}")
        if 'speed_mph' not in data:
            raise InvalidInput("Wind: Missing field 'speed_mph'")

        return cls(data['speed_mph'], data.get('bearing_degrees', 0.0))


@dataclass(frozen=True)
class WindComponents:
    """Wind split along and across the target line, in mph."""
    headwind: float  # + blowing toward the player, - tailwind
    crosswind: float  # + wind from the right of the target line


@dataclass(frozen=True)
class CarryEstimate:
    """Output of the shot model."""
    carry_yards: int
    lateral_drift_yards: int


@dataclass(frozen=True)
class ShotInputs:
    """
    One coherent snapshot of everything a shot depends on.

    The pipeline only ever reads a single ShotInputs instance, so a result can
    never mix a new position with an old club. Use ``dataclasses.replace`` to
    derive a changed snapshot.
    """
    player: GeoPoint
    target: GeoPoint
    wind: WindVector
    club: Club
    shape: ShapeProfile
    trajectory: TrajectoryProfile

    @classmethod
    def build(
        cls,
        player: PointLike,
        target: PointLike,
        wind: Union[WindVector, Dict[str, float]],
        club: Union[ClubId, Club, str],
        shape: Union[ShapeId, ShapeProfile, str] = ShapeId.STRAIGHT,
        trajectory: Union[TrajectoryId, TrajectoryProfile, str] = TrajectoryId.STANDARD,
    ) -> 'ShotInputs':
        """Build a snapshot from raw values, resolving equipment ids."""
        if not isinstance(wind, WindVector):
            wind = WindVector.from_mapping(wind)
        return cls(
            player=as_geopoint(player),
            target=as_geopoint(target),
            wind=wind,
            club=get_club(club),
            shape=get_shape(shape),
            trajectory=get_trajectory(trajectory),
        )


@dataclass(frozen=True)
class ShotResult:
    """
    Derived shot snapshot.

    ``distance_to_target_yards``, ``carry_yards`` and ``lateral_drift_yards``
    are the result proper; the remaining fields are kept for display.
    """
    distance_to_target_yards: int
    carry_yards: int
    lateral_drift_yards: int

    # Diagnostics
    target_bearing_radians: float = 0.0
    headwind_mph: Optional[float] = None
    crosswind_mph: Optional[float] = None

    @property
    def carry_remaining_yards(self) -> int:
        """Yards left to the target after the carry (negative = past it)."""
        return self.distance_to_target_yards - self.carry_yards

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for API responses and DataFrames."""
        return {
            'distance_to_target_yards': self.distance_to_target_yards,
            'carry_yards': self.carry_yards,
            'lateral_drift_yards': self.lateral_drift_yards,
            'target_bearing_radians': self.target_bearing_radians,
            'headwind_mph': self.headwind_mph,
            'crosswind_mph': self.crosswind_mph,
        }
