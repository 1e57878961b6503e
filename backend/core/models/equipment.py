"""
Equipment data models and fixed catalogs.

Clubs, ball-flight shapes and launch trajectories are closed enumerations.
Each identifier maps to exactly one immutable profile; lookups for anything
else raise UnknownProfile instead of falling back to a default.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Type, TypeVar, Union

import pandas as pd

from core.validation import UnknownProfile


@dataclass(frozen=True)
class Club:
    """A club and its still-air carry."""
    id: str
    name: str
    base_carry_yards: float  # Carry in yards with a straight shape and no wind


@dataclass(frozen=True)
class ShapeProfile:
    """
    Ball-flight shape.

    Only ``carry_factor`` feeds the shot model. Spin and roll are reference
    values shown alongside the shape.
    """
    id: str
    name: str
    carry_factor: float
    spin_factor: float = 1.0
    roll_factor: float = 1.0


@dataclass(frozen=True)
class TrajectoryProfile:
    """Launch height category and how strongly wind acts on it."""
    id: str
    name: str
    wind_sensitivity: float


class ClubId(str, Enum):
    DRIVER = 'DR'
    THREE_WOOD = '3W'
    FOUR_IRON = '4I'
    SEVEN_IRON = '7I'
    NINE_IRON = '9I'
    PITCHING_WEDGE = 'PW'
    SAND_WEDGE = 'SW'


class ShapeId(str, Enum):
    STRAIGHT = 'straight'
    DRAW = 'draw'
    FADE = 'fade'


class TrajectoryId(str, Enum):
    STANDARD = 'std'
    HIGH = 'high'
    STINGER = 'stinger'


# Catalogs keep the display order of the bag
CLUBS: Dict[ClubId, Club] = {
    ClubId.DRIVER: Club('DR', 'Driver', 265),
    ClubId.THREE_WOOD: Club('3W', '3-Wood', 235),
    ClubId.FOUR_IRON: Club('4I', '4-Iron', 205),
    ClubId.SEVEN_IRON: Club('7I', '7-Iron', 170),
    ClubId.NINE_IRON: Club('9I', '9-Iron', 145),
    ClubId.PITCHING_WEDGE: Club('PW', 'Pitching Wedge', 125),
    ClubId.SAND_WEDGE: Club('SW', 'Sand Wedge', 100),
}

SHAPES: Dict[ShapeId, ShapeProfile] = {
    ShapeId.STRAIGHT: ShapeProfile('straight', 'Straight', 1.0, spin_factor=1.0, roll_factor=1.0),
    ShapeId.DRAW: ShapeProfile('draw', 'Draw', 1.02, spin_factor=0.9, roll_factor=1.2),
    ShapeId.FADE: ShapeProfile('fade', 'Fade', 0.95, spin_factor=1.2, roll_factor=0.8),
}

TRAJECTORIES: Dict[TrajectoryId, TrajectoryProfile] = {
    TrajectoryId.STANDARD: TrajectoryProfile('std', 'Standard', 1.0),
    TrajectoryId.HIGH: TrajectoryProfile('high', 'High', 1.6),
    TrajectoryId.STINGER: TrajectoryProfile('stinger', 'Stinger', 0.4),
}

# Every enum member must have exactly one catalog entry with a matching id
for _enum, _catalog in ((ClubId, CLUBS), (ShapeId, SHAPES), (TrajectoryId, TRAJECTORIES)):
    assert set(_catalog) == set(_enum), f"{_enum.__name__} catalog is not exhaustive"
    assert all(key.value == profile.id for key, profile in _catalog.items()), \
        f"{_enum.__name__} catalog ids do not match enum values"


E = TypeVar('E', bound=Enum)


def _resolve_id(enum_cls: Type[E], value: Union[E, str], kind: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member
    raise UnknownProfile(f"Unknown {kind} '{value}'. Available: {[m.value for m in enum_cls]}")


def get_club(club: Union[ClubId, Club, str]) -> Club:
    """Look up a club by enum member or id (case-insensitive)."""
    if isinstance(club, Club):
        return club
    return CLUBS[_resolve_id(ClubId, club, 'club')]


def get_shape(shape: Union[ShapeId, ShapeProfile, str]) -> ShapeProfile:
    """Look up a ball-flight shape by enum member or id."""
    if isinstance(shape, ShapeProfile):
        return shape
    return SHAPES[_resolve_id(ShapeId, shape, 'shape')]


def get_trajectory(trajectory: Union[TrajectoryId, TrajectoryProfile, str]) -> TrajectoryProfile:
    """Look up a trajectory profile by enum member or id."""
    if isinstance(trajectory, TrajectoryProfile):
        return trajectory
    return TRAJECTORIES[_resolve_id(TrajectoryId, trajectory, 'trajectory')]


def catalog_to_dataframe() -> Dict[str, pd.DataFrame]:
    """
    Convert the equipment catalogs to pandas DataFrames.

    Returns:
        Dict with 'clubs', 'shapes' and 'trajectories' tables in catalog order
    """
    return {
        'clubs': pd.DataFrame([asdict(c) for c in CLUBS.values()]),
        'shapes': pd.DataFrame([asdict(s) for s in SHAPES.values()]),
        'trajectories': pd.DataFrame([asdict(t) for t in TRAJECTORIES.values()]),
    }
