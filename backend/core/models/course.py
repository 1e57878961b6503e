"""
Course data models.

Holes are read-only reference data supplied to the shot pipeline; the core
never edits them.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import pandas as pd

from core.models.geo import GeoPoint
from core.validation import InvalidInput


@dataclass(frozen=True)
class Hole:
    """A single hole with its tee and green positions."""
    number: int
    par: int
    handicap: int
    length_yards: int  # Card length, not the measured tee-to-green distance
    tee: GeoPoint
    green: GeoPoint

    def to_dict(self) -> Dict[str, Any]:
        """Convert hole to dictionary for DataFrame creation."""
        return {
            'number': self.number,
            'par': self.par,
            'handicap': self.handicap,
            'length_yards': self.length_yards,
            'tee_latitude': self.tee.latitude,
            'tee_longitude': self.tee.longitude,
            'green_latitude': self.green.latitude,
            'green_longitude': self.green.longitude,
        }


@dataclass(frozen=True)
class Course:
    """Ordered, immutable list of holes."""
    name: str
    holes: Tuple[Hole, ...]

    def __post_init__(self):
        object.__setattr__(self, 'holes', tuple(self.holes))
        numbers = [h.number for h in self.holes]
        if len(set(numbers)) != len(numbers):
            raise InvalidInput(f"{self.name}: duplicate hole numbers {numbers}")

    def __len__(self) -> int:
        return len(self.holes)

    def hole(self, number: int) -> Hole:
        """Return the hole with the given number."""
        for h in self.holes:
            if h.number == number:
                return h
        raise InvalidInput(f"{self.name}: no hole {number} (holes: {[h.number for h in self.holes]})")

    def next_index(self, index: int) -> int:
        """Index of the next hole, staying on the last one."""
        return min(len(self.holes) - 1, index + 1)

    def previous_index(self, index: int) -> int:
        """Index of the previous hole, staying on the first one."""
        return max(0, index - 1)

    @property
    def total_par(self) -> int:
        return sum(h.par for h in self.holes)


def holes_to_dataframe(course: Course) -> pd.DataFrame:
    """
    Convert a course's holes to a pandas DataFrame.

    Args:
        course: Course to convert

    Returns:
        DataFrame with one row per hole, in playing order
    """
    if not course.holes:
        return pd.DataFrame()

    data: List[Dict[str, Any]] = [hole.to_dict() for hole in course.holes]
    return pd.DataFrame(data)


# Henderson Country Club, NC
HENDERSON_CC = Course(
    name="Henderson Country Club",
    holes=(
        Hole(
            number=1, par=5, handicap=5, length_yards=505,
            tee=GeoPoint(36.3188, -78.3843),
            green=GeoPoint(36.3226, -78.3837),
        ),
        Hole(
            number=2, par=3, handicap=13, length_yards=175,
            tee=GeoPoint(36.3227, -78.3835),
            green=GeoPoint(36.3221, -78.3815),
        ),
    ),
)
