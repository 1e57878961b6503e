"""
Geographic utilities module - re-exports from core.calculations.

Keeps display code importing distances and conversions from one place while
the implementations live in core.calculations.
"""

from core.calculations import (
    bearing_to_compass_degrees,
    calculate_distance_meters,
    calculate_distance_yards,
    calculate_initial_bearing,
    calculate_target_bearing,
    meters_to_yards,
    yards_to_meters,
)

__all__ = [
    'bearing_to_compass_degrees',
    'calculate_distance_meters',
    'calculate_distance_yards',
    'calculate_initial_bearing',
    'calculate_target_bearing',
    'meters_to_yards',
    'yards_to_meters',
]
