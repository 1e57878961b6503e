"""
Wind resolution module.

Splits an ambient wind into components along and across the target line.
"""

from .resolver import describe_wind, relative_wind_angle, resolve_wind

__all__ = [
    'resolve_wind',
    'relative_wind_angle',
    'describe_wind',
]
