"""
Services package.

Provides business logic layer between API and core algorithms.

Modules:
    geodesy_service: Distance to target and target bearing
    wind_service: Wind decomposition relative to the target line
    shot_service: Shot pipeline, input session and yardage tables
"""

from services.geodesy_service import GeodesyService, get_geodesy_service
from services.wind_service import WindResolver, get_wind_resolver
from services.shot_service import (
    ShotModel,
    ShotPlanner,
    ShotSession,
    build_advisor_context,
    club_sweep,
    get_shot_planner,
    yardage_book,
)

__all__ = [
    'GeodesyService',
    'get_geodesy_service',
    'WindResolver',
    'get_wind_resolver',
    'ShotModel',
    'ShotPlanner',
    'ShotSession',
    'get_shot_planner',
    'club_sweep',
    'yardage_book',
    'build_advisor_context',
]
