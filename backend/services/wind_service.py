"""
Wind resolution service.

This module provides the business-logic wrapper around the wind decomposition,
used by the shot pipeline and the API backend.
"""

import logging
from typing import Dict

from core.models.shot import WindComponents, WindVector
from core.wind import describe_wind, resolve_wind

logger = logging.getLogger(__name__)


class WindResolver:
    """
    Service for splitting wind relative to the target line.

    Pure: no hidden state, so a single instance can serve any number of
    concurrent callers.
    """

    @staticmethod
    def resolve(wind: WindVector, target_bearing_radians: float) -> WindComponents:
        """
        Resolve a wind vector against a target bearing.

        Args:
            wind: Wind speed (mph) and bearing it blows from (degrees)
            target_bearing_radians: Target line bearing in radians

        Returns:
            WindComponents with headwind and crosswind in mph

        Raises:
            InvalidInput: If wind speed is negative or non-finite
        """
        return resolve_wind(wind, target_bearing_radians)

    @staticmethod
    def describe(components: WindComponents) -> Dict[str, str]:
        """Display labels for resolved components."""
        return describe_wind(components)


def get_wind_resolver() -> WindResolver:
    """
    Get a WindResolver instance.

    Returns:
        WindResolver instance
    """
    return WindResolver()
