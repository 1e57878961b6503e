"""
Wind decomposition relative to the target line.
"""

import math
import logging
from typing import Dict

import numpy as np

from core.constants import CALM_WIND_THRESHOLD_MPH
from core.models.shot import WindComponents, WindVector
from core.validation import InvalidInput, validate_wind_bearing, validate_wind_speed

logger = logging.getLogger(__name__)


def relative_wind_angle(wind: WindVector, target_bearing_radians: float) -> float:
    """Angle between the wind's origin and the target line, in radians."""
    return math.radians(wind.bearing_degrees) - target_bearing_radians


def resolve_wind(wind: WindVector, target_bearing_radians: float) -> WindComponents:
    """
    Decompose a wind vector into headwind and crosswind components.

    Parameters:
    - wind: Wind speed in mph and the compass bearing it blows from
    - target_bearing_radians: Bearing of the target line, clockwise from north

    Returns:
    - WindComponents in mph
      - headwind > 0 means wind into the player's face, < 0 a tailwind
      - crosswind > 0 means wind from the right of the target line

    Raises:
    - InvalidInput: If the wind speed is negative or non-finite, or the
      target bearing is non-finite
    """
    validate_wind_speed(wind.speed_mph)
    validate_wind_bearing(wind.bearing_degrees)
    if not np.isfinite(target_bearing_radians):
        raise InvalidInput(f"Target bearing: Invalid value: {target_bearing_radians}")

    angle = relative_wind_angle(wind, target_bearing_radians)
    headwind = math.cos(angle) * wind.speed_mph
    crosswind = math.sin(angle) * wind.speed_mph

    logger.debug(f"Wind {wind.speed_mph} mph @ {wind.bearing_degrees}° vs target "
                 f"{math.degrees(target_bearing_radians):.1f}° -> head {headwind:.2f}, cross {crosswind:.2f}")

    return WindComponents(headwind=headwind, crosswind=crosswind)


def describe_wind(components: WindComponents) -> Dict[str, str]:
    """
    Label wind components for display.

    Returns:
        Dict with 'along' ('Headwind', 'Tailwind' or 'Calm') and
        'across' ('Right-to-left', 'Left-to-right' or 'None')
    """
    if abs(components.headwind) < CALM_WIND_THRESHOLD_MPH:
        along = 'Calm'
    else:
        along = 'Headwind' if components.headwind > 0 else 'Tailwind'

    if abs(components.crosswind) < CALM_WIND_THRESHOLD_MPH:
        across = 'None'
    else:
        across = 'Right-to-left' if components.crosswind > 0 else 'Left-to-right'

    return {'along': along, 'across': across}
