"""
Input validation utilities for core functions.

This module provides the error hierarchy raised by the shot model and the
validation functions that guard every public operation. All failures are
local and synchronous: nothing here performs I/O, so there is nothing to
roll back when a check fails.
"""

import logging
import numbers
from typing import Any, Optional

import numpy as np

from core.constants import (
    FULL_CIRCLE_DEGREES,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_WIND_SLIDER_MPH,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Base exception for validation errors."""
    pass


class InvalidCoordinate(ValidationError):
    """Latitude or longitude out of range or non-finite."""
    pass


class InvalidInput(ValidationError):
    """Wind speed, wind bearing or model parameter out of range."""
    pass


class UnknownProfile(ValidationError):
    """Club, shape or trajectory identifier not in the fixed catalog."""
    pass


def _as_finite_float(value: Any, error: type, context: str) -> float:
    """Convert ``value`` to a finite float or raise ``error``."""
    if value is None:
        raise error(f"{context}: Value is None")

    # bool is an int subclass; True/False are never meaningful numbers here
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.floating, np.integer)):
        raise error(f"{context}: Expected a number, got {type(value).__name__}")

    result = float(value)
    if not np.isfinite(result):
        raise error(f"{context}: Invalid value: {result}")

    return result


def validate_coordinate(latitude: Any, longitude: Any, context: str = "Coordinate") -> tuple:
    """
    Validate a latitude/longitude pair.

    Args:
        latitude: Latitude in degrees (-90 to 90)
        longitude: Longitude in degrees (-180 to 180)
        context: Context description for error messages

    Returns:
        Tuple of (latitude, longitude) as floats

    Raises:
        InvalidCoordinate: If either value is non-numeric, non-finite or out of range
    """
    lat = _as_finite_float(latitude, InvalidCoordinate, f"{context} latitude")
    lon = _as_finite_float(longitude, InvalidCoordinate, f"{context} longitude")

    if not MIN_LATITUDE <= lat <= MAX_LATITUDE:
        raise InvalidCoordinate(f"{context}: Invalid latitude {lat} (must be -90 to 90)")

    if not MIN_LONGITUDE <= lon <= MAX_LONGITUDE:
        raise InvalidCoordinate(f"{context}: Invalid longitude {lon} (must be -180 to 180)")

    logger.debug(f"{context}: Validation passed for ({lat}, {lon})")
    return lat, lon


def validate_wind_speed(speed_mph: Any, context: str = "Wind speed") -> float:
    """
    Validate a wind speed.

    Speeds above the input slider bound are legal but logged.

    Raises:
        InvalidInput: If the speed is negative, non-finite or non-numeric
    """
    speed = _as_finite_float(speed_mph, InvalidInput, context)

    if speed < 0:
        raise InvalidInput(f"{context}: Must be >= 0 mph, got {speed}")

    if speed > MAX_WIND_SLIDER_MPH:
        logger.warning(f"{context}: {speed} mph exceeds the {MAX_WIND_SLIDER_MPH} mph input range")

    logger.debug(f"{context}: {speed} mph")
    return speed


def validate_wind_bearing(bearing_degrees: Any, context: str = "Wind bearing") -> float:
    """
    Validate a compass-style wind bearing.

    Unlike direction inputs elsewhere, the bearing is not normalized: a value
    of 360 or more is rejected so that callers notice unit mix-ups.

    Raises:
        InvalidInput: If the bearing is outside [0, 360) or non-finite
    """
    bearing = _as_finite_float(bearing_degrees, InvalidInput, context)

    if not 0 <= bearing < FULL_CIRCLE_DEGREES:
        raise InvalidInput(f"{context}: Must be in [0, 360) degrees, got {bearing}")

    logger.debug(f"{context}: {bearing}°")
    return bearing


def validate_model_parameters(
    wind_carry_coeff: Optional[float] = None,
    wind_drift_coeff: Optional[float] = None,
    wind_sensitivity: Optional[float] = None,
) -> None:
    """
    Validate shot model parameter ranges.

    Args:
        wind_carry_coeff: Yards lost per mph of headwind
        wind_drift_coeff: Yards of drift per mph of crosswind
        wind_sensitivity: Trajectory wind sensitivity multiplier

    Raises:
        InvalidInput: If any parameter is negative or non-finite
    """
    for name, value in (
        ("Wind carry coefficient", wind_carry_coeff),
        ("Wind drift coefficient", wind_drift_coeff),
        ("Wind sensitivity", wind_sensitivity),
    ):
        if value is None:
            continue
        checked = _as_finite_float(value, InvalidInput, name)
        if checked < 0:
            raise InvalidInput(f"{name} must be >= 0, got {checked}")
        logger.debug(f"{name}: {checked}")


def validate_wind_component(value: Any, context: str = "Wind component") -> float:
    """
    Validate a resolved headwind or crosswind component in mph.

    Components are signed, so only finiteness is checked.

    Raises:
        InvalidInput: If the value is non-finite or non-numeric
    """
    component = _as_finite_float(value, InvalidInput, context)
    logger.debug(f"{context}: {component} mph")
    return component
