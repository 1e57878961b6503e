"""
Application settings and configuration.

This module contains application-specific configuration, UI defaults, and
environment overrides for the shot model. For model constants, see the
core.constants module.
"""

import os
import logging
from typing import Dict, Any

# Import model constants from core module
from core.constants import (
    DEFAULT_CLAMP_NEGATIVE_CARRY,
    MAX_WIND_SLIDER_MPH,
    WIND_CARRY_COEFF,
    WIND_DRIFT_COEFF,
)
from core.models.course import HENDERSON_CC

# App information
APP_NAME = "Fairway Lab"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Plan golf shots with geodesic distances and wind-adjusted carry"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Shot model parameters (overridable from the environment)
DEFAULT_WIND_CARRY_COEFF = _env_float("FAIRWAY_WIND_CARRY_COEFF", WIND_CARRY_COEFF)
DEFAULT_WIND_DRIFT_COEFF = _env_float("FAIRWAY_WIND_DRIFT_COEFF", WIND_DRIFT_COEFF)
DEFAULT_CLAMP_CARRY = _env_bool("FAIRWAY_CLAMP_NEGATIVE_CARRY", DEFAULT_CLAMP_NEGATIVE_CARRY)

# UI defaults
DEFAULT_WIND_SPEED_MPH = 12.0
DEFAULT_WIND_BEARING_DEGREES = 0.0  # Wind out of the north
DEFAULT_CLUB_ID = "DR"
DEFAULT_SHAPE_ID = "straight"
DEFAULT_TRAJECTORY_ID = "std"
DEFAULT_BEARING_METHOD = "planar"
DEFAULT_COURSE = HENDERSON_CC

# Slider ranges
WIND_SPEED_RANGE = {"min": 0, "max": MAX_WIND_SLIDER_MPH, "step": 1}
WIND_BEARING_RANGE = {"min": 0, "max": 359, "step": 1}

# Logging configuration
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# =============== Configuration Classes ===============
# These classes provide typed access to configuration sections

class ShotModelConfig:
    """Configuration parameters for the carry/drift model."""
    WIND_CARRY_COEFF = DEFAULT_WIND_CARRY_COEFF
    WIND_DRIFT_COEFF = DEFAULT_WIND_DRIFT_COEFF
    CLAMP_NEGATIVE_CARRY = DEFAULT_CLAMP_CARRY

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get shot model configuration as a dictionary."""
        return {
            'wind_carry_coeff': cls.WIND_CARRY_COEFF,
            'wind_drift_coeff': cls.WIND_DRIFT_COEFF,
            'clamp_negative_carry': cls.CLAMP_NEGATIVE_CARRY,
        }


class WindConfig:
    """Configuration parameters for wind input."""
    DEFAULT_SPEED = DEFAULT_WIND_SPEED_MPH
    DEFAULT_BEARING = DEFAULT_WIND_BEARING_DEGREES
    MAX_SLIDER_SPEED = MAX_WIND_SLIDER_MPH

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get wind configuration as a dictionary."""
        return {
            'default_speed_mph': cls.DEFAULT_SPEED,
            'default_bearing_degrees': cls.DEFAULT_BEARING,
            'max_slider_speed_mph': cls.MAX_SLIDER_SPEED,
        }


class GeodesyConfig:
    """Configuration parameters for distance and bearing."""
    BEARING_METHOD = DEFAULT_BEARING_METHOD

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get geodesy configuration as a dictionary."""
        return {
            'bearing_method': cls.BEARING_METHOD,
        }
