"""
Constants for the Fairway Lab application.

This module contains all the mathematical, model and domain-specific
constants used throughout the codebase. Constants are grouped by their purpose
and documented with their units where applicable.
"""

# =============================================================================
# CONVERSION FACTORS
# =============================================================================

# Distance conversions
METERS_TO_YARDS = 1.09361  # 1 m = 1.09361 yd
YARDS_TO_METERS = 1 / METERS_TO_YARDS
METERS_PER_KILOMETER = 1000

# Spherical-earth approximation (mean radius)
EARTH_RADIUS_METERS = 6_371_000
EARTH_RADIUS_KILOMETERS = EARTH_RADIUS_METERS / METERS_PER_KILOMETER

# =============================================================================
# ANGLE AND COORDINATE BOUNDS (degrees)
# =============================================================================

FULL_CIRCLE_DEGREES = 360

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Bearing returned when player and target coincide
ZERO_DISTANCE_BEARING_RADIANS = 0.0

# =============================================================================
# SHOT MODEL PARAMETERS
# =============================================================================

# Tunable model parameters, not physical constants
WIND_CARRY_COEFF = 1.8  # Yards of carry lost per mph of headwind (before trajectory scaling)
WIND_DRIFT_COEFF = 1.2  # Yards of lateral drift per mph of crosswind (before trajectory scaling)

# Negative carry is legal output of the model (strong headwind, short club)
DEFAULT_CLAMP_NEGATIVE_CARRY = False

# =============================================================================
# WIND THRESHOLDS
# =============================================================================

MAX_WIND_SLIDER_MPH = 40  # Input surface bound only, not enforced by the model
CALM_WIND_THRESHOLD_MPH = 0.5  # Components below this are labelled calm

# =============================================================================
# VALIDATION
# =============================================================================

assert abs(METERS_TO_YARDS * YARDS_TO_METERS - 1.0) < 1e-12, \
    "Yard and meter conversion factors must invert each other"
