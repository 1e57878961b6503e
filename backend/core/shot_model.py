"""
Shot model: carry and lateral drift under wind.

carry = base_carry * shape_factor - headwind * carry_coeff * wind_sensitivity
drift = crosswind * drift_coeff * wind_sensitivity

Both results are rounded half-up to whole yards.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from core.calculations import round_half_up
from core.constants import (
    DEFAULT_CLAMP_NEGATIVE_CARRY,
    WIND_CARRY_COEFF,
    WIND_DRIFT_COEFF,
)
from core.models.equipment import Club, ShapeProfile, TrajectoryProfile
from core.models.shot import CarryEstimate
from core.validation import InvalidInput, validate_model_parameters, validate_wind_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShotModelParams:
    """Tunable shot model parameters."""
    wind_carry_coeff: float = WIND_CARRY_COEFF
    wind_drift_coeff: float = WIND_DRIFT_COEFF
    clamp_negative_carry: bool = DEFAULT_CLAMP_NEGATIVE_CARRY

    def __post_init__(self):
        validate_model_parameters(
            wind_carry_coeff=self.wind_carry_coeff,
            wind_drift_coeff=self.wind_drift_coeff,
        )

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for API responses."""
        return {
            'wind_carry_coeff': self.wind_carry_coeff,
            'wind_drift_coeff': self.wind_drift_coeff,
            'clamp_negative_carry': self.clamp_negative_carry,
        }


def compute_shot(
    club: Club,
    shape: ShapeProfile,
    trajectory: TrajectoryProfile,
    headwind: float,
    crosswind: float,
    params: Optional[ShotModelParams] = None
) -> CarryEstimate:
    """
    Predict carry and lateral drift for a club, shape and trajectory.

    Args:
        club: Club with its still-air base carry
        shape: Ball-flight shape; its carry factor multiplies base carry
        trajectory: Launch profile; its wind sensitivity scales both wind effects
        headwind: Headwind component in mph (negative = tailwind)
        crosswind: Crosswind component in mph
        params: Model parameters, or None for defaults

    Returns:
        CarryEstimate in whole yards. Carry is not clamped unless
        params.clamp_negative_carry is set.

    Raises:
        InvalidInput: If a wind component is non-finite or a profile factor is out of range
    """
    if params is None:
        params = ShotModelParams()

    headwind = validate_wind_component(headwind, "Headwind")
    crosswind = validate_wind_component(crosswind, "Crosswind")
    validate_model_parameters(wind_sensitivity=trajectory.wind_sensitivity)
    if shape.carry_factor <= 0 or club.base_carry_yards <= 0:
        raise InvalidInput(
            f"Carry factor and base carry must be > 0 "
            f"(shape {shape.id}: {shape.carry_factor}, club {club.id}: {club.base_carry_yards})"
        )

    base_carry = club.base_carry_yards * shape.carry_factor
    carry_adjustment = -(headwind * params.wind_carry_coeff * trajectory.wind_sensitivity)
    carry_yards = round_half_up(base_carry + carry_adjustment)
    lateral_drift_yards = round_half_up(crosswind * params.wind_drift_coeff * trajectory.wind_sensitivity)

    if carry_yards < 0:
        if params.clamp_negative_carry:
            logger.debug(f"Clamping negative carry {carry_yards} to 0 for {club.id}")
            carry_yards = 0
        else:
            logger.warning(f"Negative carry {carry_yards} yd for {club.id} into {headwind:.1f} mph headwind")

    return CarryEstimate(carry_yards=carry_yards, lateral_drift_yards=lateral_drift_yards)
