"""
Shot planning service.

This module composes the geodesy, wind and shot-model steps into one
pipeline that turns a ShotInputs snapshot into a ShotResult, and provides
the session object the input surface uses to change inputs atomically.
"""

import logging
import threading
from dataclasses import fields, replace
from typing import Any, Dict, Optional, Tuple, Union

import pandas as pd

from core.calculations import bearing_to_compass_degrees
from core.models.course import Course, Hole
from core.models.equipment import (
    CLUBS, Club, ClubId, ShapeId, ShapeProfile, TrajectoryId, TrajectoryProfile,
    get_club, get_shape, get_trajectory,
)
from core.models.geo import as_geopoint
from core.models.shot import CarryEstimate, ShotInputs, ShotResult, WindVector
from core.shot_model import ShotModelParams, compute_shot
from core.validation import InvalidInput
from config.settings import ShotModelConfig
from services.geodesy_service import GeodesyService, get_geodesy_service
from services.wind_service import WindResolver, get_wind_resolver

logger = logging.getLogger(__name__)

ADVISOR_FALLBACK_TEXT = "Signal's gone a bit foggy, sir."


def default_model_params() -> ShotModelParams:
    """Shot model parameters from configuration."""
    return ShotModelParams(
        wind_carry_coeff=ShotModelConfig.WIND_CARRY_COEFF,
        wind_drift_coeff=ShotModelConfig.WIND_DRIFT_COEFF,
        clamp_negative_carry=ShotModelConfig.CLAMP_NEGATIVE_CARRY,
    )


class ShotModel:
    """Carry and drift for a club, shape and trajectory under resolved wind."""

    def __init__(self, params: Optional[ShotModelParams] = None):
        self.params = params if params is not None else default_model_params()

    def compute_shot(
        self,
        club: Union[ClubId, Club, str],
        shape: Union[ShapeId, ShapeProfile, str],
        trajectory: Union[TrajectoryId, TrajectoryProfile, str],
        headwind: float,
        crosswind: float
    ) -> CarryEstimate:
        """
        Compute carry and lateral drift.

        Equipment may be given as profiles, enum members or string ids.

        Raises:
            UnknownProfile: If an equipment id is not in its catalog
        """
        return compute_shot(
            get_club(club),
            get_shape(shape),
            get_trajectory(trajectory),
            headwind,
            crosswind,
            params=self.params,
        )


class ShotPlanner:
    """
    Geodesy -> wind -> shot model pipeline.

    Every call reads exactly one ShotInputs snapshot, so the distance, carry
    and drift of a result always belong together.
    """

    def __init__(
        self,
        geodesy: Optional[GeodesyService] = None,
        wind_resolver: Optional[WindResolver] = None,
        shot_model: Optional[ShotModel] = None
    ):
        self.geodesy = geodesy or get_geodesy_service()
        self.wind_resolver = wind_resolver or get_wind_resolver()
        self.shot_model = shot_model or ShotModel()

    def plan(self, inputs: ShotInputs) -> ShotResult:
        """
        Compute the shot result for a snapshot.

        Raises:
            ValidationError: If any input is invalid; nothing is partially computed
        """
        distance = self.geodesy.distance(inputs.player, inputs.target)
        bearing = self.geodesy.target_bearing(inputs.player, inputs.target)
        components = self.wind_resolver.resolve(inputs.wind, bearing)
        estimate = self.shot_model.compute_shot(
            inputs.club, inputs.shape, inputs.trajectory,
            components.headwind, components.crosswind
        )

        logger.debug(f"Planned {inputs.club.id}/{inputs.shape.id}/{inputs.trajectory.id}: "
                     f"{distance} yd to target, carry {estimate.carry_yards}, drift {estimate.lateral_drift_yards}")

        return ShotResult(
            distance_to_target_yards=distance,
            carry_yards=estimate.carry_yards,
            lateral_drift_yards=estimate.lateral_drift_yards,
            target_bearing_radians=bearing,
            headwind_mph=components.headwind,
            crosswind_mph=components.crosswind,
        )


def get_shot_planner(
    bearing_method: Optional[str] = None,
    params: Optional[ShotModelParams] = None
) -> ShotPlanner:
    """
    Get a ShotPlanner instance.

    Args:
        bearing_method: Bearing method name, or None for the configured default
        params: Shot model parameters, or None for the configured defaults

    Returns:
        ShotPlanner instance
    """
    return ShotPlanner(
        geodesy=get_geodesy_service(bearing_method),
        wind_resolver=get_wind_resolver(),
        shot_model=ShotModel(params),
    )


_INPUT_FIELDS = {f.name for f in fields(ShotInputs)}


def _coerce_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize raw field values (tuples, ids, dicts) to snapshot types."""
    unknown = set(changes) - _INPUT_FIELDS
    if unknown:
        raise InvalidInput(f"Unknown shot input fields: {sorted(unknown)}")

    coerced = {}
    for name, value in changes.items():
        if name in ('player', 'target'):
            coerced[name] = as_geopoint(value)
        elif name == 'wind':
            coerced[name] = value if isinstance(value, WindVector) else WindVector.from_mapping(value)
        elif name == 'club':
            coerced[name] = get_club(value)
        elif name == 'shape':
            coerced[name] = get_shape(value)
        else:
            coerced[name] = get_trajectory(value)
    return coerced


class ShotSession:
    """
    Current inputs and their result, kept as one coherent pair.

    Updates replace the whole snapshot and its result under a lock. A failed
    update raises and leaves the last valid pair in place.
    """

    def __init__(self, inputs: ShotInputs, planner: Optional[ShotPlanner] = None):
        self._planner = planner or get_shot_planner()
        self._lock = threading.Lock()
        self._inputs = inputs
        self._result = self._planner.plan(inputs)

    @property
    def inputs(self) -> ShotInputs:
        return self.snapshot()[0]

    @property
    def result(self) -> ShotResult:
        return self.snapshot()[1]

    def snapshot(self) -> Tuple[ShotInputs, ShotResult]:
        """Return the current (inputs, result) pair."""
        with self._lock:
            return self._inputs, self._result

    def update(self, **changes: Any) -> ShotResult:
        """
        Change any of player, target, wind, club, shape or trajectory at once.

        Raises:
            ValidationError: If a new value is invalid; state is unchanged
        """
        coerced = _coerce_changes(changes)
        with self._lock:
            new_inputs = replace(self._inputs, **coerced)
            new_result = self._planner.plan(new_inputs)
            self._inputs, self._result = new_inputs, new_result
            return new_result

    def select_hole(self, hole: Hole) -> ShotResult:
        """Move to a new hole: player on the tee, target on the green."""
        return self.update(player=hole.tee, target=hole.green)

    def reset_to_tee(self, hole: Hole) -> ShotResult:
        """Put the player back on the tee of the current hole."""
        return self.update(player=hole.tee)


def club_sweep(inputs: ShotInputs, planner: Optional[ShotPlanner] = None) -> pd.DataFrame:
    """
    Carry and drift for every club under one snapshot's wind and target.

    Args:
        inputs: Snapshot whose club is ignored
        planner: Pipeline to use, or None for the default

    Returns:
        DataFrame with one row per club in catalog order
    """
    planner = planner or get_shot_planner()

    rows = []
    for club in CLUBS.values():
        result = planner.plan(replace(inputs, club=club))
        rows.append({
            'club_id': club.id,
            'club_name': club.name,
            'distance_to_target_yards': result.distance_to_target_yards,
            'carry_yards': result.carry_yards,
            'lateral_drift_yards': result.lateral_drift_yards,
            'carry_remaining_yards': result.carry_remaining_yards,
        })

    return pd.DataFrame(rows)


def yardage_book(
    course: Course,
    wind: WindVector,
    shape: Union[ShapeId, ShapeProfile, str] = ShapeId.STRAIGHT,
    trajectory: Union[TrajectoryId, TrajectoryProfile, str] = TrajectoryId.STANDARD,
    planner: Optional[ShotPlanner] = None
) -> pd.DataFrame:
    """
    Tee-to-green distance and wind-adjusted carry for every hole and club.

    Returns:
        DataFrame with one row per hole; carry columns are named carry_<club id>
    """
    planner = planner or get_shot_planner()
    if not course.holes:
        return pd.DataFrame()

    rows = []
    for hole in course.holes:
        inputs = ShotInputs.build(hole.tee, hole.green, wind, ClubId.DRIVER, shape, trajectory)
        sweep = club_sweep(inputs, planner)
        first = planner.plan(inputs)

        row = {
            'hole': hole.number,
            'par': hole.par,
            'handicap': hole.handicap,
            'card_yards': hole.length_yards,
            'measured_yards': first.distance_to_target_yards,
            'bearing_degrees': round(bearing_to_compass_degrees(first.target_bearing_radians), 1),
            'headwind_mph': round(first.headwind_mph, 1),
            'crosswind_mph': round(first.crosswind_mph, 1),
        }
        for _, club_row in sweep.iterrows():
            row[f"carry_{club_row['club_id']}"] = int(club_row['carry_yards'])
        rows.append(row)

    logger.info(f"Built yardage book for {course.name}: {len(rows)} holes, wind {wind.speed_mph} mph")
    return pd.DataFrame(rows)


def build_advisor_context(hole: Hole, inputs: ShotInputs, result: ShotResult) -> Dict[str, Any]:
    """
    Values handed to the external caddie advisor.

    The advisor composes its own text from these; when it fails, callers show
    ADVISOR_FALLBACK_TEXT.
    """
    return {
        'hole_number': hole.number,
        'par': hole.par,
        'distance_to_target_yards': result.distance_to_target_yards,
        'club': inputs.club.name,
        'shape': inputs.shape.name,
        'trajectory': inputs.trajectory.name,
        'wind_speed_mph': inputs.wind.speed_mph,
        'wind_bearing_degrees': inputs.wind.bearing_degrees,
        'fallback_text': ADVISOR_FALLBACK_TEXT,
    }

