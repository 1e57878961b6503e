"""
Tests for distance, bearing and rounding calculations.
"""

import math

import pytest

from core.bearing import BearingCalculatorFactory, GreatCircleBearingCalculator, PlanarBearingCalculator
from core.calculations import (
    bearing_to_compass_degrees,
    calculate_distance_meters,
    calculate_distance_yards,
    calculate_initial_bearing,
    calculate_target_bearing,
    meters_to_yards,
    round_half_up,
    yards_to_meters,
)
from core.models.geo import GeoPoint, as_geopoint
from core.validation import InvalidCoordinate, InvalidInput

HOLE_1_TEE = GeoPoint(36.3188, -78.3843)
HOLE_1_GREEN = GeoPoint(36.3226, -78.3837)

SAMPLE_POINTS = [
    GeoPoint(36.3188, -78.3843),
    GeoPoint(36.3227, -78.3835),
    GeoPoint(0.0, 0.0),
    GeoPoint(-33.8688, 151.2093),
    GeoPoint(51.5074, -0.1278),
    GeoPoint(89.9, 179.9),
]


class TestDistance:
    """Tests for calculate_distance_yards."""

    def test_hole_one_tee_to_green(self):
        """Tee to green on hole 1 is roughly 466 yards."""
        distance = calculate_distance_yards(HOLE_1_TEE, HOLE_1_GREEN)
        assert 460 <= distance <= 475

    def test_returns_int(self):
        assert isinstance(calculate_distance_yards(HOLE_1_TEE, HOLE_1_GREEN), int)

    def test_symmetric(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                assert calculate_distance_yards(a, b) == calculate_distance_yards(b, a)

    def test_identity_is_zero(self):
        for p in SAMPLE_POINTS:
            assert calculate_distance_yards(p, p) == 0

    def test_accepts_tuples(self):
        """(lat, lon) pairs work the same as GeoPoints."""
        assert calculate_distance_yards((36.3188, -78.3843), (36.3226, -78.3837)) == \
            calculate_distance_yards(HOLE_1_TEE, HOLE_1_GREEN)

    def test_one_degree_of_latitude(self):
        """One degree on a 6371 km sphere is about 111.19 km."""
        meters = calculate_distance_meters((0.0, 0.0), (1.0, 0.0))
        assert meters == pytest.approx(111_194.93, rel=1e-5)

    def test_invalid_latitude_raises(self):
        with pytest.raises(InvalidCoordinate):
            calculate_distance_yards((91.0, 0.0), (0.0, 0.0))

    def test_invalid_longitude_on_second_point_raises(self):
        with pytest.raises(InvalidCoordinate):
            calculate_distance_yards((0.0, 0.0), (0.0, -180.5))

    def test_non_finite_raises(self):
        with pytest.raises(InvalidCoordinate):
            calculate_distance_yards((float('nan'), 0.0), (0.0, 0.0))
        with pytest.raises(InvalidCoordinate):
            calculate_distance_yards((0.0, 0.0), (0.0, float('inf')))


class TestGeoPoint:
    """Tests for GeoPoint validation."""

    def test_latitude_91_raises(self):
        with pytest.raises(InvalidCoordinate):
            GeoPoint(91, 0)

    def test_bounds_are_inclusive(self):
        GeoPoint(90, 180)
        GeoPoint(-90, -180)

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidCoordinate):
            GeoPoint("36.3", -78.3)
        with pytest.raises(InvalidCoordinate):
            GeoPoint(None, 0)

    def test_bool_is_not_a_coordinate(self):
        with pytest.raises(InvalidCoordinate):
            GeoPoint(True, 0)

    def test_stores_floats(self):
        p = GeoPoint(36, -78)
        assert isinstance(p.latitude, float)
        assert p.as_tuple() == (36.0, -78.0)

    def test_from_tuple_wrong_length_raises(self):
        with pytest.raises(InvalidCoordinate):
            GeoPoint.from_tuple((1.0, 2.0, 3.0))

    def test_as_geopoint_passthrough(self):
        assert as_geopoint(HOLE_1_TEE) is HOLE_1_TEE


class TestTargetBearing:
    """Tests for the planar target bearing."""

    def test_due_north_is_zero(self):
        assert calculate_target_bearing((36.0, -78.0), (36.01, -78.0)) == 0.0

    def test_due_east_is_half_pi(self):
        assert calculate_target_bearing((36.0, -78.0), (36.0, -77.99)) == pytest.approx(math.pi / 2)

    def test_due_south_is_pi(self):
        assert abs(calculate_target_bearing((36.0, -78.0), (35.99, -78.0))) == pytest.approx(math.pi)

    def test_due_west_is_minus_half_pi(self):
        assert calculate_target_bearing((36.0, -78.0), (36.0, -78.01)) == pytest.approx(-math.pi / 2)

    def test_same_point_falls_back_to_zero(self):
        assert calculate_target_bearing(HOLE_1_TEE, HOLE_1_TEE) == 0.0

    def test_no_longitude_scaling(self):
        """Equal degree deltas give 45 degrees regardless of latitude."""
        bearing = calculate_target_bearing((60.0, 10.0), (60.01, 10.01))
        assert bearing == pytest.approx(math.pi / 4)

    def test_invalid_point_raises(self):
        with pytest.raises(InvalidCoordinate):
            calculate_target_bearing((0.0, 0.0), (-91.0, 0.0))


class TestInitialBearing:
    """Tests for the great-circle initial bearing."""

    def test_due_north(self):
        assert calculate_initial_bearing((0.0, 0.0), (1.0, 0.0)) == pytest.approx(0.0)

    def test_east_along_equator(self):
        assert calculate_initial_bearing((0.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)

    def test_scales_longitude_at_high_latitude(self):
        """At 60N a degree of longitude is half as long, so the bearing is steeper than 45."""
        bearing = calculate_initial_bearing((60.0, 10.0), (60.01, 10.01))
        assert math.degrees(bearing) == pytest.approx(26.57, abs=0.1)

    def test_same_point(self):
        assert calculate_initial_bearing(HOLE_1_TEE, HOLE_1_TEE) == 0.0


class TestBearingFactory:
    """Tests for BearingCalculatorFactory."""

    def test_default_is_planar(self):
        assert BearingCalculatorFactory.get_default_method() == 'planar'
        calculator = BearingCalculatorFactory.create('planar')
        assert isinstance(calculator, PlanarBearingCalculator)

    def test_great_circle(self):
        calculator = BearingCalculatorFactory.create('Great_Circle')
        assert isinstance(calculator, GreatCircleBearingCalculator)

    def test_unknown_method_raises(self):
        with pytest.raises(InvalidInput):
            BearingCalculatorFactory.create('rhumb')

    def test_available_methods(self):
        methods = BearingCalculatorFactory.get_available_methods()
        assert set(methods) == {'planar', 'great_circle'}


class TestConversions:
    """Tests for unit conversions and rounding."""

    def test_meters_to_yards(self):
        assert meters_to_yards(100) == pytest.approx(109.361)

    def test_round_trip(self):
        assert yards_to_meters(meters_to_yards(250.0)) == pytest.approx(250.0)

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2
        assert round_half_up(0.49) == 0
        assert round_half_up(-15.2) == -15

    def test_bearing_to_compass_degrees(self):
        assert bearing_to_compass_degrees(0.0) == 0.0
        assert bearing_to_compass_degrees(-math.pi / 2) == pytest.approx(270.0)
        assert bearing_to_compass_degrees(math.pi) == pytest.approx(180.0)
