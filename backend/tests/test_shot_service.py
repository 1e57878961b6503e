"""
Tests for the shot planning pipeline, session and yardage tables.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import pytest

from core.models.course import HENDERSON_CC
from core.models.equipment import ClubId, get_club
from core.models.shot import ShotInputs, ShotResult, WindVector
from core.shot_model import ShotModelParams
from core.validation import InvalidCoordinate, InvalidInput, UnknownProfile
from services.geodesy_service import GeodesyService, get_geodesy_service
from services.shot_service import (
    ADVISOR_FALLBACK_TEXT,
    ShotSession,
    build_advisor_context,
    club_sweep,
    get_shot_planner,
    yardage_book,
)

ORIGIN = (36.0, -78.0)
NORTH_TARGET = (36.01, -78.0)  # Target bearing 0


@pytest.fixture
def planner():
    return get_shot_planner(bearing_method='planar', params=ShotModelParams())


def _inputs(wind_bearing=0.0, speed=10.0, club='DR', trajectory='std'):
    return ShotInputs.build(
        player=ORIGIN,
        target=NORTH_TARGET,
        wind=WindVector(speed, wind_bearing),
        club=club,
        shape='straight',
        trajectory=trajectory,
    )


class TestGeodesyService:
    """Tests for GeodesyService."""

    def test_distance_and_bearing(self):
        service = get_geodesy_service()
        hole = HENDERSON_CC.hole(1)
        assert 460 <= service.distance(hole.tee, hole.green) <= 475
        assert service.target_bearing(ORIGIN, NORTH_TARGET) == 0.0

    def test_zero_distance_bearing_fallback(self):
        service = GeodesyService()
        assert service.target_bearing(ORIGIN, ORIGIN) == 0.0
        assert service.distance(ORIGIN, ORIGIN) == 0

    def test_great_circle_method(self):
        service = get_geodesy_service('great_circle')
        assert service.bearing_method == 'great_circle'
        assert service.target_bearing((0.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)

    def test_unknown_method_raises(self):
        with pytest.raises(InvalidInput):
            GeodesyService('loxodrome')


class TestShotPlanner:
    """Tests for the full pipeline."""

    def test_pure_headwind(self, planner):
        result = planner.plan(_inputs(wind_bearing=0.0))
        assert result.carry_yards == 247
        assert result.lateral_drift_yards == 0
        assert result.headwind_mph == pytest.approx(10.0)

    def test_pure_tailwind(self, planner):
        result = planner.plan(_inputs(wind_bearing=180.0))
        assert result.carry_yards == 283

    def test_pure_crosswind(self, planner):
        result = planner.plan(_inputs(wind_bearing=90.0))
        assert result.carry_yards == 265
        assert result.lateral_drift_yards == 12

    def test_distance_to_target(self, planner):
        """0.01 degrees of latitude is about 1216 yards."""
        result = planner.plan(_inputs())
        assert 1210 <= result.distance_to_target_yards <= 1222
        assert result.carry_remaining_yards == result.distance_to_target_yards - 247

    def test_hole_one(self, planner):
        hole = HENDERSON_CC.hole(1)
        inputs = ShotInputs.build(hole.tee, hole.green, WindVector(0, 0), 'DR')
        result = planner.plan(inputs)
        assert 460 <= result.distance_to_target_yards <= 475
        assert result.carry_yards == 265

    def test_result_to_dict(self, planner):
        data = planner.plan(_inputs()).to_dict()
        assert data['carry_yards'] == 247
        assert set(data) >= {'distance_to_target_yards', 'carry_yards', 'lateral_drift_yards'}

    def test_build_rejects_bad_values(self):
        with pytest.raises(InvalidCoordinate):
            ShotInputs.build((91.0, 0.0), NORTH_TARGET, WindVector(0, 0), 'DR')
        with pytest.raises(InvalidInput):
            ShotInputs.build(ORIGIN, NORTH_TARGET, {'speed_mph': -1, 'bearing_degrees': 0}, 'DR')
        with pytest.raises(UnknownProfile):
            ShotInputs.build(ORIGIN, NORTH_TARGET, WindVector(0, 0), 'XX')

    def test_build_accepts_wind_dict(self):
        inputs = ShotInputs.build(ORIGIN, NORTH_TARGET, {'speed_mph': 5, 'bearing_degrees': 90}, 'PW')
        assert inputs.wind == WindVector(5, 90)
        assert inputs.club == get_club(ClubId.PITCHING_WEDGE)

    def test_build_rejects_malformed_wind(self):
        """Wrong wind keys or a bare number raise InvalidInput, not TypeError."""
        with pytest.raises(InvalidInput):
            ShotInputs.build(ORIGIN, NORTH_TARGET, {'speed': 5}, 'DR')
        with pytest.raises(InvalidInput):
            ShotInputs.build(ORIGIN, NORTH_TARGET, 12, 'DR')


class TestShotSession:
    """Tests for ShotSession snapshot handling."""

    def test_initial_result(self, planner):
        session = ShotSession(_inputs(), planner)
        assert session.result.carry_yards == 247

    def test_update_club(self, planner):
        session = ShotSession(_inputs(), planner)
        result = session.update(club='7I')
        assert result.carry_yards == 152  # 170 - 18
        assert session.inputs.club.id == '7I'

    def test_update_several_fields_at_once(self, planner):
        session = ShotSession(_inputs(), planner)
        result = session.update(wind=WindVector(10, 90), trajectory='high')
        assert result.carry_yards == 265
        assert result.lateral_drift_yards == 19

    def test_failed_update_keeps_last_valid_pair(self, planner):
        session = ShotSession(_inputs(), planner)
        before = session.snapshot()
        with pytest.raises(UnknownProfile):
            session.update(club='XX', wind=WindVector(20, 0))
        with pytest.raises(InvalidCoordinate):
            session.update(player=(0.0, 200.0))
        assert session.snapshot() == before

    def test_unknown_field_raises(self, planner):
        session = ShotSession(_inputs(), planner)
        with pytest.raises(InvalidInput):
            session.update(altitude=480)

    def test_malformed_wind_update_keeps_last_valid_pair(self, planner):
        session = ShotSession(_inputs(), planner)
        before = session.snapshot()
        with pytest.raises(InvalidInput):
            session.update(wind={'speed': 5})
        with pytest.raises(InvalidInput):
            session.update(wind=12)
        assert session.snapshot() == before

    def test_update_accepts_wind_dict(self, planner):
        session = ShotSession(_inputs(), planner)
        result = session.update(wind={'speed_mph': 10, 'bearing_degrees': 180})
        assert result.carry_yards == 283

    def test_select_hole_and_reset(self, planner):
        session = ShotSession(_inputs(speed=0.0), planner)
        hole = HENDERSON_CC.hole(2)
        session.select_hole(hole)
        assert session.inputs.player == hole.tee
        assert session.inputs.target == hole.green

        session.update(player=(36.3224, -78.3825))
        moved = session.result.distance_to_target_yards
        result = session.reset_to_tee(hole)
        assert session.inputs.player == hole.tee
        assert result.distance_to_target_yards > moved

    def test_concurrent_updates_stay_coherent(self, planner):
        """Every observed pair is exactly what the pipeline gives for its inputs."""
        session = ShotSession(_inputs(), planner)
        clubs = ['DR', '3W', '4I', '7I', '9I', 'PW', 'SW']
        positions = [(36.0 + i * 0.001, -78.0) for i in range(7)]
        observed = []

        def work(i):
            session.update(club=clubs[i % 7], player=positions[(i * 3) % 7])
            observed.append(session.snapshot())

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(work, range(56)))

        assert len(observed) == 56
        for inputs, result in observed:
            assert result == planner.plan(inputs)


class TestClubSweep:
    """Tests for club_sweep."""

    def test_one_row_per_club(self, planner):
        sweep = club_sweep(_inputs(), planner)
        assert list(sweep['club_id']) == ['DR', '3W', '4I', '7I', '9I', 'PW', 'SW']
        assert list(sweep['carry_yards']) == [247, 217, 187, 152, 127, 107, 82]

    def test_distance_identical_for_all_clubs(self, planner):
        sweep = club_sweep(_inputs(), planner)
        assert sweep['distance_to_target_yards'].nunique() == 1


class TestYardageBook:
    """Tests for yardage_book."""

    def test_calm_book(self, planner):
        book = yardage_book(HENDERSON_CC, WindVector(0, 0), planner=planner)
        assert list(book['hole']) == [1, 2]
        assert book.loc[0, 'carry_DR'] == 265
        assert book.loc[1, 'carry_SW'] == 100
        assert 460 <= book.loc[0, 'measured_yards'] <= 475

    def test_bearing_column(self, planner):
        book = yardage_book(HENDERSON_CC, WindVector(0, 0), planner=planner)
        # Hole 2 plays east-south-east
        assert 90 < book.loc[1, 'bearing_degrees'] < 180

    def test_unknown_shape_raises(self, planner):
        with pytest.raises(UnknownProfile):
            yardage_book(HENDERSON_CC, WindVector(0, 0), shape='hook', planner=planner)


class TestAdvisorContext:
    """Tests for build_advisor_context."""

    def test_context_values(self, planner):
        hole = HENDERSON_CC.hole(1)
        inputs = ShotInputs.build(hole.tee, hole.green, WindVector(12, 0), '3W', 'fade', 'stinger')
        result = planner.plan(inputs)
        context = build_advisor_context(hole, inputs, result)

        assert context['hole_number'] == 1
        assert context['par'] == 5
        assert context['distance_to_target_yards'] == result.distance_to_target_yards
        assert (context['club'], context['shape'], context['trajectory']) == ('3-Wood', 'Fade', 'Stinger')
        assert context['wind_speed_mph'] == 12.0
        assert context['fallback_text'] == ADVISOR_FALLBACK_TEXT

    def test_result_is_independent_of_snapshot_copy(self, planner):
        inputs = _inputs()
        changed = replace(inputs, club=get_club('SW'))
        assert planner.plan(inputs) != planner.plan(changed)
        assert isinstance(planner.plan(inputs), ShotResult)
