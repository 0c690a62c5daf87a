"""
Tests for the concentric year/month/day engine.

Geometry of the default 200px config: center (100, 100), padding 4, so the
bands are 32px wide: year 0-32, month 32-64, day 64-96 (rings at 16/48/80).
The arc starts at 12 o'clock, so 3 o'clock is a quarter of every range.
"""
from datetime import date

import pytest

from components.knob_widgets.handles import OrbiterHandle
from conftest import FakeSurface, polar
from models.drag_session import DragState
from models.geometry import Range, Vec2
from models.knob_config import DateKnobConfig
from services.date_knob_engine import DateKnobEngine


CENTER = Vec2(100, 100)
YEAR_R, MONTH_R, DAY_R = 20, 40, 80


def at(radius, angle):
    return polar(CENTER, radius, angle)


@pytest.fixture
def emitted():
    return []


@pytest.fixture
def make_engine(date_config, emitted):
    def make(value, lock_band=False, config=None):
        return DateKnobEngine(config or date_config, value, on_change=emitted.append, lock_band=lock_band)
    return make


# ══════════════════════════════════════════════════════════════════════════
# Geometry
# ══════════════════════════════════════════════════════════════════════════

class TestGeometry:

    def test_band_layout(self, make_engine):
        engine = make_engine(date(2010, 6, 15))
        assert engine.band_width == 32
        assert engine.ring_radii == (16, 48, 80)

    @pytest.mark.parametrize("radius, band", [
        (0, 0), (31, 0), (33, 1), (63, 1), (65, 2), (96, 2), (150, 2),
    ])
    def test_band_at(self, make_engine, radius, band):
        engine = make_engine(date(2010, 6, 15))
        assert engine.band_at(at(radius, 30)) == band


# ══════════════════════════════════════════════════════════════════════════
# Single band drags
# ══════════════════════════════════════════════════════════════════════════

class TestBandDrag:

    def test_year_band(self, make_engine, emitted):
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(YEAR_R, 0))
        # quarter of 2000..2030 -> 2007.5 -> 2008
        assert engine.on_pointer_move(at(YEAR_R, 0)) == date(2008, 6, 15)
        assert engine.active_band == 0
        assert emitted == [date(2008, 6, 15)]

    def test_month_band(self, make_engine):
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(MONTH_R, 0))
        # 1 + 0.25 * 11 = 3.75 -> 4
        assert engine.on_pointer_move(at(MONTH_R, 0)) == date(2010, 4, 15)

    def test_leap_february_reaches_29(self, make_engine):
        engine = make_engine(date(2024, 2, 10))
        engine.on_pointer_down(at(DAY_R, 0))
        assert engine.on_pointer_move(at(DAY_R, 268)) == date(2024, 2, 29)

    def test_common_february_stops_at_28(self, make_engine):
        engine = make_engine(date(2023, 2, 10))
        engine.on_pointer_down(at(DAY_R, 0))
        assert engine.on_pointer_move(at(DAY_R, 268)) == date(2023, 2, 28)

    def test_year_change_reclamps_day(self, make_engine):
        engine = make_engine(date(2024, 2, 29))
        engine.on_pointer_down(at(YEAR_R, 0))
        # 23/30 of the turn from 12 o'clock -> 2023, which has no Feb 29
        assert engine.on_pointer_move(at(YEAR_R, -90 + 276)) == date(2023, 2, 28)

    def test_result_clamped_to_window(self, make_engine):
        config = DateKnobConfig(date(2023, 3, 10), date(2027, 8, 20))
        engine = make_engine(date(2025, 1, 1), config=config)
        engine.on_pointer_down(at(YEAR_R, -90))
        value = engine.on_pointer_move(at(YEAR_R, -90))
        assert value.year == 2023
        assert value >= date(2023, 3, 10)

    def test_single_day_window_is_constant(self, make_engine):
        day = date(2024, 7, 4)
        engine = make_engine(day, config=DateKnobConfig(day, day))
        engine.on_pointer_down(at(DAY_R, 45))
        for radius in (YEAR_R, MONTH_R, DAY_R):
            assert engine.on_pointer_move(at(radius, 123)) == day


# ══════════════════════════════════════════════════════════════════════════
# Band switching
# ══════════════════════════════════════════════════════════════════════════

class TestBandSwitch:

    def test_leaving_a_band_commits_it_from_current_sample(self, make_engine, emitted):
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(YEAR_R, 0))
        engine.on_pointer_move(at(YEAR_R, 0))
        # Jump straight to the day band at 135 degrees of sweep:
        # year is committed at 2011 first, then the day resolves to 12
        assert engine.on_pointer_move(at(DAY_R, 45)) == date(2011, 6, 12)
        assert engine.active_band == 2
        assert emitted == [date(2008, 6, 15), date(2011, 6, 12)]

    def test_working_state_survives_ignored_emissions(self, make_engine):
        # Host never applies: the committed date stays 2010-06-15
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(YEAR_R, 0))
        engine.on_pointer_move(at(YEAR_R, 0))
        value = engine.on_pointer_move(at(MONTH_R, 90))
        assert value.year == 2015
        assert engine.current_value() == date(2010, 6, 15)

    def test_reentry_keeps_other_bands(self, make_engine):
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(MONTH_R, 0))
        engine.on_pointer_move(at(MONTH_R, 0))  # month 4
        engine.on_pointer_move(at(DAY_R, 0))  # commits month 4, day 8
        value = engine.on_pointer_move(at(MONTH_R, 0))  # back into month
        assert value == date(2010, 4, 8)

    def test_new_session_reseeds_from_committed_value(self, make_engine):
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(YEAR_R, 0))
        engine.on_pointer_move(at(YEAR_R, 0))
        engine.on_pointer_up()
        engine.on_pointer_down(at(DAY_R, 0))
        assert engine.on_pointer_move(at(DAY_R, 0)) == date(2010, 6, 8)


# ══════════════════════════════════════════════════════════════════════════
# Session and orbiter mode
# ══════════════════════════════════════════════════════════════════════════

class TestSession:

    def test_release_discards_working_state(self, make_engine):
        surface = FakeSurface()
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(YEAR_R, 0), surface=surface)
        session = engine.session
        engine.on_pointer_move(at(YEAR_R, 0))
        engine.on_pointer_up()
        assert engine.state == DragState.IDLE
        assert session.working == {}
        assert surface.unsubscribe_count == 1

    def test_drag_position_tracks_pointer(self, make_engine):
        engine = make_engine(date(2010, 6, 15))
        assert engine.drag_position is None
        engine.on_pointer_down(at(YEAR_R, 0))
        engine.on_pointer_move(Vec2(130, 100))
        assert engine.drag_position == Vec2(130, 100)

    def test_capture_lost(self, make_engine):
        surface = FakeSurface()
        engine = make_engine(date(2010, 6, 15))
        engine.on_pointer_down(at(YEAR_R, 0), surface=surface)
        engine.on_capture_lost()
        assert not engine.is_dragging
        assert not surface.active


class TestOrbiter:
    """lock_band: drags start on a band handle and stay on that band."""

    def test_pointer_down_off_handles_ignored(self, make_engine):
        engine = make_engine(date(2015, 1, 1), lock_band=True)
        assert not engine.on_pointer_down(Vec2(150, 150))
        assert engine.state == DragState.IDLE

    def test_hit_band(self, make_engine):
        engine = make_engine(date(2015, 1, 1), lock_band=True)
        # year 2015 is halfway -> handle at 6 o'clock on the inner ring
        assert engine.hit_band(Vec2(100, 116)) == 0
        assert engine.hit_band(Vec2(100, 52)) == 1
        assert engine.hit_band(Vec2(100, 20)) == 2

    def test_hit_band_matches_handle_hit_areas(self, make_engine):
        engine = make_engine(date(2015, 1, 1), lock_band=True)
        angles = engine.band_angles()
        handles = [OrbiterHandle(band, '#000000') for band in range(3)]
        for x in range(80, 121, 4):
            for y in range(0, 201, 4):
                hits = [band for band, handle in enumerate(handles)
                        if handle.hit_test(x, y, 100, 100, engine.ring_radii[band], angles[band])]
                assert engine.hit_band(Vec2(x, y)) == (hits[0] if hits else None)

    def test_locked_band_ignores_radius(self, make_engine):
        engine = make_engine(date(2015, 1, 1), lock_band=True)
        assert engine.on_pointer_down(Vec2(100, 52))
        assert engine.active_band == 1
        assert engine.on_pointer_move(at(DAY_R, 0)) == date(2015, 4, 1)
        assert engine.active_band == 1


# ══════════════════════════════════════════════════════════════════════════
# Entities and render outputs
# ══════════════════════════════════════════════════════════════════════════

class TestEntities:

    def test_entities_have_live_ranges(self, make_engine):
        engine = make_engine(date(2024, 2, 10))
        year, month, day = engine.entities()
        assert (year.id, month.id, day.id) == ('year', 'month', 'day')
        assert year.range == Range(2000, 2030)
        assert day.range == Range(1, 29)
        assert day.ring_radius == 80

    def test_idle_commit_emits_clamped_date(self, make_engine, emitted):
        engine = make_engine(date(2024, 2, 10))
        day = engine.entities()[2]
        day.commit(31)
        assert emitted == [date(2024, 2, 29)]

    def test_commit_after_release_uses_committed_date(self, make_engine, emitted):
        engine = make_engine(date(2024, 2, 29))
        engine.on_pointer_down(at(YEAR_R, 0))
        engine.on_pointer_move(at(YEAR_R, 0))
        year = engine.entities()[0]
        engine.on_pointer_up()
        year.commit(2023)
        assert emitted[-1] == date(2023, 2, 28)

    def test_dependent_range_follows_year_commit(self, date_config):
        engine = DateKnobEngine(date_config, date(2024, 2, 10))
        engine.set_on_change(engine.set_value)
        year, month, day = engine.entities()
        assert day.range == Range(1, 29)
        year.commit(2023)
        assert day.range == Range(1, 28)
        assert (year.current_value, day.current_value) == (2023, 10)

    def test_commit_during_drag_updates_working_parts(self, make_engine, emitted):
        engine = make_engine(date(2024, 2, 29))
        engine.on_pointer_down(at(YEAR_R, 0))
        year, month, day = engine.entities()
        year.commit(2023)
        assert day.current_value == 28
        assert day.range == Range(1, 28)
        assert emitted == []
        assert engine.current_value() == date(2024, 2, 29)


    def test_band_angles(self, make_engine):
        engine = make_engine(date(2015, 1, 1))
        year, month, day = engine.band_angles()
        assert year == pytest.approx(90)
        assert month == pytest.approx(-90)
        assert day == pytest.approx(-90)

    def test_band_paths_sit_on_rings(self, make_engine):
        engine = make_engine(date(2015, 1, 1))
        paths = engine.band_paths()
        assert [p.radius for p in paths] == [16, 48, 80]
        assert paths[0].large_arc_flag == 0
