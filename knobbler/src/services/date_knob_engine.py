"""Concentric year/month/day knob engine.

Three bands share one circular surface, band 0 (year) nearest the center,
band 2 (day) at the rim. A single drag edits whichever band the pointer is
over; crossing into another band commits the band being left before the new
one starts resolving.

Month and day ranges depend on the working year/month, so they are
recomputed right before every read. Dependent values are re-clamped whenever
the value they depend on changes (Feb 29 -> Feb 28 when leaving a leap year).

In orbiter mode (lock_band=True) a drag only starts on a band's thumb handle
and stays on that band for the whole gesture.
"""

import logging
import math
from datetime import date
from typing import Callable, List, Optional

from constants import (
    DATE_BAND_COUNT, DATE_BAND_YEAR, DATE_BAND_MONTH, DATE_BAND_DAY,
    DATE_BAND_NAMES, DATE_RING_FACTORS, ORBITER_HANDLE_SIZE, ORBITER_HIT_TOLERANCE
)
from models.drag_session import DragSession, DragState
from models.entity import Entity
from models.geometry import Rect
from services.arc_path import synthesize
from services.calendar_bounds import clamp_date, day_bounds, month_bounds, year_bounds
from services.value_resolver import round_half_up
from utils.coordinate_transforms import (
    angle_at_value, angle_of, distance_of, hits_handle, offset_from, point_on_circle, relative_sweep
)


class DateKnobEngine:
    """Composite radial engine editing a date through three dependent bands."""

    def __init__(self, config, value: Optional[date] = None,
                 on_change: Optional[Callable[[date], None]] = None, lock_band=False):
        """
        Args:
            config: DateKnobConfig
            value: Initial committed date (defaults to today, clamped)
            on_change: Called with every assembled date during a drag
            lock_band: Orbiter mode - drag only from a band's thumb handle
        """
        self._logger = logging.getLogger('DateKnobEngine')
        self.config = config
        self.lock_band = lock_band
        self._on_change = on_change
        self._session: Optional[DragSession] = None
        self._value = config.min_date
        self.set_value(value if value is not None else date.today())

        self._rect = None
        self.set_geometry(config.default_rect())

    # --------------------------------------------------------------
    # Geometry
    # --------------------------------------------------------------
    def set_geometry(self, rect: Rect):
        self._rect = rect
        self.center = rect.center
        self.radius = min(rect.width, rect.height) / 2.0
        self.effective_radius = max(self.radius - self.config.padding, 0.0)
        self.band_width = self.effective_radius / DATE_BAND_COUNT
        self.ring_radii = tuple(f * self.band_width for f in DATE_RING_FACTORS)

    @property
    def rect(self) -> Rect:
        return self._rect

    def band_at(self, point) -> int:
        """Band index under a pointer position (clamped to the rim)."""
        dx, dy = offset_from(point, self.center)
        dist = min(distance_of(dx, dy), self.effective_radius)
        if self.band_width <= 0:
            self._logger.debug("Zero band width, routing pointer to the year band")
            return DATE_BAND_YEAR
        return min(DATE_BAND_COUNT - 1, math.floor(dist / self.band_width))

    def hit_band(self, point) -> Optional[int]:
        """Band whose thumb handle is under point (orbiter mode), or None."""
        angles = self.band_angles()
        for band in range(DATE_BAND_COUNT):
            handle = point_on_circle(self.center, self.ring_radii[band], angles[band])
            if hits_handle(point.x, point.y, handle.x, handle.y, ORBITER_HANDLE_SIZE, ORBITER_HIT_TOLERANCE):
                return band
        return None

    # --------------------------------------------------------------
    # Value ownership
    # --------------------------------------------------------------
    def set_on_change(self, callback):
        self._on_change = callback

    def set_value(self, value: date):
        """Apply the host's authoritative date (clamped into [min, max])."""
        self._value = clamp_date(value, self.config.min_date, self.config.max_date)

    def current_value(self) -> date:
        return self._value

    # --------------------------------------------------------------
    # Dependent ranges
    # --------------------------------------------------------------
    def _band_range(self, band, parts):
        cfg = self.config
        if band == DATE_BAND_YEAR:
            return year_bounds(cfg.min_date, cfg.max_date)
        if band == DATE_BAND_MONTH:
            return month_bounds(parts['year'], cfg.min_date, cfg.max_date)
        return day_bounds(parts['year'], parts['month'], cfg.min_date, cfg.max_date)

    def band_ranges(self, parts=None):
        """Ranges of all bands for parts (defaults to the committed date)."""
        parts = parts if parts is not None else self._parts(self._value)
        return [self._band_range(band, parts) for band in range(DATE_BAND_COUNT)]

    def _resolve_band(self, band, rel, parts) -> int:
        """Angle-implied value of band, read against its range right now."""
        band_range = self._band_range(band, parts)
        if band_range.is_degenerate:
            return int(band_range.min)
        raw = band_range.min + (rel / self.config.arc.span) * band_range.span
        return int(band_range.clamp(round_half_up(raw)))

    def _write_band(self, band, value, parts):
        """Write a band value and re-clamp everything that depends on it."""
        parts[DATE_BAND_NAMES[band]] = value
        if band == DATE_BAND_YEAR:
            parts['month'] = int(self._band_range(DATE_BAND_MONTH, parts).clamp(parts['month']))
        if band in (DATE_BAND_YEAR, DATE_BAND_MONTH):
            parts['day'] = int(self._band_range(DATE_BAND_DAY, parts).clamp(parts['day']))

    @staticmethod
    def _parts(value: date):
        return {'year': value.year, 'month': value.month, 'day': value.day}

    def _assemble(self, parts) -> date:
        return clamp_date(date(parts['year'], parts['month'], parts['day']),
                          self.config.min_date, self.config.max_date)

    # --------------------------------------------------------------
    # Session lifecycle
    # --------------------------------------------------------------
    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self._session is not None else DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def active_band(self) -> Optional[int]:
        return self._session.active_band if self._session is not None else None

    @property
    def drag_position(self):
        """Last pointer position of the running drag (for the guide line)."""
        return self._session.last_point if self._session is not None else None

    def on_pointer_down(self, origin, container_rect=None, surface=None) -> bool:
        """Start a drag session seeded from the committed date.

        Returns:
            bool: True if a session started
        """
        if self._session is not None:
            self._logger.debug("Pointer-down ignored, a drag session is already active")
            return False

        if container_rect is not None and container_rect != self._rect:
            self.set_geometry(container_rect)

        locked_band = None
        if self.lock_band:
            locked_band = self.hit_band(origin)
            if locked_band is None:
                return False

        session = DragSession(active_band=locked_band, working=self._parts(self._value))
        if surface is not None:
            try:
                session.scope.subscribe(surface, self.on_pointer_move, self.on_pointer_up, self.on_capture_lost)
            except Exception:
                session.end()
                raise
        self._session = session
        self._logger.debug("Date drag started on %s, band=%s", self._value, locked_band)
        return True

    def on_pointer_move(self, point) -> Optional[date]:
        """Update the working date for a pointer position and emit it.

        Returns:
            The emitted date, or None when no session is active
        """
        session = self._session
        if session is None:
            return None

        session.last_point = point
        session.move_count += 1
        try:
            value = self._step(session, point)
            if self._on_change is not None:
                self._on_change(value)
        except Exception:
            self._end_session()
            raise
        return value

    def _step(self, session, point) -> date:
        parts = session.working
        dx, dy = offset_from(point, self.center)
        rel = relative_sweep(angle_of(dx, dy), self.config.arc)

        previous = session.active_band
        candidate = previous if self.lock_band else self.band_at(point)

        if previous is not None and previous != candidate:
            # Pointer crossed rings: settle the band being left first so the
            # new band resolves against ranges that include it
            self._write_band(previous, self._resolve_band(previous, rel, parts), parts)
            self._logger.debug("Band switch %s -> %s, committed %s",
                               DATE_BAND_NAMES[previous], DATE_BAND_NAMES[candidate], parts)

        session.active_band = candidate
        self._write_band(candidate, self._resolve_band(candidate, rel, parts), parts)
        return self._assemble(parts)

    def on_pointer_up(self):
        """End the session; the working state is discarded."""
        if self._session is None:
            return
        self._logger.debug("Date drag finished, value=%s", self._value)
        self._end_session()

    def on_capture_lost(self):
        if self._session is None:
            return
        self._logger.debug("Pointer capture lost during date drag")
        self._end_session()

    def close(self):
        self._end_session()

    def _end_session(self):
        session, self._session = self._session, None
        if session is not None:
            session.end()

    # --------------------------------------------------------------
    # Entities and render outputs
    # --------------------------------------------------------------
    def _live_parts(self):
        """Working parts of the running drag, or a fresh copy of the committed date."""
        if self._session is not None:
            return self._session.working
        return self._parts(self._value)

    def entities(self) -> List[Entity]:
        """Band entities over the live state.

        Each access resolves against whatever is live at that moment: the
        working parts while a drag runs, otherwise the committed date. A
        commit during a drag updates the working parts; a commit while idle
        assembles a new date and emits it.
        """
        def committer(band):
            def commit(value):
                dragging = self._session is not None
                parts = self._live_parts()
                self._write_band(band, int(self._band_range(band, parts).clamp(value)), parts)
                if not dragging and self._on_change is not None:
                    self._on_change(self._assemble(parts))
            return commit

        def range_reader(band):
            return lambda: self._band_range(band, self._live_parts())

        def value_reader(band):
            return lambda: self._live_parts()[DATE_BAND_NAMES[band]]

        return [
            Entity(
                id=DATE_BAND_NAMES[band],
                ring_radius=self.ring_radii[band],
                commit=committer(band),
                read_range=range_reader(band),
                read_value=value_reader(band),
            )
            for band in range(DATE_BAND_COUNT)
        ]

    def band_angles(self):
        """Display angle of each band for the committed date."""
        parts = self._parts(self._value)
        return [
            angle_at_value(parts[DATE_BAND_NAMES[band]], band_range, self.config.arc)
            for band, band_range in enumerate(self.band_ranges(parts))
        ]

    def band_paths(self):
        """Progress arc of each band at its ring radius."""
        return [
            synthesize(self.center, self.ring_radii[band], self.config.arc, angle)
            for band, angle in enumerate(self.band_angles())
        ]
