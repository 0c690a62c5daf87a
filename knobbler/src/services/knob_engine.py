"""Single-value knob engine - the drag session state machine.

States: IDLE -> DRAGGING -> IDLE

- pointer-down starts a session (and optionally subscribes to a wider
  pointer surface through a scoped registration)
- every pointer-move resolves a value and emits it through on_change
- pointer-up or capture loss ends the session

The engine never applies emitted values itself. The host applies them with
set_value() (or doesn't), and the next move reads whatever value the host
left as the previous value.
"""

import logging
from typing import Callable, Optional

from constants import KNOB_PADDING, TRACK_INSET
from models.drag_session import DragSession, DragState
from models.geometry import Rect
from services.arc_path import synthesize, synthesize_track, tick_marks
from services.value_resolver import resolve
from utils.coordinate_transforms import (
    angle_at_value, container_center, container_radius, point_on_circle
)


class KnobEngine:
    """Radial input engine for one bounded numeric value."""

    def __init__(self, config, value=None, on_change: Optional[Callable[[float], None]] = None):
        """
        Args:
            config: KnobConfig (already validated)
            value: Initial committed value (defaults to the range minimum)
            on_change: Called with every resolved value during a drag
        """
        self._logger = logging.getLogger('KnobEngine')
        self.config = config
        self._on_change = on_change
        self._session: Optional[DragSession] = None
        self._value = config.value_range.min
        if value is not None:
            self.set_value(value)

        self._rect = None
        self.set_geometry(config.default_rect())

    # --------------------------------------------------------------
    # Geometry
    # --------------------------------------------------------------
    def set_geometry(self, rect: Rect):
        """Recompute center, radii and band geometry for a container rect."""
        self._rect = rect
        orientation = self.config.orientation
        self.center = container_center(rect, orientation)
        self.radius = container_radius(rect, orientation)
        self.track_radius = max(self.radius - KNOB_PADDING - TRACK_INSET, 0.0)
        if self.track_radius == 0.0:
            self._logger.debug("Container %s too small for a track, arc collapses to the center", rect)
        self.step_policy = self.config.step_policy.with_geometry(self.config.deadzone, self.track_radius)

    @property
    def rect(self) -> Rect:
        return self._rect

    # --------------------------------------------------------------
    # Value ownership
    # --------------------------------------------------------------
    def set_on_change(self, callback):
        self._on_change = callback

    def set_value(self, value):
        """Apply the host's authoritative value (clamped into range)."""
        value_range = self.config.value_range
        if not value_range.contains(value):
            self._logger.debug("Value %s outside %s, clamped", value, value_range)
        self._value = value_range.clamp(value)

    def current_value(self):
        return self._value

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

    def on_pointer_down(self, origin, container_rect=None, surface=None) -> bool:
        """Start a drag session.

        Args:
            origin: Vec2 pointer-down position (container-local)
            container_rect: Rect of the container, if it may have changed
            surface: Optional PointerSurface to subscribe move/up handlers on

        Returns:
            bool: True if a session started, False if one is already running
        """
        if self._session is not None:
            self._logger.debug("Pointer-down ignored, a drag session is already active")
            return False

        if container_rect is not None and container_rect != self._rect:
            self.set_geometry(container_rect)

        session = DragSession()
        if surface is not None:
            try:
                session.scope.subscribe(surface, self.on_pointer_move, self.on_pointer_up, self.on_capture_lost)
            except Exception:
                session.end()
                raise
        self._session = session
        self._logger.debug("Drag started at (%.1f, %.1f), value=%s", origin.x, origin.y, self._value)
        return True

    def on_pointer_move(self, point):
        """Resolve and emit the value for a pointer position.

        Returns:
            The emitted value, or None when no session is active
        """
        session = self._session
        if session is None:
            return None

        session.last_point = point
        session.move_count += 1
        try:
            value = resolve(point, self.center, self.config.value_range, self.config.arc,
                            self.config.deadzone, self.step_policy, self._value)
            if self._on_change is not None:
                self._on_change(value)
        except Exception:
            self._end_session()
            raise
        return value

    def on_pointer_up(self):
        """End the session. No value is emitted on release."""
        if self._session is None:
            return
        self._logger.debug("Drag finished, value=%s", self._value)
        self._end_session()

    def on_capture_lost(self):
        """Host lost pointer capture - same teardown as a release."""
        if self._session is None:
            return
        self._logger.debug("Pointer capture lost during drag")
        self._end_session()

    def close(self):
        """Tear down any running session (e.g. the host widget is going away)."""
        self._end_session()

    def _end_session(self):
        session, self._session = self._session, None
        if session is not None:
            session.end()

    # --------------------------------------------------------------
    # Render outputs
    # --------------------------------------------------------------
    def current_angle(self):
        return angle_at_value(self._value, self.config.value_range, self.config.arc)

    def current_arc_path(self):
        return synthesize(self.center, self.track_radius, self.config.arc, self.current_angle())

    def track_path(self):
        return synthesize_track(self.center, self.track_radius, self.config.arc)

    def ticks(self):
        return tick_marks(self.center, self.track_radius, self.config.value_range,
                          self.config.arc, self.config.tick_step)

    def thumb_position(self):
        return point_on_circle(self.center, self.track_radius, self.current_angle())
