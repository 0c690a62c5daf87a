"""Knob configuration - validated once, at construction time.

Malformed configuration raises ConfigurationError here so that a running
drag session never has to deal with it.
"""
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from constants import (
    DEFAULT_MIN, DEFAULT_MAX, DEFAULT_TICK_STEP, DEFAULT_PRECISION_STEP,
    DEFAULT_PRECISION_DISTANCE, DEFAULT_DEADZONE, DEFAULT_START_ANGLE,
    DEFAULT_ARC_LENGTH, DEFAULT_DIAMETER, DIRECTION_NORMAL, KNOB_PADDING,
    TRACK_INSET, DEFAULT_MIN_DATE, DEFAULT_MAX_DATE, DEFAULT_DATE_DIAMETER
)
from models.errors import ConfigurationError
from models.geometry import ArcSpec, Range, Rect
from services.step_policy import StepPolicy, create_step_policy


def _require_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def _require_non_negative(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class KnobConfig:
    """Everything a single-value knob engine needs besides its value.

    Attributes:
        value_range: Output Range
        arc: ArcSpec the range is drawn on (already direction-adjusted)
        deadzone: Center radius in pixels where drags are ignored
        step_policy: StepPolicy for snapping
        tick_step: Spacing of tick marks
        diameter: Full circle diameter in pixels
        orientation: None for full controls, else the half-circle orientation
    """
    value_range: Range
    arc: ArcSpec
    deadzone: float
    step_policy: StepPolicy
    tick_step: float
    diameter: float = DEFAULT_DIAMETER
    orientation: Optional[str] = None

    def __post_init__(self):
        _require_non_negative("deadzone", self.deadzone)
        _require_positive("diameter", self.diameter)
        _require_positive("tick_step", self.tick_step)

    # Keys accepted by from_dict (same names as create's keyword arguments)
    FIELDS = (
        'min', 'max', 'tick_step', 'precision_step', 'precision_distance',
        'precision_steps', 'deadzone', 'start_angle', 'arc_length', 'diameter',
        'orientation', 'direction',
    )

    @classmethod
    def create(cls, min=DEFAULT_MIN, max=DEFAULT_MAX, tick_step=DEFAULT_TICK_STEP,
               precision_step=DEFAULT_PRECISION_STEP,
               precision_distance=DEFAULT_PRECISION_DISTANCE,
               precision_steps=None, deadzone=DEFAULT_DEADZONE,
               start_angle=DEFAULT_START_ANGLE, arc_length=DEFAULT_ARC_LENGTH,
               diameter=DEFAULT_DIAMETER, orientation=None, direction=DIRECTION_NORMAL):
        """Build a config from knob props.

        When orientation is given the arc is the half-circle preset for it and
        start_angle/arc_length are ignored.

        Raises:
            ConfigurationError: Any prop is malformed
        """
        value_range = Range(min, max)
        if orientation is not None:
            arc = ArcSpec.half_circle(orientation, direction)
        else:
            arc = ArcSpec(start_angle, arc_length).with_direction(direction)

        _require_non_negative("deadzone", deadzone)
        _require_positive("diameter", diameter)
        track_radius = diameter / 2.0 - KNOB_PADDING - TRACK_INSET
        step_policy = create_step_policy(
            tick_step, precision_step, precision_distance, precision_steps,
            deadzone=deadzone, outer_radius=track_radius,
        )
        return cls(value_range, arc, deadzone, step_policy, tick_step, diameter, orientation)

    @classmethod
    def from_dict(cls, data):
        """Build a config from a props dict (e.g. a demo preset).

        Raises:
            ConfigurationError: Unknown keys or malformed values
        """
        unknown = set(data) - set(cls.FIELDS)
        if unknown:
            raise ConfigurationError(f"Unknown knob config keys: {sorted(unknown)}")
        return cls.create(**data)

    def default_rect(self) -> Rect:
        """Container rect the control occupies when laid out at its diameter."""
        if self.orientation in ('top', 'bottom'):
            return Rect(0.0, 0.0, self.diameter, self.diameter / 2.0)
        if self.orientation in ('left', 'right'):
            return Rect(0.0, 0.0, self.diameter / 2.0, self.diameter)
        return Rect.square(self.diameter)


@dataclass(frozen=True)
class DateKnobConfig:
    """Configuration of the concentric year/month/day knob."""
    min_date: date = DEFAULT_MIN_DATE
    max_date: date = DEFAULT_MAX_DATE
    arc: ArcSpec = ArcSpec(DEFAULT_START_ANGLE, DEFAULT_ARC_LENGTH)
    diameter: float = DEFAULT_DATE_DIAMETER
    padding: float = KNOB_PADDING

    def __post_init__(self):
        for name in ('min_date', 'max_date'):
            if not isinstance(getattr(self, name), date):
                raise ConfigurationError(f"{name} must be a date, got {getattr(self, name)!r}")
        if self.max_date < self.min_date:
            raise ConfigurationError(f"max_date {self.max_date} is before min_date {self.min_date}")
        _require_positive("diameter", self.diameter)
        _require_non_negative("padding", self.padding)
        if self.padding * 2 >= self.diameter:
            raise ConfigurationError(f"padding {self.padding} leaves no room in diameter {self.diameter}")

    @classmethod
    def create(cls, min_date=DEFAULT_MIN_DATE, max_date=DEFAULT_MAX_DATE,
               start_angle=DEFAULT_START_ANGLE, arc_length=DEFAULT_ARC_LENGTH,
               diameter=DEFAULT_DATE_DIAMETER):
        return cls(min_date, max_date, ArcSpec(start_angle, arc_length), diameter)

    def default_rect(self) -> Rect:
        return Rect.square(self.diameter)
