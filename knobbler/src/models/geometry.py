"""Geometry data structures shared by the knob engines and widgets."""
import math
from dataclasses import dataclass

from constants import HALF_CIRCLE_ARCS, DIRECTION_NORMAL, DIRECTION_REVERSE, PATH_COORD_DECIMALS
from models.errors import ConfigurationError


def _require_finite(name, *values):
    for value in values:
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ConfigurationError(f"{name} must be a finite number, got {value!r}")


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for container-local pointer positions, circle centers and
    path end points (pixels, Y-down).
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Rect:
    """Container geometry in container-local pixels."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def square(cls, size):
        return cls(0.0, 0.0, size, size)

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass(frozen=True)
class Range:
    """Closed numeric interval [min, max].

    min == max is accepted and behaves as a constant (always min).
    """
    min: float
    max: float

    def __post_init__(self):
        _require_finite("Range bounds", self.min, self.max)
        if self.max < self.min:
            raise ConfigurationError(f"Range max ({self.max}) is below min ({self.min})")

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min

    def clamp(self, value):
        return max(self.min, min(self.max, value))

    def contains(self, value) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class ArcSpec:
    """Angular span a value range is mapped onto.

    Angles are degrees in screen space (0 = 3 o'clock, clockwise with Y-down).
    A negative arc_length sweeps in reverse.
    """
    start_angle: float
    arc_length: float

    def __post_init__(self):
        _require_finite("ArcSpec", self.start_angle, self.arc_length)
        if self.arc_length == 0:
            raise ConfigurationError("ArcSpec arc_length must be non-zero")

    @classmethod
    def half_circle(cls, orientation, direction=DIRECTION_NORMAL):
        """Build the half-circle arc for an orientation.

        Args:
            orientation: 'top', 'bottom', 'left' or 'right'
            direction: 'normal' (start -> end) or 'reverse' (end -> start)

        Returns:
            ArcSpec covering 180 degrees
        """
        if orientation not in HALF_CIRCLE_ARCS:
            raise ConfigurationError(f"Unknown orientation '{orientation}'")
        start, length = HALF_CIRCLE_ARCS[orientation]
        return cls(start, length).with_direction(direction)

    def with_direction(self, direction):
        """Return this arc drawn in the given direction."""
        if direction == DIRECTION_NORMAL:
            return self
        if direction == DIRECTION_REVERSE:
            return ArcSpec(self.start_angle + self.arc_length, -self.arc_length)
        raise ConfigurationError(f"Unknown direction '{direction}'")

    @property
    def span(self) -> float:
        """Absolute sweep in degrees."""
        return abs(self.arc_length)

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.arc_length

    @property
    def is_reverse(self) -> bool:
        return self.arc_length < 0


@dataclass(frozen=True)
class PathSpec:
    """Circular arc description consumed by renderers.

    Mirrors the SVG elliptical arc command: move to start, arc with radius
    to end using the large-arc and sweep flags.
    """
    start: Vec2
    end: Vec2
    radius: float
    large_arc_flag: int
    sweep_flag: int

    def to_svg(self, decimals=PATH_COORD_DECIMALS) -> str:
        """Render as SVG path data ('M sx sy A r r 0 large sweep ex ey')."""
        def fmt(n):
            # '12.0' -> '12', '-0.0' -> '0'
            rounded = round(n, decimals) + 0.0
            return str(int(rounded)) if rounded.is_integer() else repr(rounded)

        return (
            f"M {fmt(self.start.x)} {fmt(self.start.y)}"
            f" A {fmt(self.radius)} {fmt(self.radius)} 0 {self.large_arc_flag} {self.sweep_flag}"
            f" {fmt(self.end.x)} {fmt(self.end.y)}"
        )
