"""Step policies - snapping granularity as a function of pointer distance.

Each policy class knows:
- Which step size applies at a given distance from the center
- Which steps it can ever produce (for the fixed output precision)
- How to rebind itself to new container geometry
"""

import logging
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Sequence

from models.errors import ConfigurationError


_logger = logging.getLogger('StepPolicy')


def step_decimals(step) -> int:
    """Number of fractional digits in the decimal representation of step.

    0.1 -> 1, 0.25 -> 2, 5 -> 0, 1e-05 -> 5
    """
    exponent = Decimal(repr(step)).normalize().as_tuple().exponent
    return max(0, -exponent)


def _validate_step(name, step):
    if isinstance(step, bool) or not isinstance(step, (int, float)) or not math.isfinite(step):
        raise ConfigurationError(f"{name} must be a finite number, got {step!r}")
    if step <= 0:
        raise ConfigurationError(f"{name} must be positive, got {step}")


class StepPolicy(ABC):
    """Abstract base class for snapping policies."""

    @property
    @abstractmethod
    def steps(self) -> List[float]:
        """All step sizes this policy may return."""
        pass

    @abstractmethod
    def step_for(self, distance) -> float:
        """Step size for a pointer at distance pixels from the center."""
        pass

    def with_geometry(self, deadzone, outer_radius) -> 'StepPolicy':
        """Return a policy bound to new container geometry.

        Policies that don't depend on geometry return themselves.
        """
        return self

    @property
    def decimals(self) -> int:
        """Fixed output precision: most fractional digits among all steps.

        Applied to every snapped value regardless of the active band so
        values from different bands stay comparable.
        """
        return max(step_decimals(s) for s in self.steps)


class BinaryStepPolicy(StepPolicy):
    """Coarse tick step near the center, fine precision step beyond a distance."""

    def __init__(self, tick_step, precision_step, precision_distance):
        """
        Args:
            tick_step: Step used at or inside precision_distance
            precision_step: Step used beyond precision_distance
            precision_distance: Switch-over distance in pixels
        """
        _validate_step("tick_step", tick_step)
        _validate_step("precision_step", precision_step)
        if not isinstance(precision_distance, (int, float)) or not math.isfinite(precision_distance):
            raise ConfigurationError(f"precision_distance must be a finite number, got {precision_distance!r}")
        self.tick_step = tick_step
        self.precision_step = precision_step
        self.precision_distance = precision_distance

    @property
    def steps(self):
        return [self.tick_step, self.precision_step]

    def step_for(self, distance):
        return self.precision_step if distance > self.precision_distance else self.tick_step

    def __repr__(self):
        return (f"BinaryStepPolicy(tick_step={self.tick_step}, precision_step={self.precision_step}, "
                f"precision_distance={self.precision_distance})")


class BandedStepPolicy(StepPolicy):
    """Equal-width precision bands between the deadzone and the outer radius.

    Band 0 is the annulus right outside the deadzone; the last band reaches
    the outer radius. Distances beyond either end use the nearest band.
    """

    def __init__(self, band_steps: Sequence[float], deadzone=0.0, outer_radius=0.0):
        """
        Args:
            band_steps: Step size for each band, innermost first
            deadzone: Deadzone radius in pixels (inner edge of band 0)
            outer_radius: Outer edge of the last band in pixels
        """
        band_steps = list(band_steps)
        if not band_steps:
            raise ConfigurationError("Banded step policy needs at least one band")
        for i, step in enumerate(band_steps):
            _validate_step(f"band step [{i}]", step)
        self._steps = band_steps
        self.deadzone = deadzone
        self.outer_radius = outer_radius

    @property
    def steps(self):
        return list(self._steps)

    @property
    def band_count(self) -> int:
        return len(self._steps)

    @property
    def band_width(self) -> float:
        return max(self.outer_radius - self.deadzone, 0) / len(self._steps)

    def band_index(self, distance) -> int:
        """Index of the band containing distance."""
        width = self.band_width
        if width <= 0:
            # Collapsed geometry: every distance lands on the last band
            _logger.debug("Band width collapsed (deadzone=%s, outer_radius=%s)", self.deadzone, self.outer_radius)
            return len(self._steps) - 1
        index = math.floor((distance - self.deadzone) / width)
        return max(0, min(len(self._steps) - 1, index))

    def step_for(self, distance):
        return self._steps[self.band_index(distance)]

    def with_geometry(self, deadzone, outer_radius):
        return BandedStepPolicy(self._steps, deadzone, outer_radius)

    def __repr__(self):
        return (f"BandedStepPolicy({self._steps}, deadzone={self.deadzone}, "
                f"outer_radius={self.outer_radius})")


def create_step_policy(tick_step, precision_step, precision_distance,
                       precision_steps: Optional[Sequence[float]] = None,
                       deadzone=0.0, outer_radius=0.0) -> StepPolicy:
    """Factory matching the knob props.

    A non-empty precision_steps list selects banded mode; otherwise the
    binary tick/precision pair is used.

    Returns:
        StepPolicy instance
    """
    if precision_steps:
        # tick_step still drives tick marks, so it must be valid too
        _validate_step("tick_step", tick_step)
        return BandedStepPolicy(precision_steps, deadzone, outer_radius)
    return BinaryStepPolicy(tick_step, precision_step, precision_distance)
