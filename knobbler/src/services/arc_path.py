"""Arc path synthesis for the track, progress arc and tick marks.

The same synthesis serves the static track and the live progress arc; the
flags always follow the signed arc direction so reverse arcs render as one
continuous sweep.
"""

import math
from typing import List, Tuple

import numpy as np

from constants import TICK_LENGTH
from models.geometry import PathSpec, Vec2
from utils.coordinate_transforms import point_on_circle, relative_sweep


def synthesize(center, radius, arc, current_angle) -> PathSpec:
    """Progress arc from the arc start to current_angle.

    Args:
        center: Vec2 circle center
        radius: Arc radius in pixels
        arc: ArcSpec
        current_angle: Displayed angle in degrees

    Returns:
        PathSpec
    """
    return PathSpec(
        start=point_on_circle(center, radius, arc.start_angle),
        end=point_on_circle(center, radius, current_angle),
        radius=radius,
        large_arc_flag=1 if relative_sweep(current_angle, arc) > 180 else 0,
        sweep_flag=1 if arc.arc_length >= 0 else 0,
    )


def synthesize_track(center, radius, arc) -> PathSpec:
    """Track path covering the whole arc span."""
    return PathSpec(
        start=point_on_circle(center, radius, arc.start_angle),
        end=point_on_circle(center, radius, arc.end_angle),
        radius=radius,
        large_arc_flag=1 if arc.span > 180 else 0,
        sweep_flag=1 if arc.arc_length >= 0 else 0,
    )


def is_full_circle(arc) -> bool:
    """True when the span closes on itself (a single arc command can't draw it)."""
    return arc.span >= 360


def tick_values(value_range, tick_step) -> np.ndarray:
    """Values min, min + step, ... up to max inclusive."""
    if value_range.is_degenerate:
        return np.array([value_range.min], dtype=float)
    # Small epsilon so max is kept when the span is an exact multiple of the step
    count = math.floor(value_range.span / tick_step + 1e-9) + 1
    return value_range.min + np.arange(count, dtype=float) * tick_step


def tick_marks(center, radius, value_range, arc, tick_step,
               length=TICK_LENGTH) -> List[Tuple[Vec2, Vec2]]:
    """Tick segments along the arc, one per tick value.

    Args:
        center: Vec2 circle center
        radius: Track radius; ticks run inward from here
        value_range: Range
        arc: ArcSpec
        tick_step: Spacing of tick values
        length: Tick length in pixels

    Returns:
        List of (inner, outer) Vec2 pairs
    """
    values = tick_values(value_range, tick_step)
    if value_range.is_degenerate:
        angles = np.full(values.shape, float(arc.start_angle))
    else:
        angles = arc.start_angle + ((values - value_range.min) / value_range.span) * arc.arc_length
    rad = np.radians(angles)
    cos_a, sin_a = np.cos(rad), np.sin(rad)

    inner_x = center.x + (radius - length) * cos_a
    inner_y = center.y + (radius - length) * sin_a
    outer_x = center.x + radius * cos_a
    outer_y = center.y + radius * sin_a

    return [
        (Vec2(float(ix), float(iy)), Vec2(float(ox), float(oy)))
        for ix, iy, ox, oy in zip(inner_x, inner_y, outer_x, outer_y)
    ]
