"""Value resolution - turns a pointer position into a snapped, clamped value.

resolve() is a pure function: the previously committed value comes in as an
argument and the new value goes out as the return value, so the deadzone
freeze needs no hidden state.
"""

import math

from utils.coordinate_transforms import angle_of, distance_of, offset_from, value_at_angle


def round_half_up(x):
    """Round to the nearest integer, halves going up (0.5 -> 1, -0.5 -> 0)."""
    return math.floor(x + 0.5)


def snap(raw, step):
    """Snap raw onto the nearest multiple of step (halves up)."""
    return round_half_up(raw / step) * step


def resolve(pointer, center, value_range, arc, deadzone, step_policy, previous_value):
    """Resolve the value for a pointer position.

    Args:
        pointer: Vec2 pointer position in container-local pixels
        center: Vec2 circle center in container-local pixels
        value_range: Range of output values
        arc: ArcSpec the range is mapped onto
        deadzone: Radius in pixels inside which the value does not change
        step_policy: StepPolicy deciding the snapping step by distance
        previous_value: Value to keep when the pointer is inside the deadzone

    Returns:
        float: Value in [min, max], a step multiple (except where clamped to
        min or max), rounded to the policy's decimals
    """
    dx, dy = offset_from(pointer, center)
    dist = distance_of(dx, dy)
    if dist < deadzone:
        return previous_value

    if value_range.is_degenerate:
        return value_range.min

    raw = value_at_angle(angle_of(dx, dy), value_range, arc)
    step = step_policy.step_for(dist)
    clamped = value_range.clamp(snap(raw, step))
    return round(clamped, step_policy.decimals)
