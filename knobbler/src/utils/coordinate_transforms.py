"""Coordinate transformation utilities for radial controls.

Provides conversion between the coordinate systems a knob deals with:
- Container-local pointer pixels (Y-down)
- Polar coordinates around the control center (angle, distance)
- Value space (a Range mapped linearly onto an ArcSpec)

All functions are pure. Angles are degrees, 0 = 3 o'clock, growing clockwise
on screen because Y points down.
"""
import math

from models.geometry import Vec2


def angle_of(dx, dy):
	"""Angle of an offset from the center.

	Args:
		dx, dy: Offset from the circle center in pixels

	Returns:
		float: Degrees in [0, 360)
	"""
	angle = math.degrees(math.atan2(dy, dx))
	if angle < 0:
		angle += 360.0
	# atan2 can return -0.0 or values that round up to exactly 360
	return angle % 360.0


def distance_of(dx, dy):
	"""Euclidean distance of an offset from the center."""
	return math.hypot(dx, dy)


def relative_sweep(angle, arc):
	"""Degrees travelled from the arc start to angle, in the arc's direction.

	Angles outside the span clamp to the far end instead of wrapping.

	Args:
		angle: Pointer angle in degrees
		arc: ArcSpec

	Returns:
		float: Degrees in [0, |arc_length|]
	"""
	if arc.arc_length >= 0:
		rel = (angle - arc.start_angle + 360.0) % 360.0
	else:
		rel = (arc.start_angle - angle + 360.0) % 360.0
	return min(rel, arc.span)


def value_at_angle(angle, value_range, arc):
	"""Map a pointer angle onto the value range.

	Args:
		angle: Pointer angle in degrees
		value_range: Range
		arc: ArcSpec

	Returns:
		float: Unsnapped value in [min, max] (min for a degenerate range)
	"""
	if value_range.is_degenerate:
		return value_range.min
	return value_range.min + (relative_sweep(angle, arc) / arc.span) * value_range.span


def angle_at_value(value, value_range, arc):
	"""Inverse of value_at_angle.

	Uses the signed arc length so reverse arcs travel backwards from the start.

	Args:
		value: Value inside value_range
		value_range: Range
		arc: ArcSpec

	Returns:
		float: Angle in degrees (not normalized)
	"""
	if value_range.is_degenerate:
		return arc.start_angle
	return arc.start_angle + ((value - value_range.min) / value_range.span) * arc.arc_length


def point_on_circle(center, radius, angle):
	"""Pixel position at angle on a circle around center.

	Args:
		center: Vec2 circle center
		radius: Circle radius in pixels
		angle: Degrees

	Returns:
		Vec2
	"""
	rad = math.radians(angle)
	return Vec2(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


def container_center(rect, orientation=None):
	"""Circle center in container-local pixels.

	Full controls are centered in their container. Half-circle controls
	render only half of the circle, so the center sits on the container
	edge the flat side faces:
	- 'top': bottom edge midpoint
	- 'bottom': top edge midpoint
	- 'left': right edge midpoint
	- 'right': left edge midpoint

	Args:
		rect: Rect of the container
		orientation: None for a full control, or a half-circle orientation

	Returns:
		Vec2
	"""
	if orientation is None:
		return rect.center
	if orientation == 'top':
		return Vec2(rect.x + rect.width / 2.0, rect.y + rect.height)
	if orientation == 'bottom':
		return Vec2(rect.x + rect.width / 2.0, rect.y)
	if orientation == 'left':
		return Vec2(rect.x + rect.width, rect.y + rect.height / 2.0)
	if orientation == 'right':
		return Vec2(rect.x, rect.y + rect.height / 2.0)
	raise ValueError(f"Unknown orientation '{orientation}'")


def container_radius(rect, orientation=None):
	"""Largest circle radius that fits the container for an orientation."""
	if orientation in ('top', 'bottom'):
		return min(rect.width / 2.0, rect.height)
	if orientation in ('left', 'right'):
		return min(rect.width, rect.height / 2.0)
	return min(rect.width, rect.height) / 2.0


def offset_from(point, center):
	"""Pointer offset (dx, dy) from center."""
	return point.x - center.x, point.y - center.y


def hits_handle(point_x, point_y, handle_x, handle_y, handle_size, hit_tolerance):
	"""Whether a pointer lands on a round handle.

	Args:
		point_x, point_y: Pointer position in pixels
		handle_x, handle_y: Handle center in pixels
		handle_size: Visual radius of the handle
		hit_tolerance: Extra pixels around the visual radius

	Returns:
		bool: True within handle_size + hit_tolerance of the handle center
	"""
	return distance_of(point_x - handle_x, point_y - handle_y) <= handle_size + hit_tolerance
