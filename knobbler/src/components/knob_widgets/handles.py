"""Knob handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to draw itself
- How to test if a mouse position hits it
- Where it sits on the control (a radius and an angle around the center)

Handles do not resolve values; the engines do. Widgets only use them for
painting, hit testing and cursor feedback.
"""

from abc import ABC, abstractmethod
from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QPen, QBrush, QColor
import math

from constants import (
    THUMB_RADIUS, THUMB_STROKE_WIDTH, DEFAULT_THUMB_COLOR, DEFAULT_ACTIVE_COLOR,
    ORBITER_HANDLE_SIZE, ORBITER_HIT_TOLERANCE, BAND_HIGHLIGHT_OPACITY, DATE_BAND_NAMES
)
from utils.coordinate_transforms import hits_handle


def _pixel_pos(center_x, center_y, radius, angle):
    rad = math.radians(angle)
    return center_x + radius * math.cos(rad), center_y + radius * math.sin(rad)


class Handle(ABC):
    """Abstract base class for knob handles."""

    @abstractmethod
    def hit_test(self, mouse_x, mouse_y, center_x, center_y, radius, angle) -> bool:
        """Test if mouse position hits this handle.

        Args:
            mouse_x, mouse_y: Mouse position in widget pixel coordinates
            center_x, center_y: Control center in widget pixels
            radius: Radius the handle sits on
            angle: Angle of the handle in degrees

        Returns:
            bool: True if mouse hits this handle
        """
        pass

    @abstractmethod
    def draw(self, painter, center_x, center_y, radius, angle):
        """Draw this handle.

        Args:
            painter: QPainter instance
            center_x, center_y: Control center in widget pixels
            radius: Radius the handle sits on
            angle: Angle of the handle in degrees
        """
        pass

    @abstractmethod
    def get_cursor(self):
        """Get the Qt cursor shape for this handle.

        Returns:
            Qt.CursorShape: Cursor to display when hovering over this handle
        """
        pass


class ThumbHandle(Handle):
    """Round thumb riding the track at the current value."""

    def __init__(self, thumb_radius=THUMB_RADIUS, hit_tolerance=4,
                 fill=DEFAULT_THUMB_COLOR, stroke=DEFAULT_ACTIVE_COLOR):
        """
        Args:
            thumb_radius: Visual radius of the thumb in pixels
            hit_tolerance: Extra pixels for hit detection
            fill, stroke: Colors as hex strings
        """
        self.thumb_radius = thumb_radius
        self.hit_tolerance = hit_tolerance
        self.fill = fill
        self.stroke = stroke

    def hit_test(self, mouse_x, mouse_y, center_x, center_y, radius, angle):
        px, py = _pixel_pos(center_x, center_y, radius, angle)
        return hits_handle(mouse_x, mouse_y, px, py, self.thumb_radius, self.hit_tolerance)

    def draw(self, painter, center_x, center_y, radius, angle):
        px, py = _pixel_pos(center_x, center_y, radius, angle)
        painter.setPen(QPen(QColor(self.stroke), THUMB_STROKE_WIDTH))
        painter.setBrush(QBrush(QColor(self.fill)))
        painter.drawEllipse(QPointF(px, py), float(self.thumb_radius), float(self.thumb_radius))

    def get_cursor(self):
        return Qt.OpenHandCursor


class BandRingHandle(Handle):
    """One band of the date knob: an annulus around its ring radius."""

    def __init__(self, band, band_width, color):
        """
        Args:
            band: Band index (0 = year, innermost)
            band_width: Radial thickness of the band in pixels
            color: Band color as a hex string
        """
        self.band = band
        self.band_width = band_width
        self.color = color

    def hit_test(self, mouse_x, mouse_y, center_x, center_y, radius, angle):
        """Annular hit area (ring radius +- half the band width)."""
        distance = math.hypot(mouse_x - center_x, mouse_y - center_y)
        return abs(distance - radius) <= self.band_width / 2.0

    def draw(self, painter, center_x, center_y, radius, angle):
        """Translucent highlight of the whole band."""
        color = QColor(self.color)
        color.setAlphaF(BAND_HIGHLIGHT_OPACITY)
        painter.setPen(QPen(color, self.band_width))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(QPointF(center_x, center_y), float(radius), float(radius))

    def get_cursor(self):
        return Qt.CrossCursor


class OrbiterHandle(Handle):
    """Labelled thumb a band is dragged by in orbiter mode."""

    def __init__(self, band, color, handle_size=ORBITER_HANDLE_SIZE, hit_tolerance=ORBITER_HIT_TOLERANCE):
        """
        Args:
            band: Band index (0 = year, innermost)
            color: Band color as a hex string
            handle_size: Visual radius of the handle in pixels
            hit_tolerance: Extra pixels for hit detection
        """
        self.band = band
        self.color = color
        self.handle_size = handle_size
        self.hit_tolerance = hit_tolerance
        self.label = DATE_BAND_NAMES[band][0].upper()

    def hit_test(self, mouse_x, mouse_y, center_x, center_y, radius, angle):
        px, py = _pixel_pos(center_x, center_y, radius, angle)
        return hits_handle(mouse_x, mouse_y, px, py, self.handle_size, self.hit_tolerance)

    def draw(self, painter, center_x, center_y, radius, angle):
        px, py = _pixel_pos(center_x, center_y, radius, angle)
        size = float(self.handle_size)
        painter.setPen(QPen(QColor(255, 255, 255), 2))
        painter.setBrush(QBrush(QColor(self.color)))
        painter.drawEllipse(QPointF(px, py), size, size)

        painter.setPen(QPen(QColor(255, 255, 255)))
        painter.drawText(QRectF(px - size, py - size, size * 2, size * 2), Qt.AlignCenter, self.label)

    def get_cursor(self):
        return Qt.SizeAllCursor
