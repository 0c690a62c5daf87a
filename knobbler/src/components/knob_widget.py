"""
Knob Widget - Radial input control for one bounded value

Provides a draggable knob with:
- Background track over the configured arc (full circle, fixed arc or half circle)
- Progress arc from the arc start to the current value
- Tick marks every tick_step
- Thumb handle at the current value
- Value readout in the center

Pointer handling is delegated to KnobEngine; the widget grabs the mouse for
the duration of a drag and applies every emitted value to itself before
re-emitting it through valueChanged.
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, QRectF, QEvent, pyqtSignal
from PyQt5.QtGui import QPainter, QPainterPath, QPen, QColor

from constants import (
	DEFAULT_TRACK_COLOR, DEFAULT_ACTIVE_COLOR, TRACK_STROKE_WIDTH, TICK_STROKE_WIDTH
)
from components.knob_widgets.handles import ThumbHandle
from components.knob_widgets.pointer_surface import QtPointerSurface
from models.errors import ConfigurationError
from models.geometry import Rect, Vec2
from models.knob_config import KnobConfig
from services.arc_path import is_full_circle
from services.knob_engine import KnobEngine
from utils.logger import loggerRaise


def arc_painter_path(center, radius, start_angle, sweep):
	"""QPainterPath along a circle from start_angle, sweeping sweep degrees.

	Angles are screen degrees (clockwise, Y-down); Qt measures arcs
	counter-clockwise, hence the sign flips.
	"""
	rect = QRectF(center.x - radius, center.y - radius, radius * 2, radius * 2)
	path = QPainterPath()
	path.arcMoveTo(rect, -start_angle)
	path.arcTo(rect, -start_angle, -sweep)
	return path


def event_point(event):
	"""Container-local Vec2 of a mouse event."""
	pos = event.localPos()
	return Vec2(pos.x(), pos.y())


class KnobWidget(QWidget):
	"""Interactive radial knob for one numeric value"""

	# Signals
	valueChanged = pyqtSignal(float)  # Every value resolved during a drag
	dragFinished = pyqtSignal()  # Drag released or capture lost

	def __init__(self, config=None, value=None, parent=None):
		super().__init__(parent)
		self.setMouseTracking(True)

		self.config = config if config is not None else KnobConfig.create()
		self.engine = KnobEngine(self.config, value, on_change=self._on_engine_value)
		self.surface = QtPointerSurface(self)
		self.thumb = ThumbHandle()

		self.track_color = QColor(DEFAULT_TRACK_COLOR)
		self.active_color = QColor(DEFAULT_ACTIVE_COLOR)

		rect = self.config.default_rect()
		self.setMinimumSize(int(rect.width), int(rect.height))
		self.resize(int(rect.width), int(rect.height))

	@classmethod
	def from_props(cls, value=None, parent=None, **props):
		"""Build a knob from component props (min, max, tick_step, ...).

		Malformed props go through loggerRaise so release builds report them.
		"""
		try:
			config = KnobConfig.create(**props)
		except ConfigurationError as e:
			logging.getLogger('KnobWidget').warning("Rejected knob props %s: %s", props, e)
			loggerRaise(e, f"Invalid knob configuration: {e}", "Knob Error")
		return cls(config, value, parent)

	# ------------------------------------------------------------------
	# Value
	# ------------------------------------------------------------------
	def value(self):
		return self.engine.current_value()

	def setValue(self, value):
		"""Set the value programmatically (no signal)"""
		self.engine.set_value(value)
		self.update()

	def set_colors(self, track, active, thumb):
		"""Set track, progress and thumb colors (hex strings)"""
		self.track_color = QColor(track)
		self.active_color = QColor(active)
		self.thumb = ThumbHandle(fill=thumb, stroke=active)
		self.update()

	def arcPathData(self):
		"""SVG path data of the progress arc"""
		return self.engine.current_arc_path().to_svg()

	def _on_engine_value(self, value):
		self.engine.set_value(value)
		self.update()
		self.valueChanged.emit(float(value))

	def _container_rect(self):
		return Rect(0.0, 0.0, float(self.width()), float(self.height()))

	# ------------------------------------------------------------------
	# Qt events
	# ------------------------------------------------------------------
	def resizeEvent(self, event):
		if not self.engine.is_dragging:
			self.engine.set_geometry(self._container_rect())
		super().resizeEvent(event)

	def mousePressEvent(self, event):
		"""Start a drag session"""
		if event.button() == Qt.LeftButton:
			if self.engine.on_pointer_down(event_point(event), self._container_rect(), self.surface):
				self.setCursor(Qt.ClosedHandCursor)
				event.accept()
				return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		"""Forward drag moves to the engine, otherwise update hover cursor"""
		if self.surface.active:
			self.surface.dispatch_move(event_point(event))
			event.accept()
			return

		engine = self.engine
		pos = event.localPos()
		if self.thumb.hit_test(pos.x(), pos.y(), engine.center.x, engine.center.y,
				engine.track_radius, engine.current_angle()):
			self.setCursor(self.thumb.get_cursor())
		else:
			self.setCursor(Qt.ArrowCursor)
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		"""End the drag session"""
		if event.button() == Qt.LeftButton and self.surface.active:
			self.surface.dispatch_up()
			self._finish_drag()
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def hideEvent(self, event):
		self._capture_lost()
		super().hideEvent(event)

	def event(self, event):
		if event.type() == QEvent.WindowDeactivate:
			self._capture_lost()
		return super().event(event)

	def closeEvent(self, event):
		self.engine.close()
		super().closeEvent(event)

	def _capture_lost(self):
		if self.surface.active:
			self.surface.dispatch_lost()
			self._finish_drag()

	def _finish_drag(self):
		self.setCursor(Qt.ArrowCursor)
		self.dragFinished.emit()

	# ------------------------------------------------------------------
	# Painting
	# ------------------------------------------------------------------
	def paintEvent(self, event):
		"""Draw track, ticks, progress arc, thumb and readout"""
		engine = self.engine
		radius = engine.track_radius
		if radius <= 0:
			return

		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		center = engine.center
		arc = self.config.arc

		# Background track
		painter.setBrush(Qt.NoBrush)
		painter.setPen(QPen(self.track_color, TRACK_STROKE_WIDTH, Qt.SolidLine, Qt.RoundCap))
		if is_full_circle(arc):
			painter.drawEllipse(QPointF(center.x, center.y), radius, radius)
		else:
			painter.drawPath(arc_painter_path(center, radius, arc.start_angle, arc.arc_length))

		# Ticks
		painter.setPen(QPen(self.track_color.darker(130), TICK_STROKE_WIDTH))
		for inner, outer in engine.ticks():
			painter.drawLine(QPointF(inner.x, inner.y), QPointF(outer.x, outer.y))

		# Progress arc
		sweep = engine.current_angle() - arc.start_angle
		if sweep != 0:
			painter.setPen(QPen(self.active_color, TRACK_STROKE_WIDTH, Qt.SolidLine, Qt.RoundCap))
			painter.drawPath(arc_painter_path(center, radius, arc.start_angle, sweep))

		self.thumb.draw(painter, center.x, center.y, radius, engine.current_angle())

		# Readout
		decimals = engine.step_policy.decimals
		painter.setPen(QPen(self.palette().windowText().color()))
		text_rect = QRectF(self.rect())
		painter.drawText(text_rect, Qt.AlignCenter, f"{self.value():.{decimals}f}")
		painter.end()
