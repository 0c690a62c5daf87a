"""
Date Knob Widget - Concentric year/month/day rings

Three rings share one circle: year innermost, day at the rim. Dragging over
a ring edits that part of the date; moving to another ring mid-drag commits
the ring being left. With lock_band each ring is dragged by its own labelled
handle instead (orbiter mode).
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, QRectF, QEvent, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor

from constants import (
	DATE_BAND_COUNT, DATE_YEAR_COLOR, DATE_MONTH_COLOR, DATE_DAY_COLOR,
	DEFAULT_TRACK_COLOR, TRACK_STROKE_WIDTH
)
from components.knob_widget import arc_painter_path, event_point
from components.knob_widgets.handles import BandRingHandle, OrbiterHandle, ThumbHandle
from components.knob_widgets.pointer_surface import QtPointerSurface
from models.errors import ConfigurationError
from models.geometry import Rect
from models.knob_config import DateKnobConfig
from services.arc_path import is_full_circle
from services.date_knob_engine import DateKnobEngine
from utils.logger import loggerRaise

BAND_COLORS = (DATE_YEAR_COLOR, DATE_MONTH_COLOR, DATE_DAY_COLOR)


class DateKnobWidget(QWidget):
	"""Interactive concentric date knob"""

	# Signals
	dateChanged = pyqtSignal(object)  # datetime.date
	dragFinished = pyqtSignal()

	def __init__(self, config=None, value=None, lock_band=False, parent=None):
		super().__init__(parent)
		self.setMouseTracking(True)

		self.config = config if config is not None else DateKnobConfig()
		self.engine = DateKnobEngine(self.config, value, on_change=self._on_engine_date, lock_band=lock_band)
		self.surface = QtPointerSurface(self)
		self.track_color = QColor(DEFAULT_TRACK_COLOR)
		self._build_handles()

		rect = self.config.default_rect()
		self.setMinimumSize(int(rect.width), int(rect.height))
		self.resize(int(rect.width), int(rect.height))

	@classmethod
	def from_props(cls, value=None, lock_band=False, parent=None, **props):
		"""Build a date knob from props (min_date, max_date, start_angle, ...)."""
		try:
			config = DateKnobConfig.create(**props)
		except ConfigurationError as e:
			logging.getLogger('DateKnobWidget').warning("Rejected date knob props %s: %s", props, e)
			loggerRaise(e, f"Invalid date knob configuration: {e}", "Date Knob Error")
		return cls(config, value, lock_band, parent)

	def _build_handles(self):
		"""Ring and thumb handles per band (band width changes with geometry)"""
		band_width = self.engine.band_width
		self.ring_handles = [BandRingHandle(band, band_width, BAND_COLORS[band]) for band in range(DATE_BAND_COUNT)]
		if self.engine.lock_band:
			self.thumb_handles = [OrbiterHandle(band, BAND_COLORS[band]) for band in range(DATE_BAND_COUNT)]
		else:
			self.thumb_handles = [ThumbHandle(thumb_radius=4, stroke=BAND_COLORS[band]) for band in range(DATE_BAND_COUNT)]

	# ------------------------------------------------------------------
	# Value
	# ------------------------------------------------------------------
	def date(self):
		return self.engine.current_value()

	def setDate(self, value):
		"""Set the date programmatically (no signal)"""
		self.engine.set_value(value)
		self.update()

	def _on_engine_date(self, value):
		self.engine.set_value(value)
		self.update()
		self.dateChanged.emit(value)

	def _container_rect(self):
		return Rect(0.0, 0.0, float(self.width()), float(self.height()))

	# ------------------------------------------------------------------
	# Qt events
	# ------------------------------------------------------------------
	def resizeEvent(self, event):
		if not self.engine.is_dragging:
			self.engine.set_geometry(self._container_rect())
			self._build_handles()
		super().resizeEvent(event)

	def mousePressEvent(self, event):
		"""Start a drag (orbiter mode: only on a band handle)"""
		if event.button() == Qt.LeftButton:
			if self.engine.on_pointer_down(event_point(event), self._container_rect(), self.surface):
				event.accept()
				self.update()
				return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		if self.surface.active:
			self.surface.dispatch_move(event_point(event))
			event.accept()
			return

		point = event_point(event)
		if self.engine.lock_band:
			band = self.engine.hit_band(point)
			cursor = self.thumb_handles[band].get_cursor() if band is not None else Qt.ArrowCursor
		else:
			cursor = self.ring_handles[self.engine.band_at(point)].get_cursor()
		self.setCursor(cursor)
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
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
		self.update()
		self.dragFinished.emit()

	# ------------------------------------------------------------------
	# Painting
	# ------------------------------------------------------------------
	def paintEvent(self, event):
		"""Draw ring tracks, progress arcs, handles, guide line and readout"""
		engine = self.engine
		if engine.band_width <= 0:
			return

		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		center = engine.center
		arc = self.config.arc
		angles = engine.band_angles()
		stroke = min(TRACK_STROKE_WIDTH, engine.band_width * 0.6)

		active = engine.active_band
		if active is not None:
			self.ring_handles[active].draw(painter, center.x, center.y, engine.ring_radii[active], angles[active])

		for band in range(DATE_BAND_COUNT):
			radius = engine.ring_radii[band]
			painter.setBrush(Qt.NoBrush)
			painter.setPen(QPen(self.track_color, stroke, Qt.SolidLine, Qt.RoundCap))
			if is_full_circle(arc):
				painter.drawEllipse(QPointF(center.x, center.y), radius, radius)
			else:
				painter.drawPath(arc_painter_path(center, radius, arc.start_angle, arc.arc_length))

			sweep = angles[band] - arc.start_angle
			if sweep != 0:
				painter.setPen(QPen(QColor(BAND_COLORS[band]), stroke, Qt.SolidLine, Qt.RoundCap))
				painter.drawPath(arc_painter_path(center, radius, arc.start_angle, sweep))

		# Guide line from the center to the pointer while dragging
		drag_position = engine.drag_position
		if drag_position is not None:
			painter.setPen(QPen(QColor(0, 0, 0, 60), 1, Qt.DashLine))
			painter.drawLine(QPointF(center.x, center.y), QPointF(drag_position.x, drag_position.y))

		for band in range(DATE_BAND_COUNT):
			self.thumb_handles[band].draw(painter, center.x, center.y, engine.ring_radii[band], angles[band])

		painter.setPen(QPen(self.palette().windowText().color()))
		text_rect = QRectF(center.x - 40, center.y + engine.ring_radii[0] + 2, 80, 16)
		painter.drawText(text_rect, Qt.AlignCenter, self.date().isoformat())
		painter.end()
