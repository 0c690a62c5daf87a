"""
pytest-qt tests for the knob widgets.

Mouse events are delivered straight to the widget handlers so the drag flow
runs without a window system (hidden widgets never grab the mouse).
"""
from datetime import date

import pytest
from PyQt5.QtCore import Qt, QEvent, QPointF
from PyQt5.QtGui import QMouseEvent, QHideEvent

from components.date_knob_widget import DateKnobWidget
from components.knob_widget import KnobWidget
from models.errors import ConfigurationError
from models.knob_config import DateKnobConfig, KnobConfig


def press(x, y):
    return QMouseEvent(QEvent.MouseButtonPress, QPointF(x, y), Qt.LeftButton, Qt.LeftButton, Qt.NoModifier)


def move(x, y):
    return QMouseEvent(QEvent.MouseMove, QPointF(x, y), Qt.NoButton, Qt.LeftButton, Qt.NoModifier)


def release(x, y):
    return QMouseEvent(QEvent.MouseButtonRelease, QPointF(x, y), Qt.LeftButton, Qt.NoButton, Qt.NoModifier)


# ══════════════════════════════════════════════════════════════════════════
# KnobWidget
# ══════════════════════════════════════════════════════════════════════════

class TestKnobWidget:

    @pytest.fixture
    def knob(self, qtbot):
        widget = KnobWidget(KnobConfig.create(), 0)
        qtbot.addWidget(widget)
        return widget

    def test_default_size_matches_diameter(self, knob):
        assert (knob.width(), knob.height()) == (150, 150)

    def test_drag_emits_and_applies_value(self, knob):
        values = []
        knob.valueChanged.connect(values.append)
        knob.mousePressEvent(press(75, 25))
        knob.mouseMoveEvent(move(125, 75))
        assert values == [3.0]
        assert knob.value() == 3.0

    def test_release_emits_drag_finished(self, knob, qtbot):
        knob.mousePressEvent(press(75, 25))
        with qtbot.waitSignal(knob.dragFinished, timeout=1000):
            knob.mouseReleaseEvent(release(75, 25))
        assert not knob.engine.is_dragging
        assert not knob.surface.active

    def test_moves_after_release_are_hover_only(self, knob):
        values = []
        knob.valueChanged.connect(values.append)
        knob.mousePressEvent(press(75, 25))
        knob.mouseReleaseEvent(release(75, 25))
        knob.mouseMoveEvent(move(125, 75))
        assert values == []

    def test_hide_counts_as_capture_loss(self, knob, qtbot):
        knob.mousePressEvent(press(75, 25))
        with qtbot.waitSignal(knob.dragFinished, timeout=1000):
            knob.hideEvent(QHideEvent())
        assert not knob.engine.is_dragging

    def test_set_value_does_not_emit(self, knob):
        values = []
        knob.valueChanged.connect(values.append)
        knob.setValue(7)
        assert knob.value() == 7
        assert values == []

    def test_arc_path_data(self, knob):
        knob.setValue(3)
        assert knob.arcPathData() == "M 75 9 A 66 66 0 0 1 141 75"

    def test_from_props_rejects_bad_config(self):
        # Running from source: loggerRaise re-raises the ConfigurationError
        with pytest.raises(ConfigurationError):
            KnobWidget.from_props(min=10, max=0)

    @pytest.mark.parametrize("props", [
        {},
        {'orientation': 'top'},
        {'start_angle': -135, 'arc_length': 270, 'direction': 'reverse'},
        {'precision_steps': [1, 0.5]},
    ])
    def test_paints(self, qtbot, props):
        widget = KnobWidget.from_props(value=4, **props)
        qtbot.addWidget(widget)
        widget.set_colors('#fef3c7', '#f59e0b', '#fde68a')
        assert not widget.grab().isNull()


# ══════════════════════════════════════════════════════════════════════════
# DateKnobWidget
# ══════════════════════════════════════════════════════════════════════════

class TestDateKnobWidget:

    @pytest.fixture
    def date_knob(self, qtbot):
        widget = DateKnobWidget(DateKnobConfig(), date(2010, 6, 15))
        qtbot.addWidget(widget)
        return widget

    def test_year_ring_drag(self, date_knob):
        dates = []
        date_knob.dateChanged.connect(dates.append)
        date_knob.mousePressEvent(press(120, 100))
        date_knob.mouseMoveEvent(move(120, 100))
        assert dates == [date(2008, 6, 15)]
        assert date_knob.date() == date(2008, 6, 15)

    def test_release_ends_drag(self, date_knob, qtbot):
        date_knob.mousePressEvent(press(120, 100))
        with qtbot.waitSignal(date_knob.dragFinished, timeout=1000):
            date_knob.mouseReleaseEvent(release(120, 100))
        assert not date_knob.engine.is_dragging

    def test_orbiter_ignores_press_off_handles(self, qtbot):
        widget = DateKnobWidget(DateKnobConfig(), date(2015, 1, 1), lock_band=True)
        qtbot.addWidget(widget)
        widget.mousePressEvent(press(150, 150))
        assert not widget.engine.is_dragging
        widget.mousePressEvent(press(100, 52))
        assert widget.engine.active_band == 1

    @pytest.mark.parametrize("lock_band", [False, True])
    def test_paints(self, qtbot, lock_band):
        widget = DateKnobWidget.from_props(value=date(2024, 2, 29), lock_band=lock_band,
                                           start_angle=-135, arc_length=270)
        qtbot.addWidget(widget)
        widget.mousePressEvent(press(120, 100))
        widget.mouseMoveEvent(move(130, 100))
        assert not widget.grab().isNull()
