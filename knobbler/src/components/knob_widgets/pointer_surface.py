"""Qt pointer surface - routes grabbed mouse events to a drag session."""

import logging
from PyQt5.QtWidgets import QWidget

from models.drag_session import PointerSurface


class QtPointerSurface(PointerSurface):
    """PointerSurface over a widget's mouse grab.

    While subscribed, the widget grabs the mouse so moves and the release
    keep arriving after the pointer leaves it. The owning widget forwards
    its mouse events through dispatch_move/dispatch_up/dispatch_lost.
    """

    def __init__(self, widget):
        self.widget = widget
        self._handlers = None
        self._logger = logging.getLogger('PointerSurface')

    @property
    def active(self) -> bool:
        return self._handlers is not None

    def subscribe(self, on_move, on_up, on_lost):
        if self._handlers is not None:
            raise RuntimeError("Pointer surface already has a subscriber")
        self._handlers = (on_move, on_up, on_lost)
        # Hidden widgets cannot grab the mouse
        if self.widget.isVisible():
            self.widget.grabMouse()
        return self._release

    def _release(self):
        if self._handlers is None:
            return
        self._handlers = None
        if QWidget.mouseGrabber() is self.widget:
            self.widget.releaseMouse()
        self._logger.debug("Released pointer surface of %s", type(self.widget).__name__)

    def dispatch_move(self, point):
        if self._handlers is not None:
            self._handlers[0](point)

    def dispatch_up(self):
        if self._handlers is not None:
            self._handlers[1]()

    def dispatch_lost(self):
        if self._handlers is not None:
            self._handlers[2]()
