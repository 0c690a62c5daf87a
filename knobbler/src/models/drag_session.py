"""Drag session state for knob interactions.

One DragSession object per gesture replaces loose "is dragging" flags. It is
created on pointer-down and dropped on pointer-up or capture loss.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import ExitStack
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from models.geometry import Vec2


_logger = logging.getLogger('DragSession')


class DragState(Enum):
    """Engine lifecycle states."""
    IDLE = "idle"
    DRAGGING = "dragging"


class PointerSurface(ABC):
    """A surface wider than the control that delivers move/up events.

    Hosts implement this over whatever they use for pointer capture (a Qt
    mouse grab, a window-level listener, ...).
    """

    @abstractmethod
    def subscribe(self, on_move: Callable[[Vec2], None], on_up: Callable[[], None],
                  on_lost: Callable[[], None]) -> Callable[[], None]:
        """Start routing pointer events to the handlers.

        Args:
            on_move: Called with the container-local pointer position
            on_up: Called when the pointer is released
            on_lost: Called when the host loses pointer capture

        Returns:
            Callable that stops the routing (must be safe to call once)
        """
        pass


class ListenerScope:
    """Scoped pointer listener registration.

    Every subscription made through the scope is undone by close(), which
    the engines call from every exit path of a session.
    """

    def __init__(self):
        self._stack = ExitStack()
        self._closed = False

    def subscribe(self, surface, on_move, on_up, on_lost):
        unsubscribe = surface.subscribe(on_move, on_up, on_lost)
        self._stack.callback(unsubscribe)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._stack.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


@dataclass
class DragSession:
    """Unified drag state for one pointer gesture.

    Attributes:
        active_band: Band owning the pointer (composite knobs), None before the first move
        last_point: Most recent pointer position
        working: Working values of composite entities, discarded on release
        scope: Listener registrations released when the session ends
    """
    active_band: Optional[int] = None
    last_point: Optional[Vec2] = None
    working: dict = field(default_factory=dict)
    scope: ListenerScope = field(default_factory=ListenerScope)
    move_count: int = 0

    def end(self):
        """Release everything the session acquired."""
        _logger.debug("Ending drag session after %d moves", self.move_count)
        self.active_band = None
        self.working.clear()
        self.scope.close()
