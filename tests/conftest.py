"""
Shared fixtures for Knobbler tests.

Provides knob configurations, engines and a fake pointer surface.
"""
import sys
import os
import pytest

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure knobbler/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'knobbler', 'src'))

from models.drag_session import PointerSurface
from models.geometry import Vec2


# ── Geometry helpers ────────────────────────────────────────────────────

def polar(center, radius, angle):
    """Pointer at angle (screen degrees) and radius around center."""
    import math
    rad = math.radians(angle)
    return Vec2(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


class FakeSurface(PointerSurface):
    """Records subscriptions instead of grabbing the mouse."""

    def __init__(self, fail=False):
        self.fail = fail
        self.handlers = None
        self.subscribe_count = 0
        self.unsubscribe_count = 0

    def subscribe(self, on_move, on_up, on_lost):
        if self.fail:
            raise RuntimeError("surface unavailable")
        self.subscribe_count += 1
        self.handlers = (on_move, on_up, on_lost)

        def unsubscribe():
            self.unsubscribe_count += 1
            self.handlers = None
        return unsubscribe

    @property
    def active(self):
        return self.handlers is not None


# ── Fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def default_config():
    """0..12 full-circle knob, 150px, deadzone 15, precision beyond 30px"""
    from models.knob_config import KnobConfig
    return KnobConfig.create()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def emitted():
    """List collecting on_change values"""
    return []


@pytest.fixture
def engine(default_config, emitted):
    """Engine at 0 whose host never applies emitted values"""
    from services.knob_engine import KnobEngine
    return KnobEngine(default_config, 0, on_change=emitted.append)


@pytest.fixture
def date_config():
    """2000-01-01..2030-12-31, 200px, full circle from 12 o'clock"""
    from models.knob_config import DateKnobConfig
    return DateKnobConfig()
