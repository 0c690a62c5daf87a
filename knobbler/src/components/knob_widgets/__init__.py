"""
Knobbler - Knob Widget Components

- handles.py: ABC-based handle classes (ThumbHandle, BandRingHandle, OrbiterHandle)
- pointer_surface.py: Mouse-grab backed PointerSurface for drag sessions
"""

from .handles import Handle, ThumbHandle, BandRingHandle, OrbiterHandle
from .pointer_surface import QtPointerSurface

__all__ = [
    'Handle', 'ThumbHandle', 'BandRingHandle', 'OrbiterHandle',
    'QtPointerSurface',
]
