"""
Knobbler - Data Models

- geometry.py: Vec2, Rect, Range, ArcSpec, PathSpec value objects
- knob_config.py: validated KnobConfig / DateKnobConfig
- drag_session.py: DragSession, ListenerScope, PointerSurface
- entity.py: composite band records
- presets.py: demo gallery presets

Import from the submodules directly; services import models and
knob_config imports services, so nothing is re-exported here.
"""
