"""UI components for Knobbler

- knob_widget: KnobWidget (single value knob, full/arc/half circle)
- date_knob_widget: DateKnobWidget (concentric year/month/day rings)
- knob_widgets: handle classes and the Qt pointer surface
"""

from .knob_widget import KnobWidget
from .date_knob_widget import DateKnobWidget

__all__ = [
    'KnobWidget',
    'DateKnobWidget',
]
