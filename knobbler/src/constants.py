"""
Knobbler - Constants and Configuration

This module contains all constant values used throughout the application:
- Default value range and snapping steps
- Arc geometry defaults (start angle, sweep, half-circle presets)
- Control geometry (diameter, padding, track inset)
- Date knob defaults
- Widget colors and handle sizes
"""

from datetime import date

# ======================================================================
# VALUE RANGE
# ======================================================================

DEFAULT_MIN = 0
DEFAULT_MAX = 12

# ======================================================================
# SNAPPING / PRECISION
# ======================================================================

# Coarse step used near the center (binary policy)
DEFAULT_TICK_STEP = 1
# Fine step used beyond DEFAULT_PRECISION_DISTANCE (binary policy)
DEFAULT_PRECISION_STEP = 0.1
# Distance from center (pixels) that switches to the fine step
DEFAULT_PRECISION_DISTANCE = 30

# Radius (pixels) around the center where dragging is ignored
DEFAULT_DEADZONE = 15

# Decimals used when rendering path coordinates
PATH_COORD_DECIMALS = 3

# ======================================================================
# ARC GEOMETRY
# ======================================================================

# Degrees, screen convention (0 = 3 o'clock, clockwise, Y-down)
DEFAULT_START_ANGLE = -90  # 12 o'clock
DEFAULT_ARC_LENGTH = 360

# Half-circle presets: orientation -> (start_angle, arc_length)
HALF_CIRCLE_ARCS = {
    'top':    (180, 180),
    'bottom': (0, 180),
    'left':   (90, 180),
    'right':  (-90, 180),
}

DIRECTION_NORMAL = 'normal'
DIRECTION_REVERSE = 'reverse'

# ======================================================================
# CONTROL GEOMETRY
# ======================================================================

DEFAULT_DIAMETER = 150
KNOB_PADDING = 4  # Space between container edge and control radius
TRACK_INSET = 5   # Track sits this far inside the padded radius
TICK_LENGTH = 5   # Tick marks run from (track radius - TICK_LENGTH) to track radius

# ======================================================================
# DATE KNOB
# ======================================================================

DEFAULT_MIN_DATE = date(2000, 1, 1)
DEFAULT_MAX_DATE = date(2030, 12, 31)
DEFAULT_DATE_DIAMETER = 200

DATE_BAND_COUNT = 3
DATE_BAND_YEAR = 0
DATE_BAND_MONTH = 1
DATE_BAND_DAY = 2
DATE_BAND_NAMES = ('year', 'month', 'day')

# Ring radius of each band as a multiple of the band width
DATE_RING_FACTORS = (0.5, 1.5, 2.5)

# Orbiter thumb handles
ORBITER_HANDLE_SIZE = 12  # Half of the 24px icon
ORBITER_HIT_TOLERANCE = 4

# ======================================================================
# WIDGET COLORS
# ======================================================================

DEFAULT_TRACK_COLOR = '#e5e7eb'
DEFAULT_ACTIVE_COLOR = '#4f46e5'
DEFAULT_THUMB_COLOR = '#ffffff'

DATE_YEAR_COLOR = '#4f46e5'
DATE_MONTH_COLOR = '#10b981'
DATE_DAY_COLOR = '#f59e0b'

# ======================================================================
# WIDGET HANDLES
# ======================================================================

TRACK_STROKE_WIDTH = 10
TICK_STROKE_WIDTH = 2
THUMB_RADIUS = 8
THUMB_STROKE_WIDTH = 2
BAND_HIGHLIGHT_OPACITY = 0.3
