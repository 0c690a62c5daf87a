"""Demo gallery presets.

Each preset is a plain dict: 'config' holds knob props fed through
KnobConfig.from_dict / DateKnobConfig.create, 'value' the initial value and
'colors' an optional (track, active, thumb) triple.
"""
from datetime import date

from models.knob_config import DateKnobConfig, KnobConfig

# Shared props of the half-circle knobs, overridden per orientation
_HALF_CIRCLE_BASE = {
    'min': 0,
    'max': 100,
    'tick_step': 10,
    'precision_step': 1,
    'precision_distance': 20,
    'deadzone': 10,
    'diameter': 140,
}

KNOB_PRESETS = {
    'Default': {
        'value': 6,
        'config': {
            'min': 0, 'max': 12, 'tick_step': 1, 'precision_step': 0.1,
            'precision_distance': 20, 'deadzone': 10, 'start_angle': -90,
            'arc_length': 360, 'diameter': 120,
        },
    },
    'Clock style': {
        'value': 3,
        'config': {
            'min': 1, 'max': 12, 'tick_step': 1, 'precision_steps': [1, 0.5],
            'deadzone': 10, 'start_angle': -90, 'arc_length': 360, 'diameter': 140,
        },
        'colors': ('#e2e8f0', '#2563eb', '#3b82f6'),
    },
    'Full 360': {
        'value': 180,
        'config': {
            'min': 0, 'max': 360, 'tick_step': 45, 'precision_steps': [30, 15, 5, 1],
            'deadzone': 20, 'start_angle': 0, 'arc_length': 360, 'diameter': 160,
        },
        'colors': ('#f3f4f6', '#0891b2', '#bae6fd'),
    },
    'Semi circle': {
        'value': 50,
        'config': {
            'min': 0, 'max': 100, 'tick_step': 20, 'precision_step': 5,
            'precision_distance': 25, 'deadzone': 10, 'start_angle': -180,
            'arc_length': 180, 'diameter': 130,
        },
        'colors': ('#faf5ff', '#7c3aed', '#ddd6fe'),
    },
    'Custom bands': {
        'value': 5,
        'config': {
            'min': 0, 'max': 50, 'tick_step': 5, 'precision_steps': [10, 5, 2, 1, 0.5],
            'deadzone': 15, 'start_angle': -90, 'arc_length': 360, 'diameter': 150,
        },
        'colors': ('#fef3c7', '#f59e0b', '#fde68a'),
    },
    'Small knob': {
        'value': 0.5,
        'config': {
            'min': 0, 'max': 1, 'tick_step': 0.1, 'precision_step': 0.01,
            'precision_distance': 10, 'deadzone': 5, 'start_angle': -90,
            'arc_length': 360, 'diameter': 80,
        },
        'colors': ('#e5e7eb', '#047857', '#10b981'),
    },
    'Half top': {
        'value': 50,
        'config': dict(_HALF_CIRCLE_BASE, orientation='top'),
        'colors': ('#f3f4f6', '#2563eb', '#3b82f6'),
    },
    'Half bottom': {
        'value': 50,
        'config': dict(_HALF_CIRCLE_BASE, orientation='bottom'),
        'colors': ('#faf5ff', '#7c3aed', '#ddd6fe'),
    },
    'Half left': {
        'value': 0.5,
        'config': dict(_HALF_CIRCLE_BASE, orientation='left', min=0, max=1, tick_step=0.1,
                       precision_step=0.01, precision_distance=15, diameter=120),
        'colors': ('#ecfdf5', '#10b981', '#a7f3d0'),
    },
    'Half right': {
        'value': 50,
        'config': dict(_HALF_CIRCLE_BASE, orientation='right'),
        'colors': ('#fffbeb', '#f59e0b', '#fde68a'),
    },
}

DATE_PRESETS = {
    'Date default': {
        'value': None,  # today
        'config': {'min_date': date(2000, 1, 1), 'max_date': date(2030, 12, 31), 'diameter': 220},
    },
    'Limited year range': {
        'value': date(2025, 6, 15),
        'config': {'min_date': date(2023, 1, 1), 'max_date': date(2027, 12, 31),
                   'diameter': 200, 'start_angle': -135, 'arc_length': 270},
    },
    'Single year': {
        'value': date(2022, 12, 25),
        'config': {'min_date': date(2022, 1, 1), 'max_date': date(2022, 12, 31),
                   'diameter': 250, 'start_angle': 0},
    },
    'Month/day picker': {
        'value': date(2024, 7, 4),
        'config': {'min_date': date(2024, 1, 1), 'max_date': date(2024, 12, 31), 'diameter': 200},
    },
    'Orbiter': {
        'value': None,
        'config': {'min_date': date(2000, 1, 1), 'max_date': date(2030, 12, 31), 'diameter': 200},
        'lock_band': True,
    },
}


def knob_preset(name):
    """Resolve a knob preset.

    Returns:
        tuple: (KnobConfig, value, colors or None)

    Raises:
        KeyError: Unknown preset name
    """
    preset = KNOB_PRESETS[name]
    return KnobConfig.from_dict(preset['config']), preset['value'], preset.get('colors')


def date_preset(name):
    """Resolve a date preset.

    Returns:
        tuple: (DateKnobConfig, value or None, lock_band)
    """
    preset = DATE_PRESETS[name]
    return DateKnobConfig.create(**preset['config']), preset['value'], preset.get('lock_band', False)
