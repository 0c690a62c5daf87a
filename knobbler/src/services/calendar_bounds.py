"""Dependent calendar ranges for the date knob.

Month bounds depend on the year (only at the edges of the [min, max] window);
day bounds depend on year and month. Both are recomputed from the current
working values every time they are read.
"""

import calendar
from datetime import date

from models.geometry import Range


def days_in_month(year, month) -> int:
    return calendar.monthrange(year, month)[1]


def year_bounds(min_date: date, max_date: date) -> Range:
    return Range(min_date.year, max_date.year)


def month_bounds(year, min_date: date, max_date: date) -> Range:
    """Valid months for year inside [min_date, max_date]."""
    low = min_date.month if year == min_date.year else 1
    high = max_date.month if year == max_date.year else 12
    return Range(low, high)


def day_bounds(year, month, min_date: date, max_date: date) -> Range:
    """Valid days for (year, month) inside [min_date, max_date]."""
    low = min_date.day if (year, month) == (min_date.year, min_date.month) else 1
    if (year, month) == (max_date.year, max_date.month):
        high = max_date.day
    else:
        high = days_in_month(year, month)
    return Range(low, high)


def clamp_date(value: date, min_date: date, max_date: date) -> date:
    """Nearest date inside [min_date, max_date]."""
    if value < min_date:
        return min_date
    if value > max_date:
        return max_date
    return value
