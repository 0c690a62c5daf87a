"""
Tests for dependent calendar ranges.
"""
from datetime import date

import pytest

from models.geometry import Range
from services.calendar_bounds import (
    clamp_date, day_bounds, days_in_month, month_bounds, year_bounds
)


MIN = date(2023, 3, 10)
MAX = date(2027, 8, 20)


class TestCalendarBounds:

    @pytest.mark.parametrize("year, month, days", [
        (2024, 2, 29),
        (2023, 2, 28),
        (1900, 2, 28),
        (2000, 2, 29),
        (2024, 4, 30),
        (2024, 12, 31),
    ])
    def test_days_in_month(self, year, month, days):
        assert days_in_month(year, month) == days

    def test_year_bounds(self):
        assert year_bounds(MIN, MAX) == Range(2023, 2027)

    def test_month_bounds_at_edges(self):
        assert month_bounds(2023, MIN, MAX) == Range(3, 12)
        assert month_bounds(2025, MIN, MAX) == Range(1, 12)
        assert month_bounds(2027, MIN, MAX) == Range(1, 8)

    def test_day_bounds_at_edges(self):
        assert day_bounds(2023, 3, MIN, MAX) == Range(10, 31)
        assert day_bounds(2027, 8, MIN, MAX) == Range(1, 20)

    def test_leap_february(self):
        assert day_bounds(2024, 2, MIN, MAX) == Range(1, 29)
        assert day_bounds(2025, 2, MIN, MAX) == Range(1, 28)

    def test_single_day_window(self):
        day = date(2024, 7, 4)
        assert month_bounds(2024, day, day) == Range(7, 7)
        assert day_bounds(2024, 7, day, day) == Range(4, 4)

    def test_clamp_date(self):
        assert clamp_date(date(2020, 1, 1), MIN, MAX) == MIN
        assert clamp_date(date(2030, 1, 1), MIN, MAX) == MAX
        assert clamp_date(date(2025, 5, 5), MIN, MAX) == date(2025, 5, 5)
