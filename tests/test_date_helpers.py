from datetime import date, datetime

import pytest

from budget_planner.utils.date_helpers import get_month_range, is_future_month, next_month, previous_month


class TestMonthRange:

    def test_calendar_month(self):
        start, end = get_month_range(2024, 2)
        assert start == datetime(2024, 2, 1)
        assert end == datetime(2024, 2, 29, 23, 59, 59, 999999)

    def test_december_wraps_year(self):
        start, end = get_month_range(2024, 12)
        assert start == datetime(2024, 12, 1)
        assert end == datetime(2024, 12, 31, 23, 59, 59, 999999)

    def test_anchor_day(self):
        start, end = get_month_range(2024, 1, first_day=15)
        assert start == datetime(2024, 1, 15)
        assert end == datetime(2024, 2, 14, 23, 59, 59, 999999)

    @pytest.mark.parametrize("first_day", [0, 29, 31])
    def test_invalid_anchor(self, first_day):
        with pytest.raises(ValueError):
            get_month_range(2024, 1, first_day=first_day)

    def test_december_9999_overflows(self):
        with pytest.raises(ValueError):
            get_month_range(9999, 12)


def test_previous_and_next_month():
    assert previous_month(2024, 1) == (2023, 12)
    assert previous_month(2024, 7) == (2024, 6)
    assert next_month(2024, 12) == (2025, 1)


def test_is_future_month():
    today = date(2024, 6, 15)
    assert is_future_month(2024, 7, today)
    assert is_future_month(2025, 1, today)
    assert not is_future_month(2024, 6, today)
    assert not is_future_month(2023, 12, today)
