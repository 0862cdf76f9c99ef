"""Tests for inclusive date-range iteration."""

from __future__ import annotations

from datetime import timedelta

import pytest

from conftest import d


class TestDateRange:

    def test_inclusive_both_ends(self):
        from calendar_csp.calendar import date_range

        assert list(date_range(d("2023-01-01"), d("2023-01-03"))) == [
            d("2023-01-01"), d("2023-01-02"), d("2023-01-03"),
        ]

    def test_single_day(self):
        from calendar_csp.calendar import date_range

        assert list(date_range(d("2023-01-01"), d("2023-01-01"))) == [d("2023-01-01")]

    def test_reversed_is_empty(self):
        from calendar_csp.calendar import date_range

        assert list(date_range(d("2023-01-02"), d("2023-01-01"))) == []

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            ("2023-02-27", "2023-03-01", 3),  # non-leap February
            ("2024-02-27", "2024-03-01", 4),  # leap February
            ("2022-12-30", "2023-01-02", 4),  # year boundary
        ],
        ids=["non_leap", "leap", "year_boundary"],
    )
    def test_calendar_boundaries(self, start, end, expected):
        from calendar_csp.calendar import date_range, days_in_range

        days = list(date_range(d(start), d(end)))
        assert len(days) == expected
        assert days_in_range(d(start), d(end)) == expected
        assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))

    def test_days_in_range_reversed(self):
        from calendar_csp.calendar import days_in_range

        assert days_in_range(d("2023-01-05"), d("2023-01-01")) == 0
