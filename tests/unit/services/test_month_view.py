"""
Unit tests for the monthly calendar aggregation.
"""

from dataclasses import dataclass
from datetime import date

from timetrack.services.month_view import (
    build_month,
    clamp_month,
    days_in_month,
    last_visible_day,
    month_bounds,
    month_total,
)


@dataclass
class Entry:
    date: date
    start_time: str
    end_time: str
    project_name: str = "Website"
    client_name: str = "ACME Corp"


TODAY = date(2024, 5, 15)


class TestDaysInMonth:

    def test_regular_months(self):
        assert days_in_month(2024, 3) == 31
        assert days_in_month(2024, 4) == 30

    def test_february_leap_years(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_month_bounds(self):
        assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))


class TestClampMonth:

    def test_past_month_unchanged(self):
        assert clamp_month(2024, 3, TODAY) == (2024, 3)
        assert clamp_month(2019, 12, TODAY) == (2019, 12)

    def test_current_month_reachable(self):
        assert clamp_month(2024, 5, TODAY) == (2024, 5)

    def test_future_month_redirected_to_current(self):
        assert clamp_month(2024, 6, TODAY) == (2024, 5)
        assert clamp_month(2025, 1, TODAY) == (2024, 5)


class TestBuildMonth:

    def test_past_month_has_every_day(self):
        days = build_month(2024, 3, [], TODAY)

        assert len(days) == 31
        assert days[0].date == date(2024, 3, 1)
        assert days[-1].date == date(2024, 3, 31)
        assert [d.date.day for d in days] == list(range(1, 32))
        assert all(d.total_minutes == 0 and d.entries == [] for d in days)

    def test_current_month_stops_at_today(self):
        days = build_month(2024, 5, [], TODAY)

        assert len(days) == 15
        assert days[-1].date == TODAY

    def test_future_month_has_no_days(self):
        assert build_month(2024, 6, [], TODAY) == []

    def test_entries_bucketed_and_summed(self):
        entries = [
            Entry(date(2024, 3, 4), "13:00", "14:30"),
            Entry(date(2024, 3, 4), "09:00", "12:00"),
            Entry(date(2024, 3, 20), "10:00", "10:45"),
        ]

        days = build_month(2024, 3, entries, TODAY)
        by_day = {d.date.day: d for d in days}

        assert by_day[4].total_minutes == 270
        assert [e.start_time for e in by_day[4].entries] == ["09:00", "13:00"]
        assert by_day[20].total_minutes == 45
        assert by_day[5].total_minutes == 0
        assert month_total(days) == 315

    def test_entries_outside_month_ignored(self):
        entries = [
            Entry(date(2024, 2, 29), "09:00", "10:00"),
            Entry(date(2024, 4, 1), "09:00", "10:00"),
        ]

        days = build_month(2024, 3, entries, TODAY)

        assert month_total(days) == 0

    def test_entries_after_today_in_current_month_dropped(self):
        entries = [
            Entry(date(2024, 5, 15), "09:00", "10:00"),
            Entry(date(2024, 5, 16), "09:00", "10:00"),
        ]

        days = build_month(2024, 5, entries, TODAY)

        assert len(days) == 15
        assert month_total(days) == 60

    def test_last_visible_day(self):
        assert last_visible_day(2024, 2, TODAY) == 29
        assert last_visible_day(2024, 5, TODAY) == 15
        assert last_visible_day(2024, 7, TODAY) == 0
        assert last_visible_day(2024, 5, date(2024, 5, 1)) == 1
