from __future__ import annotations

import time
from datetime import date, datetime, timedelta, timezone

import pytest

from fabric_erp.utils.date_converter import (
    days_until,
    format_display_date,
    format_due_time,
    system_clock,
    to_date,
)

TODAY = date(2025, 1, 15)


def test_to_date_accepts_dates_datetimes_and_iso_strings():
    assert to_date(TODAY) == TODAY
    assert to_date(datetime(2025, 1, 15, 18, 45)) == TODAY
    assert to_date("2025-01-15") == TODAY


def test_to_date_returns_none_for_garbage():
    assert to_date(None) is None
    assert to_date("") is None
    assert to_date("not a date") is None
    assert to_date(20250115) is None


def test_days_until():
    assert days_until(date(2025, 1, 25), TODAY) == 10
    assert days_until(date(2025, 1, 12), TODAY) == -3


def test_format_due_time():
    assert format_due_time("2025-01-13", TODAY) == "Overdue by 2 days"
    assert format_due_time("2025-01-14", TODAY) == "Overdue by 1 day"
    assert format_due_time(TODAY, TODAY) == "Due today"
    assert format_due_time("2025-01-16", TODAY) == "Due tomorrow"
    assert format_due_time("2025-01-18", TODAY) == "Due in 3 days"
    assert format_due_time("2025-01-29", TODAY) == "Due in 14 days"


def test_format_due_time_outside_window_or_missing():
    assert format_due_time("2025-01-30", TODAY) is None
    assert format_due_time("2025-01-30", TODAY, window_days=30) == "Due in 15 days"
    assert format_due_time(None, TODAY) is None


def test_format_display_date():
    assert format_display_date("2025-01-15") == "15 Jan 2025"
    assert format_display_date(None) == "-"


def test_system_clock_returns_a_date():
    assert isinstance(system_clock(), date)


def test_offset_timestamps_use_the_local_calendar_date(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("needs time.tzset")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    try:
        assert to_date("2025-01-15T10:30:00+05:30") == TODAY
        assert to_date("2025-01-15T10:30:00Z") == TODAY
        # 01:00 in India is still the previous evening in UTC
        assert to_date("2025-01-15T01:00:00+05:30") == date(2025, 1, 14)
        assert to_date("2025-01-14T23:30:00-02:00") == TODAY
        assert to_date(datetime(2025, 1, 15, 2, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))) == date(2025, 1, 14)
    finally:
        monkeypatch.undo()
        time.tzset()
