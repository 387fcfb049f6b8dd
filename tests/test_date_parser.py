"""Tests for date parsing and calendar-day helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest
from dateutil import tz
from dateutil.relativedelta import relativedelta

from bizdash.utils.date_parser import (
    get_date_range,
    parse_date,
    same_calendar_day,
    start_of_day,
    to_local_date,
)

SAO_PAULO = tz.gettz("America/Sao_Paulo")
TOKYO = tz.gettz("Asia/Tokyo")


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    assert parse_date("Tomorrow") == date.today() + timedelta(days=1)


def test_parse_in_n_days():
    """Test parsing 'in N days'."""
    assert parse_date("in 3 days") == date.today() + timedelta(days=3)
    assert parse_date("in 1 day") == date.today() + timedelta(days=1)


def test_parse_next_week_and_month():
    """Test parsing 'next week' and 'next month'."""
    assert parse_date("next week") == date.today() + timedelta(weeks=1)
    assert parse_date("next month") == date.today() + relativedelta(months=1)


def test_parse_standard_formats():
    """Test parsing other common formats."""
    assert parse_date("May 10, 2024") == date(2024, 5, 10)
    assert parse_date("2024/05/10") == date(2024, 5, 10)


def test_parse_invalid_date():
    """Test that unparseable strings raise ValueError."""
    with pytest.raises(ValueError):
        parse_date("not a date")


def test_get_date_range_this_month():
    """Test getting date range for this month."""
    start, end = get_date_range("this-month")
    today = date.today()
    assert start == date(today.year, today.month, 1)
    assert end == today


def test_get_date_range_last_month():
    """Test getting date range for last month."""
    start, end = get_date_range("last-month")
    first_of_this_month = date.today().replace(day=1)
    assert end == first_of_this_month - timedelta(days=1)
    assert start == end.replace(day=1)


def test_get_date_range_this_year():
    """Test getting date range for this year."""
    start, end = get_date_range("this-year")
    today = date.today()
    assert start == date(today.year, 1, 1)
    assert end == today


def test_get_date_range_last_year():
    """Test getting date range for last year."""
    start, end = get_date_range("last-year")
    year = date.today().year - 1
    assert start == date(year, 1, 1)
    assert end == date(year, 12, 31)


def test_get_date_range_unknown():
    """Test that unknown periods raise ValueError."""
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")


class TestCalendarDays:
    """Calendar-day helpers convert absolute timestamps to local dates."""

    def test_to_local_date_uses_zone(self):
        """The same instant can be different days in different zones."""
        instant = datetime(2024, 5, 10, 1, 30, tzinfo=timezone.utc)
        assert to_local_date(instant, SAO_PAULO) == date(2024, 5, 9)
        assert to_local_date(instant, TOKYO) == date(2024, 5, 10)

    def test_naive_timestamps_are_utc(self):
        """Naive timestamps are read as UTC."""
        naive = datetime(2024, 5, 10, 1, 30)
        assert to_local_date(naive, SAO_PAULO) == date(2024, 5, 9)

    def test_start_of_day(self):
        """Local midnight is returned as a UTC timestamp."""
        midnight = start_of_day(date(2024, 5, 10), SAO_PAULO)
        assert midnight == datetime(2024, 5, 10, 3, 0, tzinfo=timezone.utc)
        assert to_local_date(midnight, SAO_PAULO) == date(2024, 5, 10)

    def test_same_calendar_day_ignores_time(self):
        """Only year, month and day are compared."""
        late = datetime(2024, 5, 10, 23, 59, tzinfo=SAO_PAULO)
        assert same_calendar_day(late, date(2024, 5, 10), SAO_PAULO)
        assert not same_calendar_day(late, date(2024, 5, 11), SAO_PAULO)
