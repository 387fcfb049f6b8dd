"""Date parsing and calendar-day utilities.

Records store absolute timestamps in UTC; anything that talks about a
"day" converts to the local calendar first and drops the time of day.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz
from dateutil.relativedelta import relativedelta


def local_timezone() -> tzinfo:
    """Return the machine's local timezone."""
    return tz.tzlocal()


def to_local_date(timestamp: datetime, zone: Optional[tzinfo] = None) -> date:
    """Return the calendar date of a timestamp in the given (default local) zone.

    Naive timestamps are taken to be UTC, which is how the store keeps them.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=tz.UTC)
    return timestamp.astimezone(zone or local_timezone()).date()


def start_of_day(day: date, zone: Optional[tzinfo] = None) -> datetime:
    """Return the UTC timestamp of midnight of ``day`` in the given (default local) zone."""
    local = datetime.combine(day, time.min, tzinfo=zone or local_timezone())
    return local.astimezone(tz.UTC)


def same_calendar_day(
    timestamp: datetime, day: date, zone: Optional[tzinfo] = None
) -> bool:
    """Check that a timestamp falls on ``day`` (year, month and day all equal)."""
    return to_local_date(timestamp, zone) == day


_RELATIVE_DAYS = {"today": 0, "yesterday": -1, "tomorrow": 1}


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-05-10", "May 10, 2024", ...) and a few
    relative forms: "today", "yesterday", "tomorrow", "in N days" and
    "next week" / "next month" (same weekday or day of month).

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    if text in _RELATIVE_DAYS:
        return today + timedelta(days=_RELATIVE_DAYS[text])

    if text.startswith("in ") and text.endswith((" days", " day")):
        count = text[3:].split(" ", 1)[0]
        if count.isdigit():
            return today + timedelta(days=int(count))

    if text == "next week":
        return today + timedelta(weeks=1)
    if text == "next month":
        return today + relativedelta(months=1)

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates (inclusive) for a named period.

    Args:
        period: One of this-month, last-month, this-year, last-year

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return today.replace(day=1), today
    if period == "last-month":
        start = (today - relativedelta(months=1)).replace(day=1)
        return start, today.replace(day=1) - timedelta(days=1)
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "last-year":
        start = today.replace(month=1, day=1) - relativedelta(years=1)
        return start, today.replace(month=1, day=1) - timedelta(days=1)

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: this-month, last-month, this-year, last-year"
    )
