"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

RecordDate = Union[date, datetime, str]

DATE_KEY_FORMAT = "%Y-%m-%d"

TIME_RANGES = ("weekly", "monthly", "3-months")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def to_local_date(value: RecordDate) -> date:
    """Resolve a record timestamp to its calendar day in local time.

    ISO strings without an offset (including bare "2024-01-15") are read as
    local wall-clock time. Offset-aware values are converted to the local
    zone before the day is taken, so every date in the engine agrees on
    local time.

    Raises:
        ValueError: If a string value is not a parseable ISO timestamp
    """
    if isinstance(value, str):
        value = date_parser.isoparse(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def date_key(value: RecordDate) -> str:
    """Return the local ``YYYY-MM-DD`` key used to bucket records by day."""
    return to_local_date(value).strftime(DATE_KEY_FORMAT)


def each_day(start: date, end: date) -> list[date]:
    """List every calendar day from start to end inclusive (empty if end < start)."""
    days = []
    current = start
    while current <= end:
        days.append(current)
        current += timedelta(days=1)
    return days


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a dashboard time range.

    Args:
        period: One of "weekly", "monthly" or "3-months"
        today: Reference day, defaults to the local current date

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    if today is None:
        today = date.today()

    if period == "weekly":
        return (today - timedelta(days=6), today)

    elif period == "monthly":
        start_date = today.replace(day=1)
        # Last day of the month (day before first day of next month)
        end_date = start_date + relativedelta(months=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "3-months":
        start_date = (today - relativedelta(months=2)).replace(day=1)
        return (start_date, today)

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(TIME_RANGES)}"
        )
