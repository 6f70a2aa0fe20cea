"""Date parsing utilities."""

from datetime import UTC, date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a relative date word into a date object.

    Supports:
    - "today", "yesterday", "tomorrow"
    - "this week/month/year", "last week/month/year" (first day of the period)

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If the string is not a known relative date
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this week": today - timedelta(days=today.weekday()),
        "this month": today.replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last week": today - timedelta(days=today.weekday() + 7),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]
    raise ValueError(f"Unknown relative date '{date_str}'")


def to_storage_datetime(value: datetime) -> datetime:
    """Normalize a datetime to the naive UTC form stored in the database."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value


def parse_range_bound(value: str | date | datetime, end: bool = False) -> datetime:
    """Parse one bound of an inclusive date range.

    A bound without a time of day covers the whole day: a start bound
    becomes midnight, an end bound the last microsecond of the day.

    Args:
        value: Date string ("2024-01-15", "2024-01-15T10:00:00+02:00",
            "today", ...), a date or a datetime
        end: True when parsing the upper bound

    Returns:
        Naive UTC datetime

    Raises:
        ValueError: If the string cannot be parsed
    """
    if isinstance(value, datetime):
        return to_storage_datetime(value)

    if isinstance(value, date):
        day = value
    else:
        text = value.strip()
        try:
            day = parse_date(text)
        except ValueError:
            today = date.today()
            try:
                parsed = date_parser.parse(text, default=datetime.combine(today, time.min))
                # Missing fields come from the default, so only an explicit
                # time of day gives the same hour for both defaults.
                late = date_parser.parse(text, default=datetime.combine(today, time.max))
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Could not parse date '{text}': {e}")
            if parsed.hour == late.hour:
                return to_storage_datetime(parsed)
            day = parsed.date()

    return datetime.combine(day, time.max if end else time.min)
