"""Tests for date parser with relative dates and range bounds."""

import pytest
from datetime import date, datetime, time, timedelta, timezone
from dateutil.relativedelta import relativedelta
from tradeledger.utils.date_parser import parse_date, parse_range_bound, to_storage_datetime


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    assert parse_date("tomorrow") == date.today() + timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month'."""
    result = parse_date("last month")
    # Should be first day of last month
    today = date.today()
    if today.month == 1:
        expected = date(today.year - 1, 12, 1)
    else:
        expected = date(today.year, today.month - 1, 1)
    assert result == expected


def test_parse_last_week():
    """Test parsing 'last week'."""
    result = parse_date("last week")
    today = date.today()
    assert result == today - timedelta(days=today.weekday() + 7)
    assert result.weekday() == 0


def test_parse_this_periods():
    today = date.today()
    assert parse_date("this week").weekday() == 0
    assert parse_date("this month") == today.replace(day=1)
    assert parse_date("this year") == date(today.year, 1, 1)
    assert parse_date("last year") == date(today.year, 1, 1) - relativedelta(years=1)


def test_parse_is_case_insensitive():
    assert parse_date("  Today ") == date.today()


def test_parse_unknown_word():
    with pytest.raises(ValueError):
        parse_date("next decade")


class TestRangeBound:
    """Tests for parse_range_bound."""

    def test_date_only_start_is_midnight(self):
        assert parse_range_bound("2024-01-15") == datetime(2024, 1, 15, 0, 0)

    def test_date_only_end_covers_whole_day(self):
        result = parse_range_bound("2024-01-15", end=True)
        assert result == datetime.combine(date(2024, 1, 15), time.max)

    def test_explicit_time_is_kept(self):
        assert parse_range_bound("2024-01-15 10:30", end=True) == datetime(2024, 1, 15, 10, 30)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2024-01-15 10am", datetime(2024, 1, 15, 10, 0)),
            ("2024-01-15 3pm", datetime(2024, 1, 15, 15, 0)),
        ],
    )
    def test_time_without_colon_is_kept(self, text, expected):
        assert parse_range_bound(text, end=True) == expected

    def test_written_out_date_end_covers_whole_day(self):
        result = parse_range_bound("15 Jan 2024", end=True)
        assert result == datetime.combine(date(2024, 1, 15), time.max)

    def test_offset_is_converted_to_utc(self):
        result = parse_range_bound("2024-01-15T10:00:00+02:00")
        assert result == datetime(2024, 1, 15, 8, 0)
        assert result.tzinfo is None

    def test_relative_word(self):
        assert parse_range_bound("today") == datetime.combine(date.today(), time.min)
        assert parse_range_bound("yesterday", end=True) == datetime.combine(
            date.today() - timedelta(days=1), time.max
        )

    def test_date_and_datetime_objects(self):
        assert parse_range_bound(date(2024, 3, 1)) == datetime(2024, 3, 1)
        assert parse_range_bound(datetime(2024, 3, 1, 12, 0), end=True) == datetime(2024, 3, 1, 12, 0)

    def test_unparsable(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_range_bound("not a date")


def test_to_storage_datetime():
    aware = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert to_storage_datetime(aware) == datetime(2024, 6, 1, 17, 0)
    naive = datetime(2024, 6, 1, 12, 0)
    assert to_storage_datetime(naive) is naive
