"""Tests for date parsing helpers."""
import logging
import pytest
from datetime import date, datetime
from holiday_calendar.logging_config import ExtraFormatter
from holiday_calendar.utils.dates import month_bounds, parse_calendar_date


@pytest.mark.parametrize("value, expected", [
    ("2025-07-04", date(2025, 7, 4)),
    (" 2025-07-04 ", date(2025, 7, 4)),
    ("2025-07-04T00:00:00Z", date(2025, 7, 4)),
    ("2025-03-09T02:00:00-08:00", date(2025, 3, 9)),
    ("2025-07-04 10:30:00", date(2025, 7, 4)),
    (date(2025, 7, 4), date(2025, 7, 4)),
    (datetime(2025, 7, 4, 23, 59), date(2025, 7, 4)),
])
def test_parse_calendar_date(value, expected):
    assert parse_calendar_date(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "2025-13-01", "04/07/2025", "tomorrow", None, 20250704])
def test_parse_calendar_date_rejects(value):
    with pytest.raises(ValueError):
        parse_calendar_date(value)


@pytest.mark.parametrize("year, month, last_day", [
    (2025, 2, 28),
    (2024, 2, 29),
    (2025, 4, 30),
    (2025, 12, 31),
])
def test_month_bounds(year, month, last_day):
    first, last = month_bounds(year, month)
    assert first == date(year, month, 1)
    assert last == date(year, month, last_day)


def test_extra_formatter_appends_extra_fields():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "Fetching holidays", None, None)
    record.country = "US"
    record.year = 2025
    line = ExtraFormatter("%(message)s").format(record)
    assert line.startswith("Fetching holidays")
    assert line.endswith('| {"country": "US", "year": 2025}')
