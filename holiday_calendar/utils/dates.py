"""Calendar date parsing utilities."""
import calendar
from datetime import date, datetime
from typing import Any

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_calendar_date(value: Any) -> date:
    """
    Parse a provider date value into a calendar date (no time component).
    
    Supports:
    - Plain ISO date: "2025-07-04"
    - ISO datetime with "Z" suffix: "2025-07-04T00:00:00Z"
    - ISO datetime with offset: "2025-03-09T02:00:00-08:00" (the local date is kept)
    - Space-separated: "2025-07-04 10:00:00"
    - date / datetime instances
    
    Args:
        value: Raw date value
        
    Returns:
        date object
        
    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    
    s = value.strip()
    if not s:
        raise ValueError("Empty date string")
    
    if len(s) == 10:
        return date.fromisoformat(s)
    
    # Convert trailing "Z" to "+00:00" for ISO format compatibility
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    if " " in s and "T" not in s:
        s = s.replace(" ", "T", 1)
    
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        raise ValueError(
            f"Unable to parse date: {value!r}. Expected ISO format (e.g. '2025-07-04' or '2025-07-04T00:00:00Z')"
        ) from None


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last calendar day of a month."""
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    return first, last
