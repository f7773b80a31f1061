from .dates import parse_calendar_date, month_bounds, WEEKDAY_NAMES, MONTH_NAMES

__all__ = ["parse_calendar_date", "month_bounds", "WEEKDAY_NAMES", "MONTH_NAMES"]
