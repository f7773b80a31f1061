"""Exception types shared across the service."""


class HolidayCalendarError(Exception):
    """Base class for holiday calendar errors."""


class CalendarInputError(HolidayCalendarError, ValueError):
    """Raised when a calendar request violates the input contract (granularity, reference date, week start)."""


class HolidayProviderError(HolidayCalendarError, RuntimeError):
    """Raised when an upstream holiday provider fails or returns an error payload."""
