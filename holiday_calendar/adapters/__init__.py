from .base import HolidayProvider
from .mock import FallbackHolidayProvider
from .calendarific import CalendarificProvider
from .nager import NagerProvider
from .abstractapi import AbstractAPIProvider
from .factory import get_holiday_provider

__all__ = [
    "HolidayProvider",
    "FallbackHolidayProvider",
    "CalendarificProvider",
    "NagerProvider",
    "AbstractAPIProvider",
    "get_holiday_provider",
]
