"""Factory for creating holiday providers."""
import logging
from typing import Optional
from holiday_calendar.adapters.base import HolidayProvider
from holiday_calendar.adapters.mock import FallbackHolidayProvider
from holiday_calendar.adapters.calendarific import CalendarificProvider
from holiday_calendar.adapters.nager import NagerProvider
from holiday_calendar.adapters.abstractapi import AbstractAPIProvider
from holiday_calendar.config import settings

logger = logging.getLogger(__name__)


def get_holiday_provider(name: Optional[str] = None, **kwargs) -> HolidayProvider:
    """
    Factory function to create the configured holiday provider.

    Args:
        name: Provider name ("calendarific", "nager", "abstractapi", "fallback").
            Defaults to settings.holiday_api_provider.
        **kwargs: Additional configuration for the provider

    Returns:
        HolidayProvider instance
    """
    provider = (name or settings.holiday_api_provider or "").strip().lower()
    base_url = kwargs.pop("base_url", None) or settings.holiday_api_base_url

    if provider in ("fallback", "mock"):
        return FallbackHolidayProvider(**kwargs)
    elif provider == "nager":
        return NagerProvider(base_url, **kwargs)
    elif provider == "abstractapi":
        api_key = kwargs.pop("api_key", None) or settings.abstractapi_key
        if not api_key:
            logger.warning("ABSTRACTAPI_KEY not set, using fallback holiday data")
            return FallbackHolidayProvider(**kwargs)
        return AbstractAPIProvider(base_url, api_key=api_key, **kwargs)
    else:
        # Calendarific is the default provider
        api_key = kwargs.pop("api_key", None) or settings.calendarific_api_key
        if not api_key:
            logger.warning(
                "CALENDARIFIC_API_KEY not set, using fallback holiday data. "
                "Get a free key at https://calendarific.com/"
            )
            return FallbackHolidayProvider(**kwargs)
        return CalendarificProvider(base_url, api_key=api_key, **kwargs)
