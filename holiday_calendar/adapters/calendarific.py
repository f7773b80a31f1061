"""Calendarific holiday provider."""
import logging
from typing import Any, Dict, List, Optional
from holiday_calendar.adapters.base import HolidayProvider
from holiday_calendar.errors import HolidayProviderError

logger = logging.getLogger(__name__)

HOLIDAY_TYPES = "national,local,religious,observance"


class CalendarificProvider(HolidayProvider):
    """Calendarific API (``/holidays``). Dates arrive as ``{"date": {"iso": ...}}``."""
    
    name = "calendarific"
    default_base_url = "https://calendarific.com/api/v2"
    
    def __init__(self, base_url: Optional[str] = None, **kwargs):
        super().__init__(base_url, **kwargs)
        self.api_key = kwargs.get("api_key", "")
        if not self.api_key:
            raise ValueError("Calendarific API key required. Set CALENDARIFIC_API_KEY in .env")
    
    async def fetch_holidays(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = {
            "api_key": self.api_key,
            "country": country,
            "year": year,
            "type": HOLIDAY_TYPES,
        }
        if month:
            params["month"] = month
        
        logger.info(
            "Calendarific request: baseUrl=%s country=%s year=%s month=%s",
            self.base_url,
            country,
            year,
            month or "(all)",
        )
        data = await self._get_json(f"{self.base_url}/holidays", params=params)
        if not isinstance(data, dict):
            raise HolidayProviderError("Calendarific returned an unexpected payload")
        
        meta = data.get("meta") or {}
        if meta.get("code") != 200:
            raise HolidayProviderError(
                f"Calendarific API error: {meta.get('error_detail') or 'Unknown error'}"
            )
        response = data.get("response") or {}
        holidays = response.get("holidays") if isinstance(response, dict) else None
        return holidays or []
