"""Nager.Date holiday provider (no API key required)."""
import logging
from typing import Any, Dict, List, Optional
from holiday_calendar.adapters.base import HolidayProvider
from holiday_calendar.errors import HolidayProviderError
from holiday_calendar.utils.dates import parse_calendar_date

logger = logging.getLogger(__name__)


class NagerProvider(HolidayProvider):
    """Nager.Date ``/PublicHolidays/{year}/{country}``; always yearly, month filtered locally."""
    
    name = "nager"
    default_base_url = "https://date.nager.at/api/v3"
    
    async def fetch_holidays(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        logger.info("Nager.Date request: baseUrl=%s country=%s year=%s", self.base_url, country, year)
        data = await self._get_json(f"{self.base_url}/PublicHolidays/{year}/{country}")
        if not isinstance(data, list):
            raise HolidayProviderError("Nager.Date returned an unexpected payload")
        
        if month:
            data = [h for h in data if _holiday_month(h) == month]
        return data


def _holiday_month(holiday: Dict[str, Any]) -> Optional[int]:
    try:
        return parse_calendar_date(holiday.get("date") if isinstance(holiday, dict) else None).month
    except ValueError:
        return None
