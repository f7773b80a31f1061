"""AbstractAPI holidays provider."""
import logging
from typing import Any, Dict, List, Optional
from holiday_calendar.adapters.base import HolidayProvider
from holiday_calendar.errors import HolidayProviderError

logger = logging.getLogger(__name__)


class AbstractAPIProvider(HolidayProvider):
    """AbstractAPI holidays endpoint; returns a flat list of records."""
    
    name = "abstractapi"
    default_base_url = "https://holidays.abstractapi.com/v1"
    
    def __init__(self, base_url: Optional[str] = None, **kwargs):
        super().__init__(base_url, **kwargs)
        self.api_key = kwargs.get("api_key", "")
        if not self.api_key:
            raise ValueError("AbstractAPI key required. Set ABSTRACTAPI_KEY in .env")
    
    async def fetch_holidays(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = {"api_key": self.api_key, "country": country, "year": year}
        if month:
            params["month"] = month
        
        logger.info(
            "AbstractAPI request: baseUrl=%s country=%s year=%s month=%s",
            self.base_url,
            country,
            year,
            month or "(all)",
        )
        data = await self._get_json(f"{self.base_url}/", params=params)
        if not isinstance(data, list):
            raise HolidayProviderError("AbstractAPI returned an unexpected payload")
        return data
