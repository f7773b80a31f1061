"""Base holiday provider interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import httpx
from holiday_calendar.config import settings


class HolidayProvider(ABC):
    """Abstract base class for holiday data providers."""
    
    name: str = "base"
    default_base_url: str = ""
    
    def __init__(self, base_url: Optional[str] = None, **kwargs):
        """
        Initialize the provider.
        
        Args:
            base_url: API base URL; defaults to the provider's public endpoint
            **kwargs: Additional provider-specific configuration
                (``api_key``, ``timeout``, ``transport`` for tests)
        """
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.config = kwargs
        self.timeout = kwargs.get("timeout", settings.request_timeout_seconds)
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.config.get("transport"))
    
    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        async with self._client() as client:
            response = await client.get(url, params=params, headers={"accept": "application/json"})
            response.raise_for_status()
            return response.json()
    
    @abstractmethod
    async def fetch_holidays(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch raw holiday records.
        
        Args:
            country: ISO 3166-1 alpha-2 country code (upper case)
            year: Year
            month: Month (1-12); None for the whole year
            
        Returns:
            Raw records in the provider's own shape
            
        Raises:
            HolidayProviderError or httpx.HTTPError on upstream failure
        """
        pass
