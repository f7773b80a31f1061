"""Static fallback holiday dataset, used when no provider is configured or a fetch fails."""
import logging
from typing import Any, Dict, List, Optional, Tuple
from holiday_calendar.adapters.base import HolidayProvider

logger = logging.getLogger(__name__)

NATIONAL = "National holiday"


class FallbackHolidayProvider(HolidayProvider):
    """Fixed month/day holidays per country; unknown countries get the US set."""
    
    name = "fallback"
    default_country = "US"
    
    # (month, day, name) per country; the year is filled in per request
    HOLIDAYS: Dict[str, List[Tuple[int, int, str]]] = {
        "US": [
            (1, 1, "New Year's Day"),
            (1, 15, "Martin Luther King Jr. Day"),
            (2, 19, "Presidents' Day"),
            (5, 27, "Memorial Day"),
            (7, 4, "Independence Day"),
            (9, 2, "Labor Day"),
            (10, 14, "Columbus Day"),
            (11, 11, "Veterans Day"),
            (11, 28, "Thanksgiving Day"),
            (12, 25, "Christmas Day"),
        ],
        "GB": [
            (1, 1, "New Year's Day"),
            (3, 29, "Good Friday"),
            (4, 1, "Easter Monday"),
            (5, 6, "Early May Bank Holiday"),
            (5, 27, "Spring Bank Holiday"),
            (8, 26, "Summer Bank Holiday"),
            (12, 25, "Christmas Day"),
            (12, 26, "Boxing Day"),
        ],
        "CA": [
            (1, 1, "New Year's Day"),
            (2, 19, "Family Day"),
            (3, 29, "Good Friday"),
            (4, 1, "Easter Monday"),
            (5, 20, "Victoria Day"),
            (7, 1, "Canada Day"),
            (9, 2, "Labour Day"),
            (10, 14, "Thanksgiving"),
            (12, 25, "Christmas Day"),
            (12, 26, "Boxing Day"),
        ],
        "IN": [
            (1, 1, "New Year's Day"),
            (1, 26, "Republic Day"),
            (3, 13, "Holi"),
            (3, 29, "Good Friday"),
            (8, 15, "Independence Day"),
            (10, 2, "Gandhi Jayanti"),
            (11, 12, "Diwali"),
            (12, 25, "Christmas Day"),
        ],
    }
    
    def holidays_for(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Synchronous lookup in the raw ``{"name", "date", "type"}`` shape."""
        entries = self.HOLIDAYS.get(country.upper(), self.HOLIDAYS[self.default_country])
        return [
            {"name": name, "date": f"{year:04d}-{m:02d}-{d:02d}", "type": NATIONAL}
            for m, d, name in entries
            if month is None or m == month
        ]
    
    async def fetch_holidays(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        logger.info(
            "Using fallback holiday data",
            extra={"country": country, "year": year, "month": month},
        )
        return self.holidays_for(country, year, month)
