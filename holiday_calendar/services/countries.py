"""Supported-country reference data."""
import logging
from typing import List, Optional
from holiday_calendar.models.country import Country, CountryDetails

logger = logging.getLogger(__name__)

POPULAR_CODES = ("US", "IN", "GB", "CA", "AU", "DE", "FR", "JP")

_COUNTRIES = [
    ("US", "United States", "🇺🇸", "America/New_York", "North America"),
    ("IN", "India", "🇮🇳", "Asia/Kolkata", "Asia"),
    ("GB", "United Kingdom", "🇬🇧", "Europe/London", "Europe"),
    ("CA", "Canada", "🇨🇦", "America/Toronto", "North America"),
    ("AU", "Australia", "🇦🇺", "Australia/Sydney", "Oceania"),
    ("DE", "Germany", "🇩🇪", "Europe/Berlin", "Europe"),
    ("FR", "France", "🇫🇷", "Europe/Paris", "Europe"),
    ("JP", "Japan", "🇯🇵", "Asia/Tokyo", "Asia"),
    ("CN", "China", "🇨🇳", "Asia/Shanghai", "Asia"),
    ("BR", "Brazil", "🇧🇷", "America/Sao_Paulo", "South America"),
    ("MX", "Mexico", "🇲🇽", "America/Mexico_City", "North America"),
    ("RU", "Russia", "🇷🇺", "Europe/Moscow", "Europe"),
    ("ZA", "South Africa", "🇿🇦", "Africa/Johannesburg", "Africa"),
    ("IT", "Italy", "🇮🇹", "Europe/Rome", "Europe"),
    ("ES", "Spain", "🇪🇸", "Europe/Madrid", "Europe"),
    ("NL", "Netherlands", "🇳🇱", "Europe/Amsterdam", "Europe"),
    ("SE", "Sweden", "🇸🇪", "Europe/Stockholm", "Europe"),
    ("NO", "Norway", "🇳🇴", "Europe/Oslo", "Europe"),
    ("DK", "Denmark", "🇩🇰", "Europe/Copenhagen", "Europe"),
    ("SG", "Singapore", "🇸🇬", "Asia/Singapore", "Asia"),
    ("KR", "South Korea", "🇰🇷", "Asia/Seoul", "Asia"),
    ("TH", "Thailand", "🇹🇭", "Asia/Bangkok", "Asia"),
    ("MY", "Malaysia", "🇲🇾", "Asia/Kuala_Lumpur", "Asia"),
    ("PH", "Philippines", "🇵🇭", "Asia/Manila", "Asia"),
    ("ID", "Indonesia", "🇮🇩", "Asia/Jakarta", "Asia"),
    ("VN", "Vietnam", "🇻🇳", "Asia/Ho_Chi_Minh", "Asia"),
    ("AE", "United Arab Emirates", "🇦🇪", "Asia/Dubai", "Asia"),
    ("SA", "Saudi Arabia", "🇸🇦", "Asia/Riyadh", "Asia"),
    ("IL", "Israel", "🇮🇱", "Asia/Jerusalem", "Asia"),
    ("EG", "Egypt", "🇪🇬", "Africa/Cairo", "Africa"),
    ("NG", "Nigeria", "🇳🇬", "Africa/Lagos", "Africa"),
    ("KE", "Kenya", "🇰🇪", "Africa/Nairobi", "Africa"),
    ("AR", "Argentina", "🇦🇷", "America/Argentina/Buenos_Aires", "South America"),
    ("CL", "Chile", "🇨🇱", "America/Santiago", "South America"),
    ("CO", "Colombia", "🇨🇴", "America/Bogota", "South America"),
]


class CountryService:
    """Lookup and search over the supported countries."""

    def __init__(self, countries: Optional[List[Country]] = None):
        if countries is None:
            countries = [
                Country(code=code, name=name, flag=flag, timezone=tz, continent=continent)
                for code, name, flag, tz, continent in _COUNTRIES
            ]
        self._countries = countries
        self._by_code = {c.code.upper(): c for c in countries}

    def list_countries(self) -> List[Country]:
        """All supported countries sorted by name."""
        return sorted(self._countries, key=lambda c: c.name)

    def is_supported(self, code: Optional[str]) -> bool:
        return bool(code) and code.strip().upper() in self._by_code

    def get_details(self, code: str) -> Optional[CountryDetails]:
        country = self._by_code.get(code.strip().upper())
        if country is None:
            logger.info("Country with code %s not found", code)
            return None
        return CountryDetails(**country.model_dump())

    def search(self, query: str) -> List[Country]:
        """
        Match countries by name, code or continent (case-insensitive substring).
        Exact name or code matches sort first, the rest by name.
        """
        term = query.strip().lower()
        matches = [
            c for c in self._countries
            if term in c.name.lower() or term in c.code.lower() or term in c.continent.lower()
        ]

        def rank(c: Country):
            exact = c.name.lower() == term or c.code.lower() == term
            return (0 if exact else 1, c.name)

        return sorted(matches, key=rank)

    def by_continent(self, continent: str) -> List[Country]:
        term = continent.strip().lower()
        return sorted(
            (c for c in self._countries if c.continent.lower() == term),
            key=lambda c: c.name,
        )

    def popular(self) -> List[Country]:
        return [self._by_code[code] for code in POPULAR_CODES if code in self._by_code]
