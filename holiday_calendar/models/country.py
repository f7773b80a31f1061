"""Country reference data models."""
from typing import List
from pydantic import Field
from holiday_calendar.models.base import CamelModel


class Country(CamelModel):
    """A country the calendar can show holidays for."""
    
    code: str = Field(..., min_length=2, max_length=2, description="ISO 3166-1 alpha-2 code")
    name: str
    flag: str = ""
    timezone: str
    continent: str


class CountryMetadata(CamelModel):
    """Extra details returned by the country lookup endpoint."""
    
    supported_views: List[str] = Field(default_factory=lambda: ["month", "quarter", "year"])
    holiday_types: List[str] = Field(
        default_factory=lambda: ["national", "local", "religious", "observance"]
    )


class CountryDetails(Country):
    """Country plus lookup metadata."""
    
    metadata: CountryMetadata = Field(default_factory=CountryMetadata)
