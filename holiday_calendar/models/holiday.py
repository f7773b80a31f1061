"""Holiday data models: resolved date sources and the canonical holiday record."""
from datetime import date
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from holiday_calendar.models.base import CamelModel

DEFAULT_CATEGORY = "Holiday"


class IsoDateSource(BaseModel):
    """Date taken from a structured ISO field (``date.iso`` or ``date_iso``)."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["iso"] = "iso"
    value: date


class StringDateSource(BaseModel):
    """Date taken from a plain ``date`` field (string or date value)."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["string"] = "string"
    value: date


class UnparseableDate(BaseModel):
    """No usable date on the raw record; the normalizer substitutes ``today``."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["unparseable"] = "unparseable"
    raw: Optional[str] = None


DateSource = Annotated[
    Union[IsoDateSource, StringDateSource, UnparseableDate],
    Field(discriminator="kind"),
]


class CanonicalHoliday(CamelModel):
    """Holiday normalized to one shape regardless of provider.
    
    ``id`` is derived from ``(date, name)`` and is NOT unique: two raw rows with
    the same date and name share an id. Group by ``date`` when counting.
    """
    
    id: str = Field(..., description="Deterministic id derived from date and name")
    name: str = Field(default="", description="Holiday name")
    date: date
    category: str = Field(default=DEFAULT_CATEGORY, description="Holiday type reported by the source")
    description: str = ""
    country: str = ""
    day_of_week: str = Field(..., description="English weekday name")
    iso_week: int = Field(..., ge=1, le=53)
    month: int = Field(..., ge=1, le=12)
    year: int
