from .holiday import (
    CanonicalHoliday,
    DateSource,
    IsoDateSource,
    StringDateSource,
    UnparseableDate,
    DEFAULT_CATEGORY,
)
from .calendar import (
    Granularity,
    DensityClass,
    WeekSpan,
    ClassifiedWeek,
    MonthGrid,
    MonthView,
    CalendarView,
)
from .country import Country, CountryDetails, CountryMetadata

__all__ = [
    "CanonicalHoliday",
    "DateSource",
    "IsoDateSource",
    "StringDateSource",
    "UnparseableDate",
    "DEFAULT_CATEGORY",
    "Granularity",
    "DensityClass",
    "WeekSpan",
    "ClassifiedWeek",
    "MonthGrid",
    "MonthView",
    "CalendarView",
    "Country",
    "CountryDetails",
    "CountryMetadata",
]
