"""Calendar grid and classification models."""
from datetime import date, timedelta
from enum import Enum
from typing import Dict, List, Optional
from pydantic import Field
from holiday_calendar.models.base import CamelModel
from holiday_calendar.models.holiday import CanonicalHoliday


class Granularity(str, Enum):
    """Requested view size."""
    
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class DensityClass(str, Enum):
    """Week color class derived from the number of holiday-bearing days."""
    
    DEFAULT = "default"
    LIGHT = "light"
    DARK = "dark"


class WeekSpan(CamelModel):
    """Seven consecutive days starting on the configured week-start day."""
    
    start: date
    end: date
    iso_week_number: int = Field(..., ge=1, le=53)
    
    def days(self) -> List[date]:
        return [self.start + timedelta(days=i) for i in range(7)]


class ClassifiedWeek(WeekSpan):
    """Week span with its holiday subset and density class."""
    
    holiday_day_count: int = Field(..., ge=0, le=7, description="Distinct dates with at least one holiday")
    density_class: DensityClass
    density_label: str
    holidays: List[CanonicalHoliday] = Field(default_factory=list)


class MonthGrid(CamelModel):
    """Week spans needed to render one month, edge weeks included in full."""
    
    name: str
    month_index: int = Field(..., ge=0, le=11, description="Zero-based month (0 = January)")
    year: int
    weeks: List[WeekSpan]


class MonthView(CamelModel):
    """A month entry of the calendar view with classified weeks."""
    
    name: str
    month_index: int = Field(..., ge=0, le=11)
    year: int
    weeks: List[ClassifiedWeek]


class CalendarView(CamelModel):
    """Response shape consumed by the presentation layer."""
    
    granularity: Granularity
    reference_date: date
    week_start: int = Field(..., ge=0, le=6, description="0 = Monday ... 6 = Sunday")
    months: List[MonthView]
    holidays: List[CanonicalHoliday] = Field(default_factory=list)
    holidays_by_month: Optional[Dict[int, List[CanonicalHoliday]]] = None
