from .normalizer import normalize_holidays, normalize_holiday, resolve_date_source
from .grid import build_grid, build_month, build_weeks, period_months
from .classifier import classify, classify_week, density_for, group_by_date
from .aggregator import build_calendar_view, build_week_summary, group_by_month
from .holidays import HolidayService, quarter_months
from .countries import CountryService

__all__ = [
    "normalize_holidays",
    "normalize_holiday",
    "resolve_date_source",
    "build_grid",
    "build_month",
    "build_weeks",
    "period_months",
    "classify",
    "classify_week",
    "density_for",
    "group_by_date",
    "build_calendar_view",
    "build_week_summary",
    "group_by_month",
    "HolidayService",
    "quarter_months",
    "CountryService",
]
