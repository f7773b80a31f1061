"""Holiday fetching with fallback substitution, feeding the calendar core."""
import asyncio
import logging
from collections import defaultdict
from datetime import date
from typing import Any, Awaitable, Dict, Iterable, List, Optional, Tuple, Union

import httpx

from holiday_calendar.adapters.base import HolidayProvider
from holiday_calendar.adapters.factory import get_holiday_provider
from holiday_calendar.adapters.mock import FallbackHolidayProvider
from holiday_calendar.config import settings
from holiday_calendar.errors import HolidayProviderError
from holiday_calendar.models.calendar import CalendarView, ClassifiedWeek, Granularity
from holiday_calendar.models.holiday import CanonicalHoliday
from holiday_calendar.services.aggregator import build_calendar_view, build_week_summary, summary_range
from holiday_calendar.services.grid import build_grid, build_weeks
from holiday_calendar.services.normalizer import normalize_holidays

logger = logging.getLogger(__name__)

RawHolidays = List[Dict[str, Any]]

# Upstream failures that are replaced with fallback data
PROVIDER_ERRORS = (httpx.HTTPError, HolidayProviderError, ValueError, KeyError, TypeError)


class HolidayService:
    """Fetches raw holidays, substitutes fallback data on failure, and runs the core."""

    def __init__(
        self,
        provider: Optional[HolidayProvider] = None,
        fallback: Optional[FallbackHolidayProvider] = None,
        week_start: Optional[int] = None,
    ):
        self.provider = provider or get_holiday_provider()
        self.fallback = fallback or FallbackHolidayProvider()
        self.week_start = settings.week_start if week_start is None else week_start

    @property
    def provider_name(self) -> str:
        return self.provider.name

    async def fetch_raw(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
    ) -> Tuple[RawHolidays, bool]:
        """
        Fetch raw holidays for a month or a year.

        Returns:
            Tuple of (raw_records, used_fallback)
        """
        try:
            raw = await self.provider.fetch_holidays(country, year, month)
            return list(raw), isinstance(self.provider, FallbackHolidayProvider)
        except PROVIDER_ERRORS as e:
            logger.warning(
                "Holiday provider failed, using fallback data: %s",
                e,
                extra={"provider": self.provider_name, "country": country, "year": year, "month": month},
            )
            return self.fallback.holidays_for(country, year, month), True

    async def fetch_months(
        self,
        country: str,
        year: int,
        months: List[int],
    ) -> Tuple[RawHolidays, bool]:
        """
        Fetch several months concurrently and concatenate the results.

        Months that fail are substituted individually; the combined set is
        returned unclassified so the caller runs a single normalize/classify pass.
        """
        return await _concatenate(self.fetch_raw(country, year, m) for m in months)

    async def fetch_range(
        self,
        country: str,
        start: date,
        end: date,
    ) -> Tuple[RawHolidays, bool]:
        """
        Fetch every month touched by ``[start, end]`` concurrently.

        A year whose twelve months are all touched is fetched in one call.
        Grid edge weeks reach into neighbouring months (and years), so callers
        pass the grid's outer bounds here rather than the view's own months.
        """
        by_year: Dict[int, List[int]] = defaultdict(list)
        for year, month in months_between(start, end):
            by_year[year].append(month)

        fetches = []
        for year, months in by_year.items():
            if len(months) == 12:
                fetches.append(self.fetch_raw(country, year))
            else:
                fetches.extend(self.fetch_raw(country, year, m) for m in months)
        return await _concatenate(fetches)

    async def fetch_period(
        self,
        country: str,
        reference_date: date,
        granularity: Union[Granularity, str],
    ) -> Tuple[RawHolidays, bool]:
        """Raw holidays for every week of the month, quarter or year grid holding ``reference_date``."""
        grids = build_grid(reference_date, granularity, self.week_start)
        return await self.fetch_range(country, grids[0].weeks[0].start, grids[-1].weeks[-1].end)

    async def get_holidays(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Tuple[List[CanonicalHoliday], bool]:
        raw, used_fallback = await self.fetch_raw(country, year, month)
        return normalize_holidays(raw, today=today), used_fallback

    async def get_quarter_holidays(
        self,
        country: str,
        year: int,
        quarter: int,
        today: Optional[date] = None,
    ) -> Tuple[List[CanonicalHoliday], List[int], bool]:
        months = quarter_months(quarter)
        raw, used_fallback = await self.fetch_months(country, year, months)
        return normalize_holidays(raw, today=today), months, used_fallback

    async def get_week_summary(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Tuple[List[ClassifiedWeek], bool]:
        start, end = summary_range(year, month)
        spans = build_weeks(start, end, self.week_start)
        raw, used_fallback = await self.fetch_range(country, spans[0].start, spans[-1].end)
        weeks = build_week_summary(raw, year, month, week_start=self.week_start, today=today)
        return weeks, used_fallback

    async def get_calendar_view(
        self,
        country: str,
        reference_date: date,
        granularity: Union[Granularity, str],
        today: Optional[date] = None,
    ) -> Tuple[CalendarView, bool]:
        raw, used_fallback = await self.fetch_period(country, reference_date, granularity)
        view = build_calendar_view(
            raw,
            reference_date,
            granularity,
            week_start=self.week_start,
            today=today,
        )
        return view, used_fallback


def quarter_months(quarter: int) -> List[int]:
    """Months (1-12) of a 1-based quarter."""
    if not 1 <= quarter <= 4:
        raise ValueError(f"Quarter must be between 1 and 4, got {quarter}")
    return [(quarter - 1) * 3 + offset + 1 for offset in range(3)]


def months_between(start: date, end: date) -> List[Tuple[int, int]]:
    """(year, month) pairs touched by the inclusive range ``[start, end]``."""
    months = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months


async def _concatenate(fetches: Iterable[Awaitable[Tuple[RawHolidays, bool]]]) -> Tuple[RawHolidays, bool]:
    results = await asyncio.gather(*fetches)
    raw: RawHolidays = []
    used_fallback = False
    for fetched, fetched_fallback in results:
        raw.extend(fetched)
        used_fallback = used_fallback or fetched_fallback
    return raw, used_fallback
