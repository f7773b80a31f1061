"""Calendar view aggregation: normalize, build grid, classify."""
import logging
from collections import defaultdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from holiday_calendar.errors import CalendarInputError
from holiday_calendar.models.calendar import (
    CalendarView,
    ClassifiedWeek,
    Granularity,
    MonthView,
)
from holiday_calendar.models.holiday import CanonicalHoliday
from holiday_calendar.services.classifier import classify, classify_week, group_by_date
from holiday_calendar.services.grid import (
    SUNDAY,
    build_grid,
    build_weeks,
    check_reference_date,
    check_week_start,
    coerce_granularity,
)
from holiday_calendar.services.normalizer import normalize_holidays
from holiday_calendar.utils.dates import month_bounds

logger = logging.getLogger(__name__)


def group_by_month(holidays: Iterable[CanonicalHoliday]) -> Dict[int, List[CanonicalHoliday]]:
    """Group holidays by month number (1-12), months in ascending order."""
    grouped: Dict[int, List[CanonicalHoliday]] = defaultdict(list)
    for holiday in holidays:
        grouped[holiday.month].append(holiday)
    return {month: grouped[month] for month in sorted(grouped)}


def sort_holidays(holidays: Iterable[CanonicalHoliday]) -> List[CanonicalHoliday]:
    """Stable date order for presentation."""
    return sorted(holidays, key=lambda h: h.date)


def build_calendar_view(
    raw_holidays: Iterable[Any],
    reference_date: date,
    granularity: Union[Granularity, str],
    week_start: int = SUNDAY,
    today: Optional[date] = None,
) -> CalendarView:
    """
    Build the calendar view for a period.

    Raw holidays are normalized once; every week of every month entry is then
    classified against the full canonical set, so a week that straddles two
    months sees holidays from both. Real and fallback data are treated alike.
    The flat list and the quarter grouping only carry holidays that fall in
    the view's own months; rows from neighbouring months count toward edge
    weeks but are not listed.

    Args:
        raw_holidays: Raw records covering the grid, edge weeks included
            (already fallback-substituted by the caller)
        reference_date: Any date inside the requested period
        granularity: month, quarter or year
        week_start: First day of the week (0 = Monday ... 6 = Sunday)
        today: Date for raw rows without a usable date. If None, uses date.today().

    Returns:
        CalendarView

    Raises:
        CalendarInputError: On an invalid granularity, reference date or week start
    """
    check_reference_date(reference_date)
    check_week_start(week_start)
    granularity = coerce_granularity(granularity)

    holidays = sort_holidays(normalize_holidays(raw_holidays, today=today))
    by_date = group_by_date(holidays)
    grids = build_grid(reference_date, granularity, week_start)
    period = {(grid.year, grid.month_index + 1) for grid in grids}
    listed = [h for h in holidays if (h.year, h.month) in period]

    months = []
    for grid in grids:
        weeks = [classify_week(span, by_date) for span in grid.weeks]
        months.append(
            MonthView(name=grid.name, month_index=grid.month_index, year=grid.year, weeks=weeks)
        )

    logger.debug(
        "Built %s view for %s: %d months, %d holidays",
        granularity.value,
        reference_date.isoformat(),
        len(months),
        len(listed),
    )

    return CalendarView(
        granularity=granularity,
        reference_date=reference_date,
        week_start=week_start,
        months=months,
        holidays=listed,
        holidays_by_month=group_by_month(listed) if granularity is Granularity.QUARTER else None,
    )


def build_week_summary(
    raw_holidays: Iterable[Any],
    year: int,
    month: Optional[int] = None,
    week_start: int = SUNDAY,
    today: Optional[date] = None,
) -> List[ClassifiedWeek]:
    """
    Contiguous classified weeks covering a whole month, or a whole year when
    ``month`` is None (one unbroken run of weeks, not per-month grids).
    """
    start, end = summary_range(year, month)
    holidays = normalize_holidays(raw_holidays, today=today)
    return classify(build_weeks(start, end, week_start), holidays)


def summary_range(year: int, month: Optional[int] = None) -> Tuple[date, date]:
    """First and last day of the month, or of the year when ``month`` is None."""
    if month is None:
        return date(year, 1, 1), date(year, 12, 31)
    if not 1 <= month <= 12:
        raise CalendarInputError(f"Month must be between 1 and 12, got {month}")
    return month_bounds(year, month)
