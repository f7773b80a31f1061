"""Calendar grid builder: the week spans needed to render a month, quarter or year."""
import calendar
from datetime import date, datetime, timedelta
from typing import List, Union
from holiday_calendar.errors import CalendarInputError
from holiday_calendar.models.calendar import Granularity, MonthGrid, WeekSpan
from holiday_calendar.utils.dates import month_bounds, MONTH_NAMES

SUNDAY = calendar.SUNDAY
MONDAY = calendar.MONDAY


def coerce_granularity(granularity: Union[Granularity, str]) -> Granularity:
    if isinstance(granularity, Granularity):
        return granularity
    try:
        return Granularity(granularity)
    except ValueError:
        allowed = ", ".join(g.value for g in Granularity)
        raise CalendarInputError(
            f"Invalid granularity {granularity!r}; expected one of: {allowed}"
        ) from None


def check_reference_date(reference_date: date) -> None:
    if isinstance(reference_date, datetime) or not isinstance(reference_date, date):
        raise CalendarInputError(
            f"Reference date must be a calendar date, got {type(reference_date).__name__}"
        )


def check_week_start(week_start: int) -> None:
    if isinstance(week_start, bool) or not isinstance(week_start, int) or not 0 <= week_start <= 6:
        raise CalendarInputError(f"Week start must be 0 (Monday) to 6 (Sunday), got {week_start!r}")


def align_to_week_start(day: date, week_start: int = SUNDAY) -> date:
    """Latest week-start day on or before ``day``."""
    return day - timedelta(days=(day.weekday() - week_start) % 7)


def build_weeks(start: date, end: date, week_start: int = SUNDAY) -> List[WeekSpan]:
    """
    Contiguous 7-day spans covering ``[start, end]``.

    The first span begins on the aligned day on or before ``start``; spans are
    added until one covers ``end``. The span's week number is the ISO week of
    its middle day, which holds the majority of the span.
    """
    check_week_start(week_start)
    if end < start:
        raise CalendarInputError(f"Range end {end} is before start {start}")

    weeks = []
    current = align_to_week_start(start, week_start)
    while current <= end:
        weeks.append(
            WeekSpan(
                start=current,
                end=current + timedelta(days=6),
                iso_week_number=(current + timedelta(days=3)).isocalendar()[1],
            )
        )
        current += timedelta(days=7)
    return weeks


def build_month(year: int, month: int, week_start: int = SUNDAY) -> MonthGrid:
    """Grid for one month; partial edge weeks are included in full."""
    first, last = month_bounds(year, month)
    return MonthGrid(
        name=f"{MONTH_NAMES[month - 1]} {year}",
        month_index=month - 1,
        year=year,
        weeks=build_weeks(first, last, week_start),
    )


def period_months(reference_date: date, granularity: Union[Granularity, str]) -> List[int]:
    """
    Months (1-12) of the reference year covered by the requested view.

    A quarter is the block of three months holding the reference month: the
    zero-based quarter index is ``(month - 1) // 3``.
    """
    check_reference_date(reference_date)
    granularity = coerce_granularity(granularity)
    if granularity is Granularity.MONTH:
        return [reference_date.month]
    if granularity is Granularity.QUARTER:
        quarter_index = (reference_date.month - 1) // 3
        return [quarter_index * 3 + offset + 1 for offset in range(3)]
    return list(range(1, 13))


def build_grid(
    reference_date: date,
    granularity: Union[Granularity, str],
    week_start: int = SUNDAY,
) -> List[MonthGrid]:
    """
    Month entries for a view: one for month, three for quarter, twelve for year.

    Pure function of its arguments; each month is built independently with the
    same alignment rule.
    """
    check_week_start(week_start)
    months = period_months(reference_date, granularity)
    return [build_month(reference_date.year, m, week_start) for m in months]
