"""Week classification by holiday density."""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List
from holiday_calendar.models.calendar import ClassifiedWeek, DensityClass, WeekSpan
from holiday_calendar.models.holiday import CanonicalHoliday

# Fixed thresholds; the UI legend depends on them.
DENSITY_LABELS = {
    DensityClass.DEFAULT: "Default",
    DensityClass.LIGHT: "Light Green",
    DensityClass.DARK: "Dark Green",
}


def density_for(holiday_day_count: int) -> DensityClass:
    """Map the number of holiday-bearing days in a week to its density class."""
    if holiday_day_count <= 0:
        return DensityClass.DEFAULT
    if holiday_day_count == 1:
        return DensityClass.LIGHT
    return DensityClass.DARK


def group_by_date(holidays: Iterable[CanonicalHoliday]) -> Dict[date, List[CanonicalHoliday]]:
    """Group holidays by calendar date, preserving input order within a date."""
    grouped: Dict[date, List[CanonicalHoliday]] = defaultdict(list)
    for holiday in holidays:
        grouped[holiday.date].append(holiday)
    return dict(grouped)


def classify_week(span: WeekSpan, by_date: Dict[date, List[CanonicalHoliday]]) -> ClassifiedWeek:
    """
    Classify one week span.

    Counts distinct days with at least one holiday over the full 7-day window,
    regardless of which month the week is displayed under.
    """
    week_holidays: List[CanonicalHoliday] = []
    holiday_day_count = 0
    for day in span.days():
        matches = by_date.get(day)
        if matches:
            holiday_day_count += 1
            week_holidays.extend(matches)

    density = density_for(holiday_day_count)
    return ClassifiedWeek(
        start=span.start,
        end=span.end,
        iso_week_number=span.iso_week_number,
        holiday_day_count=holiday_day_count,
        density_class=density,
        density_label=DENSITY_LABELS[density],
        holidays=week_holidays,
    )


def classify(
    week_spans: Iterable[WeekSpan],
    holidays: Iterable[CanonicalHoliday],
) -> List[ClassifiedWeek]:
    """
    Classify week spans against the full canonical holiday set.

    Args:
        week_spans: Spans to classify
        holidays: Canonical holidays; matched by exact date equality

    Returns:
        List of ClassifiedWeek in span order
    """
    by_date = group_by_date(holidays)
    return [classify_week(span, by_date) for span in week_spans]
