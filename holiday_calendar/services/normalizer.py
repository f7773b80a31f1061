"""Holiday normalization: provider payloads -> canonical holidays.

Providers disagree on shape. Calendarific nests the date as ``{"date": {"iso": ...}}``
(sometimes flattened to ``date_iso``), Nager and the fallback dataset use a plain
``"date"`` string, and OpenHolidays-style payloads carry names as a list of
``{"language", "text"}`` entries. Each raw row is resolved to a ``DateSource`` once,
on entry, and everything downstream works on the canonical record.
"""
import hashlib
import logging
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional
from holiday_calendar.models.holiday import (
    CanonicalHoliday,
    DateSource,
    IsoDateSource,
    StringDateSource,
    UnparseableDate,
    DEFAULT_CATEGORY,
)
from holiday_calendar.utils.dates import parse_calendar_date, WEEKDAY_NAMES

logger = logging.getLogger(__name__)


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


def resolve_date_source(raw: Any) -> DateSource:
    """
    Resolve the date of a raw record, trying in order:
    1. a structured ISO field (``date.iso`` or top-level ``date_iso``)
    2. a plain ``date`` value (string, or an already-parsed date/datetime)
    Anything else resolves to ``UnparseableDate``; this never raises.
    """
    record = _as_mapping(raw)
    date_field = record.get("date")

    iso_candidates = []
    if isinstance(date_field, Mapping):
        iso_candidates.append(date_field.get("iso"))
    iso_candidates.append(record.get("date_iso"))
    for candidate in iso_candidates:
        if candidate is None:
            continue
        try:
            return IsoDateSource(value=parse_calendar_date(candidate))
        except ValueError:
            continue

    if isinstance(date_field, (str, date)):
        try:
            return StringDateSource(value=parse_calendar_date(date_field))
        except ValueError:
            pass

    raw_text = date_field if isinstance(date_field, str) else None
    return UnparseableDate(raw=raw_text)


def _extract_name(record: Mapping[str, Any]) -> str:
    name = record.get("name")
    if isinstance(name, str):
        return name
    if isinstance(name, list):
        # OpenHolidays: [{"language": "EN", "text": "Christmas Day"}, ...]
        for entry in name:
            if isinstance(entry, Mapping) and entry.get("text"):
                return str(entry["text"])
        if name and not isinstance(name[0], Mapping):
            return str(name[0])
    return ""


def _extract_category(record: Mapping[str, Any]) -> str:
    for key in ("type", "types"):
        value = record.get(key)
        if isinstance(value, str) and value:
            return value
        if isinstance(value, list):
            labels = [str(v) for v in value if v]
            if labels:
                return labels[0]
    return DEFAULT_CATEGORY


def _extract_country(record: Mapping[str, Any]) -> str:
    country = record.get("country") or record.get("countryCode")
    if isinstance(country, Mapping):
        country = country.get("id") or country.get("name")
    return str(country).upper() if country else ""


def holiday_id(day: date, name: str) -> str:
    """Deterministic id for ``(date, name)``. Not unique across duplicate rows."""
    digest = hashlib.sha1(f"{day.isoformat()}|{name}".encode("utf-8")).hexdigest()
    return f"{day.isoformat()}-{digest[:12]}"


def normalize_holiday(raw: Any, today: date) -> CanonicalHoliday:
    """Normalize one raw record. Rows without a usable date are dated ``today``."""
    record = _as_mapping(raw)
    source = resolve_date_source(record)
    if isinstance(source, UnparseableDate):
        logger.debug("Holiday record without a usable date, using %s (raw=%r)", today, source.raw)
        day = today
    else:
        day = source.value

    name = _extract_name(record)
    description = record.get("description")
    return CanonicalHoliday(
        id=holiday_id(day, name),
        name=name,
        date=day,
        category=_extract_category(record),
        description=description if isinstance(description, str) else "",
        country=_extract_country(record),
        day_of_week=WEEKDAY_NAMES[day.weekday()],
        iso_week=day.isocalendar()[1],
        month=day.month,
        year=day.year,
    )


def normalize_holidays(
    raw_holidays: Iterable[Any],
    today: Optional[date] = None,
) -> List[CanonicalHoliday]:
    """
    Normalize raw provider records into canonical holidays.

    Every input row yields exactly one output row; no deduplication is done.

    Args:
        raw_holidays: Raw records from a provider or the fallback dataset
        today: Date used for rows without a usable date. If None, uses date.today().

    Returns:
        List of CanonicalHoliday
    """
    fallback_day = today if today is not None else date.today()
    return [normalize_holiday(raw, fallback_day) for raw in raw_holidays]
