"""FastAPI main application."""
import logging
from datetime import date, datetime
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from holiday_calendar import __version__
from holiday_calendar.config import settings
from holiday_calendar.errors import CalendarInputError
from holiday_calendar.logging_config import configure_logging
from holiday_calendar.services.aggregator import group_by_month, summary_range
from holiday_calendar.services.countries import CountryService
from holiday_calendar.services.holidays import HolidayService
from holiday_calendar.utils.dates import parse_calendar_date

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug, version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Initialize services
holiday_service = HolidayService()
country_service = CountryService()


# ---------------------------------------------------------------------------
# Response envelope and error handlers
# ---------------------------------------------------------------------------

def _ok(data: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, "data": data}


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, HTTPStatus(exc.status_code).phrase, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "query")
    message = f"{location}: {first.get('msg', 'invalid value')}" if location else "Invalid request"
    return _error(400, "Invalid request", message)


@app.exception_handler(CalendarInputError)
async def calendar_input_exception_handler(request: Request, exc: CalendarInputError):
    return _error(400, "Invalid calendar request", str(exc))


# ---------------------------------------------------------------------------
# Boundary validation
# ---------------------------------------------------------------------------

def _validate_country(country: str) -> str:
    code = (country or "").strip().upper()
    if len(code) != 2 or not code.isalpha():
        raise HTTPException(
            status_code=400,
            detail="Country must be a 2-letter ISO 3166-1 alpha-2 code (e.g., US, IN, GB)",
        )
    if not country_service.is_supported(code):
        raise HTTPException(
            status_code=400,
            detail=f"Country {code} is not supported. Please check /api/countries for supported countries.",
        )
    return code


def _validate_year(year: int) -> int:
    max_year = datetime.now().year + settings.max_years_ahead
    if year < settings.min_year or year > max_year:
        raise HTTPException(
            status_code=400,
            detail=f"Year must be between {settings.min_year} and {max_year}",
        )
    return year


def _validate_month(month: Optional[int]) -> Optional[int]:
    if month is not None and not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail="Month must be between 1 and 12")
    return month


def _parse_query_date(value: str, field: str) -> date:
    try:
        return parse_calendar_date(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{field} must be in YYYY-MM-DD format") from None


def _validate_date_range(
    start_date: Optional[str],
    end_date: Optional[str],
) -> Optional[Tuple[date, date]]:
    if not (start_date and end_date):
        return None
    start = _parse_query_date(start_date, "startDate")
    end = _parse_query_date(end_date, "endDate")
    if start > end:
        raise HTTPException(status_code=400, detail="Start date must be before or equal to end date")
    if (end - start).days > settings.max_range_days:
        raise HTTPException(
            status_code=400,
            detail=f"Date range cannot exceed {settings.max_range_days} days",
        )
    return start, end


def _dump(items) -> List[Dict[str, Any]]:
    return [item.model_dump(by_alias=True, mode="json") for item in items]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/", tags=["health"])
async def root():
    """Root endpoint."""
    return {"message": settings.app_name, "version": __version__}


@app.get("/health", tags=["health"])
async def health():
    return {"status": "OK", "provider": holiday_service.provider_name, "timestamp": datetime.now().isoformat()}


@app.get("/api/holidays", tags=["holidays"])
async def get_holidays(
    country: str = Query(..., description="ISO 3166-1 alpha-2 country code"),
    year: int = Query(..., description="Year"),
    month: Optional[int] = Query(None, description="Month (1-12)"),
    start_date: Optional[str] = Query(None, alias="startDate", description="Range start (YYYY-MM-DD)"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Range end (YYYY-MM-DD)"),
):
    """
    Holidays for a country in a year or month.

    When both startDate and endDate are given the list is limited to that
    inclusive range.
    """
    code = _validate_country(country)
    _validate_year(year)
    _validate_month(month)
    date_range = _validate_date_range(start_date, end_date)
    period_start, period_end = summary_range(year, month)
    if date_range and (date_range[0] < period_start or date_range[1] > period_end):
        raise HTTPException(
            status_code=400,
            detail=f"Date range must fall within the requested period ({period_start} to {period_end})",
        )

    logger.info("Fetching holidays", extra={"country": code, "year": year, "month": month})
    holidays, used_fallback = await holiday_service.get_holidays(code, year, month, today=date.today())

    range_start, range_end = date_range or (period_start, period_end)
    if date_range:
        holidays = [h for h in holidays if range_start <= h.date <= range_end]

    return _ok({
        "holidays": _dump(holidays),
        "metadata": {
            "country": code,
            "year": year,
            "month": month,
            "totalHolidays": len(holidays),
            "usingFallbackData": used_fallback,
            "dateRange": {"start": range_start.isoformat(), "end": range_end.isoformat()},
        },
    })


@app.get("/api/holidays/quarterly", tags=["holidays"])
async def get_quarterly_holidays(
    country: str = Query(..., description="ISO 3166-1 alpha-2 country code"),
    year: int = Query(..., description="Year"),
    quarter: int = Query(..., description="Quarter (1-4)"),
):
    """Holidays for a quarter; the three months are fetched concurrently."""
    code = _validate_country(country)
    _validate_year(year)
    if not 1 <= quarter <= 4:
        raise HTTPException(status_code=400, detail="Quarter must be between 1 and 4")

    logger.info("Fetching quarterly holidays", extra={"country": code, "year": year, "quarter": quarter})
    holidays, months, used_fallback = await holiday_service.get_quarter_holidays(
        code, year, quarter, today=date.today()
    )

    return _ok({
        "holidays": _dump(holidays),
        "holidaysByMonth": {
            str(month): _dump(items) for month, items in group_by_month(holidays).items()
        },
        "metadata": {
            "country": code,
            "year": year,
            "quarter": quarter,
            "months": months,
            "totalHolidays": len(holidays),
            "usingFallbackData": used_fallback,
        },
    })


@app.get("/api/holidays/week-summary", tags=["holidays"])
async def get_week_summary(
    country: str = Query(..., description="ISO 3166-1 alpha-2 country code"),
    year: int = Query(..., description="Year"),
    month: Optional[int] = Query(None, description="Month (1-12)"),
):
    """Week-by-week density classification for a month or a whole year."""
    code = _validate_country(country)
    _validate_year(year)
    _validate_month(month)

    weeks, used_fallback = await holiday_service.get_week_summary(code, year, month, today=date.today())

    return _ok({
        "weekSummary": _dump(weeks),
        "metadata": {
            "country": code,
            "year": year,
            "month": month,
            "totalWeeks": len(weeks),
            "usingFallbackData": used_fallback,
        },
    })


@app.get("/api/holidays/calendar", tags=["holidays"])
async def get_calendar(
    country: str = Query(..., description="ISO 3166-1 alpha-2 country code"),
    reference_date: Optional[str] = Query(None, alias="date", description="Any date in the period (YYYY-MM-DD); defaults to today"),
    view: str = Query("month", description="month, quarter or year"),
):
    """Calendar grid with classified weeks for the month, quarter or year holding ``date``."""
    code = _validate_country(country)
    ref = _parse_query_date(reference_date, "date") if reference_date else date.today()
    _validate_year(ref.year)

    calendar_view, used_fallback = await holiday_service.get_calendar_view(
        code, ref, view, today=date.today()
    )

    return _ok({
        "calendar": calendar_view.model_dump(by_alias=True, mode="json"),
        "metadata": {
            "country": code,
            "totalHolidays": len(calendar_view.holidays),
            "usingFallbackData": used_fallback,
        },
    })


@app.get("/api/countries", tags=["countries"])
async def list_countries():
    """Supported countries sorted by name."""
    countries = country_service.list_countries()
    return _ok({
        "countries": _dump(countries),
        "metadata": {"totalCountries": len(countries)},
    })


@app.get("/api/countries/search", tags=["countries"])
async def search_countries(q: str = Query("", description="Name, code or continent")):
    """Search countries by name, code or continent."""
    term = q.strip()
    if len(term) < 2:
        raise HTTPException(status_code=400, detail="Search query must be at least 2 characters long")
    if len(term) > 100:
        raise HTTPException(status_code=400, detail="Search query cannot exceed 100 characters")

    countries = country_service.search(term)
    return _ok({
        "countries": _dump(countries),
        "metadata": {"searchQuery": term, "resultsCount": len(countries)},
    })


@app.get("/api/countries/popular", tags=["countries"])
async def popular_countries():
    return _ok({"countries": _dump(country_service.popular())})


@app.get("/api/countries/continent/{continent}", tags=["countries"])
async def countries_by_continent(continent: str):
    countries = country_service.by_continent(continent)
    return _ok({
        "countries": _dump(countries),
        "metadata": {"continent": continent, "totalCountries": len(countries)},
    })


@app.get("/api/countries/{code}", tags=["countries"])
async def get_country(code: str):
    """Details for one country."""
    if len(code.strip()) != 2:
        raise HTTPException(status_code=400, detail="Country code must be a 2-letter ISO code")
    details = country_service.get_details(code)
    if details is None:
        raise HTTPException(status_code=404, detail=f"Country with code {code.upper()} not found")
    return _ok({"country": details.model_dump(by_alias=True, mode="json")})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
