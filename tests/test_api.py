"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from holiday_calendar import main
from holiday_calendar.adapters import FallbackHolidayProvider
from holiday_calendar.main import app
from holiday_calendar.services.holidays import HolidayService

client = TestClient(app)


@pytest.fixture(autouse=True)
def fallback_service(monkeypatch):
    """Serve the static dataset so no request leaves the process."""
    service = HolidayService(provider=FallbackHolidayProvider(), week_start=6)
    monkeypatch.setattr(main, "holiday_service", service)
    return service


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert "version" in response.json()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["provider"] == "fallback"


class TestHolidays:

    def test_month(self):
        response = client.get("/api/holidays", params={"country": "us", "year": 2025, "month": 7})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        holidays = body["data"]["holidays"]
        assert [h["name"] for h in holidays] == ["Independence Day"]
        assert holidays[0]["dayOfWeek"] == "Friday"

        metadata = body["data"]["metadata"]
        assert metadata["country"] == "US"
        assert metadata["totalHolidays"] == 1
        assert metadata["usingFallbackData"] is True
        assert metadata["dateRange"] == {"start": "2025-07-01", "end": "2025-07-31"}

    def test_date_range(self):
        response = client.get("/api/holidays", params={
            "country": "US",
            "year": 2025,
            "startDate": "2025-07-01",
            "endDate": "2025-11-30",
        })
        assert response.status_code == 200
        metadata = response.json()["data"]["metadata"]
        assert metadata["totalHolidays"] == 5
        assert metadata["dateRange"] == {"start": "2025-07-01", "end": "2025-11-30"}

    @pytest.mark.parametrize("params", [
        {"country": "USA", "year": 2025},
        {"country": "XX", "year": 2025},
        {"country": "US", "year": 1800},
        {"country": "US", "year": 2025, "month": 13},
        {"country": "US", "year": 2025, "startDate": "2025-12-01", "endDate": "2025-01-01"},
        {"country": "US", "year": 2025, "startDate": "2025-01-01", "endDate": "2028-01-01"},
        {"country": "US", "year": 2025, "startDate": "01/01/2025", "endDate": "2025-02-01"},
        {"country": "US", "year": 2025, "startDate": "2025-12-01", "endDate": "2026-01-31"},
        {"country": "US", "year": 2025, "month": 7, "startDate": "2025-06-15", "endDate": "2025-07-15"},
    ])
    def test_invalid_params(self, params):
        response = client.get("/api/holidays", params=params)
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Bad Request"
        assert body["message"]

    def test_range_inside_month(self):
        response = client.get("/api/holidays", params={
            "country": "US",
            "year": 2025,
            "month": 7,
            "startDate": "2025-07-01",
            "endDate": "2025-07-03",
        })
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["holidays"] == []
        assert data["metadata"]["dateRange"] == {"start": "2025-07-01", "end": "2025-07-03"}

    def test_range_outside_year_is_rejected(self):
        response = client.get("/api/holidays", params={
            "country": "US",
            "year": 2025,
            "startDate": "2025-12-01",
            "endDate": "2026-01-31",
        })
        assert response.status_code == 400
        assert "2025-01-01 to 2025-12-31" in response.json()["message"]

    def test_missing_country(self):
        response = client.get("/api/holidays", params={"year": 2025})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"


class TestQuarterly:

    def test_q3(self):
        response = client.get("/api/holidays/quarterly", params={"country": "US", "year": 2025, "quarter": 3})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["metadata"]["months"] == [7, 8, 9]
        assert data["metadata"]["totalHolidays"] == 2
        assert sorted(data["holidaysByMonth"]) == ["7", "9"]
        assert data["holidaysByMonth"]["9"][0]["name"] == "Labor Day"

    @pytest.mark.parametrize("quarter", [0, 5])
    def test_invalid_quarter(self, quarter):
        response = client.get("/api/holidays/quarterly", params={"country": "US", "year": 2025, "quarter": quarter})
        assert response.status_code == 400


class TestWeekSummary:

    def test_month(self):
        response = client.get("/api/holidays/week-summary", params={"country": "US", "year": 2025, "month": 7})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["metadata"]["totalWeeks"] == 5
        first = data["weekSummary"][0]
        assert first["start"] == "2025-06-29"
        assert first["densityClass"] == "light"
        assert first["densityLabel"] == "Light Green"

    def test_year(self):
        response = client.get("/api/holidays/week-summary", params={"country": "US", "year": 2025})
        assert response.json()["data"]["metadata"]["totalWeeks"] == 53


class TestCalendar:

    def test_month_view(self):
        response = client.get("/api/holidays/calendar", params={"country": "US", "date": "2025-07-04"})
        assert response.status_code == 200
        calendar = response.json()["data"]["calendar"]
        assert calendar["granularity"] == "month"
        assert calendar["weekStart"] == 6
        assert calendar["months"][0]["name"] == "July 2025"
        assert calendar["months"][0]["weeks"][0]["densityClass"] == "light"
        assert calendar["holidaysByMonth"] is None

    def test_quarter_view(self):
        response = client.get(
            "/api/holidays/calendar",
            params={"country": "US", "date": "2025-08-15", "view": "quarter"},
        )
        calendar = response.json()["data"]["calendar"]
        assert [m["monthIndex"] for m in calendar["months"]] == [6, 7, 8]
        assert sorted(calendar["holidaysByMonth"]) == ["7", "9"]

    def test_year_view(self):
        response = client.get(
            "/api/holidays/calendar",
            params={"country": "GB", "date": "2025-03-01", "view": "year"},
        )
        data = response.json()["data"]
        assert len(data["calendar"]["months"]) == 12
        assert data["metadata"]["totalHolidays"] == 8

    def test_invalid_view(self):
        response = client.get("/api/holidays/calendar", params={"country": "US", "date": "2025-07-04", "view": "weekly"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid calendar request"

    def test_invalid_date(self):
        response = client.get("/api/holidays/calendar", params={"country": "US", "date": "July 4"})
        assert response.status_code == 400


class TestCountries:

    def test_list(self):
        response = client.get("/api/countries")
        assert response.status_code == 200
        assert response.json()["data"]["metadata"]["totalCountries"] == 35

    def test_search(self):
        response = client.get("/api/countries/search", params={"q": "ind"})
        data = response.json()["data"]
        assert [c["code"] for c in data["countries"]] == ["IN", "ID"]
        assert data["metadata"]["resultsCount"] == 2

    def test_search_too_short(self):
        response = client.get("/api/countries/search", params={"q": "u"})
        assert response.status_code == 400

    def test_popular(self):
        response = client.get("/api/countries/popular")
        assert response.json()["data"]["countries"][0]["code"] == "US"

    def test_continent(self):
        response = client.get("/api/countries/continent/Oceania")
        assert [c["code"] for c in response.json()["data"]["countries"]] == ["AU"]

    def test_details(self):
        response = client.get("/api/countries/de")
        assert response.status_code == 200
        assert response.json()["data"]["country"]["name"] == "Germany"

    def test_not_found(self):
        response = client.get("/api/countries/XX")
        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"

    def test_bad_code(self):
        response = client.get("/api/countries/USA")
        assert response.status_code == 400
