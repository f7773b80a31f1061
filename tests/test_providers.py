"""Tests for holiday providers and the provider factory."""
import httpx
import pytest
from unittest.mock import patch
from holiday_calendar.adapters import (
    AbstractAPIProvider,
    CalendarificProvider,
    FallbackHolidayProvider,
    NagerProvider,
    get_holiday_provider,
)
from holiday_calendar.config import settings
from holiday_calendar.errors import HolidayProviderError


def mock_transport(payload, status_code=200, seen=None):
    """httpx transport returning a fixed JSON payload and recording requests."""
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_calendarific_returns_holidays():
    seen = []
    payload = {
        "meta": {"code": 200},
        "response": {"holidays": [
            {"name": "Independence Day", "date": {"iso": "2025-07-04"}, "type": ["National holiday"]},
        ]},
    }
    provider = CalendarificProvider(api_key="test-key", transport=mock_transport(payload, seen=seen))

    holidays = await provider.fetch_holidays("US", 2025, 7)

    assert holidays[0]["name"] == "Independence Day"
    params = seen[0].url.params
    assert seen[0].url.path == "/api/v2/holidays"
    assert params["country"] == "US"
    assert params["year"] == "2025"
    assert params["month"] == "7"
    assert params["type"] == "national,local,religious,observance"


@pytest.mark.asyncio
async def test_calendarific_without_month_omits_param():
    seen = []
    payload = {"meta": {"code": 200}, "response": {"holidays": []}}
    provider = CalendarificProvider(api_key="k", transport=mock_transport(payload, seen=seen))
    assert await provider.fetch_holidays("GB", 2025) == []
    assert "month" not in seen[0].url.params


@pytest.mark.asyncio
async def test_calendarific_error_meta_raises():
    payload = {"meta": {"code": 401, "error_detail": "Invalid API key"}, "response": []}
    provider = CalendarificProvider(api_key="bad", transport=mock_transport(payload))
    with pytest.raises(HolidayProviderError, match="Invalid API key"):
        await provider.fetch_holidays("US", 2025)


@pytest.mark.asyncio
async def test_http_error_propagates():
    provider = CalendarificProvider(api_key="k", transport=mock_transport({}, status_code=500))
    with pytest.raises(httpx.HTTPStatusError):
        await provider.fetch_holidays("US", 2025)


def test_calendarific_requires_key():
    with pytest.raises(ValueError):
        CalendarificProvider(api_key="")


@pytest.mark.asyncio
async def test_nager_filters_by_month():
    seen = []
    payload = [
        {"date": "2025-07-04", "name": "Independence Day", "types": ["Public"]},
        {"date": "2025-12-25", "name": "Christmas Day", "types": ["Public"]},
    ]
    provider = NagerProvider(transport=mock_transport(payload, seen=seen))

    holidays = await provider.fetch_holidays("US", 2025, 12)

    assert [h["name"] for h in holidays] == ["Christmas Day"]
    assert seen[0].url.path == "/api/v3/PublicHolidays/2025/US"


@pytest.mark.asyncio
async def test_nager_unexpected_payload():
    provider = NagerProvider(transport=mock_transport({"status": 404}))
    with pytest.raises(HolidayProviderError):
        await provider.fetch_holidays("US", 2025)


@pytest.mark.asyncio
async def test_abstractapi_returns_list():
    payload = [{"name": "Labor Day", "date": "09/01/2025", "type": "National"}]
    provider = AbstractAPIProvider(api_key="k", transport=mock_transport(payload))
    assert await provider.fetch_holidays("US", 2025, 9) == payload


class TestFallbackProvider:

    def test_month_filter(self):
        holidays = FallbackHolidayProvider().holidays_for("GB", 2025, 12)
        assert [h["name"] for h in holidays] == ["Christmas Day", "Boxing Day"]
        assert holidays[0]["date"] == "2025-12-25"
        assert holidays[0]["type"] == "National holiday"

    def test_unknown_country_uses_us(self):
        provider = FallbackHolidayProvider()
        assert provider.holidays_for("ZZ", 2025) == provider.holidays_for("US", 2025)

    def test_month_without_holidays(self):
        assert FallbackHolidayProvider().holidays_for("US", 2025, 3) == []

    @pytest.mark.asyncio
    async def test_fetch_matches_sync_lookup(self):
        provider = FallbackHolidayProvider()
        assert await provider.fetch_holidays("IN", 2025, 1) == provider.holidays_for("IN", 2025, 1)


class TestFactory:

    def test_fallback(self):
        assert isinstance(get_holiday_provider("fallback"), FallbackHolidayProvider)

    def test_nager(self):
        provider = get_holiday_provider("nager")
        assert isinstance(provider, NagerProvider)
        assert provider.base_url == (settings.holiday_api_base_url or NagerProvider.default_base_url).rstrip("/")

    def test_calendarific_with_key(self):
        provider = get_holiday_provider("calendarific", api_key="abc")
        assert isinstance(provider, CalendarificProvider)
        assert provider.api_key == "abc"

    def test_calendarific_without_key_degrades_to_fallback(self):
        with patch.object(settings, "calendarific_api_key", ""):
            assert isinstance(get_holiday_provider("calendarific"), FallbackHolidayProvider)

    def test_abstractapi_without_key_degrades_to_fallback(self):
        with patch.object(settings, "abstractapi_key", ""):
            assert isinstance(get_holiday_provider("abstractapi"), FallbackHolidayProvider)

    def test_default_uses_settings(self):
        with patch.object(settings, "holiday_api_provider", "nager"):
            assert isinstance(get_holiday_provider(), NagerProvider)
