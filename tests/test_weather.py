import asyncio
import copy

import httpx

from command_center.schemas.common import ErrorResult
from command_center.schemas.weather import CurrentWeather
from command_center.services.weather import get_weather
from fakes import FORECAST, FakeUpstream


def fetch(settings, transport):
    async def run():
        async with httpx.AsyncClient(transport=transport) as client:
            return await get_weather(settings, client)

    return asyncio.run(run())


def test_current_conditions_with_first_hourly_sample(settings):
    up = FakeUpstream()
    weather = fetch(settings, up.transport())
    assert isinstance(weather, CurrentWeather)
    assert weather.temperature == 13.4
    assert weather.windSpeed == 9.7
    assert weather.weatherCode == 3
    assert weather.timezone == "GMT"
    assert weather.time == "2024-05-01T12:00"
    # index 0 of the hourly series, not the sample matching current time
    assert weather.humidity == 81
    assert weather.apparentTemperature == 10.2


def test_request_params(settings):
    up = FakeUpstream()
    fetch(settings, up.transport())
    params = up.requests[0].url.params
    assert params["latitude"] == "52.52"
    assert params["longitude"] == "13.41"
    assert params["current_weather"] == "true"
    assert params["hourly"] == "relativehumidity_2m,apparent_temperature"


def test_missing_hourly_series_gives_absent_values(settings):
    payload = copy.deepcopy(FORECAST)
    payload["hourly"] = {"relativehumidity_2m": []}
    weather = fetch(settings, FakeUpstream(weather=(200, payload)).transport())
    assert weather.humidity is None
    assert weather.apparentTemperature is None


def test_missing_coordinates_is_config_error(settings):
    up = FakeUpstream()
    result = fetch(settings.model_copy(update={"weather_longitude": None}), up.transport())
    assert isinstance(result, ErrorResult)
    assert result.error.startswith("Missing WEATHER_LATITUDE")
    assert up.requests == []


def test_forbidden_is_remote_api_error(settings):
    result = fetch(settings, FakeUpstream(weather=(403, "Forbidden")).transport())
    assert isinstance(result, ErrorResult)
    assert result.error == "Weather API error: 403"
    assert result.details == "Forbidden"


def test_malformed_payload_is_remote_api_error(settings):
    result = fetch(settings, FakeUpstream(weather=(200, {"timezone": "GMT"})).transport())
    assert isinstance(result, ErrorResult)
    assert result.error == "Weather API error: 200"
    assert "unexpected payload" in result.details


def test_non_object_hourly_gives_absent_values(settings):
    payload = copy.deepcopy(FORECAST)
    payload["hourly"] = [1, 2]
    weather = fetch(settings, FakeUpstream(weather=(200, payload)).transport())
    assert isinstance(weather, CurrentWeather)
    assert weather.humidity is None
    assert weather.apparentTemperature is None


def test_non_object_current_weather_is_remote_api_error(settings):
    payload = copy.deepcopy(FORECAST)
    payload["current_weather"] = "sunny"
    result = fetch(settings, FakeUpstream(weather=(200, payload)).transport())
    assert isinstance(result, ErrorResult)
    assert result.error == "Weather API error: 200"


def test_missing_coordinates_is_logged(settings, caplog):
    with caplog.at_level("WARNING", logger="command_center.services.errors"):
        fetch(settings.model_copy(update={"weather_latitude": None}), FakeUpstream().transport())
    assert "weather unavailable: Missing WEATHER_LATITUDE" in caplog.text
