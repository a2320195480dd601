from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from command_center.config.settings import Settings
from command_center.schemas.weather import CurrentWeather, WeatherResult
from command_center.services.errors import ConfigError, RemoteAPIError, contain, unavailable

logger = logging.getLogger(__name__)

HOURLY_FIELDS = "relativehumidity_2m,apparent_temperature"


def _first(series: Any) -> Optional[float]:
    if isinstance(series, list) and series:
        return series[0]
    return None


def parse_forecast(data: dict[str, Any]) -> CurrentWeather:
    """
    Map an Open-Meteo forecast payload to CurrentWeather.

    Humidity and apparent temperature come from index 0 of the hourly series.
    That sample is the first hour of the forecast window, which is only an
    approximation of "now": it is not aligned with current_weather.time.
    """
    current = data["current_weather"]
    hourly = data.get("hourly")
    if not isinstance(hourly, dict):
        hourly = {}
    return CurrentWeather(
        temperature=current["temperature"],
        windSpeed=current["windspeed"],
        weatherCode=current["weathercode"],
        time=current["time"],
        timezone=data["timezone"],
        apparentTemperature=_first(hourly.get("apparent_temperature")),
        humidity=_first(hourly.get("relativehumidity_2m")),
    )


async def _fetch_weather(settings: Settings, client: httpx.AsyncClient) -> CurrentWeather:
    params = {
        "latitude": str(settings.weather_latitude),
        "longitude": str(settings.weather_longitude),
        "current_weather": "true",
        "hourly": HOURLY_FIELDS,
    }
    try:
        r = await client.get(settings.weather_api_url, params=params)
    except httpx.RequestError as e:
        raise RemoteAPIError("Weather", None, str(e)) from e

    if not r.is_success:
        raise RemoteAPIError("Weather", r.status_code, r.text)

    try:
        weather = parse_forecast(r.json())
    except (ValueError, KeyError, TypeError, AttributeError, ValidationError) as e:
        raise RemoteAPIError("Weather", r.status_code, f"unexpected payload: {e}") from e

    logger.debug("weather at %s: %s", weather.time, weather.temperature)
    return weather


async def get_weather(settings: Settings, client: httpx.AsyncClient) -> WeatherResult:
    if settings.weather_latitude is None or settings.weather_longitude is None:
        return unavailable(
            "weather",
            ConfigError(
                "Missing WEATHER_LATITUDE or WEATHER_LONGITUDE environment variables.",
                "Weather needs both coordinates to be configured.",
            ),
        )
    return await contain("weather", _fetch_weather(settings, client), settings.adapter_timeout_seconds)
