from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

from command_center.schemas.common import ErrorResult


class CurrentWeather(BaseModel):
    temperature: float
    windSpeed: float
    weatherCode: int
    # upstream local ISO time, passed through unchanged
    time: str
    timezone: str
    # first hourly sample, not time-aligned with `time`
    apparentTemperature: Optional[float] = None
    humidity: Optional[float] = None


WeatherResult = Union[CurrentWeather, ErrorResult]
