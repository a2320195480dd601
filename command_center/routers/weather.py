from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends

from command_center.config.settings import Settings
from command_center.deps import get_app_settings, get_http_client
from command_center.schemas.weather import WeatherResult
from command_center.services.errors import InternalError
from command_center.services.weather import get_weather

router = APIRouter(prefix="/api", tags=["Weather"])


@router.get("/weather", response_model=WeatherResult)
async def weather(
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        return await get_weather(settings, client)
    except Exception as e:
        raise InternalError(str(e)) from e
