from __future__ import annotations

from fastapi import APIRouter, Depends

from command_center.config.settings import Settings
from command_center.deps import get_app_settings
from command_center.schemas.system import SystemSnapshot
from command_center.services.errors import InternalError
from command_center.services.system_stats import get_system_snapshot

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/system", response_model=SystemSnapshot)
async def system(settings: Settings = Depends(get_app_settings)):
    try:
        return await get_system_snapshot(settings.adapter_timeout_seconds)
    except Exception as e:
        raise InternalError(str(e)) from e
