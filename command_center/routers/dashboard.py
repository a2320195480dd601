from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Query

from command_center.config.settings import Settings
from command_center.deps import get_app_settings, get_http_client, normalize_user
from command_center.schemas.dashboard import DashboardSnapshot
from command_center.services.dashboard import build_dashboard
from command_center.services.errors import InternalError

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardSnapshot)
async def dashboard(
    user: str | None = Query(default=None),
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    # always 200: failed sources show up as {error, details} sections
    try:
        return await build_dashboard(settings, client, normalize_user(user))
    except Exception as e:
        raise InternalError(str(e)) from e
