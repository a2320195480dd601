from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Query

from command_center.config.settings import Settings
from command_center.deps import get_app_settings, get_http_client, normalize_user
from command_center.schemas.github import GithubResult
from command_center.services.errors import InternalError
from command_center.services.github_repos import get_github_repos

router = APIRouter(prefix="/api", tags=["GitHub"])


@router.get("/github", response_model=GithubResult)
async def github(
    user: str | None = Query(default=None, description="GitHub username, overrides GITHUB_USERNAME"),
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        return await get_github_repos(settings, client, normalize_user(user))
    except Exception as e:
        raise InternalError(str(e)) from e
