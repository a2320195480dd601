from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from command_center.config.settings import Settings
from command_center.schemas.github import GithubResult, RepoSummary
from command_center.services.errors import ConfigError, RemoteAPIError, contain, unavailable

logger = logging.getLogger(__name__)

USER_AGENT = "Dev-Command-Center"
REPO_LIMIT = 5


def _to_summary(repo: dict[str, Any]) -> RepoSummary:
    return RepoSummary(
        id=repo["id"],
        name=repo["name"],
        description=repo.get("description"),
        url=repo["html_url"],
        pushedAt=repo.get("pushed_at"),
        stars=repo["stargazers_count"],
        language=repo.get("language"),
    )


async def _fetch_repos(settings: Settings, client: httpx.AsyncClient, user: str) -> List[RepoSummary]:
    url = f"{settings.github_api_url.rstrip('/')}/users/{quote(user, safe='')}/repos"
    params = {"sort": "updated", "per_page": str(REPO_LIMIT)}
    headers = {"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"}
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"

    try:
        r = await client.get(url, params=params, headers=headers)
    except httpx.RequestError as e:
        raise RemoteAPIError("GitHub", None, str(e)) from e

    if not r.is_success:
        raise RemoteAPIError("GitHub", r.status_code, r.text)

    try:
        data = r.json()
        if not isinstance(data, list):
            raise ValueError("expected a JSON array")
        repos = [_to_summary(repo) for repo in data]
    except (ValueError, KeyError, TypeError, ValidationError) as e:
        raise RemoteAPIError("GitHub", r.status_code, f"unexpected payload: {e}") from e

    logger.debug("fetched %d repositories for %s", len(repos), user)
    return repos


async def get_github_repos(
    settings: Settings,
    client: httpx.AsyncClient,
    username: Optional[str] = None,
) -> GithubResult:
    user = (username or settings.github_username).strip()
    if not user:
        return unavailable(
            "github",
            ConfigError("Missing GitHub username", "Set GITHUB_USERNAME or pass ?user=<name>."),
        )
    return await contain("github", _fetch_repos(settings, client, user), settings.adapter_timeout_seconds)
