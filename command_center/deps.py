from __future__ import annotations

import httpx
from fastapi import Request

from command_center.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def normalize_user(user: str | None) -> str | None:
    # "?user=" means no override
    if user is None or not user.strip():
        return None
    return user.strip()
