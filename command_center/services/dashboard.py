# command_center/services/dashboard.py
from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional, Sequence

import httpx

from command_center.config.settings import Settings
from command_center.schemas.dashboard import DashboardSnapshot
from command_center.services.github_repos import get_github_repos
from command_center.services.motivation import get_motivation
from command_center.services.system_stats import DISK_COMMAND, get_system_snapshot
from command_center.services.uptime import get_uptime
from command_center.services.weather import get_weather

logger = logging.getLogger(__name__)


async def build_dashboard(
    settings: Settings,
    client: httpx.AsyncClient,
    username: Optional[str] = None,
    clock: Callable[[], float] = time.time,
    disk_command: Sequence[str] = DISK_COMMAND,
) -> DashboardSnapshot:
    """
    Run the slow sources side by side and wait for every one of them.

    Source failures arrive as ErrorResult values and simply land in their
    section. An exception here means an adapter broke its contract; it is
    re-raised only after all siblings have settled.
    """
    started = time.monotonic()
    results = await asyncio.gather(
        get_system_snapshot(settings.adapter_timeout_seconds, disk_command),
        get_github_repos(settings, client, username),
        get_weather(settings, client),
        return_exceptions=True,
    )
    for res in results:
        if isinstance(res, BaseException):
            raise res
    system, github, weather = results

    logger.debug("dashboard assembled in %.3fs", time.monotonic() - started)
    return DashboardSnapshot(
        system=system,
        github=github,
        weather=weather,
        uptime=get_uptime(clock),
        motivation=get_motivation(clock),
    )
