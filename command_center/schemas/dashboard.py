from __future__ import annotations

from pydantic import BaseModel

from command_center.schemas.github import GithubResult
from command_center.schemas.motivation import MotivationResult
from command_center.schemas.system import SystemSnapshot
from command_center.schemas.uptime import UptimeResult
from command_center.schemas.weather import WeatherResult


class DashboardSnapshot(BaseModel):
    system: SystemSnapshot
    github: GithubResult
    weather: WeatherResult
    uptime: UptimeResult
    motivation: MotivationResult
