from command_center.schemas.common import ErrorResult
from command_center.schemas.dashboard import DashboardSnapshot
from command_center.schemas.github import GithubResult, RepoSummary
from command_center.schemas.motivation import MotivationResult
from command_center.schemas.system import (
    CpuStats,
    DiskResult,
    DiskUsage,
    MemoryStats,
    SystemSnapshot,
)
from command_center.schemas.uptime import UptimeResult
from command_center.schemas.weather import CurrentWeather, WeatherResult

__all__ = [
    "CpuStats",
    "CurrentWeather",
    "DashboardSnapshot",
    "DiskResult",
    "DiskUsage",
    "ErrorResult",
    "GithubResult",
    "MemoryStats",
    "MotivationResult",
    "RepoSummary",
    "SystemSnapshot",
    "UptimeResult",
    "WeatherResult",
]
