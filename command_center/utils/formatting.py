"""Text helpers for rendering dashboard sections (mirrors the browser client)."""
from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Mapping, Optional

UNITS = ("B", "KB", "MB", "GB", "TB")


def _finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def format_bytes(value: Any) -> str:
    if not _finite(value):
        return "N/A"
    size = float(value)
    unit = 0
    while size >= 1024 and unit < len(UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f} {UNITS[unit]}"


def format_duration(seconds: Any) -> str:
    if not _finite(seconds):
        return "Unknown"
    seconds = float(seconds)
    days = int(seconds // 86400)
    hours = int(seconds % 86400 // 3600)
    minutes = int(seconds % 3600 // 60)
    secs = int(seconds % 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


def _error_of(section: Any) -> Optional[str]:
    if isinstance(section, Mapping) and "error" in section:
        return str(section["error"])
    return None


def describe_cpu(cpu: Mapping[str, Any]) -> str:
    return f"{cpu['load1']} / {cpu['load5']} / {cpu['load15']} (cores: {cpu['cores']})"


def cpu_load_percent(cpu: Mapping[str, Any]) -> float:
    cores = cpu.get("cores") or 0
    if not cores:
        return 0.0
    return min(100.0, cpu["load1"] / cores * 100)


def describe_memory(memory: Mapping[str, Any]) -> str:
    return f"{format_bytes(memory['usedBytes'])} used of {format_bytes(memory['totalBytes'])}"


def describe_disk(disk: Any) -> str:
    err = _error_of(disk)
    if err:
        return err
    return (
        f"{format_bytes(disk['usedBytes'])} used of {format_bytes(disk['totalBytes'])} "
        f"({disk['usedPercentage']}% used)"
    )


def describe_weather(weather: Any) -> list[str]:
    err = _error_of(weather)
    if err or not weather:
        return [err or "Weather unavailable. Configure coordinates."]
    lines = [f"{weather['temperature']}°C current temperature"]
    if weather.get("apparentTemperature") is not None:
        lines.append(f"Feels like {weather['apparentTemperature']}°C")
    if weather.get("humidity") is not None:
        lines.append(f"Humidity {weather['humidity']}%")
    lines.append(f"Wind {weather['windSpeed']} km/h")
    return lines


def describe_repo(repo: Mapping[str, Any]) -> str:
    pushed = repo.get("pushedAt")
    if pushed:
        try:
            pushed = datetime.fromisoformat(str(pushed).replace("Z", "+00:00")).strftime("%Y-%m-%d %H:%M")
        except ValueError:
            pass
    else:
        pushed = "never"
    return f"⭐ {repo['stars']} · {repo.get('language') or 'N/A'} · Updated {pushed}"


def describe_uptime(uptime: Optional[Mapping[str, Any]]) -> tuple[str, str]:
    if not uptime:
        return ("System: Unknown", "Dashboard: Unknown")
    return (
        f"System: {format_duration(uptime.get('systemSeconds'))}",
        f"Dashboard: {format_duration(uptime.get('processSeconds'))}",
    )
