from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class Settings(BaseSettings):
    app_name: str = "Dev Command Center"

    github_username: str = ""
    github_token: str = ""
    github_api_url: str = "https://api.github.com"

    weather_latitude: float | None = Field(default=None, ge=-90, le=90)
    weather_longitude: float | None = Field(default=None, ge=-180, le=180)
    weather_api_url: str = "https://api.open-meteo.com/v1/forecast"

    host: str = "0.0.0.0"
    port: int = 4000
    adapter_timeout_seconds: float = Field(default=5.0, gt=0)
    static_dir: Path = STATIC_DIR
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
