import pytest
from pydantic import ValidationError

from command_center.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("GITHUB_USERNAME", "GITHUB_TOKEN", "WEATHER_LATITUDE", "WEATHER_LONGITUDE", "PORT"):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    s = Settings(_env_file=None)
    assert s.port == 4000
    assert s.github_username == ""
    assert s.weather_latitude is None
    assert s.adapter_timeout_seconds == 5.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_x")
    monkeypatch.setenv("WEATHER_LATITUDE", "52.52")
    monkeypatch.setenv("WEATHER_LONGITUDE", "")
    monkeypatch.setenv("PORT", "8080")
    s = Settings(_env_file=None)
    assert s.github_username == "octocat"
    assert s.github_token == "ghp_x"
    assert s.weather_latitude == 52.52
    assert s.weather_longitude is None
    assert s.port == 8080


def test_rejects_out_of_range_latitude(monkeypatch):
    monkeypatch.setenv("WEATHER_LATITUDE", "123")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_are_immutable():
    s = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        s.port = 1
