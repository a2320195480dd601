from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from command_center.config.settings import Settings
from command_center.main import create_app
from fakes import FakeUpstream


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / "static"
    (root / "sub").mkdir(parents=True)
    (root / "index.html").write_text("<!DOCTYPE html><title>dash</title>", encoding="utf-8")
    (root / "style.css").write_text("body { color: red; }", encoding="utf-8")
    (root / "sub" / "app.js").write_text("console.log('hi');", encoding="utf-8")
    (root / "blob.bin").write_bytes(bytes(range(256)))
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return root


@pytest.fixture
def settings(static_root):
    return Settings(
        _env_file=None,
        github_username="octocat",
        github_token="",
        weather_latitude=52.52,
        weather_longitude=13.41,
        adapter_timeout_seconds=2.0,
        static_dir=static_root,
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_client(settings):
    clients = []

    def _make(upstream: FakeUpstream, **overrides) -> TestClient:
        cfg = settings.model_copy(update=overrides) if overrides else settings
        client = TestClient(create_app(cfg, upstream.transport()), raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, upstream):
    return make_client(upstream)
