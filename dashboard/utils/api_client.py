import os

import requests

API_BASE = os.environ.get("COMMAND_CENTER_API", "http://127.0.0.1:4000")


def _get(path: str, params: dict | None = None) -> dict | list:
    try:
        res = requests.get(f"{API_BASE}{path}", params=params, timeout=5)
        res.raise_for_status()
        return res.json()
    except requests.RequestException as e:
        return {"error": "Command Center API is not reachable. Start the server first.", "details": str(e)}


def get_dashboard(user: str | None = None):
    return _get("/api/dashboard", {"user": user} if user else None)


def get_system():
    return _get("/api/system")


def get_uptime():
    return _get("/api/uptime")
