from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from command_center import __version__
from command_center.config.settings import Settings, get_settings
from command_center.routers.dashboard import router as dashboard_router
from command_center.routers.github import router as github_router
from command_center.routers.motivation import router as motivation_router
from command_center.routers.static import router as static_router
from command_center.routers.system import router as system_router
from command_center.routers.uptime import router as uptime_router
from command_center.routers.weather import router as weather_router
from command_center.services.errors import InternalError
from command_center.services.github_repos import USER_AGENT

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET",
}


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(
            transport=transport,
            headers={"User-Agent": USER_AGENT},
            timeout=httpx.Timeout(settings.adapter_timeout_seconds),
            follow_redirects=True,
        ) as client:
            app.state.http_client = client
            yield

    app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(InternalError)
    async def internal_error(request: Request, exc: InternalError):
        logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Server error", "details": str(exc)})

    # runs outside the http middleware, so CORS headers are set here
    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "details": str(exc)},
            headers=CORS_HEADERS,
        )

    @app.get("/api/health", tags=["Health"])
    async def health():
        return {"ok": True, "service": "command-center", "version": __version__}

    # API routers first, static catch-all last
    app.include_router(system_router)
    app.include_router(github_router)
    app.include_router(weather_router)
    app.include_router(uptime_router)
    app.include_router(motivation_router)
    app.include_router(dashboard_router)

    @app.get("/api/{rest:path}", include_in_schema=False)
    async def api_not_found(rest: str):
        return JSONResponse(status_code=404, content={"error": "Endpoint not found"})

    app.include_router(static_router)
    return app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Dev Command Center server listening on %s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
