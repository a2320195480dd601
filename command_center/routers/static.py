from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from command_center.config.settings import Settings
from command_center.deps import get_app_settings
from command_center.utils.static_files import (
    AssetForbidden,
    content_type_for,
    read_asset,
    resolve_asset,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Static"])


@router.get("/{path:path}", include_in_schema=False)
async def static_asset(path: str, settings: Settings = Depends(get_app_settings)):
    try:
        target = resolve_asset(settings.static_dir, path)
    except AssetForbidden:
        logger.warning("rejected asset path outside root: %r", path)
        return PlainTextResponse("Forbidden", status_code=403)

    try:
        data = await run_in_threadpool(read_asset, target)
    except (FileNotFoundError, ValueError):
        # ValueError: path with an embedded NUL byte
        return PlainTextResponse("Not Found", status_code=404)
    except OSError:
        logger.exception("failed to read %s", target)
        return PlainTextResponse("Server Error", status_code=500)

    # explicit header so text types are sent as-is, without a charset suffix
    return Response(content=data, headers={"Content-Type": content_type_for(target)})
