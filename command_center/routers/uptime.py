from fastapi import APIRouter

from command_center.schemas.uptime import UptimeResult
from command_center.services.errors import InternalError
from command_center.services.uptime import get_uptime

router = APIRouter(prefix="/api", tags=["Uptime"])


@router.get("/uptime", response_model=UptimeResult)
async def uptime():
    try:
        return get_uptime()
    except Exception as e:
        raise InternalError(str(e)) from e
