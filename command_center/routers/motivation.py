from fastapi import APIRouter

from command_center.schemas.motivation import MotivationResult
from command_center.services.errors import InternalError
from command_center.services.motivation import get_motivation

router = APIRouter(prefix="/api", tags=["Motivation"])


@router.get("/motivation", response_model=MotivationResult)
async def motivation():
    try:
        return get_motivation()
    except Exception as e:
        raise InternalError(str(e)) from e
