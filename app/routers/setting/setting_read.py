from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.setting_service import read_settings
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.get("/settings", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.SETTINGS_FETCH_FAILED)
async def read(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    settings = await read_settings(db)
    return success_response(settings=settings)
