from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.dashboard_service import read_dashboard
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.get("/dashboard", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.DASHBOARD_FAILED)
async def read(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    response_model = await read_dashboard(db)
    return success_response(data=response_model)
