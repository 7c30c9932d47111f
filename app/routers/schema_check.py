from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.schema_service import read_schema
from app.utils.util_response import raw_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

# 開發用：確認資料表與外鍵設定
@router.get("/schema-check", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.SCHEMA_CHECK_FAILED)
async def read(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    return raw_response(await read_schema(db))
