from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.metadata_service import read_metadata, read_metadata_keys
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.get("/items/{item_id}/metadata", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.METADATA_FETCH_FAILED)
async def read_list(
    request: Request,
    item_id: int,
    db: AsyncSession = Depends(get_db)
):
    response_models = await read_metadata(item_id, db)
    return success_response(data=response_models)


# 自動完成用的 key 清單
@router.get("/metadata-keys", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.METADATA_KEYS_FETCH_FAILED)
async def read_keys(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    response_models = await read_metadata_keys(db)
    return success_response(data=response_models)
