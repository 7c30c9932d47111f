from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.item.item_read_service import read_item
from app.services.tote.tote_read_service import get_tote, read_tote_items
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler
from app.utils.util_tote_id import check_tote_id

router = APIRouter()

@router.get("/totes/{tote_id}/items", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_FETCH_LIST_FAILED)
async def read_list(
    request: Request,
    tote_id: str,
    db: AsyncSession = Depends(get_db)
):
    check_tote_id(tote_id)
    await get_tote(tote_id, db)
    response_models = await read_tote_items(tote_id, db)
    return success_response(data=response_models)


@router.get("/items/{item_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_FETCH_FAILED)
async def read(
    request: Request,
    item_id: int,
    db: AsyncSession = Depends(get_db)
):
    response_model = await read_item(item_id, db)
    return success_response(data=response_model)
