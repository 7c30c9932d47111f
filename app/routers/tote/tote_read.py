from typing import Optional
from fastapi import APIRouter, Depends, Request, Query
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.tote.tote_read_service import read_totes, read_tote
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler
from app.utils.util_tote_id import check_tote_id

router = APIRouter()

@router.get("/totes", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.TOTE_FETCH_LIST_FAILED)
async def read_list(
    request: Request,
    sort: Optional[str] = Query(None, description="name / location / owner / created_at / updated_at"),
    order: Optional[str] = Query(None, description="asc / desc"),
    db: AsyncSession = Depends(get_db)
):
    response_models = await read_totes(sort, order, db)
    return success_response(data=response_models)


@router.get("/totes/{tote_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.TOTE_FETCH_FAILED)
async def read(
    request: Request,
    tote_id: str,
    db: AsyncSession = Depends(get_db)
):
    check_tote_id(tote_id)
    response_model = await read_tote(tote_id, db)
    return success_response(data=response_model)
