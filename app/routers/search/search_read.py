from typing import Optional
from fastapi import APIRouter, Depends, Request, Query
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.search_service import search_items, read_search_filters
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.get("/search", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.SEARCH_FAILED)
async def search(
    request: Request,
    q: Optional[str] = Query(None, description="比對名稱、描述與 metadata 值"),
    location: Optional[str] = Query(None),
    owner: Optional[str] = Query(None),
    metadata_key: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    response_model = await search_items(q, location, owner, metadata_key, db)
    return success_response(data=response_model)


@router.get("/search/filters", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.SEARCH_FILTERS_FAILED)
async def read_filters(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    response_model = await read_search_filters(db)
    return success_response(data=response_model)
