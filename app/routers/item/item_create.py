from fastapi import APIRouter, Depends, Request, BackgroundTasks, status
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.item.item_create_service import create_item
from app.schemas.item_request import CreateItemRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler
from app.utils.util_tote_id import check_tote_id

router = APIRouter()

# 路由入口
@router.post("/totes/{tote_id}/items", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_CREATE_FAILED)
async def create(
    request: Request,
    tote_id: str,
    request_model: CreateItemRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    check_tote_id(tote_id)
    response_model = await create_item(tote_id, request_model, db)
    response = success_response(data=response_model, status_code=status.HTTP_201_CREATED)
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(exclude_unset=True),
        response_model.model_dump(),
        request
    )
    return response
