from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.item.item_update_service import update_item
from app.schemas.item_request import UpdateItemRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.put("/items/{item_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_UPDATE_FAILED)
async def update(
    request: Request,
    item_id: int,
    request_model: UpdateItemRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    response_model = await update_item(item_id, request_model, db)
    response = success_response(data=response_model)
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(exclude_unset=True),
        response_model.model_dump(),
        request
    )
    return response
