from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.item.item_move_service import move_item
from app.schemas.item_request import MoveItemRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.post("/items/{item_id}/move", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_MOVE_FAILED)
async def move(
    request: Request,
    item_id: int,
    request_model: MoveItemRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    response_model = await move_item(item_id, request_model, db)
    response = success_response(
        data=response_model,
        message=f'Item "{response_model.name}" moved to "{response_model.tote_name}" successfully',
    )
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(),
        response_model.model_dump(),
        request
    )
    return response
