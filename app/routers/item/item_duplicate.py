from fastapi import APIRouter, Depends, Request, BackgroundTasks, status
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.item.item_duplicate_service import duplicate_item
from app.schemas.item_request import DuplicateItemRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.post("/items/{item_id}/duplicate", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_DUPLICATE_FAILED)
async def duplicate(
    request: Request,
    item_id: int,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    request_model = await _read_request_model(request)
    response_model, source_name = await duplicate_item(item_id, request_model, db)
    response = success_response(
        data=response_model,
        message=f'Item "{source_name}" duplicated successfully',
        status_code=status.HTTP_201_CREATED,
    )
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(),
        response_model.model_dump(),
        request
    )
    return response

# body 可省略，無法解析時視為空物件（放回原 tote）
async def _read_request_model(request: Request) -> DuplicateItemRequestModel:
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return DuplicateItemRequestModel()
    return DuplicateItemRequestModel.model_validate(body)
