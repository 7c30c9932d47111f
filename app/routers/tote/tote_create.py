from fastapi import APIRouter, Depends, Request, BackgroundTasks, status
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.tote.tote_create_service import create_tote
from app.schemas.tote_request import CreateToteRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import ValidationError, router_exception_handler

router = APIRouter()

# 路由入口
@router.post("/totes", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.TOTE_CREATE_FAILED)
async def create(
    request: Request,
    request_model: CreateToteRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    _error_check(request_model)
    response_model = await create_tote(request_model, db)
    response = success_response(data=response_model, status_code=status.HTTP_201_CREATED)
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(),
        response_model.model_dump(),
        request
    )
    return response

# 自定義錯誤檢查
def _error_check(request_model: CreateToteRequestModel) -> None:
    # 檢查 name
    if not request_model.name:
        raise ValidationError(ServerErrorMessage.TOTE_NAME_INVALID)
    if not request_model.name.strip():
        raise ValidationError(ServerErrorMessage.TOTE_NAME_REQUIRED)

    # 檢查 location
    if not request_model.location:
        raise ValidationError(ServerErrorMessage.TOTE_LOCATION_INVALID)
    if not request_model.location.strip():
        raise ValidationError(ServerErrorMessage.TOTE_LOCATION_REQUIRED)
