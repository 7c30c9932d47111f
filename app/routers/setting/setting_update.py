from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.setting_service import update_settings
from app.schemas.setting_request import UpdateSettingsRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import ValidationError, router_exception_handler

router = APIRouter()

@router.put("/settings", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.SETTINGS_UPDATE_FAILED)
async def update(
    request: Request,
    request_model: UpdateSettingsRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    _error_check(request_model)
    settings = await update_settings(request_model, db)
    bg_tasks.add_task(log_info, request_model.model_dump(), {"settings": settings}, request)
    return success_response(settings=settings)

# 自定義錯誤檢查
def _error_check(request_model: UpdateSettingsRequestModel) -> None:
    if request_model.settings is None:
        raise ValidationError(ServerErrorMessage.SETTINGS_REQUIRED)
