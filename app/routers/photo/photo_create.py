from typing import Optional
from fastapi import APIRouter, Depends, Request, BackgroundTasks, UploadFile, File, status
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.photo.photo_create_service import create_photo
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

# 路由入口
@router.post("/items/{item_id}/photos", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.PHOTO_UPLOAD_FAILED)
async def create(
    request: Request,
    item_id: int,
    bg_tasks: BackgroundTasks,
    photo: Optional[UploadFile] = File(None, description="JPEG / PNG / WebP 图片"),
    db: AsyncSession = Depends(get_db)
):
    response_model = await create_photo(item_id, photo, db)
    response = success_response(
        data=response_model,
        message="Photo uploaded successfully",
        status_code=status.HTTP_201_CREATED,
    )
    bg_tasks.add_task(
        log_info,
        {"item_id": item_id, "filename": photo.filename if photo else None},
        response_model.model_dump(),
        request
    )
    return response
