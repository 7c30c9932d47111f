from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse, FileResponse
from app.db.session import get_db
from app.services.photo.photo_read_service import read_item_photos, read_photo_file
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

# 檔名為隨機值，內容不會變動
PHOTO_CACHE_CONTROL = "public, max-age=31536000, immutable"

@router.get("/items/{item_id}/photos", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.PHOTO_FETCH_FAILED)
async def read_list(
    request: Request,
    item_id: int,
    db: AsyncSession = Depends(get_db)
):
    response_models = await read_item_photos(item_id, db)
    return success_response(data=response_models)


@router.get("/photos/{photo_id}")
@router_exception_handler(ServerErrorMessage.PHOTO_SERVE_FAILED)
async def read(
    request: Request,
    photo_id: int,
    db: AsyncSession = Depends(get_db)
):
    file_path, mime_type = await read_photo_file(photo_id, db)
    return FileResponse(file_path, media_type=mime_type, headers={"Cache-Control": PHOTO_CACHE_CONTROL})


@router.get("/photos/{photo_id}/thumbnail")
@router_exception_handler(ServerErrorMessage.PHOTO_THUMBNAIL_SERVE_FAILED)
async def read_thumbnail(
    request: Request,
    photo_id: int,
    db: AsyncSession = Depends(get_db)
):
    file_path, mime_type = await read_photo_file(photo_id, db, thumbnail=True)
    return FileResponse(file_path, media_type=mime_type, headers={"Cache-Control": PHOTO_CACHE_CONTROL})
