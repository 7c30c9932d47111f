from typing import Optional
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from app.table import ItemPhoto
from app.schemas.photo_response import PhotoResponseModel
from app.services.item.item_read_service import get_item
from app.services.setting_service import get_max_upload_size
from app.core.core_config import settings
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError
from app.utils.util_file import save_photo, delete_photo_files, InvalidImageError
import logging

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024

# ==================== Create ====================
async def create_photo(
    item_id: int,
    upload: Optional[UploadFile],
    db: AsyncSession
) -> PhotoResponseModel:
    """
    上傳照片：寫入原圖與縮圖，再新增 item_photos 資料列

    檢查順序：item 存在 -> 照片數未滿 -> 有檔案 -> MIME 類型 -> 檔案大小 -> 可解碼為圖片
    """
    await get_item(item_id, db)
    await _check_photo_limit(item_id, db)

    if upload is None:
        raise ValidationError(ServerErrorMessage.PHOTO_FILE_REQUIRED)

    mime_type = upload.content_type or ""
    if mime_type not in settings.ALLOWED_IMAGE_TYPES:
        raise ValidationError(f"Invalid file type: {mime_type}. Supported formats: JPEG, PNG, WebP")

    data = await upload.read()
    if not data:
        raise ValidationError(ServerErrorMessage.PHOTO_FILE_EMPTY)

    max_size = await get_max_upload_size(db)
    if len(data) > max_size:
        raise ValidationError(f"File size exceeds maximum of {max_size / BYTES_PER_MB:.1f}MB")

    try:
        filename, original_path, thumbnail_path = save_photo(data, mime_type)
    except InvalidImageError as e:
        logger.warning(f"Rejected photo upload for item {item_id}: {e}")
        raise ValidationError(ServerErrorMessage.PHOTO_IMAGE_INVALID)

    new_photo = ItemPhoto(
        item_id=item_id,
        filename=filename,
        original_path=original_path,
        thumbnail_path=thumbnail_path,
        file_size=len(data),
        mime_type=mime_type,
        created_at=now_text(),
    )
    try:
        db.add(new_photo)
        await db.commit()
    except Exception:
        # 資料列沒寫進去，剛存的檔案一併清掉
        delete_photo_files(original_path, thumbnail_path)
        raise

    return PhotoResponseModel.model_validate(new_photo)


# ==================== Private Method ====================

async def _check_photo_limit(item_id: int, db: AsyncSession) -> None:
    result = await db.execute(select(func.count(ItemPhoto.id)).where(ItemPhoto.item_id == item_id))
    if result.scalar_one() >= settings.MAX_PHOTOS_PER_ITEM:
        message = ServerErrorMessage.PHOTO_LIMIT_REACHED.format(limit=settings.MAX_PHOTOS_PER_ITEM)
        raise ValidationError(message)
