from pathlib import Path
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.table import ItemPhoto
from app.schemas.photo_response import PhotoResponseModel
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import NotFoundError
from app.utils.util_file import resolve_data_path

# ==================== Read ====================
async def read_item_photos(
    item_id: int,
    db: AsyncSession
) -> List[PhotoResponseModel]:
    query = (
        select(ItemPhoto)
        .where(ItemPhoto.item_id == item_id)
        .order_by(ItemPhoto.created_at.desc(), ItemPhoto.id.desc())
    )
    result = await db.execute(query)
    return [PhotoResponseModel.model_validate(photo) for photo in result.scalars().all()]


async def get_photo(photo_id: int, db: AsyncSession) -> ItemPhoto:
    photo = await db.get(ItemPhoto, photo_id)
    if photo is None:
        raise NotFoundError(ServerErrorMessage.PHOTO_NOT_FOUND)
    return photo


# 檔案遺失視為 404，不當作資料損壞
async def read_photo_file(
    photo_id: int,
    db: AsyncSession,
    thumbnail: bool = False
) -> tuple[Path, str]:
    photo = await get_photo(photo_id, db)

    if thumbnail:
        file_path = resolve_data_path(photo.thumbnail_path)
        missing_message = ServerErrorMessage.PHOTO_THUMBNAIL_NOT_FOUND
    else:
        file_path = resolve_data_path(photo.original_path)
        missing_message = ServerErrorMessage.PHOTO_FILE_NOT_FOUND

    if file_path is None:
        raise NotFoundError(missing_message)
    return file_path, photo.mime_type
