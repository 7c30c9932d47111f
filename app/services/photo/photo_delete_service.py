from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete
from app.table import ItemPhoto
from app.services.photo.photo_read_service import get_photo
from app.utils.util_file import delete_photo_files

# ==================== Delete ====================
async def delete_photo(
    photo_id: int,
    db: AsyncSession
) -> None:
    photo = await get_photo(photo_id, db)
    original_path = photo.original_path
    thumbnail_path = photo.thumbnail_path

    await db.execute(delete(ItemPhoto).where(ItemPhoto.id == photo_id))
    await db.commit()

    # 資料庫為準，檔案刪除失敗只記錄
    delete_photo_files(original_path, thumbnail_path)
