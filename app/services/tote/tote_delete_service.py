from typing import Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from app.table import Tote, Item, ItemPhoto
from app.services.tote.tote_read_service import get_tote, count_tote_items
from app.utils.util_file import delete_photo_files

# ==================== Delete ====================
async def delete_tote(
    tote_id: str,
    db: AsyncSession
) -> Tuple[str, int]:
    """
    刪除 tote；items、照片、metadata、移動紀錄由外鍵級聯刪除
    提交後再盡力刪除照片檔案

    Returns:
        Tuple[str, int]: (tote 名稱, 被刪除的 item 數量)
    """
    tote = await get_tote(tote_id, db)
    tote_name = tote.name
    items_deleted = await count_tote_items(tote_id, db)

    photos_query = (
        select(ItemPhoto.original_path, ItemPhoto.thumbnail_path)
        .join(Item, Item.id == ItemPhoto.item_id)
        .where(Item.tote_id == tote_id)
    )
    photo_paths = (await db.execute(photos_query)).all()

    await db.execute(delete(Tote).where(Tote.id == tote_id))
    await db.commit()

    for original_path, thumbnail_path in photo_paths:
        delete_photo_files(original_path, thumbnail_path)

    return tote_name, items_deleted
