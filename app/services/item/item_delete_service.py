from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete
from app.table import Item
from app.services.item.item_read_service import get_item, read_item_photo_paths
from app.utils.util_file import delete_photo_files

# ==================== Delete ====================
async def delete_item(
    item_id: int,
    db: AsyncSession
) -> str:
    item = await get_item(item_id, db)
    item_name = item.name
    photo_paths = await read_item_photo_paths(item_id, db)

    # 照片、metadata、移動紀錄由外鍵級聯刪除
    await db.execute(delete(Item).where(Item.id == item_id))
    await db.commit()

    for original_path, thumbnail_path in photo_paths:
        delete_photo_files(original_path, thumbnail_path)

    return item_name
