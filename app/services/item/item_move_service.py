from sqlalchemy.ext.asyncio import AsyncSession
from app.table import ItemMovementHistory
from app.schemas.item_request import MoveItemRequestModel
from app.schemas.item_response import ItemWithToteResponseModel
from app.services.item.item_read_service import get_item, read_item_with_tote
from app.services.tote.tote_read_service import get_tote
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError

# ==================== Move ====================
async def move_item(
    item_id: int,
    request_model: MoveItemRequestModel,
    db: AsyncSession
) -> ItemWithToteResponseModel:
    """
    把 item 移到另一個 tote，並寫入一筆移動紀錄（同一個交易）

    檢查順序：item 存在 -> 有 target_tote_id -> 目標 tote 存在 -> 與目前 tote 不同
    """
    item = await get_item(item_id, db)

    target_tote_id = (request_model.target_tote_id or "").strip()
    if not target_tote_id:
        raise ValidationError(ServerErrorMessage.ITEM_TARGET_REQUIRED)

    await get_tote(target_tote_id, db, ServerErrorMessage.ITEM_TARGET_NOT_FOUND)

    if item.tote_id == target_tote_id:
        raise ValidationError(ServerErrorMessage.ITEM_ALREADY_IN_TOTE)

    from_tote_id = item.tote_id
    now = now_text()

    item.tote_id = target_tote_id
    item.updated_at = now
    db.add(ItemMovementHistory(
        item_id=item.id,
        from_tote_id=from_tote_id,
        to_tote_id=target_tote_id,
        moved_at=now,
    ))
    await db.commit()

    return await read_item_with_tote(item_id, db)
