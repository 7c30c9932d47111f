from typing import Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.table import Item, ItemMetadata
from app.schemas.item_request import DuplicateItemRequestModel
from app.schemas.item_response import ItemWithToteResponseModel
from app.services.item.item_read_service import get_item, read_item_with_tote
from app.services.tote.tote_read_service import get_tote
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage

COPY_SUFFIX = " (Copy)"

# ==================== Duplicate ====================
async def duplicate_item(
    item_id: int,
    request_model: DuplicateItemRequestModel,
    db: AsyncSession
) -> Tuple[ItemWithToteResponseModel, str]:
    """
    複製 item 與其 metadata（照片不複製），預設放在同一個 tote

    Returns:
        Tuple[ItemWithToteResponseModel, str]: (新 item, 原 item 名稱)
    """
    source = await get_item(item_id, db)

    target_tote_id = source.tote_id
    if request_model.target_tote_id is not None:
        candidate_id = request_model.target_tote_id.strip()
        await get_tote(candidate_id, db, ServerErrorMessage.ITEM_TARGET_NOT_FOUND)
        target_tote_id = candidate_id

    now = now_text()
    new_item = Item(
        tote_id=target_tote_id,
        name=f"{source.name}{COPY_SUFFIX}",
        description=source.description,
        quantity=source.quantity,
        created_at=now,
        updated_at=now,
    )
    db.add(new_item)
    await db.flush()

    metadata_query = (
        select(ItemMetadata.key, ItemMetadata.value)
        .where(ItemMetadata.item_id == item_id)
        .order_by(ItemMetadata.id)
    )
    for key, value in (await db.execute(metadata_query)).all():
        db.add(ItemMetadata(
            item_id=new_item.id,
            key=key,
            value=value,
            created_at=now,
            updated_at=now,
        ))
    await db.commit()

    return await read_item_with_tote(new_item.id, db), source.name
