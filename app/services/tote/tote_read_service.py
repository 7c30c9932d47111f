from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from app.table import Tote, Item
from app.schemas.tote_response import ToteListResponseModel, ToteDetailResponseModel
from app.schemas.item_response import ItemResponseModel
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import NotFoundError

# 允許排序的欄位（白名單）
_SORT_COLUMNS = {
    "name": Tote.name,
    "location": Tote.location,
    "owner": Tote.owner,
    "created_at": Tote.created_at,
    "updated_at": Tote.updated_at,
}
_DEFAULT_SORT = "created_at"

# ==================== Read ====================

async def read_totes(
    sort: Optional[str],
    order: Optional[str],
    db: AsyncSession
) -> List[ToteListResponseModel]:
    sort_column = _SORT_COLUMNS.get(sort or _DEFAULT_SORT, _SORT_COLUMNS[_DEFAULT_SORT])
    is_asc = (order or "desc").lower() == "asc"

    query = (
        select(Tote, func.count(Item.id).label("item_count"))
        .outerjoin(Item, Item.tote_id == Tote.id)
        .group_by(Tote.id)
        .order_by(sort_column.asc() if is_asc else sort_column.desc())
    )
    result = await db.execute(query)

    totes: List[ToteListResponseModel] = []
    for tote, item_count in result.all():
        tote_model = ToteListResponseModel.model_validate(tote)
        tote_model.item_count = item_count
        totes.append(tote_model)
    return totes


async def read_tote(
    tote_id: str,
    db: AsyncSession
) -> ToteDetailResponseModel:
    tote = await get_tote(tote_id, db)
    items = await read_tote_items(tote_id, db)

    tote_model = ToteDetailResponseModel.model_validate(tote)
    tote_model.items = items
    tote_model.item_count = len(items)
    return tote_model


async def read_tote_items(
    tote_id: str,
    db: AsyncSession
) -> List[ItemResponseModel]:
    query = (
        select(Item)
        .where(Item.tote_id == tote_id)
        .order_by(Item.created_at.desc(), Item.id.desc())
    )
    result = await db.execute(query)
    return [ItemResponseModel.model_validate(item) for item in result.scalars().all()]


async def get_tote(
    tote_id: str,
    db: AsyncSession,
    message: str = ServerErrorMessage.TOTE_NOT_FOUND
) -> Tote:
    tote = await db.get(Tote, tote_id)
    if tote is None:
        raise NotFoundError(message)
    return tote


async def count_tote_items(tote_id: str, db: AsyncSession) -> int:
    result = await db.execute(select(func.count(Item.id)).where(Item.tote_id == tote_id))
    return result.scalar_one()
