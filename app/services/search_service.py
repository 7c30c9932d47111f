from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from app.table import Tote, Item, ItemMetadata, MetadataKey
from app.schemas.item_response import ItemWithToteResponseModel
from app.schemas.search_response import SearchResponseModel, SearchFiltersResponseModel

SEARCH_LIMIT = 100

# ==================== Read ====================
async def search_items(
    q: Optional[str],
    location: Optional[str],
    owner: Optional[str],
    metadata_key: Optional[str],
    db: AsyncSession
) -> SearchResponseModel:
    """
    q 比對 item 名稱、描述與任一 metadata 值；location / owner 過濾所屬 tote；
    metadata_key 只保留帶有相符 key 的 item。全部為空時直接回傳空結果
    """
    q = (q or "").strip()
    location = (location or "").strip()
    owner = (owner or "").strip()
    metadata_key = (metadata_key or "").strip()

    if not (q or location or owner or metadata_key):
        return SearchResponseModel(items=[], total=0)

    query = select(Item, Tote.name, Tote.location).outerjoin(Tote, Tote.id == Item.tote_id)

    if q:
        pattern = _like(q)
        metadata_match = select(ItemMetadata.item_id).where(ItemMetadata.value.like(pattern))
        query = query.where(or_(
            Item.name.like(pattern),
            Item.description.like(pattern),
            Item.id.in_(metadata_match),
        ))
    if location:
        query = query.where(Tote.location.like(_like(location)))
    if owner:
        query = query.where(Tote.owner.like(_like(owner)))
    if metadata_key:
        key_match = select(ItemMetadata.item_id).where(ItemMetadata.key.like(_like(metadata_key)))
        query = query.where(Item.id.in_(key_match))

    query = query.order_by(Item.updated_at.desc(), Item.id.desc()).limit(SEARCH_LIMIT)
    result = await db.execute(query)

    items = []
    for item, tote_name, tote_location in result.all():
        item_model = ItemWithToteResponseModel.model_validate(item)
        item_model.tote_name = tote_name
        item_model.tote_location = tote_location
        items.append(item_model)
    return SearchResponseModel(items=items, total=len(items))


async def read_search_filters(db: AsyncSession) -> SearchFiltersResponseModel:
    locations = await db.execute(
        select(Tote.location).distinct()
        .where(Tote.location.is_not(None), Tote.location != "")
        .order_by(Tote.location)
    )
    owners = await db.execute(
        select(Tote.owner).distinct()
        .where(Tote.owner.is_not(None), Tote.owner != "")
        .order_by(Tote.owner)
    )
    metadata_keys = await db.execute(select(MetadataKey.key_name).distinct().order_by(MetadataKey.key_name))
    return SearchFiltersResponseModel(
        locations=list(locations.scalars().all()),
        owners=list(owners.scalars().all()),
        metadata_keys=list(metadata_keys.scalars().all()),
    )


# ==================== Private Method ====================

def _like(term: str) -> str:
    return f"%{term}%"
