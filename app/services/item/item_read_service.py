from typing import Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import aliased
from app.table import Tote, Item, ItemPhoto, ItemMetadata, ItemMovementHistory
from app.schemas.item_response import (
    ItemWithToteResponseModel,
    ItemDetailResponseModel,
    MovementHistoryResponseModel,
)
from app.schemas.photo_response import PhotoResponseModel
from app.schemas.metadata_response import MetadataResponseModel
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import NotFoundError

# ==================== Read ====================

async def read_item(
    item_id: int,
    db: AsyncSession
) -> ItemDetailResponseModel:
    item_model = await read_item_with_tote(item_id, db)
    detail = ItemDetailResponseModel.model_validate(item_model.model_dump())

    metadata_query = (
        select(ItemMetadata)
        .where(ItemMetadata.item_id == item_id)
        .order_by(ItemMetadata.created_at.desc(), ItemMetadata.id.desc())
    )
    detail.metadata = [
        MetadataResponseModel.model_validate(row)
        for row in (await db.execute(metadata_query)).scalars().all()
    ]

    photos_query = (
        select(ItemPhoto)
        .where(ItemPhoto.item_id == item_id)
        .order_by(ItemPhoto.created_at.desc(), ItemPhoto.id.desc())
    )
    detail.photos = [
        PhotoResponseModel.model_validate(row)
        for row in (await db.execute(photos_query)).scalars().all()
    ]

    detail.movement_history = await _read_movement_history(item_id, db)
    return detail


async def read_item_with_tote(
    item_id: int,
    db: AsyncSession
) -> ItemWithToteResponseModel:
    # 匯入的資料可能指向不存在的 tote
    query = (
        select(Item, Tote.name, Tote.location)
        .outerjoin(Tote, Tote.id == Item.tote_id)
        .where(Item.id == item_id)
    )
    row = (await db.execute(query)).first()
    if row is None:
        raise NotFoundError(ServerErrorMessage.ITEM_NOT_FOUND)

    item, tote_name, tote_location = row
    item_model = ItemWithToteResponseModel.model_validate(item)
    item_model.tote_name = tote_name
    item_model.tote_location = tote_location
    return item_model


async def get_item(item_id: int, db: AsyncSession) -> Item:
    item = await db.get(Item, item_id)
    if item is None:
        raise NotFoundError(ServerErrorMessage.ITEM_NOT_FOUND)
    return item


async def read_item_photo_paths(item_id: int, db: AsyncSession) -> list[Tuple[str, str]]:
    query = select(ItemPhoto.original_path, ItemPhoto.thumbnail_path).where(ItemPhoto.item_id == item_id)
    return [(original, thumbnail) for original, thumbnail in (await db.execute(query)).all()]


# ==================== Private Method ====================

async def _read_movement_history(
    item_id: int,
    db: AsyncSession
) -> list[MovementHistoryResponseModel]:
    from_tote = aliased(Tote)
    to_tote = aliased(Tote)
    query = (
        select(ItemMovementHistory, from_tote.name, to_tote.name)
        .outerjoin(from_tote, from_tote.id == ItemMovementHistory.from_tote_id)
        .outerjoin(to_tote, to_tote.id == ItemMovementHistory.to_tote_id)
        .where(ItemMovementHistory.item_id == item_id)
        .order_by(ItemMovementHistory.moved_at.desc(), ItemMovementHistory.id.desc())
    )

    history: list[MovementHistoryResponseModel] = []
    for row, from_tote_name, to_tote_name in (await db.execute(query)).all():
        entry = MovementHistoryResponseModel.model_validate(row)
        entry.from_tote_name = from_tote_name
        entry.to_tote_name = to_tote_name
        history.append(entry)
    return history
