from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from app.table import ItemMetadata, MetadataKey
from app.schemas.metadata_request import CreateMetadataRequestModel, UpdateMetadataRequestModel
from app.schemas.metadata_response import MetadataResponseModel, MetadataKeyResponseModel
from app.services.item.item_read_service import get_item
from app.services.setting_service import get_default_metadata_keys
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError, NotFoundError

# ==================== Create ====================
async def create_metadata(
    item_id: int,
    request_model: CreateMetadataRequestModel,
    db: AsyncSession
) -> MetadataResponseModel:
    key = _clean_text(request_model.key)
    if key is None:
        raise ValidationError(ServerErrorMessage.METADATA_KEY_REQUIRED)
    value = _clean_text(request_model.value)
    if value is None:
        raise ValidationError(ServerErrorMessage.METADATA_VALUE_REQUIRED)

    await get_item(item_id, db)

    now = now_text()
    new_metadata = ItemMetadata(
        item_id=item_id,
        key=key,
        value=value,
        created_at=now,
        updated_at=now,
    )
    db.add(new_metadata)
    await register_metadata_key(key, db)
    await db.commit()
    return MetadataResponseModel.model_validate(new_metadata)


# ==================== Read ====================
async def read_metadata(
    item_id: int,
    db: AsyncSession
) -> List[MetadataResponseModel]:
    await get_item(item_id, db)
    query = (
        select(ItemMetadata)
        .where(ItemMetadata.item_id == item_id)
        .order_by(ItemMetadata.created_at.desc(), ItemMetadata.id.desc())
    )
    result = await db.execute(query)
    return [MetadataResponseModel.model_validate(row) for row in result.scalars().all()]


async def read_metadata_keys(db: AsyncSession) -> List[MetadataKeyResponseModel]:
    """已用過的 key 與設定中的預設 key 合併、去重，不分大小寫排序"""
    result = await db.execute(select(MetadataKey.key_name))
    key_names = set(result.scalars().all())
    key_names.update(await get_default_metadata_keys(db))

    return [
        MetadataKeyResponseModel(key_name=key_name)
        for key_name in sorted(key_names, key=lambda k: (k.casefold(), k))
    ]


# ==================== Update ====================
async def update_metadata(
    item_id: int,
    metadata_id: int,
    request_model: UpdateMetadataRequestModel,
    db: AsyncSession
) -> MetadataResponseModel:
    metadata = await _get_item_metadata(item_id, metadata_id, db)

    key = _clean_text(request_model.key)
    value = _clean_text(request_model.value)
    if key is None and value is None:
        raise ValidationError(ServerErrorMessage.METADATA_NO_FIELDS)

    if key is not None:
        metadata.key = key
        await register_metadata_key(key, db)
    if value is not None:
        metadata.value = value
    metadata.updated_at = now_text()

    await db.commit()
    return MetadataResponseModel.model_validate(metadata)


# ==================== Delete ====================
async def delete_metadata(
    item_id: int,
    metadata_id: int,
    db: AsyncSession
) -> None:
    await _get_item_metadata(item_id, metadata_id, db)
    # metadata_keys 不跟著刪除，保留給自動完成
    await db.execute(
        delete(ItemMetadata).where(ItemMetadata.id == metadata_id, ItemMetadata.item_id == item_id)
    )
    await db.commit()


# ==================== Public Method ====================

async def register_metadata_key(key_name: str, db: AsyncSession) -> None:
    await db.execute(
        sqlite_insert(MetadataKey)
        .values(key_name=key_name, created_at=now_text())
        .on_conflict_do_nothing(index_elements=["key_name"])
    )


# ==================== Private Method ====================

async def _get_item_metadata(item_id: int, metadata_id: int, db: AsyncSession) -> ItemMetadata:
    query = select(ItemMetadata).where(ItemMetadata.id == metadata_id, ItemMetadata.item_id == item_id)
    metadata = (await db.execute(query)).scalar_one_or_none()
    if metadata is None:
        raise NotFoundError(ServerErrorMessage.METADATA_NOT_FOUND)
    return metadata


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()
