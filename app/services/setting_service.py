import json
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from app.table import Setting
from app.schemas.setting_request import UpdateSettingsRequestModel
from app.core.core_config import settings
from app.utils.util_datetime import now_text
import logging

logger = logging.getLogger(__name__)

KEY_SERVER_HOSTNAME = "server_hostname"
KEY_MAX_UPLOAD_SIZE = "max_upload_size"
KEY_DEFAULT_METADATA_KEYS = "default_metadata_keys"

# ==================== Read ====================
async def read_settings(db: AsyncSession) -> Dict[str, str]:
    result = await db.execute(select(Setting.key, Setting.value).order_by(Setting.id))
    return {key: value for key, value in result.all()}


async def get_setting_value(key: str, db: AsyncSession) -> Optional[str]:
    result = await db.execute(select(Setting.value).where(Setting.key == key))
    return result.scalar_one_or_none()


async def get_server_hostname(db: AsyncSession) -> str:
    hostname = await get_setting_value(KEY_SERVER_HOSTNAME, db)
    return hostname or settings.DEFAULT_SERVER_HOSTNAME


async def get_max_upload_size(db: AsyncSession) -> int:
    value = await get_setting_value(KEY_MAX_UPLOAD_SIZE, db)
    if value is None:
        return settings.DEFAULT_MAX_UPLOAD_SIZE
    try:
        return int(value.strip())
    except ValueError:
        logger.warning(f"Invalid max_upload_size setting: {value!r}, using default")
        return settings.DEFAULT_MAX_UPLOAD_SIZE


async def get_default_metadata_keys(db: AsyncSession) -> List[str]:
    value = await get_setting_value(KEY_DEFAULT_METADATA_KEYS, db)
    if not value:
        return []
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        # 設定值不是合法 JSON 時忽略
        return []
    if not isinstance(parsed, list):
        return []
    return [key.strip() for key in parsed if isinstance(key, str) and key.strip()]


# ==================== Update ====================
async def update_settings(
    request_model: UpdateSettingsRequestModel,
    db: AsyncSession
) -> Dict[str, str]:
    """逐筆 upsert（不限制 key），全部在同一個交易中完成"""
    now = now_text()
    for key, value in (request_model.settings or {}).items():
        stmt = sqlite_insert(Setting).values(key=key, value=to_setting_text(value), updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=["key"],
            set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
        )
        await db.execute(stmt)
    await db.commit()
    return await read_settings(db)


def to_setting_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)
