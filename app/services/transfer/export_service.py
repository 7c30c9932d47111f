import io
import json
import zipfile
from typing import Any, Dict, List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.table import Tote, Item, ItemPhoto, ItemMetadata, MetadataKey, ItemMovementHistory, Setting
from app.core.core_config import settings
from app.utils.util_datetime import now_iso, today_text
from app.utils.util_file import list_files

MANIFEST_NAME = "tote-sonar-data.json"
MANIFEST_VERSION = "1.0"

# 依外鍵相依順序排列（匯入時正向插入、反向刪除）
TRANSFER_TABLES = [
    ("totes", Tote, Tote.created_at),
    ("items", Item, Item.created_at),
    ("item_photos", ItemPhoto, ItemPhoto.created_at),
    ("item_metadata", ItemMetadata, ItemMetadata.created_at),
    ("metadata_keys", MetadataKey, MetadataKey.created_at),
    ("item_movement_history", ItemMovementHistory, ItemMovementHistory.moved_at),
    ("settings", Setting, Setting.id),
]

# ==================== Export ====================
async def export_archive(db: AsyncSession) -> Tuple[bytes, str]:
    """
    匯出整個資料庫與照片檔為 ZIP

    Returns:
        Tuple[bytes, str]: (ZIP 內容, 下載檔名)
    """
    manifest = await build_manifest(db)

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(MANIFEST_NAME, json.dumps(manifest, indent=2, ensure_ascii=False))
        for folder, directory in (
            (settings.UPLOAD_DIR, settings.upload_dir),
            (settings.THUMBNAIL_DIR, settings.thumbnail_dir),
        ):
            for file_path in list_files(directory):
                zf.write(file_path, arcname=f"{folder}/{file_path.name}")

    return buf.getvalue(), f"tote-sonar-export-{today_text()}.zip"


async def build_manifest(db: AsyncSession) -> Dict[str, Any]:
    data: Dict[str, List[Dict[str, Any]]] = {}
    for name, table, order_column in TRANSFER_TABLES:
        query = select(table.__table__).order_by(order_column, table.__table__.c.id)
        result = await db.execute(query)
        data[name] = [dict(row) for row in result.mappings().all()]

    return {
        "version": MANIFEST_VERSION,
        "exported_at": now_iso(),
        "app": settings.APP_NAME,
        "data": data,
    }
