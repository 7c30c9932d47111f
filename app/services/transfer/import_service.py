import io
import json
import zipfile
from typing import Any, Dict, List, Optional
from fastapi import UploadFile
from sqlalchemy import delete, insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncConnection
from app.table import Setting
from app.schemas.transfer_response import ImportSummaryResponseModel
from app.services.transfer.export_service import MANIFEST_NAME, TRANSFER_TABLES
from app.core.core_config import settings
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError
from app.utils.util_file import ensure_data_dirs, clear_directory, safe_member_name
import logging

logger = logging.getLogger(__name__)

ZIP_CONTENT_TYPES = {"application/zip", "application/x-zip-compressed"}

# 缺少時補上目前時間的欄位
_TIMESTAMP_COLUMNS = {"created_at", "updated_at", "moved_at"}
# 空字串一律存成 NULL 的欄位
_NULLABLE_TEXT_COLUMNS = {
    "totes": {"size", "color", "owner"},
    "items": {"description"},
    "item_movement_history": {"from_tote_id"},
}

# ==================== Import ====================
async def import_archive(
    upload: Optional[UploadFile],
    engine: AsyncEngine
) -> ImportSummaryResponseModel:
    """
    以匯出檔完整取代資料庫與照片檔（不是合併）

    1. 驗證上傳檔（任何一步失敗都回 400，不動到資料庫與檔案）
    2. 單一交易：關閉外鍵檢查 -> 反向清空七張表 -> 正向插入 -> 重新開啟外鍵檢查
    3. 交易提交後清空 uploads/、thumbnails/，再解壓縮壓縮檔中的照片
    """
    if upload is None:
        raise ValidationError(ServerErrorMessage.IMPORT_FILE_REQUIRED)
    if not (upload.filename or "").endswith(".zip") and upload.content_type not in ZIP_CONTENT_TYPES:
        raise ValidationError(ServerErrorMessage.IMPORT_FILE_TYPE_INVALID)

    archive = open_archive(await upload.read())
    data = read_manifest_data(archive)

    now = now_text()
    async with engine.connect() as conn:
        await _replace_all_rows(conn, data, now)

    _replace_photo_files(archive)
    logger.info(f"Import completed: {len(data['totes'])} totes, {len(data['items'])} items")

    return ImportSummaryResponseModel(
        totes=len(data["totes"]),
        items=len(data["items"]),
        photos=len(data["item_photos"]),
        metadata=len(data["item_metadata"]),
        settings=len(data["settings"]),
    )


# ==================== Public Method ====================

def open_archive(content: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(content))
    except zipfile.BadZipFile:
        raise ValidationError(ServerErrorMessage.IMPORT_ZIP_INVALID)


def read_manifest_data(archive: zipfile.ZipFile) -> Dict[str, List[Any]]:
    if MANIFEST_NAME not in archive.namelist():
        raise ValidationError(ServerErrorMessage.IMPORT_MANIFEST_MISSING)

    try:
        manifest = json.loads(archive.read(MANIFEST_NAME).decode("utf-8"))
    except (ValueError, zipfile.BadZipFile):
        raise ValidationError(ServerErrorMessage.IMPORT_JSON_INVALID)

    if not is_valid_manifest(manifest):
        raise ValidationError(ServerErrorMessage.IMPORT_STRUCTURE_INVALID)
    return manifest["data"]


# 只檢查型別，不檢查每一列的內容
def is_valid_manifest(manifest: Any) -> bool:
    if not isinstance(manifest, dict):
        return False
    if not isinstance(manifest.get("version"), str) or not isinstance(manifest.get("app"), str):
        return False
    data = manifest.get("data")
    if not isinstance(data, dict):
        return False
    return all(isinstance(data.get(name), list) for name, _, _ in TRANSFER_TABLES)


# ==================== Private Method ====================

async def _replace_all_rows(conn: AsyncConnection, data: Dict[str, List[Any]], now: str) -> None:
    # PRAGMA foreign_keys 在交易中無效，必須在 BEGIN 之前切換
    await conn.exec_driver_sql("PRAGMA foreign_keys=OFF")
    await conn.commit()
    try:
        async with conn.begin():
            for _, table, _ in reversed(TRANSFER_TABLES):
                await conn.execute(delete(table))

            for name, table, _ in TRANSFER_TABLES:
                rows = [_normalize_row(name, table, row, now) for row in data[name]]
                if not rows:
                    continue
                if table is Setting:
                    stmt = sqlite_insert(Setting)
                    stmt = stmt.on_conflict_do_update(
                        index_elements=["key"],
                        set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
                    )
                    await conn.execute(stmt, rows)
                else:
                    await conn.execute(insert(table), rows)
    finally:
        await conn.exec_driver_sql("PRAGMA foreign_keys=ON")
        await conn.commit()


def _normalize_row(name: str, table, row: Any, now: str) -> Dict[str, Any]:
    if not isinstance(row, dict):
        raise ValueError(f"Row in '{name}' is not an object: {row!r}")

    nullable_text = _NULLABLE_TEXT_COLUMNS.get(name, set())
    values: Dict[str, Any] = {}
    for column in table.__table__.columns:
        value = row.get(column.name)
        if column.name in _TIMESTAMP_COLUMNS and not value:
            value = now
        elif column.name in nullable_text and not value:
            value = None
        elif name == "items" and column.name == "quantity" and not value:
            value = 1
        values[column.name] = value
    return values


def _replace_photo_files(archive: zipfile.ZipFile) -> None:
    ensure_data_dirs()
    clear_directory(settings.upload_dir)
    clear_directory(settings.thumbnail_dir)

    targets = {
        f"{settings.UPLOAD_DIR}/": settings.upload_dir,
        f"{settings.THUMBNAIL_DIR}/": settings.thumbnail_dir,
    }
    for info in archive.infolist():
        if info.is_dir():
            continue
        for prefix, directory in targets.items():
            if not info.filename.startswith(prefix):
                continue
            # 只取 basename，避免路徑穿越
            file_name = safe_member_name(info.filename)
            if file_name:
                (directory / file_name).write_bytes(archive.read(info))
            break
