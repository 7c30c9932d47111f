"""
文件工具函数
处理照片原图/缩略图的保存、删除、路径解析，以及上传目录的清空与枚举

資料庫存的是相對於 DATA_DIR 的路徑（uploads/<hex>.<ext>、thumbnails/thumb_<hex>.<ext>）
"""
import io
import secrets
from pathlib import Path, PurePosixPath
from typing import Optional, Tuple
from PIL import Image, ImageOps, UnidentifiedImageError
from app.core.core_config import settings
import logging

logger = logging.getLogger(__name__)

MIME_TO_EXTENSION = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}

_MIME_TO_PIL_FORMAT = {
    "image/jpeg": "JPEG",
    "image/png": "PNG",
    "image/webp": "WEBP",
}


class InvalidImageError(ValueError):
    pass


def ensure_data_dirs() -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    settings.thumbnail_dir.mkdir(parents=True, exist_ok=True)


def save_photo(data: bytes, mime_type: str) -> Tuple[str, str, str]:
    """
    保存原图并生成 200x200 居中裁切缩略图

    Args:
        data: 上传文件的原始字节
        mime_type: 已校验过的 MIME 类型

    Returns:
        Tuple[str, str, str]: (filename, original_path, thumbnail_path)，路径相对于 DATA_DIR

    Raises:
        InvalidImageError: 字节无法解码为图片（已写入的原图会被删除）
    """
    ensure_data_dirs()
    extension = MIME_TO_EXTENSION.get(mime_type, ".jpg")
    filename = f"{secrets.token_hex(16)}{extension}"
    thumbnail_name = f"thumb_{filename}"

    original_file = settings.upload_dir / filename
    original_file.write_bytes(data)

    try:
        thumbnail_bytes = make_thumbnail(data, mime_type)
    except InvalidImageError:
        delete_data_file(f"{settings.UPLOAD_DIR}/{filename}")
        raise

    (settings.thumbnail_dir / thumbnail_name).write_bytes(thumbnail_bytes)
    return (
        filename,
        f"{settings.UPLOAD_DIR}/{filename}",
        f"{settings.THUMBNAIL_DIR}/{thumbnail_name}",
    )


def make_thumbnail(data: bytes, mime_type: str) -> bytes:
    size = settings.THUMBNAIL_SIZE
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            thumb = ImageOps.fit(img, (size, size), method=Image.LANCZOS, centering=(0.5, 0.5))
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise InvalidImageError(str(e)) from e

    image_format = _MIME_TO_PIL_FORMAT.get(mime_type, "PNG")
    if image_format == "JPEG" and thumb.mode not in ("RGB", "L"):
        thumb = thumb.convert("RGB")

    buf = io.BytesIO()
    thumb.save(buf, format=image_format)
    return buf.getvalue()


def resolve_data_path(relative_path: Optional[str]) -> Optional[Path]:
    """把資料庫中的相對路徑轉成實際文件路徑，不在 DATA_DIR 之內或文件不存在時返回 None"""
    if not relative_path:
        return None

    base_dir = settings.data_dir.resolve()
    file_path = (base_dir / relative_path).resolve()
    if base_dir not in file_path.parents:
        logger.warning(f"Rejected path outside data dir: {relative_path}")
        return None
    if not file_path.is_file():
        return None
    return file_path


# 盡力刪除：失敗只記錄，不往外拋
def delete_data_file(relative_path: Optional[str]) -> bool:
    file_path = resolve_data_path(relative_path)
    if file_path is None:
        return False
    try:
        file_path.unlink()
        return True
    except OSError as e:
        logger.error(f"Error deleting file {relative_path}: {e}", exc_info=True)
        return False


def delete_photo_files(original_path: Optional[str], thumbnail_path: Optional[str]) -> None:
    delete_data_file(original_path)
    delete_data_file(thumbnail_path)


def list_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file())


def clear_directory(directory: Path) -> int:
    removed = 0
    for file_path in list_files(directory):
        try:
            file_path.unlink()
            removed += 1
        except OSError as e:
            logger.error(f"Error deleting file {file_path}: {e}", exc_info=True)
    return removed


# 壓縮包成員只取 basename，避免路徑穿越
def safe_member_name(member_name: str) -> Optional[str]:
    if not member_name or member_name.endswith("/"):
        return None
    name = PurePosixPath(member_name.replace("\\", "/")).name
    if not name or name in (".", ".."):
        return None
    return name
