import base64
import io
from typing import Any, List
import qrcode
import qrcode.image.pil
from PIL import Image
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.table import Tote
from app.schemas.qr_response import QrCodeResponseModel, BulkQrCodeResponseModel
from app.services.tote.tote_read_service import get_tote
from app.services.setting_service import get_server_hostname
from app.core.core_config import settings
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError, NotFoundError

PNG_DATA_URL_PREFIX = "data:image/png;base64,"

# ==================== Read ====================
async def read_tote_qr_png(tote_id: str, db: AsyncSession) -> bytes:
    tote = await get_tote(tote_id, db)
    return make_qr_png(build_tote_url(await get_server_hostname(db), tote.id))


async def read_tote_qr_data_url(tote_id: str, db: AsyncSession) -> QrCodeResponseModel:
    tote = await get_tote(tote_id, db)
    encoded_url = build_tote_url(await get_server_hostname(db), tote.id)
    return QrCodeResponseModel(
        qr_data_url=to_data_url(make_qr_png(encoded_url)),
        encoded_url=encoded_url,
        tote_id=tote.id,
    )


async def read_bulk_qr(tote_ids: List[Any], db: AsyncSession) -> List[BulkQrCodeResponseModel]:
    if not tote_ids:
        raise ValidationError(ServerErrorMessage.QR_TOTE_IDS_REQUIRED)
    if len(tote_ids) > settings.QR_BULK_LIMIT:
        raise ValidationError(ServerErrorMessage.QR_BULK_LIMIT)

    # 非字串或不存在的 id 直接略過
    wanted_ids = [tote_id for tote_id in tote_ids if isinstance(tote_id, str)]
    result = await db.execute(select(Tote).where(Tote.id.in_(wanted_ids)))
    totes_by_id = {tote.id: tote for tote in result.scalars().all()}
    if not totes_by_id:
        raise NotFoundError(ServerErrorMessage.QR_NO_TOTES_FOUND)

    hostname = await get_server_hostname(db)
    codes: List[BulkQrCodeResponseModel] = []
    for tote_id in dict.fromkeys(wanted_ids):
        tote = totes_by_id.get(tote_id)
        if tote is None:
            continue
        encoded_url = build_tote_url(hostname, tote.id)
        codes.append(BulkQrCodeResponseModel(
            tote_id=tote.id,
            tote_name=tote.name,
            tote_location=tote.location,
            qr_data_url=to_data_url(make_qr_png(encoded_url)),
            encoded_url=encoded_url,
        ))
    return codes


# ==================== Public Method ====================

def build_tote_url(hostname: str, tote_id: str) -> str:
    return f"{hostname}/totes/{tote_id}"


def make_qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        border=settings.QR_MARGIN,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(image_factory=qrcode.image.pil.PilImage).get_image()
    img = img.convert("RGB").resize((settings.QR_SIZE, settings.QR_SIZE), Image.NEAREST)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def to_data_url(png: bytes) -> str:
    return PNG_DATA_URL_PREFIX + base64.b64encode(png).decode("ascii")
