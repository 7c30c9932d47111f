from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.table import Tote
from app.schemas.tote_request import CreateToteRequestModel
from app.schemas.tote_response import ToteResponseModel
from app.utils.util_datetime import now_text
from app.utils.util_tote_id import generate_tote_id
import logging

logger = logging.getLogger(__name__)

# ==================== Create ====================
async def create_tote(
    request_model: CreateToteRequestModel,
    db: AsyncSession
) -> ToteResponseModel:
    tote_id = await _gen_unique_tote_id(db)
    now = now_text()

    new_tote = Tote(
        id=tote_id,
        name=request_model.name.strip(),
        location=request_model.location.strip(),
        size=clean_optional_text(request_model.size),
        color=clean_optional_text(request_model.color),
        owner=clean_optional_text(request_model.owner),
        created_at=now,
        updated_at=now,
    )
    db.add(new_tote)
    await db.commit()
    return ToteResponseModel.model_validate(new_tote)


# ==================== Private Method ====================

async def _gen_unique_tote_id(db: AsyncSession) -> str:
    tote_id = generate_tote_id()
    # 碰撞機率極低，但仍需重新產生
    while await db.get(Tote, tote_id) is not None:
        logger.warning(f"Tote id collision: {tote_id}")
        tote_id = generate_tote_id()
    return tote_id


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None
