from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas.tote_request import UpdateToteRequestModel
from app.schemas.tote_response import ToteResponseModel
from app.services.tote.tote_read_service import get_tote
from app.services.tote.tote_create_service import clean_optional_text
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError

# 請求欄位 -> 資料表欄位（只有這些欄位可以被更新）
_REQUIRED_FIELDS = {
    "name": ("name", ServerErrorMessage.TOTE_NAME_REQUIRED),
    "location": ("location", ServerErrorMessage.TOTE_LOCATION_REQUIRED),
}
_OPTIONAL_FIELDS = {
    "size": "size",
    "color": "color",
    "owner": "owner",
}

# ==================== Update ====================
async def update_tote(
    tote_id: str,
    request_model: UpdateToteRequestModel,
    db: AsyncSession
) -> ToteResponseModel:
    tote = await get_tote(tote_id, db)

    values = _build_update_values(request_model.model_dump(exclude_unset=True))
    if not values:
        raise ValidationError(ServerErrorMessage.TOTE_NO_FIELDS)

    for column, value in values.items():
        setattr(tote, column, value)
    tote.updated_at = now_text()

    await db.commit()
    return ToteResponseModel.model_validate(tote)


# ==================== Private Method ====================

def _build_update_values(provided: Dict[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}

    for field, (column, message) in _REQUIRED_FIELDS.items():
        if field not in provided:
            continue
        value = provided[field]
        if value is None or not value.strip():
            raise ValidationError(message)
        values[column] = value.strip()

    for field, column in _OPTIONAL_FIELDS.items():
        if field in provided:
            values[column] = clean_optional_text(provided[field])

    return values
