import math
from typing import Any, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.table import Item
from app.schemas.item_request import CreateItemRequestModel
from app.schemas.item_response import ItemResponseModel
from app.services.tote.tote_read_service import get_tote
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError

DEFAULT_QUANTITY = 1
# SQLite INTEGER 為 64 位元有號整數
MAX_QUANTITY = 2 ** 63 - 1

# ==================== Create ====================
async def create_item(
    tote_id: str,
    request_model: CreateItemRequestModel,
    db: AsyncSession
) -> ItemResponseModel:
    # 檢查 tote 是否存在
    await get_tote(tote_id, db)

    name = check_item_name(request_model.name)
    quantity = DEFAULT_QUANTITY
    if "quantity" in request_model.model_fields_set:
        quantity = parse_quantity(request_model.quantity)

    now = now_text()
    new_item = Item(
        tote_id=tote_id,
        name=name,
        description=clean_description(request_model.description),
        quantity=quantity,
        created_at=now,
        updated_at=now,
    )
    db.add(new_item)
    await db.commit()
    return ItemResponseModel.model_validate(new_item)


# ==================== Public Method ====================

def check_item_name(name: Optional[str]) -> str:
    if not name:
        raise ValidationError(ServerErrorMessage.ITEM_NAME_INVALID)
    if not name.strip():
        raise ValidationError(ServerErrorMessage.ITEM_NAME_REQUIRED)
    return name.strip()


def clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None


def parse_quantity(value: Any) -> int:
    """正整數；數字字串（如 "2"、"3.0"）也接受"""
    if isinstance(value, bool) or value is None:
        raise ValidationError(ServerErrorMessage.ITEM_QUANTITY_INVALID)

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationError(ServerErrorMessage.ITEM_QUANTITY_INVALID)
    elif isinstance(value, (int, float)):
        number = value
    else:
        raise ValidationError(ServerErrorMessage.ITEM_QUANTITY_INVALID)

    if isinstance(number, float) and (not math.isfinite(number) or not number.is_integer()):
        raise ValidationError(ServerErrorMessage.ITEM_QUANTITY_INVALID)
    if number < 1 or number > MAX_QUANTITY:
        raise ValidationError(ServerErrorMessage.ITEM_QUANTITY_INVALID)
    return int(number)
