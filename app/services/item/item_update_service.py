from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas.item_request import UpdateItemRequestModel
from app.schemas.item_response import ItemResponseModel
from app.services.item.item_read_service import get_item
from app.services.item.item_create_service import check_item_name, clean_description, parse_quantity
from app.utils.util_datetime import now_text
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError

# ==================== Update ====================
async def update_item(
    item_id: int,
    request_model: UpdateItemRequestModel,
    db: AsyncSession
) -> ItemResponseModel:
    item = await get_item(item_id, db)

    values = _build_update_values(request_model.model_dump(exclude_unset=True))
    if not values:
        raise ValidationError(ServerErrorMessage.ITEM_NO_FIELDS)

    for column, value in values.items():
        setattr(item, column, value)
    item.updated_at = now_text()

    await db.commit()
    return ItemResponseModel.model_validate(item)


# ==================== Private Method ====================

def _build_update_values(provided: Dict[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    if "name" in provided:
        values["name"] = check_item_name(provided["name"])
    if "description" in provided:
        values["description"] = clean_description(provided["description"])
    if "quantity" in provided:
        values["quantity"] = parse_quantity(provided["quantity"])
    return values
