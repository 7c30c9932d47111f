from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from app.table import Tote, Item
from app.schemas.item_response import ItemWithToteResponseModel
from app.schemas.dashboard_response import DashboardResponseModel

RECENT_ITEMS_LIMIT = 10

# ==================== Read ====================
async def read_dashboard(db: AsyncSession) -> DashboardResponseModel:
    total_totes = (await db.execute(select(func.count(Tote.id)))).scalar_one()
    total_items = (await db.execute(select(func.count(Item.id)))).scalar_one()

    recent_query = (
        select(Item, Tote.name)
        .outerjoin(Tote, Tote.id == Item.tote_id)
        .order_by(Item.created_at.desc(), Item.id.desc())
        .limit(RECENT_ITEMS_LIMIT)
    )
    recent_items = []
    for item, tote_name in (await db.execute(recent_query)).all():
        item_model = ItemWithToteResponseModel.model_validate(item)
        item_model.tote_name = tote_name
        recent_items.append(item_model)

    return DashboardResponseModel(
        total_totes=total_totes,
        total_items=total_items,
        recent_items=recent_items,
    )
