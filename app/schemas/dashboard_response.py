from typing import List
from pydantic import BaseModel
from app.schemas.item_response import ItemWithToteResponseModel

class DashboardResponseModel(BaseModel):
    total_totes: int
    total_items: int
    recent_items: List[ItemWithToteResponseModel] = []
