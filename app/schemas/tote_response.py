from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from app.schemas.item_response import ItemResponseModel

class ToteResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    location: str
    size: Optional[str] = None
    color: Optional[str] = None
    owner: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class ToteListResponseModel(ToteResponseModel):
    item_count: int = 0

class ToteDetailResponseModel(ToteResponseModel):
    items: List[ItemResponseModel] = []
    item_count: int = 0
