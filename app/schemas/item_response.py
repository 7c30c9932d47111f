from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from app.schemas.photo_response import PhotoResponseModel
from app.schemas.metadata_response import MetadataResponseModel

class ItemResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    tote_id: str
    name: str
    description: Optional[str] = None
    quantity: int = 1
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class ItemWithToteResponseModel(ItemResponseModel):
    tote_name: Optional[str] = None
    tote_location: Optional[str] = None

class MovementHistoryResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_id: int
    from_tote_id: Optional[str] = None
    to_tote_id: str
    moved_at: Optional[str] = None
    from_tote_name: Optional[str] = None
    to_tote_name: Optional[str] = None

class ItemDetailResponseModel(ItemWithToteResponseModel):
    metadata: List[MetadataResponseModel] = []
    photos: List[PhotoResponseModel] = []
    movement_history: List[MovementHistoryResponseModel] = []
