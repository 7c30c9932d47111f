from typing import Optional
from pydantic import BaseModel, ConfigDict

class MetadataResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_id: int
    key: str
    value: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class MetadataKeyResponseModel(BaseModel):
    key_name: str
