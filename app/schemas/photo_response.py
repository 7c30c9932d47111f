from typing import Optional
from pydantic import BaseModel, ConfigDict

class PhotoResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_id: int
    filename: str
    original_path: str
    thumbnail_path: str
    file_size: int
    mime_type: str
    created_at: Optional[str] = None
