from typing import List
from pydantic import BaseModel, Field
from app.schemas.item_response import ItemWithToteResponseModel

class SearchResponseModel(BaseModel):
    items: List[ItemWithToteResponseModel] = []
    total: int = 0

class SearchFiltersResponseModel(BaseModel):
    locations: List[str] = []
    owners: List[str] = []
    metadata_keys: List[str] = Field(default_factory=list, serialization_alias="metadataKeys")
